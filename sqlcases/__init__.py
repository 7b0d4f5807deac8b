"""sqlcases – SQL test-case corpora for parameterized SQL tests.

Author Cases Once. Run Them Everywhere.

Public API
----------
``SQLCasesLoader``
    Builds the ``sql`` and ``unsupported_sql`` corpora on first use and
    resolves cases into literal or placeholder SQL.

``default_loader``
    Process-wide loader over the corpus bundled with this package.

``resolve_sql`` / ``expand_test_matrix``
    The resolution and matrix primitives the loader is built on, usable
    with any corpus.

Re-exported types
-----------------
``SQLCase``, ``SQLCaseType``, ``DatabaseType``, ``SQLCaseCorpus``,
``MatrixEntry``, ``CorpusConfig``, and all error classes.

Case documents
--------------
A corpus is a directory (or archive) of XML documents::

    <sql-cases>
        <sql-case id="select_by_id" value="SELECT * FROM t_order WHERE order_id = %s" />
        <sql-case id="select_like" value="SELECT * FROM t_order WHERE status LIKE 'init%%'"
                  database-types="MySQL,PostgreSQL" />
    </sql-cases>
"""

from __future__ import annotations

from sqlcases.config import CorpusConfig
from sqlcases.errors import (
    CaseNotFoundError,
    CorpusParseError,
    DuplicateCaseError,
    FormatMismatchError,
    SQLCasesError,
    UnknownDialectError,
)
from sqlcases.load.asserts import AssertParameter, load_assert_parameters
from sqlcases.load.corpus import SQLCaseCorpus, build_corpus
from sqlcases.load.sources import (
    ArchiveSource,
    DirectorySource,
    ResourceSource,
    probe_source,
)
from sqlcases.loader import SQLCasesLoader, default_loader
from sqlcases.logging_config import reset_logging, setup_logging
from sqlcases.matrix.expander import MatrixEntry, expand_test_matrix
from sqlcases.resolve.resolver import literal_sql, placeholder_sql, resolve_sql
from sqlcases.schema.case import SQLAssertCase, SQLCase, SQLCaseType, XmlNode
from sqlcases.schema.dialect import DatabaseType, dialect_from_name

__all__ = [
    # Query surface
    "SQLCasesLoader",
    "default_loader",
    # Primitives
    "build_corpus",
    "resolve_sql",
    "literal_sql",
    "placeholder_sql",
    "expand_test_matrix",
    "load_assert_parameters",
    # Discovery
    "ResourceSource",
    "DirectorySource",
    "ArchiveSource",
    "probe_source",
    # Types
    "SQLCase",
    "SQLAssertCase",
    "SQLCaseType",
    "SQLCaseCorpus",
    "XmlNode",
    "DatabaseType",
    "dialect_from_name",
    "MatrixEntry",
    "AssertParameter",
    "CorpusConfig",
    "setup_logging",
    "reset_logging",
    # Errors
    "SQLCasesError",
    "CorpusParseError",
    "CaseNotFoundError",
    "DuplicateCaseError",
    "FormatMismatchError",
    "UnknownDialectError",
]
