"""Assertion fixtures as parameterized-test rows.

Unlike template fixtures, assertion fixtures are not indexed: each
``<sql-assert>`` becomes one row handed straight to a parameterized test::

    @pytest.mark.parametrize(
        "case_id,sql,database_types,rules",
        load_assert_parameters(RESOURCES, "integrate/assert"),
    )
    def test_route(case_id, sql, database_types, rules): ...
"""
from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import NamedTuple

from sqlcases.config import CASE_FILE_EXTENSION
from sqlcases.load.parser import parse_sql_asserts
from sqlcases.load.sources import probe_source
from sqlcases.logging_config import logger
from sqlcases.schema.case import XmlNode
from sqlcases.schema.dialect import DatabaseType, dialects_from_literals


class AssertParameter(NamedTuple):
    """One assertion-fixture row.

    Attributes:
        id: Assertion id.
        sql: SQL text under test.
        database_types: Resolved dialects; empty means unrestricted.
        sharding_rule_assertions: Opaque expected-routing payload.
    """

    id: str
    sql: str
    database_types: frozenset[Enum]
    sharding_rule_assertions: XmlNode | None


def load_assert_parameters(
    root: Path,
    prefix: str,
    enum_type: type[Enum] = DatabaseType,
    extension: str = CASE_FILE_EXTENSION,
) -> list[AssertParameter]:
    """Load every ``<sql-assert>`` filed under ``prefix``.

    Args:
        root: Resource root (directory or archive).
        prefix: Category path below ``root``.
        enum_type: Dialect enumeration ``types`` literals resolve against.
        extension: Suffix of assertion documents.

    Returns:
        Rows in file order, then document order; empty if ``prefix`` is absent.

    Raises:
        CorpusParseError: If a document is malformed.
        UnknownDialectError: If a ``types`` literal is not in ``enum_type``.
    """
    result: list[AssertParameter] = []
    resources = probe_source(root, extension=extension).list_resources(prefix)
    for resource in resources:
        with resource.open() as stream:
            parsed = parse_sql_asserts(stream, resource.name, enum_type)
        for each in parsed.sql_asserts:
            result.append(
                AssertParameter(
                    id=each.id,
                    sql=each.sql,
                    database_types=frozenset(
                        dialects_from_literals(enum_type, each.dialect_names, each.id)
                    ),
                    sharding_rule_assertions=each.sharding_rule_assertions,
                )
            )
    logger.debug(f"Loaded {len(result)} assertion(s) from '{prefix}'")
    return result
