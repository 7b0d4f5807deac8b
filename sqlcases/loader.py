"""Query surface over the supported and unsupported SQL case corpora.

:class:`SQLCasesLoader` owns both corpora of one resource root.  Each corpus
is built on first use, at most once, even when several threads ask for it at
the same time; afterwards it is immutable and read without locking.

Construct a loader explicitly and pass it to whoever needs it::

    loader = SQLCasesLoader(CorpusConfig(root=Path("tests/resources")))
    sql = loader.get_supported_placeholder_sql("select_by_id")

or use the process-wide :func:`default_loader` over the bundled corpus.
"""
from __future__ import annotations

import threading
from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Any

from sqlcases.config import SUPPORTED_PATH, UNSUPPORTED_PATH, CorpusConfig
from sqlcases.load.corpus import SQLCaseCorpus, build_corpus
from sqlcases.load.sources import ResourceSource, probe_source
from sqlcases.matrix.expander import MatrixEntry, expand_test_matrix
from sqlcases.resolve.resolver import literal_sql, placeholder_sql, resolve_sql
from sqlcases.schema.case import SQLCaseType


class SQLCasesLoader:
    """Loads SQL case corpora lazily and resolves cases into SQL.

    Args:
        config: Discovery configuration; defaults to the bundled corpus.
        source: Explicit resource source.  When omitted, one is chosen by
            probing ``config.resource_root``.
    """

    def __init__(
        self,
        config: CorpusConfig | None = None,
        source: ResourceSource | None = None,
    ) -> None:
        self._config = config or CorpusConfig()
        self._source = source or probe_source(
            self._config.resource_root,
            archive_base=self._config.archive_base,
            extension=self._config.extension,
        )
        self._lock = threading.Lock()
        self._corpora: dict[str, SQLCaseCorpus] = {}

    @property
    def source(self) -> ResourceSource:
        """The source corpora are read from."""
        return self._source

    @property
    def supported_corpus(self) -> SQLCaseCorpus:
        """Cases of the ``sql`` category, built on first access."""
        return self._corpus(SUPPORTED_PATH)

    @property
    def unsupported_corpus(self) -> SQLCaseCorpus:
        """Cases of the ``unsupported_sql`` category, built on first access."""
        return self._corpus(UNSUPPORTED_PATH)

    # ------------------------------------------------------------------
    # Supported SQL
    # ------------------------------------------------------------------

    def get_supported_sql(
        self,
        case_id: str,
        case_type: SQLCaseType = SQLCaseType.Literal,
        parameters: Sequence[Any] | None = None,
    ) -> str:
        """Return a supported case rendered in ``case_type``.

        With the defaults this is the raw template.

        Raises:
            CaseNotFoundError: If no supported case has ``case_id``.
            FormatMismatchError: If ``parameters`` do not fit the template.
        """
        return resolve_sql(self.supported_corpus[case_id], case_type, parameters)

    def get_supported_literal_sql(
        self, case_id: str, parameters: Sequence[Any] | None
    ) -> str:
        """Return a supported case with ``parameters`` inlined."""
        return literal_sql(self.supported_corpus.get_sql(case_id), parameters)

    def get_supported_placeholder_sql(self, case_id: str) -> str:
        """Return a supported case with ``?`` bind parameters."""
        return placeholder_sql(self.supported_corpus.get_sql(case_id))

    def get_database_types(self, case_id: str) -> str | None:
        """Return the raw ``database-types`` literal of a supported case.

        Raises:
            CaseNotFoundError: If no supported case has ``case_id``.
        """
        return self.supported_corpus.get_database_types(case_id)

    def get_supported_test_parameters(
        self, all_database_types: Iterable[Enum], enum_type: type[Enum]
    ) -> list[MatrixEntry]:
        """Return the test matrix of the supported corpus.

        Raises:
            UnknownDialectError: If a case names a type missing from ``enum_type``.
        """
        return expand_test_matrix(self.supported_corpus, all_database_types, enum_type)

    # ------------------------------------------------------------------
    # Unsupported SQL
    # ------------------------------------------------------------------

    def get_unsupported_sql(
        self,
        case_id: str,
        case_type: SQLCaseType = SQLCaseType.Literal,
        parameters: Sequence[Any] | None = None,
    ) -> str:
        """Return an unsupported case rendered in ``case_type``.

        Raises:
            CaseNotFoundError: If no unsupported case has ``case_id``.
            FormatMismatchError: If ``parameters`` do not fit the template.
        """
        return resolve_sql(self.unsupported_corpus[case_id], case_type, parameters)

    def get_unsupported_test_parameters(
        self, all_database_types: Iterable[Enum], enum_type: type[Enum]
    ) -> list[MatrixEntry]:
        """Return the test matrix of the unsupported corpus."""
        return expand_test_matrix(self.unsupported_corpus, all_database_types, enum_type)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _corpus(self, prefix: str) -> SQLCaseCorpus:
        corpus = self._corpora.get(prefix)
        if corpus is not None:
            return corpus
        with self._lock:
            corpus = self._corpora.get(prefix)
            if corpus is None:
                corpus = build_corpus(
                    self._source,
                    prefix,
                    strict_duplicates=self._config.strict_duplicates,
                )
                self._corpora[prefix] = corpus
        return corpus


_default_loader: SQLCasesLoader | None = None
_default_lock = threading.Lock()


def default_loader() -> SQLCasesLoader:
    """Return the process-wide loader over the bundled corpus.

    Created on first call; concurrent first calls share one instance.
    """
    global _default_loader
    if _default_loader is None:
        with _default_lock:
            if _default_loader is None:
                _default_loader = SQLCasesLoader()
    return _default_loader
