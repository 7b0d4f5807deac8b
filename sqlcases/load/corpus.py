"""The corpus index: every case of one category, keyed by id.

A corpus is built once from a :class:`~sqlcases.load.sources.ResourceSource`
and never mutated afterwards, so it can be shared between threads without
locking.
"""
from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from sqlcases.errors import CaseNotFoundError, DuplicateCaseError
from sqlcases.load.parser import parse_sql_cases
from sqlcases.load.sources import ResourceSource
from sqlcases.logging_config import logger
from sqlcases.schema.case import SQLCase


class SQLCaseCorpus(Mapping[str, SQLCase]):
    """Read-only mapping from case id to :class:`SQLCase`, ordered by id.

    Args:
        cases: Cases to index.  Copied; later changes to the argument are
            not seen.
        name: Category name, used in diagnostics.
    """

    def __init__(self, cases: Mapping[str, SQLCase], name: str = "") -> None:
        self._cases: Mapping[str, SQLCase] = MappingProxyType(
            {k: cases[k] for k in sorted(cases)}
        )
        self.name = name

    def __getitem__(self, case_id: str) -> SQLCase:
        try:
            return self._cases[case_id]
        except KeyError:
            raise CaseNotFoundError(case_id) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._cases)

    def __len__(self) -> int:
        return len(self._cases)

    def __repr__(self) -> str:
        return f"SQLCaseCorpus(name={self.name!r}, cases={len(self)})"

    def lookup(self, case_id: str) -> SQLCase:
        """Return the case with ``case_id``.

        Raises:
            CaseNotFoundError: If the corpus has no such case.
        """
        return self[case_id]

    def get_sql(self, case_id: str) -> str:
        """Return the raw template of ``case_id``."""
        return self[case_id].value

    def get_database_types(self, case_id: str) -> str | None:
        """Return the raw ``database-types`` literal of ``case_id``."""
        return self[case_id].database_types


def build_corpus(
    source: ResourceSource,
    prefix: str,
    *,
    strict_duplicates: bool = False,
) -> SQLCaseCorpus:
    """Parse every document under ``prefix`` and index its cases by id.

    Args:
        source: Where the definition documents live.
        prefix: Category name, e.g. ``"sql"``.
        strict_duplicates: Raise on a repeated id instead of letting the
            later-processed definition replace the earlier one.

    Returns:
        The built corpus; empty when the category does not exist.

    Raises:
        CorpusParseError: If any document is malformed.  Nothing is returned
            for a partially parsed category.
        DuplicateCaseError: On a repeated id when ``strict_duplicates``.
    """
    cases: dict[str, SQLCase] = {}
    origins: dict[str, str] = {}
    resources = source.list_resources(prefix)
    for resource in resources:
        with resource.open() as stream:
            parsed = parse_sql_cases(stream, resource.name)
        for case in parsed.sql_cases:
            if case.id in cases:
                if strict_duplicates:
                    raise DuplicateCaseError(case.id, resource.name)
                logger.warning(
                    f"SQL case '{case.id}' in {resource.name} replaces the one in {origins[case.id]}"
                )
            cases[case.id] = case
            origins[case.id] = resource.name
    logger.debug(
        f"Built corpus '{prefix}' from {len(resources)} file(s) at {source.location}: {len(cases)} case(s)"
    )
    return SQLCaseCorpus(cases, name=prefix)
