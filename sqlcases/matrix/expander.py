"""Test matrix expansion: case x applicable database type x syntax variant.

The matrix is the flat parameter list of a parameterized test.  Each case
contributes one row per database type it applies to and per
:class:`~sqlcases.schema.case.SQLCaseType`.  A case without a
``database-types`` restriction applies to every database type the caller
passes in; a restricted case applies to exactly the types it names, however
many the caller knows.

Rows are ordered by case (corpus iteration order), then variant, then
database type, so reports stay reproducible for a fixed corpus.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import NamedTuple

from sqlcases.schema.case import SQLCase, SQLCaseType
from sqlcases.schema.dialect import dialects_from_literals


class MatrixEntry(NamedTuple):
    """One test-matrix row.

    Attributes:
        case_id: Id of the SQL case.
        database_type: Member of the caller's dialect enum.
        case_type: Syntax variant to resolve the case in.
    """

    case_id: str
    database_type: Enum
    case_type: SQLCaseType

    @property
    def param_id(self) -> str:
        """Returns a readable test id, e.g. ``select_by_id-MySQL-Literal``."""
        return f"{self.case_id}-{self.database_type.name}-{self.case_type.value}"


def applicable_dialects(
    case: SQLCase, all_dialects: Iterable[Enum], enum_type: type[Enum]
) -> list[Enum]:
    """Return the database types ``case`` is tested against.

    Raises:
        UnknownDialectError: If the case names a type missing from ``enum_type``.
    """
    names = case.dialect_names
    if not names:
        return list(all_dialects)
    return dialects_from_literals(enum_type, names, case.id)


def expand_test_matrix(
    corpus: Mapping[str, SQLCase],
    all_dialects: Iterable[Enum],
    enum_type: type[Enum],
) -> list[MatrixEntry]:
    """Expand ``corpus`` into test-matrix rows.

    Args:
        corpus: Cases keyed by id.
        all_dialects: Every database type the test suite runs against, in
            the order rows should use for unrestricted cases.
        enum_type: Enumeration the cases' ``database-types`` literals
            resolve against.

    Returns:
        One :class:`MatrixEntry` per case, applicable type and variant.

    Raises:
        UnknownDialectError: If any case names an unknown database type.
            The whole expansion fails; no partial matrix is returned.
    """
    all_dialects = list(all_dialects)
    result: list[MatrixEntry] = []
    for case in corpus.values():
        dialects = applicable_dialects(case, all_dialects, enum_type)
        for case_type in SQLCaseType:
            result.extend(MatrixEntry(case.id, each, case_type) for each in dialects)
    return result
