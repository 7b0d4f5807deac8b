"""Database types a SQL case can be restricted to.

A case names its dialects as plain literals (``database-types="MySQL,Oracle"``).
Those literals are resolved against a closed ``Enum`` supplied by the caller;
:class:`DatabaseType` is the built-in one.  Resolution is strict: a literal
with no matching member raises instead of being skipped, because it means
the corpus was authored against a dialect the test suite does not know.
"""
from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import TypeVar

from sqlcases.errors import UnknownDialectError

E = TypeVar("E", bound=Enum)


class DatabaseType(str, Enum):
    """Built-in database types, named exactly as corpus files spell them."""

    H2 = "H2"
    MySQL = "MySQL"
    PostgreSQL = "PostgreSQL"
    Oracle = "Oracle"
    SQLServer = "SQLServer"


def split_dialect_literals(raw: str | None) -> tuple[str, ...]:
    """Split a comma-separated dialect list into distinct, stripped names.

    Args:
        raw: The raw attribute value, e.g. ``"MySQL, Oracle"``.

    Returns:
        Names in declaration order with blanks and repeats removed.  An
        absent or blank value yields an empty tuple.
    """
    if not raw:
        return ()
    names: list[str] = []
    for part in raw.split(","):
        name = part.strip()
        if name and name not in names:
            names.append(name)
    return tuple(names)


def dialect_from_name(
    enum_type: type[E], name: str, case_id: str | None = None
) -> E:
    """Look up the ``enum_type`` member called ``name``.

    Args:
        enum_type: The caller's dialect enumeration.
        name: Member name as written in the corpus.
        case_id: Owning case id, carried into the error for diagnostics.

    Raises:
        UnknownDialectError: If ``enum_type`` has no member ``name``.
    """
    try:
        return enum_type[name]
    except KeyError:
        raise UnknownDialectError(
            name, case_id=case_id, known=[m.name for m in enum_type]
        ) from None


def dialects_from_literals(
    enum_type: type[E], names: Iterable[str], case_id: str | None = None
) -> list[E]:
    """Resolve every name in ``names``; fails on the first unknown one."""
    return [dialect_from_name(enum_type, n, case_id) for n in names]
