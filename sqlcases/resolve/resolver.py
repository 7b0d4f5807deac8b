"""Turns SQL case templates into concrete SQL text.

Templates use two markers:

``%s``
    A parameter position.
``%%``
    A literal percent sign.

Literal rendering walks the template marker by marker instead of handing
it to a general-purpose formatter, so it never depends on locale or on
conversions other than ``%s``.  There ``%%s`` is an escaped ``%`` followed
by ``s``.

Placeholder rendering rewrites every ``%s`` to ``?`` first and then every
``%%`` to ``%``, so ``%%s`` becomes ``%?``.  Literal rendering substitutes
each parameter's ``str()`` form positionally and then unescapes ``%%``;
without parameters the template is returned untouched, escapes included.
"""
from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Any

from sqlcases.errors import FormatMismatchError
from sqlcases.schema.case import SQLCase, SQLCaseType

#: Bind-parameter token emitted for placeholder SQL.
PLACEHOLDER = "?"


class _Token(Enum):
    TEXT = "text"
    MARKER = "marker"
    ESCAPE = "escape"
    STRAY = "stray"


def _tokenize(template: str) -> list[tuple[_Token, str]]:
    """Split ``template`` into text runs, ``%s`` markers and ``%%`` escapes.

    A ``%`` followed by anything else (or by nothing) is a ``STRAY`` token.
    """
    tokens: list[tuple[_Token, str]] = []
    start = 0
    pos = template.find("%")
    while pos != -1:
        if pos > start:
            tokens.append((_Token.TEXT, template[start:pos]))
        following = template[pos + 1 : pos + 2]
        if following == "s":
            tokens.append((_Token.MARKER, "%s"))
            start = pos + 2
        elif following == "%":
            tokens.append((_Token.ESCAPE, "%%"))
            start = pos + 2
        else:
            tokens.append((_Token.STRAY, "%"))
            start = pos + 1
        pos = template.find("%", start)
    if start < len(template):
        tokens.append((_Token.TEXT, template[start:]))
    return tokens


def count_markers(template: str) -> int:
    """Return the number of ``%s`` parameter markers in ``template``."""
    return sum(1 for kind, _ in _tokenize(template) if kind is _Token.MARKER)


def placeholder_sql(template: str) -> str:
    """Render ``template`` with ``?`` bind parameters.

    Every ``%s`` becomes ``?`` first, including one right after another
    ``%`` (``%%s`` renders as ``%?``); every ``%%`` then becomes ``%``.  A
    lone ``%`` is copied through.
    """
    return template.replace("%s", PLACEHOLDER).replace("%%", "%")


def literal_sql(template: str, parameters: Sequence[Any] | None = None) -> str:
    """Render ``template`` with parameter values inlined.

    Values are written with ``str()``; no quoting or escaping is applied, the
    corpus is expected to quote where SQL needs it.

    Args:
        template: SQL template.
        parameters: Values for the ``%s`` markers, in order.

    Returns:
        The template itself when ``parameters`` is empty or ``None`` (``%%``
        escapes are left in place); otherwise the substituted SQL with ``%%``
        unescaped.

    Raises:
        FormatMismatchError: If the marker count differs from the number of
            parameters, or the template holds a ``%`` that is neither ``%s``
            nor ``%%``.
    """
    if not parameters:
        return template
    tokens = _tokenize(template)
    expected = sum(1 for kind, _ in tokens if kind is _Token.MARKER)
    if expected != len(parameters):
        raise FormatMismatchError(
            f"SQL template has {expected} parameter marker(s) but "
            f"{len(parameters)} parameter(s) were given: {template}",
            template=template,
            expected=expected,
            actual=len(parameters),
        )
    values = iter(parameters)
    parts: list[str] = []
    for kind, text in tokens:
        if kind is _Token.MARKER:
            parts.append(str(next(values)))
        elif kind is _Token.ESCAPE:
            parts.append("%")
        elif kind is _Token.STRAY:
            raise FormatMismatchError(
                f"Unsupported '%' conversion in SQL template: {template}",
                template=template,
                expected=expected,
                actual=len(parameters),
            )
        else:
            parts.append(text)
    return "".join(parts)


def resolve_sql(
    case: SQLCase | str,
    case_type: SQLCaseType,
    parameters: Sequence[Any] | None = None,
) -> str:
    """Render a case (or a bare template) in the requested syntax variant.

    Args:
        case: The case, or its template string.
        case_type: ``Literal`` or ``Placeholder``.
        parameters: Values for ``Literal`` rendering; ignored for
            ``Placeholder``.

    Raises:
        FormatMismatchError: See :func:`literal_sql`.
        ValueError: If ``case_type`` names no :class:`SQLCaseType`.
    """
    template = case.value if isinstance(case, SQLCase) else case
    if SQLCaseType(case_type) is SQLCaseType.Placeholder:
        return placeholder_sql(template)
    return literal_sql(template, parameters)
