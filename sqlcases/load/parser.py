"""Deserializes case definition documents into schema models.

Both parsers are strict: malformed XML, an unexpected root or child element,
an unknown attribute or a missing required attribute raises
:class:`~sqlcases.errors.CorpusParseError`.  A broken fixture file means a
broken test corpus, so the error is never swallowed per file.
"""
from __future__ import annotations

import xml.etree.ElementTree as ET
from enum import Enum
from typing import IO, Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from sqlcases.errors import CorpusParseError
from sqlcases.schema.case import SQLAssertCase, SQLAsserts, SQLCase, SQLCases, XmlNode
from sqlcases.schema.dialect import DatabaseType, dialects_from_literals

M = TypeVar("M", bound=BaseModel)

SQL_CASES_TAG = "sql-cases"
SQL_CASE_TAG = "sql-case"
SQL_ASSERTS_TAG = "sql-asserts"
SQL_ASSERT_TAG = "sql-assert"
SHARDING_RULE_ASSERTIONS_TAG = "sharding-rule-assertions"


def parse_sql_cases(stream: IO[bytes], resource: str = "<stream>") -> SQLCases:
    """Parse a ``<sql-cases>`` document.

    Args:
        stream: Binary stream over the document.
        resource: Name used in error messages.

    Returns:
        The document's cases in document order.

    Raises:
        CorpusParseError: If the document is malformed or off-schema.
    """
    root = _parse_root(stream, resource, SQL_CASES_TAG)
    cases: list[SQLCase] = []
    for element in root:
        _expect_tag(element, SQL_CASE_TAG, resource)
        if len(element):
            raise CorpusParseError(
                f"<{SQL_CASE_TAG}> must not have child elements in '{resource}'.",
                resource=resource,
            )
        cases.append(_validate(SQLCase, dict(element.attrib), resource))
    return SQLCases(sql_cases=cases)


def parse_sql_asserts(
    stream: IO[bytes],
    resource: str = "<stream>",
    enum_type: type[Enum] = DatabaseType,
) -> SQLAsserts:
    """Parse a ``<sql-asserts>`` document.

    Every ``types`` literal is resolved against ``enum_type`` immediately,
    so an unknown database type fails the parse rather than a later test.

    Args:
        stream: Binary stream over the document.
        resource: Name used in error messages.
        enum_type: Dialect enumeration the ``types`` literals must belong to.

    Raises:
        CorpusParseError: If the document is malformed or off-schema.
        UnknownDialectError: If a ``types`` literal is not in ``enum_type``.
    """
    root = _parse_root(stream, resource, SQL_ASSERTS_TAG)
    asserts: list[SQLAssertCase] = []
    for element in root:
        _expect_tag(element, SQL_ASSERT_TAG, resource)
        data: dict[str, Any] = dict(element.attrib)
        for child in element:
            _expect_tag(child, SHARDING_RULE_ASSERTIONS_TAG, resource)
            if SHARDING_RULE_ASSERTIONS_TAG in data:
                raise CorpusParseError(
                    f"Duplicate <{SHARDING_RULE_ASSERTIONS_TAG}> in '{resource}'.",
                    resource=resource,
                )
            data[SHARDING_RULE_ASSERTIONS_TAG] = to_xml_node(child)
        sql_assert = _validate(SQLAssertCase, data, resource)
        dialects_from_literals(enum_type, sql_assert.dialect_names, sql_assert.id)
        asserts.append(sql_assert)
    return SQLAsserts(sql_asserts=asserts)


def to_xml_node(element: ET.Element) -> XmlNode:
    """Convert an ElementTree element into an :class:`XmlNode` tree."""
    text = (element.text or "").strip()
    return XmlNode(
        tag=element.tag,
        attributes=dict(element.attrib),
        text=text or None,
        children=[to_xml_node(child) for child in element],
    )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _parse_root(stream: IO[bytes], resource: str, tag: str) -> ET.Element:
    try:
        root = ET.parse(stream).getroot()
    except ET.ParseError as exc:
        raise CorpusParseError(
            f"Malformed case document '{resource}': {exc}", resource=resource
        ) from exc
    if root.tag != tag:
        raise CorpusParseError(
            f"Expected root element <{tag}> in '{resource}', found <{root.tag}>.",
            resource=resource,
        )
    return root


def _expect_tag(element: ET.Element, tag: str, resource: str) -> None:
    if element.tag != tag:
        raise CorpusParseError(
            f"Unexpected element <{element.tag}> in '{resource}'; expected <{tag}>.",
            resource=resource,
        )


def _validate(model: type[M], data: dict[str, Any], resource: str) -> M:
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        raise CorpusParseError(
            f"Invalid {model.__name__} in '{resource}': {exc}", resource=resource
        ) from exc
