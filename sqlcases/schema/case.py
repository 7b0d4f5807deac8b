"""Pydantic models for the records held by a case definition document.

Two flavors of document exist:

``<sql-cases>``
    Template fixtures.  Each ``<sql-case>`` carries an ``id``, a ``value``
    SQL template and an optional ``database-types`` restriction list.

``<sql-asserts>``
    Assertion fixtures.  Each ``<sql-assert>`` carries an ``id``, the ``sql``
    text, optional ``types`` and a nested ``<sharding-rule-assertions>``
    element that downstream assertions interpret; sqlcases keeps it as an
    opaque :class:`XmlNode` tree.

Field aliases match the XML attribute names so a parsed element's attribute
map validates directly.
"""
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from sqlcases.schema.dialect import split_dialect_literals


class SQLCaseType(str, Enum):
    """How parameter values appear in resolved SQL.

    Member order is the order test matrices emit variants in.
    """

    Literal = "Literal"
    Placeholder = "Placeholder"


class XmlNode(BaseModel):
    """An uninterpreted XML element.

    Attributes:
        tag: Element name.
        attributes: Attribute map in document order.
        text: Stripped text content, or ``None`` when blank.
        children: Child elements in document order.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    tag: str
    attributes: dict[str, str] = Field(default_factory=dict)
    text: str | None = None
    children: list[XmlNode] = Field(default_factory=list)

    def find(self, tag: str) -> XmlNode | None:
        """Returns the first direct child named ``tag``, or ``None``."""
        for child in self.children:
            if child.tag == tag:
                return child
        return None

    def find_all(self, tag: str) -> list[XmlNode]:
        """Returns every direct child named ``tag``."""
        return [c for c in self.children if c.tag == tag]


class SQLCase(BaseModel):
    """One SQL template fixture.

    Attributes:
        id: Unique id within its corpus.
        value: SQL template with ``%s`` markers and ``%%`` escapes.
        database_types: Raw comma-separated restriction list; empty or
            ``None`` means every dialect the caller knows.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    id: str = Field(min_length=1)
    value: str
    database_types: str | None = Field(default=None, alias="database-types")

    @property
    def dialect_names(self) -> tuple[str, ...]:
        """Returns the declared dialect names, empty when unrestricted."""
        return split_dialect_literals(self.database_types)


class SQLCases(BaseModel):
    """Root of a ``<sql-cases>`` document."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    sql_cases: list[SQLCase] = Field(default_factory=list)


class SQLAssertCase(BaseModel):
    """One assertion fixture.

    Attributes:
        id: Unique id within its file.
        sql: SQL text under test.
        types: Raw comma-separated dialect list, validated eagerly on parse.
        sharding_rule_assertions: Opaque expected-routing payload.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    id: str = Field(min_length=1)
    sql: str
    types: str | None = None
    sharding_rule_assertions: XmlNode | None = Field(
        default=None, alias="sharding-rule-assertions"
    )

    @property
    def dialect_names(self) -> tuple[str, ...]:
        """Returns the declared dialect names, empty when unrestricted."""
        return split_dialect_literals(self.types)


class SQLAsserts(BaseModel):
    """Root of a ``<sql-asserts>`` document."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    sql_asserts: list[SQLAssertCase] = Field(default_factory=list)
