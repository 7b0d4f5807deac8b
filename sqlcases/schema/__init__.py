"""sqlcases schema models: case records, syntax variants, database types."""
from sqlcases.schema.case import (
    SQLAssertCase,
    SQLAsserts,
    SQLCase,
    SQLCases,
    SQLCaseType,
    XmlNode,
)
from sqlcases.schema.dialect import (
    DatabaseType,
    dialect_from_name,
    dialects_from_literals,
    split_dialect_literals,
)

__all__ = [
    "SQLAssertCase",
    "SQLAsserts",
    "SQLCase",
    "SQLCases",
    "SQLCaseType",
    "XmlNode",
    "DatabaseType",
    "dialect_from_name",
    "dialects_from_literals",
    "split_dialect_literals",
]
