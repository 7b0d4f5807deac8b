"""SQL template resolution."""
from sqlcases.resolve.resolver import (
    PLACEHOLDER,
    count_markers,
    literal_sql,
    placeholder_sql,
    resolve_sql,
)

__all__ = [
    "PLACEHOLDER",
    "count_markers",
    "literal_sql",
    "placeholder_sql",
    "resolve_sql",
]
