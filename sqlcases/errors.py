"""Custom exception hierarchy for sqlcases.

All public errors inherit from SQLCasesError so callers can catch the base
class for any sqlcases-specific failure.  Every one of them signals a broken
fixture corpus or a test-authoring defect; none is meant to be recovered
from at runtime.
"""
from __future__ import annotations


class SQLCasesError(Exception):
    """Base exception for all sqlcases errors."""


class CorpusParseError(SQLCasesError):
    """Raised when a case definition document cannot be deserialized.

    Args:
        message: Human-readable description.
        resource: Name of the resource that failed to parse.
    """

    def __init__(self, message: str, resource: str | None = None) -> None:
        super().__init__(message)
        self.resource = resource


class CaseNotFoundError(SQLCasesError, KeyError):
    """Raised when a case id is not present in a corpus.

    Args:
        case_id: The id that was looked up.
    """

    def __init__(self, case_id: str) -> None:
        super().__init__(f"Can't find SQL of id: {case_id}")
        self.case_id = case_id

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return self.args[0]


class DuplicateCaseError(SQLCasesError):
    """Raised in strict mode when two records of one corpus share an id.

    Args:
        case_id: The duplicated id.
        resource: Resource holding the later definition.
    """

    def __init__(self, case_id: str, resource: str | None = None) -> None:
        super().__init__(
            f"Duplicate SQL case id '{case_id}'"
            + (f" in '{resource}'." if resource else ".")
        )
        self.case_id = case_id
        self.resource = resource


class FormatMismatchError(SQLCasesError):
    """Raised when literal substitution cannot be applied to a template.

    Args:
        message: Human-readable description.
        template: The SQL template being rendered.
        expected: Number of ``%s`` markers found in the template.
        actual: Number of parameters supplied.
    """

    def __init__(
        self,
        message: str,
        template: str,
        expected: int | None = None,
        actual: int | None = None,
    ) -> None:
        super().__init__(message)
        self.template = template
        self.expected = expected
        self.actual = actual


class UnknownDialectError(SQLCasesError):
    """Raised when a dialect literal has no member in the dialect enum.

    Args:
        literal: The unrecognized dialect name.
        case_id: Id of the record declaring it, when known.
        known: Names the enum does define.
    """

    def __init__(
        self,
        literal: str,
        case_id: str | None = None,
        known: list[str] | None = None,
    ) -> None:
        owner = f" declared by case '{case_id}'" if case_id else ""
        super().__init__(
            f"Unknown database type '{literal}'{owner}. Known types: {known or []}."
        )
        self.literal = literal
        self.case_id = case_id
        self.known = known or []
