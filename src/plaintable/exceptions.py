"""Exceptions for plaintable."""

from __future__ import annotations


class PlainTableError(Exception):
    """
    Base exception for all plaintable errors.

    Callers can catch every library-specific error with a single
    except clause.
    """

    pass


class ConfigurationError(PlainTableError, ValueError):
    """
    Raised when a table option cannot be resolved.

    Column width and alignment are resolved lazily, so this is usually
    raised by a render rather than by the constructor.
    """

    pass


class SchemaViolation(PlainTableError):  # noqa: N818
    """Raised when a row does not match the table's column count."""

    def __init__(self, expected: int, actual: int, message: str | None = None) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            message or f"Each row should contain {expected} cells. Found {actual}"
        )


class EmptySchema(PlainTableError):  # noqa: N818
    """Raised when a table is created without any columns."""

    def __init__(self, message: str = "No columns defined") -> None:
        super().__init__(message)


class InputError(PlainTableError):
    """Raised when table input (CSV, JSONL) cannot be parsed."""

    pass


__all__ = [
    "ConfigurationError",
    "EmptySchema",
    "InputError",
    "PlainTableError",
    "SchemaViolation",
]
