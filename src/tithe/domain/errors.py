"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class UsageError(DomainError):
    """Invalid combination of options for an operation."""


class StoreIOError(DomainError):
    """The record store file cannot be opened, created, written or read."""


class ParseError(DomainError):
    """A stored row is malformed."""

    def __init__(self, message: str, line_number: int | None = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class SerializationError(DomainError):
    """An entry cannot be encoded for storage."""


def month_without_year() -> str:
    """Return message for a month filter given without a year."""
    return "month is specified, but year is not"


def wrong_field_count(expected: int, actual: int) -> str:
    """Return message for a row with the wrong number of fields."""
    return f"expected {expected} field{'s' if expected != 1 else ''}, found {actual}"


def store_not_open(path: str) -> str:
    """Return message for using a store before opening it."""
    return f"Record store '{path}' is not open"
