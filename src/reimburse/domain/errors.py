"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


def invalid_ownership_type(value: str) -> str:
    """Return message for an ownership type outside His, Hers, Shared, Unset."""
    return f"Invalid type '{value}'. Expected one of: His, Hers, Shared, Unset"


def record_not_found(kind: str, reference: str) -> str:
    """Return message for a snapshot record missing by ID or name."""
    return f"{kind.capitalize()} '{reference}' not found"


def ambiguous_record_name(kind: str, name: str, count: int) -> str:
    """Return message when a display name matches several records."""
    return f"{count} {kind} records are named '{name}'. Use the ID instead."


def snapshot_field_missing(record: str, field_name: str) -> str:
    """Return message for a snapshot record without a required field."""
    return f"Snapshot {record} is missing required field '{field_name}'"
