"""Utility for resolving snapshot record names to IDs."""

from typing import Iterable, Protocol, TypeVar

from reimburse.domain.errors import (
    NotFoundError,
    ValidationError,
    ambiguous_record_name,
    record_not_found,
)


class NamedRecord(Protocol):
    id: str
    name: str


RecordT = TypeVar("RecordT", bound=NamedRecord)


def resolve_record(records: Iterable[RecordT], reference: str, kind: str) -> RecordT:
    """Resolve a record ID or display name to the record.

    IDs take precedence over names. Budget IDs are UUIDs, so an ID never
    collides with a human-chosen name in practice.

    Args:
        records: Accounts, categories or category groups
        reference: Record ID or exact display name
        kind: Record kind used in error messages (e.g. "account")

    Returns:
        The matching record

    Raises:
        NotFoundError: If no record matches
        ValidationError: If the name matches more than one record
    """
    records = list(records)
    for record in records:
        if record.id == reference:
            return record

    matches = [record for record in records if record.name == reference]
    if len(matches) == 1:
        return matches[0]
    if len(matches) > 1:
        raise ValidationError(ambiguous_record_name(kind, reference, len(matches)))

    raise NotFoundError(record_not_found(kind, reference))
