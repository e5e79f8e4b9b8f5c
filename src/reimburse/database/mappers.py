"""Mapper functions to convert between domain models and SQLAlchemy models.

All three ownership tables share one row shape, so a single converter
serves them.
"""

from typing import Union

from reimburse.domain import entities as domain
from reimburse.database.models import (
    AccountType as ORMAccountType,
    CategoryType as ORMCategoryType,
    CategoryGroupType as ORMCategoryGroupType,
)

ORMAssignment = Union[ORMAccountType, ORMCategoryType, ORMCategoryGroupType]


def assignment_to_domain(orm_row: ORMAssignment) -> domain.OwnershipAssignment:
    """Convert an ownership table row to a domain OwnershipAssignment."""
    return domain.OwnershipAssignment(
        target_id=orm_row.target_id,
        ownership_type=orm_row.ownership_type,
        updated_at=orm_row.updated_at,
    )


def assignments_to_type_map(
    assignments: list[domain.OwnershipAssignment],
) -> dict[str, str]:
    """Index assignments by target ID."""
    return {a.target_id: a.ownership_type for a in assignments}
