"""Tests for database mappers."""

from datetime import datetime, UTC

import pytest

from reimburse.database.models import (
    AccountType as ORMAccountType,
    CategoryType as ORMCategoryType,
    CategoryGroupType as ORMCategoryGroupType,
)
from reimburse.database.mappers import assignment_to_domain, assignments_to_type_map
from reimburse.domain.entities import OwnershipAssignment


@pytest.mark.parametrize("model", [ORMAccountType, ORMCategoryType, ORMCategoryGroupType])
def test_assignment_to_domain(model):
    """Test converting any ownership row to a domain OwnershipAssignment."""
    updated_at = datetime.now(UTC)
    orm_row = model(target_id="abc-123", ownership_type="Shared", updated_at=updated_at)

    assignment = assignment_to_domain(orm_row)

    assert isinstance(assignment, OwnershipAssignment)
    assert assignment.target_id == "abc-123"
    assert assignment.ownership_type == "Shared"
    assert assignment.updated_at == updated_at


def test_assignments_to_type_map():
    now = datetime.now(UTC)
    assignments = [
        OwnershipAssignment(target_id="a", ownership_type="His", updated_at=now),
        OwnershipAssignment(target_id="b", ownership_type="Hers", updated_at=now),
    ]

    assert assignments_to_type_map(assignments) == {"a": "His", "b": "Hers"}


def test_assignments_to_type_map_empty():
    assert assignments_to_type_map([]) == {}
