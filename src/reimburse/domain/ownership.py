"""Ownership configuration domain service."""

from typing import Callable, Iterable, Optional, Sequence

from reimburse.database.base import Database
from reimburse.database.mappers import assignments_to_type_map
from reimburse.domain import warnings as w
from reimburse.domain.entities import (
    Account,
    CalculationWarning,
    Category,
    OwnershipAssignment,
    OwnershipType,
)
from reimburse.domain.errors import ValidationError, invalid_ownership_type


def normalize_ownership_type(value: str) -> OwnershipType:
    """Parse user input such as "his" or "SHARED" into an OwnershipType.

    Raises:
        ValidationError: If the value is not His, Hers, Shared or Unset
    """
    cleaned = value.strip().lower()
    for member in OwnershipType:
        if member.value.lower() == cleaned:
            return member
    raise ValidationError(invalid_ownership_type(value))


class OwnershipService:
    """Service for tagging accounts and categories as His, Hers or Shared."""

    def __init__(self, db: Database):
        """Initialize ownership service.

        Args:
            db: Database instance
        """
        self.db = db

    def set_account_type(self, account_id: str, ownership_type: str) -> OwnershipType:
        """Set the ownership type of an account.

        Args:
            account_id: Budget account ID
            ownership_type: His, Hers, Shared or Unset (any case)

        Returns:
            The stored OwnershipType

        Raises:
            ValidationError: If the type is not recognized
        """
        member = normalize_ownership_type(ownership_type)
        self.db.set_account_type(account_id, member.value)
        return member

    def set_category_type(
        self, category_id: str, ownership_type: str
    ) -> OwnershipType:
        """Set the ownership type of a category.

        Raises:
            ValidationError: If the type is not recognized
        """
        member = normalize_ownership_type(ownership_type)
        self.db.set_category_type(category_id, member.value)
        return member

    def set_category_group_type(
        self, group_id: str, ownership_type: str
    ) -> OwnershipType:
        """Set the ownership type of a category group.

        Raises:
            ValidationError: If the type is not recognized
        """
        member = normalize_ownership_type(ownership_type)
        self.db.set_category_group_type(group_id, member.value)
        return member

    @staticmethod
    def _stored_type(assignment: Optional[OwnershipAssignment]) -> str:
        if assignment is None:
            return OwnershipType.UNSET.value
        return assignment.ownership_type

    def get_account_type(self, account_id: str) -> str:
        """Stored type of one account, Unset if it was never tagged."""
        return self._stored_type(self.db.get_account_type(account_id))

    def get_category_type(self, category_id: str) -> str:
        """Stored type of one category, Unset if it was never tagged."""
        return self._stored_type(self.db.get_category_type(category_id))

    def get_category_group_type(self, group_id: str) -> str:
        """Stored type of one category group, Unset if it was never tagged."""
        return self._stored_type(self.db.get_category_group_type(group_id))

    def get_account_types(self) -> dict[str, str]:
        return assignments_to_type_map(self.db.list_account_types())

    def get_category_types(self) -> dict[str, str]:
        return assignments_to_type_map(self.db.list_category_types())

    def get_category_group_types(self) -> dict[str, str]:
        return assignments_to_type_map(self.db.list_category_group_types())

    def account_type_lookup(self) -> Callable[[str], str]:
        """Build the account classifier used by the calculation.

        Accounts without a stored tag are Unset.
        """
        account_types = self.get_account_types()

        def classify_account(account_id: str) -> str:
            return account_types.get(account_id, OwnershipType.UNSET.value)

        return classify_account

    def category_type_lookup(
        self, categories: Sequence[Category]
    ) -> Callable[[str], str]:
        """Build the category classifier used by the calculation.

        A category's own tag wins unless it is Unset, in which case the tag
        of its group applies. Categories not in ``categories`` are Unset.
        """
        category_index = {category.id: category for category in categories}
        category_types = self.get_category_types()
        group_types = self.get_category_group_types()

        def classify_category(category_id: str) -> str:
            category = category_index.get(category_id)
            if category is None:
                return OwnershipType.UNSET.value

            own_type = category_types.get(category_id, OwnershipType.UNSET.value)
            if own_type != OwnershipType.UNSET.value:
                return own_type

            return group_types.get(
                category.category_group_id, OwnershipType.UNSET.value
            )

        return classify_category

    def validate_configuration(
        self, accounts: Iterable[Account], categories: Iterable[Category]
    ) -> list[CalculationWarning]:
        """Report accounts and categories that still need an ownership type.

        A category only needs attention when its group is also Unset.
        """
        account_types = self.get_account_types()
        category_types = self.get_category_types()
        group_types = self.get_category_group_types()
        unset = OwnershipType.UNSET.value
        warnings: list[CalculationWarning] = []

        for account in accounts:
            if account_types.get(account.id, unset) == unset:
                warnings.append(w.unset_account(account.id, account.name))

        for category in categories:
            category_type = category_types.get(category.id, unset)
            group_type = group_types.get(category.category_group_id, unset)
            if category_type == unset and group_type == unset:
                warnings.append(w.unset_category(category.id, category.name))

        return warnings
