"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from reimburse.domain.entities import OwnershipAssignment


class Database(ABC):
    """Abstract store for account, category and category group ownership."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Account ownership
    @abstractmethod
    def set_account_type(self, account_id: str, ownership_type: str) -> None:
        """Create or replace the ownership tag of an account."""
        pass

    @abstractmethod
    def get_account_type(self, account_id: str) -> Optional[OwnershipAssignment]:
        """Get the ownership tag of an account, if stored."""
        pass

    @abstractmethod
    def list_account_types(self) -> list[OwnershipAssignment]:
        """List all stored account ownership tags."""
        pass

    # Category ownership
    @abstractmethod
    def set_category_type(self, category_id: str, ownership_type: str) -> None:
        """Create or replace the ownership tag of a category."""
        pass

    @abstractmethod
    def get_category_type(self, category_id: str) -> Optional[OwnershipAssignment]:
        """Get the ownership tag of a category, if stored."""
        pass

    @abstractmethod
    def list_category_types(self) -> list[OwnershipAssignment]:
        """List all stored category ownership tags."""
        pass

    # Category group ownership
    @abstractmethod
    def set_category_group_type(self, group_id: str, ownership_type: str) -> None:
        """Create or replace the ownership tag of a category group."""
        pass

    @abstractmethod
    def get_category_group_type(self, group_id: str) -> Optional[OwnershipAssignment]:
        """Get the ownership tag of a category group, if stored."""
        pass

    @abstractmethod
    def list_category_group_types(self) -> list[OwnershipAssignment]:
        """List all stored category group ownership tags."""
        pass
