"""Domain model entities for reimburse.

These are pure data classes representing budget records and calculation
results, independent of where the budget data or the ownership
configuration come from.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional, Union


class OwnershipType(str, Enum):
    """Who an account or category belongs to."""

    HIS = "His"
    HERS = "Hers"
    SHARED = "Shared"
    UNSET = "Unset"

    @classmethod
    def parse(cls, value: object) -> Optional["OwnershipType"]:
        """Return the matching member, or None for unrecognized input."""
        for member in cls:
            if value == member.value:
                return member
        return None


class ReimbursementDirection(str, Enum):
    """Who pays whom to settle up."""

    HIM_TO_HER = "himToHer"
    HER_TO_HIM = "herToHim"


@dataclass(frozen=True)
class Account:
    """Budget account domain entity."""

    id: str
    name: str


@dataclass(frozen=True)
class CategoryGroup:
    """Category group domain entity."""

    id: str
    name: str


@dataclass(frozen=True)
class Category:
    """Budget category domain entity."""

    id: str
    name: str
    category_group_id: str


@dataclass(frozen=True)
class Subtransaction:
    """Portion of a split transaction."""

    id: str
    amount: int
    category_id: Optional[str]
    category_name: Optional[str] = None


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity.

    Amounts are in milliunits; outflows are negative.
    """

    id: str
    payee_name: Optional[str]
    date: date
    amount: int
    category_id: Optional[str]
    category_name: Optional[str]
    account_id: str
    transfer_account_id: Optional[str] = None
    transfer_transaction_id: Optional[str] = None
    subtransactions: tuple[Subtransaction, ...] = ()
    original_transaction_id: Optional[str] = None

    @property
    def is_transfer(self) -> bool:
        return bool(self.transfer_account_id or self.transfer_transaction_id)

    @property
    def is_split(self) -> bool:
        return len(self.subtransactions) > 0


@dataclass(frozen=True)
class OwnershipAssignment:
    """Stored ownership tag for an account, category or category group."""

    target_id: str
    ownership_type: str
    updated_at: datetime


@dataclass(frozen=True)
class CalculationWarning:
    """Data-quality problem found while calculating."""

    id: str
    message: str
    details: str


@dataclass
class CategorySpending:
    """Running spending sums for one category, by paying person."""

    his_spending: int = 0
    her_spending: int = 0


@dataclass(frozen=True)
class SpendingTotals:
    """Household-level spending totals.

    The ``*_for_him``/``*_for_her`` pairs hold spending recorded against
    each person's personal categories. Cross-spend (one person paying into
    the other's categories) feeds the settlement; spending in one's own
    categories only feeds the refill figures.
    """

    his_total_shared: int = 0
    her_total_shared: int = 0
    his_total_for_her: int = 0
    her_total_for_him: int = 0
    his_total_for_him: int = 0
    her_total_for_her: int = 0

    @property
    def she_should_refill(self) -> int:
        return self.his_total_for_her + self.her_total_for_her

    @property
    def he_should_refill(self) -> int:
        return self.her_total_for_him + self.his_total_for_him


@dataclass(frozen=True)
class CategorySummary:
    """Per-category spending with display metadata."""

    category_id: str
    category_name: str
    group_id: str
    group_name: str
    type: Union[OwnershipType, str]
    his_spending: int
    her_spending: int

    @property
    def total(self) -> int:
        return self.his_spending + self.her_spending


@dataclass(frozen=True)
class ReimbursementResult:
    """Outcome of a full reimbursement calculation."""

    totals: SpendingTotals
    reimbursement_amount: Decimal
    reimbursement_direction: Optional[ReimbursementDirection]
    category_summary: tuple[CategorySummary, ...] = ()
    warnings: tuple[CalculationWarning, ...] = ()

    @property
    def his_total_shared(self) -> int:
        return self.totals.his_total_shared

    @property
    def her_total_shared(self) -> int:
        return self.totals.her_total_shared

    @property
    def his_total_for_her(self) -> int:
        return self.totals.his_total_for_her

    @property
    def her_total_for_him(self) -> int:
        return self.totals.her_total_for_him


@dataclass(frozen=True)
class BudgetSnapshot:
    """Budget records loaded from an export of the budgeting service."""

    accounts: tuple[Account, ...] = ()
    category_groups: tuple[CategoryGroup, ...] = ()
    categories: tuple[Category, ...] = ()
    transactions: tuple[Transaction, ...] = ()
