"""Reimbursement domain service."""

from datetime import date
from typing import Optional, Sequence

from reimburse.database.base import Database
from reimburse.domain.calculations import calculate_reimbursement
from reimburse.domain.entities import (
    BudgetSnapshot,
    CalculationWarning,
    ReimbursementResult,
    Transaction,
)
from reimburse.domain.ownership import OwnershipService
from reimburse.domain.snapshot import configurable_categories
from reimburse.logger import get_logger

logger = get_logger("reimbursement")


def filter_by_date(
    transactions: Sequence[Transaction],
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> list[Transaction]:
    """Keep transactions dated within the inclusive range."""
    return [
        txn
        for txn in transactions
        if (start_date is None or txn.date >= start_date)
        and (end_date is None or txn.date <= end_date)
    ]


class ReimbursementService:
    """Service for settling shared spending from a budget snapshot."""

    def __init__(self, db: Database):
        """Initialize reimbursement service.

        Args:
            db: Database instance holding the ownership configuration
        """
        self.db = db
        self.ownership = OwnershipService(db)

    def configuration_warnings(
        self, snapshot: BudgetSnapshot
    ) -> list[CalculationWarning]:
        """Accounts and categories in the snapshot that still lack a type.

        Budget-internal categories are not checked.
        """
        return self.ownership.validate_configuration(
            snapshot.accounts, configurable_categories(snapshot)
        )

    def calculate(
        self,
        snapshot: BudgetSnapshot,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> ReimbursementResult:
        """Calculate the reimbursement for a snapshot.

        When the ownership configuration is incomplete the calculation is
        skipped and an all-zero result is returned; use
        configuration_warnings() to find out why.

        Args:
            snapshot: Budget records to settle
            start_date: Optional first day to include
            end_date: Optional last day to include

        Returns:
            ReimbursementResult for the selected transactions
        """
        transactions = filter_by_date(snapshot.transactions, start_date, end_date)
        logger.debug(
            "Selected %d of %d transactions between %s and %s",
            len(transactions),
            len(snapshot.transactions),
            start_date,
            end_date,
        )

        return calculate_reimbursement(
            transactions,
            snapshot.categories,
            snapshot.category_groups,
            self.ownership.account_type_lookup(),
            self.ownership.category_type_lookup(snapshot.categories),
            has_external_warnings=len(self.configuration_warnings(snapshot)) > 0,
        )
