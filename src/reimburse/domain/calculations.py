"""Reimbursement calculation pipeline.

Every stage is a pure function of its arguments. Stages return their
primary output together with the warnings they produced; records that fail
validation are left out of the totals rather than raising.
"""

import unicodedata
from dataclasses import replace
from decimal import Decimal
from typing import Callable, Iterable, Sequence

from reimburse.domain import warnings as w
from reimburse.domain.entities import (
    CalculationWarning,
    Category,
    CategoryGroup,
    CategorySpending,
    CategorySummary,
    OwnershipType,
    ReimbursementDirection,
    ReimbursementResult,
    SpendingTotals,
    Transaction,
)
from reimburse.logger import get_logger

TypeLookup = Callable[[str], str]

logger = get_logger("calculations")


def expand_transactions(
    transactions: Iterable[Transaction],
) -> tuple[list[Transaction], list[CalculationWarning]]:
    """Drop transfers and replace split transactions by their parts."""
    expanded: list[Transaction] = []
    warnings: list[CalculationWarning] = []

    for txn in transactions:
        if txn.is_transfer:
            continue

        if not txn.is_split:
            expanded.append(txn)
            continue

        for index, sub in enumerate(txn.subtransactions):
            if not sub.category_id:
                warnings.append(w.subtransaction_without_category(txn, index))
                continue
            expanded.append(
                replace(
                    txn,
                    id=f"{txn.id}:sub:{index}",
                    amount=sub.amount,
                    category_id=sub.category_id,
                    category_name=sub.category_name,
                    subtransactions=(),
                    original_transaction_id=txn.id,
                )
            )

    return expanded, warnings


def filter_transactions(
    transactions: Iterable[Transaction],
    classify_account: TypeLookup,
    classify_category: TypeLookup,
) -> tuple[list[Transaction], list[CalculationWarning]]:
    """Return the transactions that count as spending, plus warnings.

    Checks run in a fixed order and the first failure excludes the
    transaction: category present, not ready-to-assign income, not
    uncategorized, valid account type, valid category type.
    """
    expanded, warnings = expand_transactions(transactions)
    valid: list[Transaction] = []

    for txn in expanded:
        if not txn.category_id:
            warnings.append(w.transaction_without_category(txn))
            continue

        if txn.category_name == w.INFLOW_CATEGORY_NAME:
            continue

        if txn.category_name == w.UNCATEGORIZED_CATEGORY_NAME:
            warnings.append(w.uncategorized_transaction(txn))
            continue

        account_type = classify_account(txn.account_id)
        if not w.is_valid_type(account_type, for_calculation=True):
            warnings.append(
                w.create_type_warning(
                    f"transaction-account-{txn.id}",
                    f"{w.describe_transaction(txn)} account",
                    account_type,
                    for_calculation=True,
                )
            )
            continue

        category_type = classify_category(txn.category_id)
        if not w.is_valid_type(category_type, for_calculation=True):
            warnings.append(
                w.create_type_warning(
                    f"transaction-category-{txn.id}",
                    f"{w.describe_transaction(txn)} category",
                    category_type,
                    for_calculation=True,
                )
            )
            continue

        valid.append(txn)

    return valid, warnings


def calculate_category_spending(
    valid_transactions: Iterable[Transaction], classify_account: TypeLookup
) -> tuple[dict[str, CategorySpending], list[CalculationWarning]]:
    """Sum spending per category, split by the person who paid.

    Spending from shared accounts is attributed to neither person.
    """
    spending: dict[str, CategorySpending] = {}
    warnings: list[CalculationWarning] = []

    for txn in valid_transactions:
        account_type = classify_account(txn.account_id)
        # Re-checked so the stage stays safe when called on its own
        if not w.is_valid_type(account_type, for_calculation=True):
            warnings.append(
                w.create_type_warning(
                    f"account-{txn.id}",
                    f"{w.describe_transaction(txn)} account",
                    account_type,
                    for_calculation=True,
                )
            )
            continue

        entry = spending.setdefault(txn.category_id, CategorySpending())
        amount = -txn.amount
        if account_type == OwnershipType.HIS:
            entry.his_spending += amount
        elif account_type == OwnershipType.HERS:
            entry.her_spending += amount

    return spending, warnings


def calculate_spending_totals(
    category_spending: dict[str, CategorySpending],
    categories: Sequence[Category],
    classify_category: TypeLookup,
) -> tuple[SpendingTotals, list[CalculationWarning]]:
    """Roll per-category spending up into household totals."""
    category_index = {category.id: category for category in categories}
    sums = {
        "his_total_shared": 0,
        "her_total_shared": 0,
        "his_total_for_her": 0,
        "her_total_for_him": 0,
        "his_total_for_him": 0,
        "her_total_for_her": 0,
    }
    warnings: list[CalculationWarning] = []

    for category_id, entry in category_spending.items():
        category_type = classify_category(category_id)
        if not w.is_valid_type(category_type, for_calculation=True):
            category = category_index.get(category_id)
            name = category.name if category else f"Category ID: {category_id}"
            warnings.append(
                w.create_type_warning(
                    f"category-{category_id}",
                    name,
                    category_type,
                    for_calculation=True,
                )
            )
            continue

        if category_type == OwnershipType.SHARED:
            sums["his_total_shared"] += entry.his_spending
            sums["her_total_shared"] += entry.her_spending
        elif category_type == OwnershipType.HIS:
            sums["his_total_for_him"] += entry.his_spending
            sums["her_total_for_him"] += entry.her_spending
        elif category_type == OwnershipType.HERS:
            sums["her_total_for_her"] += entry.her_spending
            sums["his_total_for_her"] += entry.his_spending

    return SpendingTotals(**sums), warnings


def calculate_reimbursement_values(
    totals: SpendingTotals,
) -> tuple[Decimal, ReimbursementDirection]:
    """Work out how much one person owes the other.

    The shared pool is split evenly, then cross-spend on each other's
    personal categories is settled. The half split is exact, so an odd
    shared total leaves half a milliunit. A zero balance reports
    HER_TO_HIM; the direction carries no meaning in that case.
    """
    total_shared = Decimal(totals.his_total_shared) + Decimal(totals.her_total_shared)
    he_should_pay = (total_shared / 2 - totals.his_total_shared) + (
        totals.her_total_for_him - totals.his_total_for_her
    )

    direction = (
        ReimbursementDirection.HIM_TO_HER
        if he_should_pay > 0
        else ReimbursementDirection.HER_TO_HIM
    )
    return abs(he_should_pay), direction


def create_category_summary(
    category_spending: dict[str, CategorySpending],
    categories: Sequence[Category],
    category_groups: Sequence[CategoryGroup],
    classify_category: TypeLookup,
) -> tuple[dict[str, CategorySummary], list[CalculationWarning]]:
    """Attach category and group names to per-category spending.

    Unlike the totals, an unrecognized category type only produces a
    warning here; the category is still listed.
    """
    category_index = {category.id: category for category in categories}
    group_index = {group.id: group for group in category_groups}
    summary: dict[str, CategorySummary] = {}
    warnings: list[CalculationWarning] = []

    for category_id, entry in category_spending.items():
        category = category_index.get(category_id)
        if category is None:
            warnings.append(w.missing_category(category_id))
            continue

        group = group_index.get(category.category_group_id)
        if group is None:
            warnings.append(
                w.missing_category_group(category.category_group_id, category.name)
            )
            continue

        category_type = classify_category(category_id)
        if not w.is_valid_type(category_type):
            warnings.append(
                w.create_type_warning(
                    f"summary-category-{category_id}",
                    f'Category "{category.name}"',
                    category_type,
                )
            )

        summary[category_id] = CategorySummary(
            category_id=category_id,
            category_name=category.name,
            group_id=group.id,
            group_name=group.name,
            type=OwnershipType.parse(category_type) or category_type,
            his_spending=entry.his_spending,
            her_spending=entry.her_spending,
        )

    return summary, warnings


def _collation_key(name: str) -> str:
    """Approximate a locale-aware ordering: ignore case and accents."""
    decomposed = unicodedata.normalize("NFKD", name)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def sort_category_summary(
    summaries: Iterable[CategorySummary],
) -> list[CategorySummary]:
    """Order summaries by group name, then by category name."""
    return sorted(
        summaries,
        key=lambda s: (s.group_name, _collation_key(s.category_name)),
    )


def empty_result() -> ReimbursementResult:
    """Result returned when the calculation is not attempted."""
    return ReimbursementResult(
        totals=SpendingTotals(),
        reimbursement_amount=Decimal(0),
        reimbursement_direction=None,
    )


def calculate_reimbursement(
    transactions: Sequence[Transaction],
    categories: Sequence[Category],
    category_groups: Sequence[CategoryGroup],
    classify_account: TypeLookup,
    classify_category: TypeLookup,
    has_external_warnings: bool = False,
) -> ReimbursementResult:
    """Run the full calculation over one set of budget records.

    Args:
        transactions: Raw transactions, including transfers and splits
        categories: All known categories
        category_groups: All known category groups
        classify_account: Returns the ownership type for an account ID
        classify_category: Returns the ownership type for a category ID
        has_external_warnings: If True, the ownership configuration is known
            to be incomplete and nothing is calculated

    Returns:
        ReimbursementResult with totals, settlement, summary and warnings
    """
    if has_external_warnings:
        logger.debug("Skipping calculation: configuration has warnings")
        return empty_result()

    valid, filter_warnings = filter_transactions(
        transactions, classify_account, classify_category
    )
    category_spending, spending_warnings = calculate_category_spending(
        valid, classify_account
    )
    totals, totals_warnings = calculate_spending_totals(
        category_spending, categories, classify_category
    )
    amount, direction = calculate_reimbursement_values(totals)
    summary, summary_warnings = create_category_summary(
        category_spending, categories, category_groups, classify_category
    )

    warnings = filter_warnings + spending_warnings + totals_warnings + summary_warnings
    logger.debug(
        "Calculated reimbursement from %d of %d transactions across %d categories "
        "(%d warnings)",
        len(valid),
        len(transactions),
        len(category_spending),
        len(warnings),
    )

    return ReimbursementResult(
        totals=totals,
        reimbursement_amount=amount,
        reimbursement_direction=direction,
        category_summary=tuple(sort_category_summary(summary.values())),
        warnings=tuple(warnings),
    )
