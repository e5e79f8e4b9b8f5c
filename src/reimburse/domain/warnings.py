"""Ownership type validation and calculation warning builders."""

from reimburse.domain.entities import CalculationWarning, OwnershipType, Transaction

INFLOW_CATEGORY_NAME = "Inflow: Ready to Assign"
UNCATEGORIZED_CATEGORY_NAME = "Uncategorized"

# 'Unset' is only acceptable while configuring, never as a calculation input.
CONFIG_TYPES = frozenset(OwnershipType)
CALCULATION_TYPES = frozenset(
    {OwnershipType.HIS, OwnershipType.HERS, OwnershipType.SHARED}
)


def is_valid_type(value: object, for_calculation: bool = False) -> bool:
    """Check an ownership value against the configuration or calculation set."""
    member = OwnershipType.parse(value)
    if member is None:
        return False
    return member in (CALCULATION_TYPES if for_calculation else CONFIG_TYPES)


def create_type_warning(
    warning_id: str, name: str, value: object, for_calculation: bool = False
) -> CalculationWarning:
    """Build the warning for a record with an invalid ownership type."""
    if isinstance(value, OwnershipType):
        value = value.value
    expected = (
        "His, Hers, or Shared" if for_calculation else "His, Hers, Shared, or Unset"
    )
    return CalculationWarning(
        id=f"invalid-type-{warning_id}",
        message=f'"{name}" has an invalid type: "{value}".',
        details=f"Expected type to be one of: {expected}.",
    )


def describe_transaction(transaction: Transaction) -> str:
    """Return the label used for a transaction in warning messages."""
    return f'Transaction "{transaction.payee_name}" ({transaction.date})'


def subtransaction_without_category(
    parent: Transaction, index: int
) -> CalculationWarning:
    return CalculationWarning(
        id=f"subtransaction-{parent.id}-{index}",
        message=(
            f'Subtransaction of "{parent.payee_name}" ({parent.date}) '
            "has no category assigned."
        ),
        details="Subtransactions must have a category assigned in YNAB.",
    )


def transaction_without_category(transaction: Transaction) -> CalculationWarning:
    return CalculationWarning(
        id=f"transaction-{transaction.id}",
        message=f"{describe_transaction(transaction)} has no category assigned.",
        details="Transaction must have a category assigned in YNAB.",
    )


def uncategorized_transaction(transaction: Transaction) -> CalculationWarning:
    return CalculationWarning(
        id=f"unassigned-transaction-{transaction.id}",
        message=f"{describe_transaction(transaction)} is uncategorized.",
        details=(
            "This transaction is in the 'Uncategorized' category. "
            "Please assign it to a proper category in YNAB."
        ),
    )


def missing_category(category_id: str) -> CalculationWarning:
    return CalculationWarning(
        id=f"missing-category-{category_id}",
        message=f'Category with ID "{category_id}" was not found in the categories list.',
        details="This may indicate a deleted category or data synchronization issue.",
    )


def missing_category_group(group_id: str, category_name: str) -> CalculationWarning:
    return CalculationWarning(
        id=f"missing-group-{group_id}",
        message=(
            f'Category group with ID "{group_id}" was not found '
            f'for category "{category_name}".'
        ),
        details=(
            "This may indicate a deleted category group or data synchronization issue."
        ),
    )


def unset_account(account_id: str, account_name: str) -> CalculationWarning:
    return CalculationWarning(
        id=f"account-{account_id}",
        message=f'Account "{account_name}" has no type set.',
        details="Set it with 'reimburse account set-type'.",
    )


def unset_category(category_id: str, category_name: str) -> CalculationWarning:
    return CalculationWarning(
        id=f"category-{category_id}",
        message=f'Category "{category_name}" has no type set.',
        details=(
            "Set the category with 'reimburse category set-type' "
            "or its group with 'reimburse group set-type'."
        ),
    )
