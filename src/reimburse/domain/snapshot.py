"""Budget snapshot loading.

A snapshot is a JSON document holding the accounts, category groups (with
their categories) and transactions of one budget, in the shape returned by
the budgeting service's API:

    {
        "accounts": [{"id": "...", "name": "..."}],
        "category_groups": [
            {"id": "...", "name": "...", "categories": [{"id": "...", "name": "..."}]}
        ],
        "transactions": [{"id": "...", "date": "2024-01-15", "amount": -12340, ...}]
    }

An outer ``{"data": {...}}`` wrapper is accepted as well. Records flagged
``"deleted": true`` are skipped. The internal group and its ready-to-assign
and uncategorized categories stay in the snapshot, since transactions refer
to them, but are left out of the records that can be tagged.
"""

import json
from pathlib import Path
from typing import Any, Optional

from reimburse.domain.entities import (
    Account,
    BudgetSnapshot,
    Category,
    CategoryGroup,
    Subtransaction,
    Transaction,
)
from reimburse.domain.errors import ValidationError, snapshot_field_missing
from reimburse.domain.warnings import INFLOW_CATEGORY_NAME, UNCATEGORIZED_CATEGORY_NAME
from reimburse.logger import get_logger
from reimburse.utils.date_parser import parse_date

logger = get_logger("snapshot")

# Budget-internal records; they never take an ownership type
INTERNAL_GROUP_NAME = "Internal Master Category"
INTERNAL_CATEGORY_NAMES = frozenset({INFLOW_CATEGORY_NAME, UNCATEGORIZED_CATEGORY_NAME})


def _require(record: dict[str, Any], field_name: str, label: str) -> Any:
    value = record.get(field_name)
    if value is None:
        raise ValidationError(snapshot_field_missing(label, field_name))
    return value


def _optional_str(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def _parse_amount(value: Any, label: str) -> int:
    # bool is an int subclass but never a valid amount
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            f"Snapshot {label} has a non-integer amount: {value!r}. "
            "Amounts must be in milliunits."
        )
    return value


def _active(records: Any, label: str) -> list[dict[str, Any]]:
    if records is None:
        return []
    if not isinstance(records, list):
        raise ValidationError(f"Snapshot '{label}' must be a list")
    return [r for r in records if isinstance(r, dict) and not r.get("deleted", False)]


def parse_account(record: dict[str, Any]) -> Account:
    return Account(
        id=str(_require(record, "id", "account")),
        name=str(_require(record, "name", "account")),
    )


def parse_category_group(
    record: dict[str, Any],
) -> tuple[CategoryGroup, list[Category]]:
    """Parse a category group and the categories nested in it."""
    group = CategoryGroup(
        id=str(_require(record, "id", "category group")),
        name=str(_require(record, "name", "category group")),
    )
    categories = [
        Category(
            id=str(_require(c, "id", "category")),
            name=str(_require(c, "name", "category")),
            category_group_id=str(c.get("category_group_id") or group.id),
        )
        for c in _active(record.get("categories"), "categories")
    ]
    return group, categories


def parse_transaction(record: dict[str, Any]) -> Transaction:
    """Parse one transaction, including its subtransactions."""
    transaction_id = str(_require(record, "id", "transaction"))
    label = f"transaction '{transaction_id}'"

    try:
        txn_date = parse_date(str(_require(record, "date", label)))
    except ValueError as e:
        raise ValidationError(f"Snapshot {label} has an invalid date: {e}") from e

    subtransactions = tuple(
        Subtransaction(
            id=str(sub.get("id") or f"{transaction_id}-{index}"),
            amount=_parse_amount(sub.get("amount"), f"subtransaction of {label}"),
            category_id=_optional_str(sub.get("category_id")),
            category_name=_optional_str(sub.get("category_name")),
        )
        for index, sub in enumerate(
            _active(record.get("subtransactions"), "subtransactions")
        )
    )

    return Transaction(
        id=transaction_id,
        payee_name=_optional_str(record.get("payee_name")),
        date=txn_date,
        amount=_parse_amount(record.get("amount"), label),
        category_id=_optional_str(record.get("category_id")),
        category_name=_optional_str(record.get("category_name")),
        account_id=str(_require(record, "account_id", label)),
        transfer_account_id=_optional_str(record.get("transfer_account_id")),
        transfer_transaction_id=_optional_str(record.get("transfer_transaction_id")),
        subtransactions=subtransactions,
    )


def parse_snapshot(data: Any) -> BudgetSnapshot:
    """Build a BudgetSnapshot from decoded JSON.

    Raises:
        ValidationError: If the document is not a valid snapshot
    """
    if not isinstance(data, dict):
        raise ValidationError("Snapshot must be a JSON object")
    if isinstance(data.get("data"), dict):
        data = data["data"]

    accounts = [parse_account(a) for a in _active(data.get("accounts"), "accounts")]

    groups: list[CategoryGroup] = []
    categories: list[Category] = []
    for record in _active(data.get("category_groups"), "category_groups"):
        group, group_categories = parse_category_group(record)
        groups.append(group)
        categories.extend(group_categories)

    transactions = [
        parse_transaction(t) for t in _active(data.get("transactions"), "transactions")
    ]

    return BudgetSnapshot(
        accounts=tuple(accounts),
        category_groups=tuple(groups),
        categories=tuple(categories),
        transactions=tuple(transactions),
    )


def load_snapshot(path: str | Path) -> BudgetSnapshot:
    """Load a budget snapshot from a JSON file.

    Args:
        path: Path to the snapshot file

    Returns:
        BudgetSnapshot with accounts, groups, categories and transactions

    Raises:
        ValidationError: If the file cannot be read or is not a valid snapshot
    """
    snapshot_path = Path(path)
    try:
        with open(snapshot_path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ValidationError(f"Snapshot file '{snapshot_path}' not found") from e
    except json.JSONDecodeError as e:
        raise ValidationError(f"Snapshot file '{snapshot_path}' is not valid JSON: {e}") from e

    snapshot = parse_snapshot(data)
    logger.info(
        "Loaded snapshot %s: %d accounts, %d categories, %d transactions",
        snapshot_path,
        len(snapshot.accounts),
        len(snapshot.categories),
        len(snapshot.transactions),
    )
    return snapshot


def configurable_category_groups(snapshot: BudgetSnapshot) -> list[CategoryGroup]:
    """Category groups that can carry an ownership type."""
    return [g for g in snapshot.category_groups if g.name != INTERNAL_GROUP_NAME]


def configurable_categories(snapshot: BudgetSnapshot) -> list[Category]:
    """Categories that can carry an ownership type.

    Categories of the internal group and the ready-to-assign and
    uncategorized categories are excluded wherever they sit.
    """
    group_ids = {g.id for g in configurable_category_groups(snapshot)}
    return [
        c
        for c in snapshot.categories
        if c.category_group_id in group_ids and c.name not in INTERNAL_CATEGORY_NAMES
    ]
