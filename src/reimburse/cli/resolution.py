"""CLI helpers for snapshot loading and record resolution."""

from __future__ import annotations

from typing import Iterable

import click
from reimburse.domain.entities import BudgetSnapshot
from reimburse.domain.errors import DomainError
from reimburse.domain.snapshot import load_snapshot
from reimburse.utils.resolver import RecordT, resolve_record
from reimburse.cli.error_handling import handle_domain_error

data_option = click.option(
    "--data",
    "data_path",
    type=click.Path(dir_okay=False),
    required=True,
    envvar="REIMBURSE_DATA_PATH",
    help="Path to the budget snapshot JSON (or set REIMBURSE_DATA_PATH)",
)


def load_snapshot_or_exit(ctx: click.Context, data_path: str) -> BudgetSnapshot:
    """Load the budget snapshot, or exit with a CLI error."""
    try:
        return load_snapshot(data_path)
    except DomainError as exc:
        handle_domain_error(ctx, exc)


def resolve_record_or_exit(
    ctx: click.Context, records: Iterable[RecordT], reference: str, kind: str
) -> RecordT:
    """Resolve a record name or ID, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return resolve_record(records, reference, kind)
    except DomainError as exc:
        handle_domain_error(ctx, exc)
