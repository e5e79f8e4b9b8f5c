"""Reimbursement calculation command."""

import click
from reimburse.cli.date_filters import resolve_cli_date_range
from reimburse.cli.resolution import data_option, load_snapshot_or_exit
from reimburse.domain.entities import (
    CalculationWarning,
    CategorySummary,
    ReimbursementDirection,
    ReimbursementResult,
)
from reimburse.domain.reimbursement import ReimbursementService
from reimburse.utils.amounts import format_milliunits


def _echo_warnings(title: str, warnings: list[CalculationWarning]) -> None:
    click.echo(f"\n{title}")
    for warning in warnings:
        click.echo(f"  - {warning.message}")
        click.echo(f"    {warning.details}")


def _settlement_line(result: ReimbursementResult, currency: str) -> str:
    amount = format_milliunits(result.reimbursement_amount, currency)
    if result.reimbursement_direction == ReimbursementDirection.HER_TO_HIM:
        return f"{amount} - She should pay Him"
    return f"{amount} - He should pay Her"


def _display_category_summary(summaries: tuple[CategorySummary, ...], currency: str) -> None:
    click.echo("\nSpending by Category:")
    click.echo("-" * 90)
    click.echo(f"{'Category':<44} {'Type':<7} {'His':>12} {'Her':>12} {'Total':>12}")
    click.echo("-" * 90)

    current_group = None
    for summary in summaries:
        if summary.group_name != current_group:
            current_group = summary.group_name
            click.echo(current_group)
        type_label = getattr(summary.type, "value", summary.type)
        click.echo(
            f"    {summary.category_name:<40} {type_label:<7} "
            f"{format_milliunits(summary.his_spending, currency):>12} "
            f"{format_milliunits(summary.her_spending, currency):>12} "
            f"{format_milliunits(summary.total, currency):>12}"
        )


@click.command("calculate")
@data_option
@click.option("--month", help="Budget month (e.g. 2024-03, 'March 2024', 'last month')")
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'this month')")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today')")
@click.option("--this-month", is_flag=True, help="Limit to the current month")
@click.option("--last-month", is_flag=True, help="Limit to the previous month")
@click.option("--currency", default="£", show_default=True, help="Currency symbol for amounts")
@click.pass_context
def calculate(
    ctx,
    data_path: str,
    month: str | None,
    start_date: str | None,
    end_date: str | None,
    this_month: bool,
    last_month: bool,
    currency: str,
):
    """Calculate who owes whom for shared spending.

    Spending in Shared categories is split evenly between both people.
    Spending by one person in the other's personal categories is paid back
    in full.

    Examples:
        reimburse calculate --data budget.json --month 2024-03
        reimburse calculate --data budget.json --last-month
    """
    start, end = resolve_cli_date_range(
        ctx,
        month=month,
        start_date=start_date,
        end_date=end_date,
        period_flags={"this-month": this_month, "last-month": last_month},
    )

    snapshot = load_snapshot_or_exit(ctx, data_path)
    service = ReimbursementService(ctx.obj["db"])

    config_warnings = service.configuration_warnings(snapshot)
    if config_warnings:
        _echo_warnings("Configuration needs attention before calculating:", config_warnings)
        ctx.exit(1)

    result = service.calculate(snapshot, start_date=start, end_date=end)
    totals = result.totals

    if start or end:
        click.echo(f"\nPeriod: {start or '...'} to {end or '...'}")

    click.echo("\nReimbursement:")
    click.echo("-" * 90)
    click.echo(f"{'His shared spending:':<32} {format_milliunits(totals.his_total_shared, currency):>14}")
    click.echo(f"{'Her shared spending:':<32} {format_milliunits(totals.her_total_shared, currency):>14}")
    click.echo(f"{'His spending for her:':<32} {format_milliunits(totals.his_total_for_her, currency):>14}")
    click.echo(f"{'Her spending for him:':<32} {format_milliunits(totals.her_total_for_him, currency):>14}")
    click.echo(f"{'Settlement:':<32} {_settlement_line(result, currency)}")

    click.echo("\nBudget Refill:")
    click.echo(f"{'She should refill:':<32} {format_milliunits(totals.she_should_refill, currency):>14}")
    click.echo(f"{'He should refill:':<32} {format_milliunits(totals.he_should_refill, currency):>14}")

    if result.category_summary:
        _display_category_summary(result.category_summary, currency)
    else:
        click.echo("\nNo spending found.")

    if result.warnings:
        _echo_warnings(f"Warnings ({len(result.warnings)}):", list(result.warnings))


def register_commands(cli):
    """Register calculate command with main CLI."""
    cli.add_command(calculate)
