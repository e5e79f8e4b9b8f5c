"""Account ownership commands."""

import click
from reimburse.cli.error_handling import handle_domain_error
from reimburse.cli.resolution import data_option, load_snapshot_or_exit, resolve_record_or_exit
from reimburse.domain.entities import OwnershipType
from reimburse.domain.errors import DomainError
from reimburse.domain.ownership import OwnershipService

TYPE_CHOICE = click.Choice([t.value for t in OwnershipType], case_sensitive=False)


@click.group()
def account_group():
    """Tag budget accounts as His, Hers or Shared."""
    pass


@account_group.command("list")
@data_option
@click.pass_context
def list_accounts(ctx, data_path: str):
    """List accounts in the snapshot with their ownership type."""
    snapshot = load_snapshot_or_exit(ctx, data_path)
    service = OwnershipService(ctx.obj["db"])

    if not snapshot.accounts:
        click.echo("No accounts found.")
        return

    account_types = service.get_account_types()
    click.echo("\nAccounts:")
    click.echo("-" * 80)
    for acc in snapshot.accounts:
        account_type = account_types.get(acc.id, OwnershipType.UNSET.value)
        click.echo(f"{acc.name:30s} | {account_type:6s} | ID: {acc.id}")


@account_group.command("set-type")
@data_option
@click.argument("account", metavar="ACCOUNT")
@click.argument("ownership_type", metavar="TYPE", type=TYPE_CHOICE)
@click.pass_context
def set_account_type(ctx, data_path: str, account: str, ownership_type: str) -> None:
    """Set the ownership type of an account.

    ACCOUNT can be an account name or ID.
    TYPE is one of His, Hers, Shared or Unset.

    Examples:
        reimburse account set-type --data budget.json "Joint Checking" Shared
        reimburse account set-type --data budget.json "Her Credit Card" Hers
    """
    snapshot = load_snapshot_or_exit(ctx, data_path)
    service = OwnershipService(ctx.obj["db"])
    acc = resolve_record_or_exit(ctx, snapshot.accounts, account, "account")

    previous = service.get_account_type(acc.id)
    try:
        stored = service.set_account_type(acc.id, ownership_type)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Account '{acc.name}' is now {stored.value} (was {previous})")


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
