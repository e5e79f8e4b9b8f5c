"""Main CLI entry point."""

import click
from reimburse.database.factories import create_sqlite_database
from reimburse.logger import setup_logging

# Import and register all commands at module level
from reimburse.cli.commands import account, category, calculate


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides REIMBURSE_DB_PATH environment variable)",
    envvar="REIMBURSE_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    envvar="REIMBURSE_LOG_LEVEL",
    help="Logging verbosity (default: WARNING)",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """Reimburse - settle shared household spending.

    Tag budget accounts and categories as His, Hers or Shared, then work out
    who owes whom from a budget snapshot exported from YNAB.
    """
    ctx.ensure_object(dict)
    setup_logging(log_level)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
account.register_commands(cli)
category.register_commands(cli)
calculate.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
