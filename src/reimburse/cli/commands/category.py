"""Category and category group ownership commands."""

import click
from reimburse.cli.commands.account import TYPE_CHOICE
from reimburse.cli.error_handling import handle_domain_error
from reimburse.cli.resolution import data_option, load_snapshot_or_exit, resolve_record_or_exit
from reimburse.domain.entities import OwnershipType
from reimburse.domain.errors import DomainError
from reimburse.domain.ownership import OwnershipService
from reimburse.domain.snapshot import configurable_categories, configurable_category_groups


@click.group()
def category_group():
    """Tag budget categories as His, Hers or Shared."""
    pass


@click.group()
def group_group():
    """Tag whole category groups as His, Hers or Shared."""
    pass


@category_group.command("list")
@data_option
@click.pass_context
def list_categories(ctx, data_path: str):
    """List categories by group with their ownership type.

    A category left Unset takes the type of its group; the effective type
    is shown in brackets. Budget-internal categories are not listed.
    """
    snapshot = load_snapshot_or_exit(ctx, data_path)
    service = OwnershipService(ctx.obj["db"])

    groups = configurable_category_groups(snapshot)
    categories = configurable_categories(snapshot)
    if not groups:
        click.echo("No categories found.")
        return

    group_types = service.get_category_group_types()
    category_types = service.get_category_types()
    classify_category = service.category_type_lookup(categories)
    unset = OwnershipType.UNSET.value

    click.echo("\nCategories:")
    for group in groups:
        click.echo(f"{group.name} ({group_types.get(group.id, unset)}, ID: {group.id})")
        for cat in categories:
            if cat.category_group_id != group.id:
                continue
            own_type = category_types.get(cat.id, unset)
            effective = classify_category(cat.id)
            suffix = f" [{effective}]" if own_type != effective else ""
            click.echo(f"  {cat.name} ({own_type}{suffix}, ID: {cat.id})")


@category_group.command("set-type")
@data_option
@click.argument("category", metavar="CATEGORY")
@click.argument("ownership_type", metavar="TYPE", type=TYPE_CHOICE)
@click.pass_context
def set_category_type(ctx, data_path: str, category: str, ownership_type: str) -> None:
    """Set the ownership type of a category.

    CATEGORY can be a category name or ID. Use Unset to fall back to the
    category group's type.

    Examples:
        reimburse category set-type --data budget.json Groceries Shared
    """
    snapshot = load_snapshot_or_exit(ctx, data_path)
    service = OwnershipService(ctx.obj["db"])
    cat = resolve_record_or_exit(
        ctx, configurable_categories(snapshot), category, "category"
    )

    previous = service.get_category_type(cat.id)
    try:
        stored = service.set_category_type(cat.id, ownership_type)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Category '{cat.name}' is now {stored.value} (was {previous})")


@group_group.command("set-type")
@data_option
@click.argument("group", metavar="GROUP")
@click.argument("ownership_type", metavar="TYPE", type=TYPE_CHOICE)
@click.pass_context
def set_group_type(ctx, data_path: str, group: str, ownership_type: str) -> None:
    """Set the ownership type of a category group.

    GROUP can be a category group name or ID. Categories in the group that
    are Unset use this type.

    Examples:
        reimburse group set-type --data budget.json "Bills" Shared
    """
    snapshot = load_snapshot_or_exit(ctx, data_path)
    service = OwnershipService(ctx.obj["db"])
    grp = resolve_record_or_exit(
        ctx, configurable_category_groups(snapshot), group, "category group"
    )

    previous = service.get_category_group_type(grp.id)
    try:
        stored = service.set_category_group_type(grp.id, ownership_type)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Category group '{grp.name}' is now {stored.value} (was {previous})")


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
    cli.add_command(group_group, name="group")
