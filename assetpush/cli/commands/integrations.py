"""Integration management commands: add, remove and list."""

import logging
from typing import Annotated

import typer

from assetpush.build import create_build_invoker
from assetpush.cli.context import get_app_context
from assetpush.cli.decorators import handle_errors
from assetpush.cli.helpers import (
    print_info_message,
    print_success_message,
    print_table,
    print_warning_message,
)
from assetpush.cli.helpers.theme import TableStyles
from assetpush.core.errors import BuildError


logger = logging.getLogger(__name__)


@handle_errors
def add_command(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Name of the new integration")],
    target_path: Annotated[
        str,
        typer.Argument(
            help="Folder under the asset root receiving the integration's assemblies"
        ),
    ],
    no_scaffold: Annotated[
        bool,
        typer.Option(
            "--no-scaffold", help="Register the integration without creating a project"
        ),
    ] = False,
) -> None:
    """Add a new integration.

    Creates the integration folder with its config and a class library project
    to which NuGet packages can be added.
    """
    app_ctx = get_app_context(ctx)
    registry = app_ctx.registry()

    record = registry.create(name, target_path)
    workspace_dir = registry.workspace_dir(record)

    if not no_scaffold:
        invoker = create_build_invoker(app_ctx.settings)
        try:
            invoker.initialize(record, workspace_dir)
        except BuildError:
            logger.warning("Rolling back integration '%s' after failed scaffold", name)
            registry.delete(name)
            raise

    print_success_message(
        f"Created integration '{record.name}' targeting '{record.target_path}'",
        app_ctx.icon_mode,
    )
    if not no_scaffold:
        print_info_message(
            f"Add your NuGet packages to {workspace_dir / record.directory_name}.csproj",
            app_ctx.icon_mode,
        )


@handle_errors
def remove_command(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Name of the integration to remove")],
) -> None:
    """Remove an integration and its project folder."""
    app_ctx = get_app_context(ctx)
    registry = app_ctx.registry()

    registry.delete(name)
    print_success_message(f"Removed integration '{name}'", app_ctx.icon_mode)


@handle_errors
def list_command(ctx: typer.Context) -> None:
    """List registered integrations."""
    app_ctx = get_app_context(ctx)
    registry = app_ctx.registry()

    records = registry.list()
    listed = {record.name for record in records}
    unreadable = [name for name in registry.names() if name not in listed]
    if not records and not unreadable:
        print_info_message("No integrations registered", app_ctx.icon_mode)
        return

    if records:
        table = TableStyles.create_integrations_table(app_ctx.icon_mode)
        for record in records:
            table.add_row(
                record.name,
                record.target_path,
                str(registry.workspace_dir(record)),
            )
        print_table(table)

    for name in unreadable:
        print_warning_message(
            f"Integration '{name}' has an unreadable config; "
            f"run 'assetpush remove {name}' to drop it",
            app_ctx.icon_mode,
        )


def register_commands(app: typer.Typer) -> None:
    """Register integration commands with the main app.

    Args:
        app: The main Typer app
    """
    app.command(name="add")(add_command)
    app.command(name="remove")(remove_command)
    app.command(name="list")(list_command)
