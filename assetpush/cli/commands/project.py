"""Project initialization command."""

import logging

import typer

from assetpush.cli.context import get_app_context
from assetpush.cli.decorators import handle_errors
from assetpush.cli.helpers import print_info_message, print_success_message


logger = logging.getLogger(__name__)


@handle_errors
def init_command(ctx: typer.Context) -> None:
    """Check the Unity project and create the integrations folder."""
    app_ctx = get_app_context(ctx)
    layout = app_ctx.layout

    already_initialized = layout.is_initialized()
    integrations_dir = layout.initialize()

    if already_initialized:
        print_info_message(
            f"Project already initialized, integrations live in {integrations_dir}",
            app_ctx.icon_mode,
        )
        return

    print_success_message(
        f"Initialization done, integrations live in {integrations_dir}",
        app_ctx.icon_mode,
    )


def register_commands(app: typer.Typer) -> None:
    """Register project commands with the main app.

    Args:
        app: The main Typer app
    """
    app.command(name="init")(init_command)
