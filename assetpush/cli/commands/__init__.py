"""CLI command modules."""

import typer

from assetpush.cli.commands.integrations import (
    register_commands as register_integration_commands,
)
from assetpush.cli.commands.project import register_commands as register_project_commands
from assetpush.cli.commands.push import register_commands as register_push_commands


def register_all_commands(app: typer.Typer) -> None:
    """Register all CLI commands with the main app.

    Args:
        app: The main Typer app
    """
    register_project_commands(app)
    register_integration_commands(app)
    register_push_commands(app)
