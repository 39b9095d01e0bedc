"""Main CLI application for assetpush."""

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer

from assetpush import __version__
from assetpush.cli.commands import register_all_commands
from assetpush.cli.context import AppContext
from assetpush.cli.decorators.error_handling import print_stack_trace_if_verbose
from assetpush.cli.helpers import print_error_message
from assetpush.core.errors import ConfigError
from assetpush.core.logging import setup_logging


__all__ = ["app", "main", "__version__", "setup_logging"]

logger = logging.getLogger(__name__)


# Main app
app = typer.Typer(
    name="assetpush",
    help=f"""assetpush v{__version__}

Manage NuGet based integrations of a Unity project. Each integration is a
class library project whose assemblies are built and copied into the
project's Assets folder, while link.xml keeps them safe from code stripping.

Common workflows:
  • Prepare a project:   assetpush init
  • Add an integration:  assetpush add json Plugins/Json
  • Publish everything:  assetpush push""",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


# Global callback
@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    project: Annotated[
        Path | None,
        typer.Option(
            "-C",
            "--project",
            help="Unity project folder (default: current directory)",
            file_okay=False,
        ),
    ] = None,
    config_file: Annotated[
        str | None,
        typer.Option("-c", "--config", help="Path to configuration file"),
    ] = None,
    verbose: Annotated[
        int,
        typer.Option(
            "-v",
            "--verbose",
            count=True,
            help="Increase verbosity (-v=INFO, -vv=DEBUG)",
        ),
    ] = 0,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging (equivalent to -vv)"),
    ] = False,
    log_file: Annotated[
        str | None, typer.Option("--log-file", help="Log to file")
    ] = None,
    no_emoji: Annotated[
        bool,
        typer.Option("--no-emoji", help="Disable emoji icons in output"),
    ] = False,
    version: Annotated[
        bool, typer.Option("--version", help="Show version and exit")
    ] = False,
) -> None:
    """Manage and publish NuGet integrations of a Unity project."""
    if version:
        print(f"assetpush v{__version__}")
        raise typer.Exit()

    # If no subcommand was invoked and version wasn't requested, show help
    if ctx.invoked_subcommand is None:
        print(ctx.get_help())
        raise typer.Exit()

    try:
        app_context = AppContext(
            project_root=project,
            config_file=config_file,
            verbose=verbose,
            log_file=log_file,
            no_emoji=no_emoji,
        )
    except ConfigError as e:
        print_error_message(str(e), "text" if no_emoji else "emoji")
        raise typer.Exit(1) from e
    ctx.obj = app_context

    # Set log level based on verbosity, debug flag, or config
    log_level: int | str = logging.WARNING
    if debug:
        log_level = logging.DEBUG
    elif verbose == 1:
        log_level = logging.INFO
    elif verbose >= 2:
        log_level = logging.DEBUG
    else:
        log_level = app_context.settings.log_level

    setup_logging(level=log_level, log_file=log_file)
    logger.debug("Using project root %s", app_context.project_root)


register_all_commands(app)


def main() -> int:
    """Main CLI entry point."""
    try:
        app()
        exit_code = 0
    except SystemExit as e:
        # Capture SystemExit code (normal CLI exit)
        exit_code = e.code if isinstance(e.code, int) else 0
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        print_stack_trace_if_verbose()
        exit_code = 1
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
