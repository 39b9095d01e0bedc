"""Error handling decorators for CLI commands."""

import logging
import sys
import traceback
from collections.abc import Callable
from functools import wraps
from typing import Any

import typer

from assetpush.cli.helpers.output import print_error_message
from assetpush.core.errors import (
    AssetpushError,
    BuildError,
    ConfigError,
    FileSystemError,
    ManifestParseError,
    ProjectError,
    RegistryError,
)
from assetpush.core.structlog_logger import get_struct_logger


__all__ = ["handle_errors", "print_stack_trace_if_verbose"]

logger = get_struct_logger(__name__)


def handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to handle common exceptions in CLI commands.

    This decorator catches common exceptions and provides appropriate
    error messages to the user before exiting with a non-zero status code.

    Args:
        func: The function to decorate

    Returns:
        Decorated function with error handling
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except RegistryError as e:
            _report("registry_error", e)
            raise typer.Exit(1) from e
        except ProjectError as e:
            _report("project_error", e)
            raise typer.Exit(1) from e
        except ConfigError as e:
            _report("configuration_error", e)
            raise typer.Exit(1) from e
        except BuildError as e:
            _report("build_error", e)
            raise typer.Exit(1) from e
        except ManifestParseError as e:
            _report("manifest_error", e)
            raise typer.Exit(1) from e
        except FileSystemError as e:
            _report("filesystem_error", e)
            raise typer.Exit(1) from e
        except AssetpushError as e:
            _report("assetpush_error", e)
            raise typer.Exit(1) from e
        except typer.Exit:
            raise
        except Exception as e:
            exc_info = logging.getLogger().isEnabledFor(logging.DEBUG)
            logger.error("unexpected_error", error=str(e), exc_info=exc_info)
            print_error_message(f"Unexpected error: {e}")
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e

    return wrapper


def _report(event: str, error: Exception) -> None:
    logger.debug(event, error=str(error))
    print_error_message(str(error))
    print_stack_trace_if_verbose()


def print_stack_trace_if_verbose() -> None:
    """Print stack trace if verbose/debug mode is enabled."""
    # Check if we're in verbose/debug mode based on command line args
    if any(arg in sys.argv for arg in ["-vv", "--debug"]):
        print("\nStack trace:", file=sys.stderr)
        traceback.print_exc(file=sys.stderr)
