"""Helper functions for CLI output formatting with Rich integration."""

from rich.console import Console
from rich.table import Table

from assetpush.cli.helpers.theme import get_themed_console


def print_success_message(message: str, icon_mode: str = "emoji") -> None:
    """Print a success message with a checkmark."""
    get_themed_console(icon_mode).print_success(message)


def print_error_message(message: str, icon_mode: str = "emoji") -> None:
    """Print an error message with an X symbol."""
    get_themed_console(icon_mode).print_error(message)


def print_warning_message(message: str, icon_mode: str = "emoji") -> None:
    get_themed_console(icon_mode).print_warning(message)


def print_info_message(message: str, icon_mode: str = "emoji") -> None:
    get_themed_console(icon_mode).print_info(message)


def print_list_item(item: str, indent: int = 1, icon_mode: str = "emoji") -> None:
    """Print a list item with bullet and indentation."""
    get_themed_console(icon_mode).print_list_item(item, indent)


def print_table(table: Table) -> None:
    Console().print(table)
