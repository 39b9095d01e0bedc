"""CLI helper functions."""

from assetpush.cli.helpers.output import (
    print_error_message,
    print_info_message,
    print_list_item,
    print_success_message,
    print_table,
    print_warning_message,
)


__all__ = [
    "print_error_message",
    "print_info_message",
    "print_list_item",
    "print_success_message",
    "print_table",
    "print_warning_message",
]
