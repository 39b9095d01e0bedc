"""Helpers for building consistently worded errors."""

from pathlib import Path
from typing import Any

from assetpush.core.errors import FileSystemError


def create_file_error(
    path: Path,
    operation: str,
    error: Exception,
    context: dict[str, Any] | None = None,
    error_cls: type[FileSystemError] = FileSystemError,
) -> FileSystemError:
    """Create a file system error for a failed operation.

    Args:
        path: Path the operation was working on
        operation: Name of the operation, e.g. ``"read_text"``
        error: Original exception
        context: Extra values kept on the error for logging
        error_cls: FileSystemError subclass to instantiate

    Returns:
        Error whose message names the operation, path and cause
    """
    message = f"File operation '{operation}' failed on '{path}': {error}"
    full_context = {"original_error": error.__class__.__name__}
    if context:
        full_context.update(context)
    return error_cls(message, path=path, operation=operation, context=full_context)
