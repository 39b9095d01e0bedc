"""Exception hierarchy for assetpush.

Every error raised by the library derives from :class:`AssetpushError` so the
CLI can report it with a single handler. Errors carry a human readable message
plus an optional context dictionary used for structured logging.
"""

from pathlib import Path
from typing import Any


class AssetpushError(Exception):
    """Base exception for all assetpush errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = context or {}

    def __str__(self) -> str:
        return self.message


class ConfigError(AssetpushError):
    """Settings file or persisted integration config is invalid."""


class ProjectError(AssetpushError):
    """The working directory is not a usable host project."""


class NotInitializedError(ProjectError):
    """The integrations folder has not been created with ``init``."""


class RegistryError(AssetpushError):
    """Base class for integration registry failures."""


class InvalidNameError(RegistryError):
    """Integration name contains characters that cannot form a path segment."""


class InvalidPathError(RegistryError):
    """Target path is not a usable relative path under the asset root."""


class AlreadyExistsError(RegistryError):
    """An integration with the requested name is already registered."""


class NotFoundError(RegistryError):
    """No integration with the requested name is registered."""


class BuildError(AssetpushError):
    """The external build of an integration failed."""


class ManifestParseError(AssetpushError):
    """The existing link manifest is corrupt or unreadable."""


class FileSystemError(AssetpushError):
    """A file system operation failed."""

    def __init__(
        self,
        message: str,
        path: Path | None = None,
        operation: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, context)
        self.path = path
        self.operation = operation


class CopyError(FileSystemError):
    """Copying an artifact into the asset tree failed."""


__all__ = [
    "AssetpushError",
    "AlreadyExistsError",
    "BuildError",
    "ConfigError",
    "CopyError",
    "FileSystemError",
    "InvalidNameError",
    "InvalidPathError",
    "ManifestParseError",
    "NotFoundError",
    "NotInitializedError",
    "ProjectError",
    "RegistryError",
]
