from .errors import (
    AlreadyExistsError,
    AssetpushError,
    BuildError,
    ConfigError,
    CopyError,
    FileSystemError,
    InvalidNameError,
    InvalidPathError,
    ManifestParseError,
    NotFoundError,
    NotInitializedError,
    ProjectError,
)
from .logging import setup_logging


__all__ = [
    "setup_logging",
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
]
