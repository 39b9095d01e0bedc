"""Integration record model and input validation."""

import unicodedata
from pathlib import PurePosixPath

from pydantic import Field

from assetpush.core.errors import InvalidNameError, InvalidPathError
from assetpush.models.base import AssetpushBaseModel


RECORD_PREFIX = "integration."
CONFIG_SUFFIX = ".config.json"

# Characters that are illegal in a path segment on at least one major platform
INVALID_NAME_CHARACTERS = frozenset('/\\:*?"<>|')
INVALID_PATH_CHARACTERS = frozenset(':*?"<>|')


def _has_control_character(value: str) -> bool:
    return any(unicodedata.category(c) == "Cc" for c in value)


def validate_integration_name(name: str) -> str:
    """Return the name if it can be used as a single path segment.

    Raises:
        InvalidNameError: If the name is empty, ``.``/``..`` or contains
            separators, reserved or control characters
    """
    if not name or not name.strip():
        raise InvalidNameError("The supplied integration name is empty.")
    if name != name.strip():
        raise InvalidNameError(
            f"The supplied integration name '{name}' has surrounding whitespace."
        )
    if name in (".", ".."):
        raise InvalidNameError(f"The supplied integration name '{name}' is invalid.")
    bad = sorted({c for c in name if c in INVALID_NAME_CHARACTERS})
    if bad or _has_control_character(name):
        shown = "".join(bad) or "control characters"
        raise InvalidNameError(
            f"The supplied integration name '{name}' is invalid ({shown}).",
            {"name": name},
        )
    return name


def normalize_target_path(target_path: str) -> str:
    """Validate a target path and return it in normalized forward-slash form.

    Backslashes are accepted as separators. The path must stay inside the
    asset root: absolute paths and ``..`` segments are rejected.

    Raises:
        InvalidPathError: If the path is empty, absolute, escapes the asset
            root or contains illegal characters
    """
    if not target_path or not target_path.strip():
        raise InvalidPathError("The supplied target path is empty.")

    candidate = target_path.strip().replace("\\", "/")
    bad = sorted({c for c in candidate if c in INVALID_PATH_CHARACTERS})
    if bad or _has_control_character(candidate):
        shown = "".join(bad) or "control characters"
        raise InvalidPathError(
            f"The supplied target path '{target_path}' is invalid ({shown}).",
            {"target_path": target_path},
        )

    path = PurePosixPath(candidate)
    if path.is_absolute():
        raise InvalidPathError(
            f"The supplied target path '{target_path}' must be relative to the "
            "asset root."
        )
    if ".." in path.parts:
        raise InvalidPathError(
            f"The supplied target path '{target_path}' leaves the asset root."
        )
    return str(path)


class IntegrationRecord(AssetpushBaseModel):
    """A registered integration and where its artifacts land."""

    name: str
    target_path: str = Field(alias="targetPath")

    @property
    def directory_name(self) -> str:
        """Folder and build project name, e.g. ``integration.json``."""
        return f"{RECORD_PREFIX}{self.name}"

    @property
    def module_name(self) -> str:
        """Name of the assembly the integration's own project produces."""
        return self.directory_name

    @property
    def config_file_name(self) -> str:
        return f"{self.directory_name}{CONFIG_SUFFIX}"

    def to_config(self) -> dict[str, str]:
        """Persisted per-record configuration."""
        return {"targetPath": self.target_path}
