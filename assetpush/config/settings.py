"""
Settings loading for assetpush.

Settings come from, in order of precedence:
1. Environment variables (``ASSETPUSH_*``)
2. The settings file given on the command line
3. ``assetpush.yaml`` or ``.assetpush.yml`` in the project root
4. Default values
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from assetpush.config.models import AssetpushSettings
from assetpush.core.errors import ConfigError


logger = logging.getLogger(__name__)

SETTINGS_FILE_NAMES = ("assetpush.yaml", ".assetpush.yml")


def _settings_paths(project_root: Path) -> list[Path]:
    return [project_root / name for name in SETTINGS_FILE_NAMES]


def read_settings_file(path: Path) -> dict[str, Any]:
    """Read a YAML settings file into a dictionary.

    Raises:
        ConfigError: If the file cannot be read or is not a YAML mapping
    """
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read settings file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in settings file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {path} must contain a mapping")
    return data


def find_settings_file(
    project_root: Path, config_file: str | Path | None = None
) -> Path | None:
    """Locate the settings file to use.

    An explicitly given file must exist; otherwise the project root is searched.
    """
    if config_file is not None:
        path = Path(config_file).expanduser()
        if not path.is_absolute():
            path = project_root / path
        if not path.is_file():
            raise ConfigError(f"Settings file not found: {path}")
        return path

    for candidate in _settings_paths(project_root):
        if candidate.is_file():
            return candidate
    return None


def load_settings(
    project_root: Path, config_file: str | Path | None = None
) -> AssetpushSettings:
    """Load settings for a project.

    Args:
        project_root: Root directory of the host project
        config_file: Optional explicit settings file

    Returns:
        Validated settings

    Raises:
        ConfigError: If the settings file is missing, unreadable or invalid
    """
    settings_file = find_settings_file(project_root, config_file)
    data: dict[str, Any] = {}
    if settings_file is not None:
        data = read_settings_file(settings_file)
        logger.debug("Loaded settings from %s", settings_file)
    else:
        logger.debug("No settings file in %s, using defaults", project_root)

    try:
        return AssetpushSettings(**data)
    except ValidationError as e:
        source = settings_file or "environment"
        raise ConfigError(f"Invalid settings ({source}): {e}") from e


def create_settings(**overrides: Any) -> AssetpushSettings:
    """Create settings from explicit values, mainly for tests and scripting."""
    try:
        return AssetpushSettings(**overrides)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings: {e}") from e
