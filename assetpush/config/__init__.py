"""Configuration package for assetpush."""

from assetpush.config.models import AssetpushSettings
from assetpush.config.settings import (
    SETTINGS_FILE_NAMES,
    create_settings,
    find_settings_file,
    load_settings,
    read_settings_file,
)


__all__ = [
    "AssetpushSettings",
    "SETTINGS_FILE_NAMES",
    "create_settings",
    "find_settings_file",
    "load_settings",
    "read_settings_file",
]
