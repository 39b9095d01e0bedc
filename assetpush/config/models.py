"""Settings model for assetpush."""

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from assetpush.manifest.models import DEFAULT_PRESERVE_MODE, PreserveMode


class AssetpushSettings(BaseSettings):
    """Project settings with automatic environment variable support.

    Precedence order (highest to lowest):
    1. Environment variables (``ASSETPUSH_*``)
    2. Constructor arguments (settings file data)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="ASSETPUSH_",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: Any,
        env_settings: Any,
        dotenv_settings: Any,
        file_secret_settings: Any,
    ) -> tuple[Any, ...]:
        """Environment variables override values read from the settings file."""
        return (env_settings, init_settings)

    # Project layout, relative to the project root
    integrations_dir: Path = Field(
        default=Path(".assetpush"),
        description="Folder holding one build project per integration",
    )
    assets_dir: Path = Field(
        default=Path("Assets"),
        description="Asset root that integration target paths are relative to",
    )
    manifest_file: Path = Field(
        default=Path("link.xml"),
        description="Link manifest location, relative to the asset root",
    )

    # Manifest
    preserve_mode: PreserveMode = Field(
        default=DEFAULT_PRESERVE_MODE,
        description="Preserve mode recorded for newly added manifest entries",
    )

    # Build
    build_executable: str = Field(default="dotnet")
    build_configuration: str = Field(default="Release")
    target_framework: str = Field(default="netstandard2.0")
    project_template: str = Field(default="classlib")
    excluded_suffixes: list[str] = Field(
        default_factory=lambda: [".pdb", ".json"],
        description="Build outputs with these suffixes are never published",
    )

    # Host project checks
    min_editor_version: int = Field(default=2018, ge=0)

    # Logging
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is recognized."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        upper_v = v.strip().upper()
        if upper_v not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return upper_v

    @field_validator("excluded_suffixes")
    @classmethod
    def normalize_suffixes(cls, v: list[str]) -> list[str]:
        """Lower-case suffixes and make sure they start with a dot."""
        normalized = []
        for suffix in v:
            suffix = suffix.strip().lower()
            if not suffix:
                continue
            normalized.append(suffix if suffix.startswith(".") else f".{suffix}")
        return normalized
