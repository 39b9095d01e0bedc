"""Build domain models."""

from pathlib import Path

from pydantic import field_validator

from assetpush.models.results import BaseResult


class BuildResult(BaseResult):
    """Result of building one integration."""

    integration: str
    output_dir: Path | None = None
    return_code: int | None = None
    build_time_seconds: float | None = None

    @field_validator("build_time_seconds")
    @classmethod
    def validate_build_time(cls, v: float | None) -> float | None:
        """Validate build time is positive if provided."""
        if v is not None and v < 0:
            raise ValueError("Build time must be a non-negative number")
        return v

    @classmethod
    def failed(cls, integration: str, error: str, **kwargs: object) -> "BuildResult":
        """Shorthand for a failed build with a single error."""
        return cls(success=False, integration=integration, errors=[error], **kwargs)
