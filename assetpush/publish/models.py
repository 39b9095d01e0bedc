"""Publish run result."""

from pathlib import Path

from pydantic import Field

from assetpush.models.results import BaseResult


class PublishResult(BaseResult):
    """Outcome of one publish run over one or many integrations."""

    published: list[str] = Field(default_factory=list)
    failed: dict[str, str] = Field(default_factory=dict)
    artifact_names: list[str] = Field(default_factory=list)
    manifest_path: Path | None = None
    added_entries: int = 0
    manifest_written: bool = False

    def record_failure(self, integration: str, error: str) -> None:
        """Mark an integration as failed; its names are not merged."""
        self.failed[integration] = error
        self.add_error(f"{integration}: {error}")
