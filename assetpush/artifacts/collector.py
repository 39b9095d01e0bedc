"""Artifact collector for integration builds."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from assetpush.adapters import create_file_adapter
from assetpush.integrations.models import IntegrationRecord
from assetpush.protocols import FileAdapterProtocol


logger = logging.getLogger(__name__)

DEFAULT_EXCLUDED_SUFFIXES = (".pdb", ".json")


def artifact_name(path: Path) -> str:
    """Artifact base name: the file name without its extension."""
    return path.stem


@dataclass
class ArtifactFilter:
    """Decides which build outputs are not publishable.

    Attributes:
        excluded_suffixes: Debug symbol and metadata suffixes, lower case
        primary_module: Base name of the integration's own assembly
    """

    excluded_suffixes: tuple[str, ...] = DEFAULT_EXCLUDED_SUFFIXES
    primary_module: str | None = None
    _suffixes: frozenset[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._suffixes = frozenset(s.lower() for s in self.excluded_suffixes)

    @classmethod
    def for_integration(
        cls,
        record: IntegrationRecord,
        excluded_suffixes: Iterable[str] = DEFAULT_EXCLUDED_SUFFIXES,
    ) -> "ArtifactFilter":
        return cls(
            excluded_suffixes=tuple(excluded_suffixes),
            primary_module=record.module_name,
        )

    def excludes(self, path: Path) -> bool:
        if path.suffix.lower() in self._suffixes:
            return True
        return (
            self.primary_module is not None
            and artifact_name(path).lower() == self.primary_module.lower()
        )


class ArtifactCollector:
    """Collect publishable artifacts from a build output folder."""

    def __init__(self, file_adapter: FileAdapterProtocol | None = None) -> None:
        self.file_adapter = file_adapter or create_file_adapter()

    def collect(self, output_dir: Path, artifact_filter: ArtifactFilter) -> list[Path]:
        """Return the publishable files of a build output folder.

        Only files directly inside ``output_dir`` are considered. A missing
        folder yields no artifacts.

        Args:
            output_dir: Folder the build wrote its outputs to
            artifact_filter: Filter removing symbols, metadata and the
                integration's own module

        Returns:
            Artifact paths sorted by file name
        """
        logger.info("Collecting artifacts from: %s", output_dir)

        if not self.file_adapter.is_dir(output_dir):
            logger.warning("Output directory does not exist: %s", output_dir)
            return []

        artifacts = []
        for path in self.file_adapter.list_files(output_dir):
            if artifact_filter.excludes(path):
                logger.debug("Skipping non-publishable output: %s", path.name)
                continue
            artifacts.append(path)

        logger.info("Collected %d artifacts from %s", len(artifacts), output_dir)
        return artifacts


def create_artifact_collector(
    file_adapter: FileAdapterProtocol | None = None,
) -> ArtifactCollector:
    """Create an artifact collector."""
    return ArtifactCollector(file_adapter)
