"""Load and store the link manifest file."""

import logging
from pathlib import Path

from assetpush.adapters import create_file_adapter
from assetpush.core.errors import FileSystemError, ManifestParseError
from assetpush.manifest.models import Manifest
from assetpush.manifest.serializer import parse_manifest, serialize_manifest
from assetpush.protocols import FileAdapterProtocol


logger = logging.getLogger(__name__)


class ManifestService:
    """Read-modify-write access to the manifest at a fixed path.

    There is no locking: two processes saving the same manifest race and the
    last writer wins.
    """

    def __init__(
        self, manifest_path: Path, file_adapter: FileAdapterProtocol | None = None
    ) -> None:
        self.manifest_path = manifest_path
        self.file_adapter = file_adapter or create_file_adapter()

    def exists(self) -> bool:
        return self.file_adapter.exists(self.manifest_path)

    def load(self) -> Manifest | None:
        """Parse the manifest file.

        Returns:
            The parsed manifest, or None if the file does not exist

        Raises:
            ManifestParseError: If the file cannot be read or parsed
        """
        if not self.exists():
            logger.debug("No link manifest at %s", self.manifest_path)
            return None

        try:
            text = self.file_adapter.read_text(self.manifest_path)
        except FileSystemError as e:
            raise ManifestParseError(
                f"Cannot read link manifest {self.manifest_path}: {e}",
                {"path": str(self.manifest_path)},
            ) from e

        try:
            manifest = parse_manifest(text)
        except ManifestParseError as e:
            raise ManifestParseError(
                f"{self.manifest_path}: {e.message}",
                {**e.context, "path": str(self.manifest_path)},
            ) from e

        logger.info(
            "Loaded link manifest %s (%d entries)",
            self.manifest_path,
            len(manifest.entries),
        )
        return manifest

    def save(self, manifest: Manifest) -> None:
        """Write the manifest, replacing the file.

        Raises:
            FileSystemError: If the file cannot be written
        """
        self.file_adapter.write_text(self.manifest_path, serialize_manifest(manifest))
        logger.info(
            "Wrote link manifest %s (%d entries)",
            self.manifest_path,
            len(manifest.entries),
        )


def create_manifest_service(
    manifest_path: Path, file_adapter: FileAdapterProtocol | None = None
) -> ManifestService:
    """Create a manifest service for the given manifest file."""
    return ManifestService(manifest_path, file_adapter)
