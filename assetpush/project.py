"""Host project layout and detection.

The host is a Unity project: it has an ``Assets`` folder, a
``ProjectSettings`` folder and ``ProjectSettings/ProjectVersion.txt`` whose
first line names the editor version (``m_EditorVersion: 2019.4.1f1``).
"""

import logging
from pathlib import Path

from assetpush.config.models import AssetpushSettings
from assetpush.core.errors import NotInitializedError, ProjectError


logger = logging.getLogger(__name__)

PROJECT_SETTINGS_DIR = "ProjectSettings"
PROJECT_VERSION_FILE = "ProjectVersion.txt"


def parse_editor_version(text: str) -> int:
    """Return the major editor version from ProjectVersion.txt content.

    Raises:
        ProjectError: If the content has no recognizable version line
    """
    lines = text.splitlines()
    if not lines or ":" not in lines[0]:
        raise ProjectError("ProjectVersion.txt has no editor version line")

    version = lines[0].split(":", 1)[1].strip()
    major = version.split(".", 1)[0]
    try:
        return int(major)
    except ValueError as e:
        raise ProjectError(f"Cannot parse editor version '{version}'") from e


class ProjectLayout:
    """Paths of a host project, all derived from an explicit root."""

    def __init__(self, root: Path, settings: AssetpushSettings) -> None:
        self.root = root
        self.settings = settings

    @property
    def assets_dir(self) -> Path:
        return self.root / self.settings.assets_dir

    @property
    def project_settings_dir(self) -> Path:
        return self.root / PROJECT_SETTINGS_DIR

    @property
    def version_file(self) -> Path:
        return self.project_settings_dir / PROJECT_VERSION_FILE

    @property
    def integrations_dir(self) -> Path:
        return self.root / self.settings.integrations_dir

    @property
    def manifest_path(self) -> Path:
        return self.assets_dir / self.settings.manifest_file

    def is_initialized(self) -> bool:
        return self.integrations_dir.is_dir()

    def editor_version(self) -> int:
        """Major editor version of the project."""
        try:
            text = self.version_file.read_text(encoding="utf-8")
        except OSError as e:
            raise ProjectError(f"Cannot read {self.version_file}: {e}") from e
        return parse_editor_version(text)

    def validate(self) -> int:
        """Check that the root is a supported Unity project.

        Returns:
            The major editor version

        Raises:
            ProjectError: If a project marker is missing or the version is too old
        """
        if not self.assets_dir.is_dir():
            raise ProjectError(
                f"Couldn't find {self.settings.assets_dir} folder in {self.root}, "
                "are you sure this is a Unity project's folder?"
            )
        if not self.project_settings_dir.is_dir():
            raise ProjectError(
                f"Couldn't find {PROJECT_SETTINGS_DIR} folder in {self.root}, "
                "are you sure this is a Unity project's folder?"
            )
        if not self.version_file.is_file():
            raise ProjectError(
                f"Couldn't find {PROJECT_VERSION_FILE} in {self.project_settings_dir}, "
                "are you sure this is a Unity project's folder?"
            )

        version = self.editor_version()
        if version < self.settings.min_editor_version:
            raise ProjectError(
                f"Unity version {version} is below "
                f"{self.settings.min_editor_version} which is not supported"
            )
        logger.debug("Detected Unity project %s (editor %d)", self.root, version)
        return version

    def initialize(self) -> Path:
        """Validate the project and create the integrations folder.

        Returns:
            The integrations folder
        """
        self.validate()
        try:
            self.integrations_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ProjectError(
                f"Cannot create integrations folder {self.integrations_dir}: {e}"
            ) from e
        logger.info("Initialized integrations folder %s", self.integrations_dir)
        return self.integrations_dir

    def require_initialized(self) -> None:
        """Raise unless ``init`` has been run for this project."""
        if not self.is_initialized():
            raise NotInitializedError(
                f"Integrations folder {self.integrations_dir} is missing, make sure "
                "you're running the command in the right folder and have run "
                "'assetpush init'"
            )
