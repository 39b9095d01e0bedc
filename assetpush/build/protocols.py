"""Build invoker protocol."""

from pathlib import Path
from typing import Protocol, runtime_checkable

from assetpush.build.models import BuildResult
from assetpush.integrations.models import IntegrationRecord


@runtime_checkable
class BuildInvokerProtocol(Protocol):
    """Runs the external build tool for an integration."""

    def initialize(self, record: IntegrationRecord, workspace_dir: Path) -> None:
        """Create the build project for a newly added integration.

        Args:
            record: Integration being added
            workspace_dir: Folder that will hold the build project

        Raises:
            BuildError: If the project cannot be created
        """
        ...

    def build(self, record: IntegrationRecord, workspace_dir: Path) -> BuildResult:
        """Build an integration, blocking until the build finishes.

        A failing build is reported through the result, not raised.

        Args:
            record: Integration to build
            workspace_dir: Folder holding the build project

        Returns:
            BuildResult whose output_dir holds the candidate artifacts
        """
        ...

    def check_available(self) -> bool:
        """Check if the build tool can be executed."""
        ...
