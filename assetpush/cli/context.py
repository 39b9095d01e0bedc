"""Application context shared between the CLI callback and commands."""

import logging
from pathlib import Path

import typer

from assetpush.config import AssetpushSettings, load_settings
from assetpush.integrations import IntegrationRegistry, create_integration_registry
from assetpush.manifest import ManifestService, create_manifest_service
from assetpush.project import ProjectLayout


logger = logging.getLogger(__name__)


class AppContext:
    """Application context for storing shared state."""

    def __init__(
        self,
        project_root: Path | None = None,
        config_file: str | None = None,
        verbose: int = 0,
        log_file: str | None = None,
        no_emoji: bool = False,
    ):
        """Initialize AppContext.

        Args:
            project_root: Root folder of the game-engine project
            config_file: Path to configuration file
            verbose: Verbosity level
            log_file: Path to log file
            no_emoji: Whether to disable emoji icons

        Raises:
            ConfigError: If the configuration file cannot be loaded
        """
        self.project_root = (project_root or Path.cwd()).resolve()
        self.config_file = config_file
        self.verbose = verbose
        self.log_file = log_file
        self.no_emoji = no_emoji

        self.settings: AssetpushSettings = load_settings(self.project_root, config_file)
        self.layout = ProjectLayout(self.project_root, self.settings)

    @property
    def icon_mode(self) -> str:
        return "text" if self.no_emoji else "emoji"

    def registry(self) -> IntegrationRegistry:
        """Registry of the project's integrations.

        Raises:
            NotInitializedError: If the project was never initialized
        """
        self.layout.require_initialized()
        return create_integration_registry(self.layout.integrations_dir)

    def manifest_service(self) -> ManifestService:
        return create_manifest_service(self.layout.manifest_path)


def get_app_context(ctx: typer.Context) -> AppContext:
    """Return the AppContext stored by the main callback."""
    app_context = ctx.obj
    if not isinstance(app_context, AppContext):
        logger.debug("No application context found, creating a default one")
        app_context = AppContext()
        ctx.obj = app_context
    return app_context
