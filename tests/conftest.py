"""Core test fixtures for the assetpush project."""

from collections.abc import Callable
from pathlib import Path
from unittest.mock import Mock

import pytest
from typer.testing import CliRunner

from assetpush.build.models import BuildResult
from assetpush.config import create_settings
from assetpush.config.models import AssetpushSettings
from assetpush.core.errors import BuildError
from assetpush.integrations import (
    IntegrationRecord,
    IntegrationRegistry,
    create_integration_registry,
    create_memory_store,
)
from assetpush.manifest import ManifestService, create_manifest_service
from assetpush.protocols import FileAdapterProtocol


class FakeBuildInvoker:
    """Build invoker writing canned outputs instead of running dotnet.

    ``outputs`` maps integration names to the file names the build produces.
    Integrations listed in ``failing`` report a failed build, integrations in
    ``failing_scaffold`` raise on ``initialize``.
    """

    def __init__(
        self,
        outputs: dict[str, list[str]] | None = None,
        failing: set[str] | None = None,
        failing_scaffold: set[str] | None = None,
    ) -> None:
        self.outputs = outputs or {}
        self.failing = failing or set()
        self.failing_scaffold = failing_scaffold or set()
        self.initialized: list[str] = []
        self.built: list[str] = []

    def output_dir(self, workspace_dir: Path) -> Path:
        return workspace_dir / "bin" / "Release" / "netstandard2.0" / "publish"

    def check_available(self) -> bool:
        return True

    def initialize(self, record: IntegrationRecord, workspace_dir: Path) -> None:
        if record.name in self.failing_scaffold:
            raise BuildError(f"dotnet new classlib failed for '{record.name}'")
        workspace_dir.mkdir(parents=True, exist_ok=True)
        (workspace_dir / f"{record.directory_name}.csproj").write_text("<Project />")
        self.initialized.append(record.name)

    def build(self, record: IntegrationRecord, workspace_dir: Path) -> BuildResult:
        self.built.append(record.name)
        if record.name in self.failing:
            return BuildResult.failed(record.name, "exited with code 1", return_code=1)

        output_dir = self.output_dir(workspace_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        for file_name in self.outputs.get(record.name, []):
            (output_dir / file_name).write_text(f"{record.name}:{file_name}")
        return BuildResult(
            success=True, integration=record.name, output_dir=output_dir
        )


# ---- Base Fixtures ----


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def mock_file_adapter() -> Mock:
    """Create a mock file adapter for testing."""
    adapter = Mock(spec=FileAdapterProtocol)
    return adapter


@pytest.fixture
def settings() -> AssetpushSettings:
    """Default settings independent of the environment."""
    return create_settings()


# ---- Project Fixtures ----


@pytest.fixture
def unity_project(tmp_path: Path) -> Path:
    """Create a minimal Unity project folder."""
    project = tmp_path / "Game"
    (project / "Assets").mkdir(parents=True)
    (project / "ProjectSettings").mkdir()
    (project / "ProjectSettings" / "ProjectVersion.txt").write_text(
        "m_EditorVersion: 2019.4.1f1\nm_EditorVersionWithRevision: 2019.4.1f1 (abc)\n"
    )
    return project


@pytest.fixture
def initialized_project(unity_project: Path) -> Path:
    """Unity project with the integrations folder already created."""
    (unity_project / ".assetpush").mkdir()
    return unity_project


# ---- Registry and Build Fixtures ----


@pytest.fixture
def memory_registry(tmp_path: Path) -> IntegrationRegistry:
    """Registry backed by an in-memory store, workspaces under tmp_path."""
    return create_integration_registry(tmp_path / "integrations", create_memory_store())


@pytest.fixture
def directory_registry(tmp_path: Path) -> IntegrationRegistry:
    """Registry backed by the directory store."""
    root = tmp_path / "integrations"
    root.mkdir()
    return create_integration_registry(root)


@pytest.fixture
def fake_builder_factory() -> Callable[..., FakeBuildInvoker]:
    """Factory for fake build invokers."""

    def _factory(**kwargs: object) -> FakeBuildInvoker:
        return FakeBuildInvoker(**kwargs)  # type: ignore[arg-type]

    return _factory


@pytest.fixture
def asset_root(tmp_path: Path) -> Path:
    root = tmp_path / "Assets"
    root.mkdir()
    return root


@pytest.fixture
def manifest_service(asset_root: Path) -> ManifestService:
    return create_manifest_service(asset_root / "link.xml")
