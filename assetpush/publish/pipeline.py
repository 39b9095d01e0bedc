"""Publish pipeline: build, collect and copy integrations, then merge names.

Integrations are processed one after another; each build is awaited before
the next starts. The manifest is merged and written once per run, after all
builds, and never per integration.
"""

from pathlib import Path

from assetpush.adapters import create_file_adapter
from assetpush.artifacts.collector import (
    DEFAULT_EXCLUDED_SUFFIXES,
    ArtifactCollector,
    ArtifactFilter,
    artifact_name,
    create_artifact_collector,
)
from assetpush.build.protocols import BuildInvokerProtocol
from assetpush.core.errors import (
    BuildError,
    ConfigError,
    CopyError,
    FileSystemError,
    InvalidNameError,
)
from assetpush.core.structlog_logger import StructlogMixin
from assetpush.integrations.models import (
    IntegrationRecord,
    validate_integration_name,
)
from assetpush.integrations.registry import IntegrationRegistry
from assetpush.manifest.merger import LinkManifestMerger, create_manifest_merger
from assetpush.manifest.models import DEFAULT_PRESERVE_MODE, PreserveMode
from assetpush.manifest.service import ManifestService
from assetpush.protocols import FileAdapterProtocol
from assetpush.publish.models import PublishResult


class PublishPipeline(StructlogMixin):
    """Publish integrations into the asset tree and update the manifest."""

    def __init__(
        self,
        registry: IntegrationRegistry,
        build_invoker: BuildInvokerProtocol,
        manifest_service: ManifestService,
        asset_root: Path,
        collector: ArtifactCollector | None = None,
        file_adapter: FileAdapterProtocol | None = None,
        merger: LinkManifestMerger | None = None,
        preserve_mode: PreserveMode | str = DEFAULT_PRESERVE_MODE,
        excluded_suffixes: tuple[str, ...] = DEFAULT_EXCLUDED_SUFFIXES,
    ) -> None:
        """Initialize the pipeline.

        Args:
            registry: Source of integration records
            build_invoker: Runs the external build
            manifest_service: Access to the link manifest file
            asset_root: Root that record target paths are relative to
            collector: Artifact collector
            file_adapter: File operations used for copying
            merger: Manifest merger
            preserve_mode: Mode recorded for newly added manifest entries
            excluded_suffixes: Build output suffixes that are never published
        """
        self.registry = registry
        self.build_invoker = build_invoker
        self.manifest_service = manifest_service
        self.asset_root = asset_root
        self.file_adapter = file_adapter or create_file_adapter()
        self.collector = collector or create_artifact_collector(self.file_adapter)
        self.merger = merger or create_manifest_merger()
        self.preserve_mode = PreserveMode(preserve_mode)
        self.excluded_suffixes = tuple(excluded_suffixes)

    def target_dir(self, record: IntegrationRecord) -> Path:
        """Folder inside the asset tree receiving the record's artifacts."""
        return self.asset_root / record.target_path

    def publish_one(self, record: IntegrationRecord) -> list[str]:
        """Build one integration and copy its artifacts into the asset tree.

        Copying overwrites existing files and is not transactional: when a copy
        fails, files copied before it stay in place.

        Returns:
            Artifact base names in copy order, without duplicates

        Raises:
            BuildError: If the build fails
            CopyError: If an artifact cannot be copied
        """
        log = self.log_operation("publish_one", integration=record.name)

        workspace_dir = self.registry.workspace_dir(record)
        build_result = self.build_invoker.build(record, workspace_dir)
        if not build_result.success or build_result.output_dir is None:
            reason = "; ".join(build_result.errors) or "build produced no output"
            raise BuildError(
                f"Build of '{record.name}' failed: {reason}",
                {"integration": record.name},
            )

        artifact_filter = ArtifactFilter.for_integration(
            record, self.excluded_suffixes
        )
        artifacts = self.collector.collect(build_result.output_dir, artifact_filter)

        target_dir = self.target_dir(record)
        try:
            self.file_adapter.mkdir(target_dir)
        except FileSystemError as e:
            raise CopyError(e.message, path=target_dir, operation="mkdir") from e

        names: list[str] = []
        for artifact in artifacts:
            destination = target_dir / artifact.name
            try:
                self.file_adapter.copy_file(artifact, destination)
            except CopyError:
                raise
            except FileSystemError as e:
                raise CopyError(e.message, path=destination, operation="copy") from e
            name = artifact_name(artifact)
            if name not in names:
                names.append(name)

        log.info(
            "integration_published",
            artifact_count=len(artifacts),
            target_dir=str(target_dir),
        )
        return names

    def _load_records(
        self, name: str | None
    ) -> tuple[list[IntegrationRecord], dict[str, str]]:
        """Load the records to publish and the errors of those that fail to load."""
        if name is not None:
            validate_integration_name(name)
            candidates = [name]
        else:
            candidates = self.registry.names()

        records: list[IntegrationRecord] = []
        unloadable: dict[str, str] = {}
        for record_name in candidates:
            try:
                records.append(self.registry.load(record_name))
            except (ConfigError, InvalidNameError) as e:
                self.log_error_with_context(
                    "integration_load_failed", e, integration=record_name
                )
                unloadable[record_name] = e.message
        return records, unloadable

    def publish_all(self, name: str | None = None) -> PublishResult:
        """Publish one named integration, or all of them, then merge once.

        The existing manifest is parsed before any build so a corrupt manifest
        aborts the run with nothing built, copied or written. A failed
        integration is reported in the result and contributes no names.
        An integration whose config cannot be loaded counts as failed too, so
        one broken record never blocks the others.

        Args:
            name: Only publish this integration when given

        Returns:
            PublishResult describing every processed integration

        Raises:
            NotFoundError: If ``name`` is not registered
            InvalidNameError: If ``name`` is not a valid integration name
            ManifestParseError: If the existing manifest cannot be parsed
            FileSystemError: If the merged manifest cannot be written
        """
        log = self.log_operation("publish_all", integration=name)

        records, unloadable = self._load_records(name)
        existing = self.manifest_service.load()

        result = PublishResult(
            success=True, manifest_path=self.manifest_service.manifest_path
        )
        for record_name, error in unloadable.items():
            result.record_failure(record_name, error)
        aggregated: list[str] = []
        seen: set[str] = set()

        for record in records:
            try:
                names = self.publish_one(record)
            except (BuildError, CopyError) as e:
                self.log_error_with_context(
                    "integration_publish_failed", e, integration=record.name
                )
                result.record_failure(record.name, e.message)
                continue

            result.published.append(record.name)
            result.add_message(
                f"Published {record.name}: {', '.join(names) or 'no artifacts'}"
            )
            for artifact in names:
                if artifact not in seen:
                    seen.add(artifact)
                    aggregated.append(artifact)

        result.artifact_names = aggregated

        if existing is None and not aggregated:
            log.info("manifest_not_created", reason="no artifacts")
            return result

        merged = self.merger.merge(existing, aggregated, self.preserve_mode)
        self.manifest_service.save(merged)
        result.added_entries = sum(
            1 for artifact in aggregated if existing is None or artifact not in existing
        )
        result.manifest_written = True

        log.info(
            "publish_finished",
            published=len(result.published),
            failed=len(result.failed),
            artifacts=len(aggregated),
            added_entries=result.added_entries,
        )
        return result


def create_publish_pipeline(
    registry: IntegrationRegistry,
    build_invoker: BuildInvokerProtocol,
    manifest_service: ManifestService,
    asset_root: Path,
    preserve_mode: PreserveMode | str = DEFAULT_PRESERVE_MODE,
    excluded_suffixes: tuple[str, ...] = DEFAULT_EXCLUDED_SUFFIXES,
    file_adapter: FileAdapterProtocol | None = None,
) -> PublishPipeline:
    """Create a publish pipeline with default collector and merger."""
    return PublishPipeline(
        registry=registry,
        build_invoker=build_invoker,
        manifest_service=manifest_service,
        asset_root=asset_root,
        file_adapter=file_adapter,
        preserve_mode=preserve_mode,
        excluded_suffixes=excluded_suffixes,
    )
