"""Build artifact collection."""

from assetpush.artifacts.collector import (
    DEFAULT_EXCLUDED_SUFFIXES,
    ArtifactCollector,
    ArtifactFilter,
    artifact_name,
    create_artifact_collector,
)


__all__ = [
    "DEFAULT_EXCLUDED_SUFFIXES",
    "ArtifactCollector",
    "ArtifactFilter",
    "artifact_name",
    "create_artifact_collector",
]
