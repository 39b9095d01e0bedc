"""Link manifest: models, text format, merge and file access."""

from assetpush.manifest.merger import LinkManifestMerger, create_manifest_merger
from assetpush.manifest.models import (
    DEFAULT_PRESERVE_MODE,
    Manifest,
    ManifestEntry,
    ManifestTypeEntry,
    PreserveMode,
)
from assetpush.manifest.serializer import parse_manifest, serialize_manifest
from assetpush.manifest.service import ManifestService, create_manifest_service


__all__ = [
    "DEFAULT_PRESERVE_MODE",
    "LinkManifestMerger",
    "Manifest",
    "ManifestEntry",
    "ManifestService",
    "ManifestTypeEntry",
    "PreserveMode",
    "create_manifest_merger",
    "create_manifest_service",
    "parse_manifest",
    "serialize_manifest",
]
