"""Fold artifact names into the link manifest."""

from collections.abc import Iterable

from assetpush.core.structlog_logger import get_struct_logger
from assetpush.manifest.models import (
    DEFAULT_PRESERVE_MODE,
    Manifest,
    ManifestEntry,
    PreserveMode,
)


logger = get_struct_logger(__name__)


class LinkManifestMerger:
    """Append-only, duplicate-safe merge of names into a manifest."""

    def merge(
        self,
        existing: Manifest | None,
        new_names: Iterable[str],
        preserve_mode: PreserveMode | str = DEFAULT_PRESERVE_MODE,
    ) -> Manifest:
        """Merge names into a manifest and return the result.

        Existing entries keep their position, attributes and nested children.
        Each name not yet present is appended once with ``preserve_mode``, in
        the order first seen. The input manifest is not modified.

        Args:
            existing: Parsed manifest, or None when no manifest exists yet
            new_names: Artifact names, duplicates allowed
            preserve_mode: Mode recorded on newly appended entries

        Returns:
            Merged manifest with unique entry names
        """
        mode = PreserveMode(preserve_mode).value
        entries: list[ManifestEntry] = []
        seen: set[str] = set()

        if existing is not None:
            for entry in existing.entries:
                if entry.full_name in seen:
                    logger.warning(
                        "manifest_duplicate_entry_dropped", full_name=entry.full_name
                    )
                    continue
                seen.add(entry.full_name)
                entries.append(entry.model_copy(deep=True))

        added = 0
        for raw_name in new_names:
            name = raw_name.strip()
            if not name or name in seen:
                continue
            seen.add(name)
            entries.append(ManifestEntry(full_name=name, preserve_mode=mode))
            added += 1

        logger.debug(
            "manifest_merged",
            existing=existing is not None,
            added=added,
            total=len(entries),
            preserve_mode=mode,
        )
        return Manifest(entries=entries)


def create_manifest_merger() -> LinkManifestMerger:
    """Create a manifest merger."""
    return LinkManifestMerger()
