"""Key-value storage behind the integration registry.

Two implementations share the :class:`IntegrationStore` protocol: the
directory store used by the CLI, where every key is a folder holding a JSON
config file, and an in-memory store for tests and scripting.
"""

import copy
import logging
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from assetpush.adapters import create_file_adapter
from assetpush.core.errors import ConfigError, FileSystemError
from assetpush.integrations.models import CONFIG_SUFFIX, RECORD_PREFIX
from assetpush.protocols import FileAdapterProtocol


logger = logging.getLogger(__name__)


@runtime_checkable
class IntegrationStore(Protocol):
    """Storage interface for integration records keyed by name."""

    def get(self, key: str) -> dict[str, Any] | None:
        """Return the stored value, or None if the key is absent."""
        ...

    def set(self, key: str, value: dict[str, Any]) -> None:
        """Store a value, replacing any previous one."""
        ...

    def delete(self, key: str) -> bool:
        """Remove a key and everything stored with it.

        Returns:
            True if the key existed
        """
        ...

    def exists(self, key: str) -> bool:
        ...

    def keys(self) -> list[str]:
        """All stored keys in no particular order."""
        ...


class MemoryIntegrationStore:
    """In-memory store. Data is lost when the process exits."""

    def __init__(self, initial: dict[str, dict[str, Any]] | None = None) -> None:
        self._data: dict[str, dict[str, Any]] = copy.deepcopy(initial or {})

    def get(self, key: str) -> dict[str, Any] | None:
        value = self._data.get(key)
        return copy.deepcopy(value) if value is not None else None

    def set(self, key: str, value: dict[str, Any]) -> None:
        self._data[key] = copy.deepcopy(value)

    def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None

    def exists(self, key: str) -> bool:
        return key in self._data

    def keys(self) -> list[str]:
        return list(self._data)


class DirectoryIntegrationStore:
    """Store where each key is a folder under a root directory.

    Key ``json`` lives in ``<root>/integration.json/`` with its value in
    ``integration.json.config.json``. The folder also hosts the key's build
    project, so deleting a key removes the whole folder. Access is not
    synchronized across processes.
    """

    def __init__(
        self, root: Path, file_adapter: FileAdapterProtocol | None = None
    ) -> None:
        self.root = root
        self.file_adapter = file_adapter or create_file_adapter()

    def record_dir(self, key: str) -> Path:
        return self.root / f"{RECORD_PREFIX}{key}"

    def config_path(self, key: str) -> Path:
        return self.record_dir(key) / f"{RECORD_PREFIX}{key}{CONFIG_SUFFIX}"

    def get(self, key: str) -> dict[str, Any] | None:
        if not self.exists(key):
            return None

        config_path = self.config_path(key)
        if not self.file_adapter.is_file(config_path):
            raise ConfigError(
                f"Integration '{key}' has no config file at {config_path}",
                {"key": key, "path": str(config_path)},
            )
        try:
            return self.file_adapter.read_json(config_path)
        except FileSystemError as e:
            raise ConfigError(
                f"Cannot read config of integration '{key}': {e}",
                {"key": key, "path": str(config_path)},
            ) from e

    def set(self, key: str, value: dict[str, Any]) -> None:
        self.file_adapter.mkdir(self.record_dir(key))
        self.file_adapter.write_json(self.config_path(key), value)
        logger.debug("Stored integration config %s", self.config_path(key))

    def delete(self, key: str) -> bool:
        if not self.exists(key):
            return False
        self.file_adapter.remove_dir(self.record_dir(key), recursive=True)
        logger.debug("Removed integration folder %s", self.record_dir(key))
        return True

    def exists(self, key: str) -> bool:
        return self.file_adapter.is_dir(self.record_dir(key))

    def keys(self) -> list[str]:
        if not self.file_adapter.is_dir(self.root):
            return []
        keys = []
        for item in self.file_adapter.list_directory(self.root):
            if not self.file_adapter.is_dir(item):
                continue
            if item.name.startswith(RECORD_PREFIX) and len(item.name) > len(
                RECORD_PREFIX
            ):
                keys.append(item.name[len(RECORD_PREFIX) :])
        return keys


def create_directory_store(
    root: Path, file_adapter: FileAdapterProtocol | None = None
) -> IntegrationStore:
    """Create a directory-backed integration store."""
    return DirectoryIntegrationStore(root, file_adapter)


def create_memory_store(
    initial: dict[str, dict[str, Any]] | None = None,
) -> IntegrationStore:
    """Create an in-memory integration store."""
    return MemoryIntegrationStore(initial)
