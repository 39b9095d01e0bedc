"""Registry of integrations.

The registry validates input and maps records to and from the store. It has
no build logic and keeps no cache: every call goes to the store.
"""

from pathlib import Path

from pydantic import ValidationError

from assetpush.core.errors import (
    AlreadyExistsError,
    ConfigError,
    InvalidNameError,
    InvalidPathError,
    NotFoundError,
)
from assetpush.core.structlog_logger import get_struct_logger
from assetpush.integrations.models import (
    RECORD_PREFIX,
    IntegrationRecord,
    normalize_target_path,
    validate_integration_name,
)
from assetpush.integrations.store import IntegrationStore, create_directory_store


logger = get_struct_logger(__name__)


class IntegrationRegistry:
    """Create, list, load and delete integration records."""

    def __init__(self, root: Path, store: IntegrationStore | None = None) -> None:
        """Initialize the registry.

        Args:
            root: Integrations folder; build workspaces live below it
            store: Record storage, defaults to the directory store under root
        """
        self.root = root
        self.store = store if store is not None else create_directory_store(root)

    def create(self, name: str, target_path: str) -> IntegrationRecord:
        """Register a new integration.

        Raises:
            InvalidNameError: If the name cannot be used as a path segment
            InvalidPathError: If the target path is not a relative path
            AlreadyExistsError: If the name is already registered
        """
        validate_integration_name(name)
        normalized_path = normalize_target_path(target_path)

        if self.store.exists(name):
            raise AlreadyExistsError(
                f"Integration already exists with the name '{name}'.", {"name": name}
            )

        record = IntegrationRecord(name=name, target_path=normalized_path)
        self.store.set(name, record.to_config())
        logger.info("integration_created", name=name, target_path=normalized_path)
        return record

    def delete(self, name: str) -> None:
        """Remove an integration and all its persisted state.

        Raises:
            NotFoundError: If the name is not registered
        """
        validate_integration_name(name)
        if not self.store.delete(name):
            raise NotFoundError(
                f"Couldn't find integration with the name '{name}'.", {"name": name}
            )
        logger.info("integration_deleted", name=name)

    def load(self, name: str) -> IntegrationRecord:
        """Load a single record.

        Raises:
            NotFoundError: If the name is not registered
            ConfigError: If the stored config is unusable
        """
        validate_integration_name(name)
        data = self.store.get(name)
        if data is None:
            raise NotFoundError(
                f"Couldn't find integration with the name '{name}'.", {"name": name}
            )
        try:
            record = IntegrationRecord.model_validate({**data, "name": name})
            record.target_path = normalize_target_path(record.target_path)
        except (ValidationError, InvalidPathError) as e:
            raise ConfigError(
                f"Invalid config for integration '{name}': {e}", {"name": name}
            ) from e
        return record

    def names(self) -> list[str]:
        """Names of all stored records sorted, without loading their configs."""
        return sorted(self.store.keys())

    def list(self) -> list[IntegrationRecord]:
        """All loadable integrations sorted by name.

        Records whose config cannot be loaded are skipped with a warning; they
        stay visible through :meth:`names` and can still be deleted.
        """
        records = []
        for name in self.names():
            try:
                records.append(self.load(name))
            except (ConfigError, InvalidNameError) as e:
                logger.warning("integration_skipped", name=name, error=e.message)
        return records

    def exists(self, name: str) -> bool:
        return self.store.exists(name)

    def workspace_dir(self, record: IntegrationRecord) -> Path:
        """Folder holding the integration's build project."""
        return self.root / f"{RECORD_PREFIX}{record.name}"


def create_integration_registry(
    root: Path, store: IntegrationStore | None = None
) -> IntegrationRegistry:
    """Create an integration registry rooted at the integrations folder."""
    return IntegrationRegistry(root, store)
