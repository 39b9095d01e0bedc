"""Integration records and their registry."""

from assetpush.integrations.models import (
    IntegrationRecord,
    normalize_target_path,
    validate_integration_name,
)
from assetpush.integrations.registry import (
    IntegrationRegistry,
    create_integration_registry,
)
from assetpush.integrations.store import (
    DirectoryIntegrationStore,
    IntegrationStore,
    MemoryIntegrationStore,
    create_directory_store,
    create_memory_store,
)


__all__ = [
    "DirectoryIntegrationStore",
    "IntegrationRecord",
    "IntegrationRegistry",
    "IntegrationStore",
    "MemoryIntegrationStore",
    "create_directory_store",
    "create_integration_registry",
    "create_memory_store",
    "normalize_target_path",
    "validate_integration_name",
]
