"""Protocol definitions for assetpush adapters and interfaces.

These protocols use Python's typing.Protocol system with the
@runtime_checkable decorator to enable both static type checking and runtime
isinstance() checks.
"""

from .file_adapter_protocol import FileAdapterProtocol


__all__ = [
    "FileAdapterProtocol",
]
