"""Utility modules and functions for assetpush.

1. Process Streaming: subprocess execution and output handling
2. Error Utilities: standardized error creation
"""

# Group 2: Error Utilities
from assetpush.utils.error_utils import create_file_error

# Group 1: Process Streaming
from assetpush.utils.stream_process import (
    OutputMiddleware,
    ProcessResult,
    run_command,
)


__all__ = [
    "OutputMiddleware",
    "ProcessResult",
    "create_file_error",
    "run_command",
]
