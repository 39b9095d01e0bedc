"""File adapter for abstracting file system operations."""

import json
import logging
import shutil
from pathlib import Path
from typing import Any

from assetpush.core.errors import CopyError, FileSystemError
from assetpush.protocols import FileAdapterProtocol
from assetpush.utils.error_utils import create_file_error


logger = logging.getLogger(__name__)


class FileSystemAdapter:
    """File system adapter implementation."""

    def read_text(self, path: Path, encoding: str = "utf-8") -> str:
        """Read text content from a file."""
        try:
            logger.debug("Reading text file: %s", path)
            with path.open(mode="r", encoding=encoding) as f:
                content = f.read()
            logger.debug("Successfully read %d characters from %s", len(content), path)
            return content
        except FileNotFoundError as e:
            error = create_file_error(path, "read_text", e, {"encoding": encoding})
            logger.error("File not found: %s", path)
            raise error from e
        except PermissionError as e:
            error = create_file_error(path, "read_text", e, {"encoding": encoding})
            logger.error("Permission denied reading file: %s", path)
            raise error from e
        except UnicodeDecodeError as e:
            error = create_file_error(path, "read_text", e, {"encoding": encoding})
            logger.error("Encoding error reading file %s: %s", path, e)
            raise error from e
        except OSError as e:
            error = create_file_error(path, "read_text", e, {"encoding": encoding})
            logger.error("Error reading file %s: %s", path, e)
            raise error from e

    def write_text(self, path: Path, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file."""
        try:
            self.mkdir(path.parent)

            logger.debug("Writing text file: %s", path)
            # newline="" keeps the exact bytes we were given on every platform
            with path.open(mode="w", encoding=encoding, newline="") as f:
                f.write(content)
            logger.debug("Successfully wrote %d characters to %s", len(content), path)
        except FileSystemError:
            raise
        except PermissionError as e:
            error = create_file_error(
                path,
                "write_text",
                e,
                {"encoding": encoding, "content_length": len(content)},
            )
            logger.error("Permission denied writing file: %s", path)
            raise error from e
        except OSError as e:
            error = create_file_error(
                path,
                "write_text",
                e,
                {"encoding": encoding, "content_length": len(content)},
            )
            logger.error("Error writing file %s: %s", path, e)
            raise error from e

    def read_json(self, path: Path, encoding: str = "utf-8") -> dict[str, Any]:
        """Read and parse JSON content from a file."""
        logger.debug("Reading JSON file: %s", path)
        content = self.read_text(path, encoding)
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            error = create_file_error(path, "read_json", e, {"encoding": encoding})
            logger.error("Invalid JSON in file %s: %s", path, e)
            raise error from e
        logger.debug("Successfully parsed JSON from %s", path)
        return data if isinstance(data, dict) else {"data": data}

    def write_json(
        self,
        path: Path,
        data: dict[str, Any],
        encoding: str = "utf-8",
        indent: int = 2,
    ) -> None:
        """Write data as JSON to a file."""
        logger.debug("Writing JSON file: %s", path)
        try:
            content = json.dumps(data, indent=indent, ensure_ascii=False)
        except TypeError as e:
            error = create_file_error(
                path,
                "write_json",
                e,
                {"indent": indent, "data_type": type(data).__name__},
            )
            logger.error("Cannot serialize data to JSON for file %s: %s", path, e)
            raise error from e
        self.write_text(path, content, encoding)
        logger.debug("Successfully wrote JSON to %s", path)

    def exists(self, path: Path) -> bool:
        """Check if a path exists."""
        return path.exists()

    def is_file(self, path: Path) -> bool:
        """Check if a path is a file."""
        return path.is_file()

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        return path.is_dir()

    def mkdir(self, path: Path, parents: bool = True, exist_ok: bool = True) -> None:
        """Create a directory."""
        try:
            logger.debug("Creating directory: %s", path)
            path.mkdir(parents=parents, exist_ok=exist_ok)
        except PermissionError as e:
            error = create_file_error(
                path, "mkdir", e, {"parents": parents, "exist_ok": exist_ok}
            )
            logger.error("Permission denied creating directory: %s", path)
            raise error from e
        except OSError as e:
            error = create_file_error(
                path, "mkdir", e, {"parents": parents, "exist_ok": exist_ok}
            )
            logger.error("Error creating directory %s: %s", path, e)
            raise error from e

    def copy_file(self, src: Path, dst: Path) -> None:
        """Copy a file from source to destination, overwriting it."""
        context = {"source": str(src), "destination": str(dst)}
        try:
            self.mkdir(dst.parent)
        except FileSystemError as e:
            raise CopyError(e.message, path=dst, operation="copy_file") from e

        try:
            logger.debug("Copying file: %s -> %s", src, dst)
            shutil.copy2(src, dst)
            logger.debug("Successfully copied file: %s -> %s", src, dst)
        except FileNotFoundError as e:
            error = create_file_error(src, "copy_file", e, context, CopyError)
            logger.error("Source file not found: %s", src)
            raise error from e
        except PermissionError as e:
            error = create_file_error(src, "copy_file", e, context, CopyError)
            logger.error("Permission denied copying file: %s -> %s", src, dst)
            raise error from e
        except OSError as e:
            error = create_file_error(src, "copy_file", e, context, CopyError)
            logger.error("Error copying file %s to %s: %s", src, dst, e)
            raise error from e

    def list_files(self, path: Path, pattern: str = "*") -> list[Path]:
        """List files in a directory matching a pattern, sorted by name."""
        logger.debug("Listing files in %s with pattern '%s'", path, pattern)
        if not self.is_dir(path):
            logger.error("Path is not a directory: %s", path)
            raise create_file_error(
                path, "list_files", ValueError("Not a directory"), {"pattern": pattern}
            )

        try:
            files = sorted(f for f in path.glob(pattern) if f.is_file())
        except OSError as e:
            error = create_file_error(path, "list_files", e, {"pattern": pattern})
            logger.error("Error listing files in %s: %s", path, e)
            raise error from e

        logger.debug(
            "Found %d files matching pattern '%s' in %s", len(files), pattern, path
        )
        return files

    def list_directory(self, path: Path) -> list[Path]:
        """List all items in a directory, sorted by name."""
        logger.debug("Listing directory contents: %s", path)
        if not self.is_dir(path):
            logger.error("Path is not a directory: %s", path)
            raise create_file_error(
                path, "list_directory", ValueError("Not a directory"), {}
            )

        try:
            items = sorted(path.iterdir())
        except OSError as e:
            error = create_file_error(path, "list_directory", e, {})
            logger.error("Error listing directory %s: %s", path, e)
            raise error from e

        logger.debug("Found %d items in %s", len(items), path)
        return items

    def remove_dir(self, path: Path, recursive: bool = True) -> None:
        """Remove a directory and optionally its contents.

        Uses shutil.rmtree for recursive removal or Path.rmdir for empty
        directory removal. A missing directory is not an error.
        """
        logger.debug("Removing directory: %s (recursive=%s)", path, recursive)

        if not self.exists(path):
            logger.debug("Directory does not exist, nothing to remove: %s", path)
            return

        if not self.is_dir(path):
            logger.error("Path is not a directory: %s", path)
            raise create_file_error(
                path,
                "remove_dir",
                ValueError("Not a directory"),
                {"recursive": recursive},
            )

        try:
            if recursive:
                shutil.rmtree(path)
            else:
                path.rmdir()
            logger.debug("Successfully removed directory: %s", path)
        except OSError as e:
            error = create_file_error(path, "remove_dir", e, {"recursive": recursive})
            logger.error("Error removing directory %s: %s", path, e)
            raise error from e


def create_file_adapter() -> FileAdapterProtocol:
    """Create a file adapter with default implementation."""
    return FileSystemAdapter()
