"""Process execution and streaming output handling.

This module runs subprocesses and hands every output line to a middleware
object as soon as it is produced, so long running builds show progress in the
log instead of dumping everything at exit.

Example:
    ```python
    from assetpush.utils.stream_process import run_command

    return_code, stdout, stderr = run_command(
        ["dotnet", "publish", "-c", "Release"], middleware, cwd=build_dir
    )
    ```
"""

import shlex
import subprocess
from pathlib import Path
from threading import Thread
from typing import Any, Generic, TypeAlias, TypeVar


T = TypeVar("T")  # Type of processed output

# (return_code, stdout, stderr)
ProcessResult: TypeAlias = tuple[int, list[T], list[T]]


class OutputMiddleware(Generic[T]):
    """Base class for processing command output streams.

    Type parameter T represents the return type of the process method,
    allowing middleware to transform strings into other types if needed.
    Returning ``None`` drops the line from the captured output.
    """

    def process(self, line: str, stream_type: str) -> T:
        """Process a line of output from a subprocess stream.

        Args:
            line: A line of text from the process output
            stream_type: Either "stdout" or "stderr"

        Returns:
            Processed output of type T
        """
        raise NotImplementedError()


def run_command(
    cmd: str | list[str],
    middleware: OutputMiddleware[T],
    cwd: Path | None = None,
) -> ProcessResult[T]:
    """Run a command and process its output through middleware.

    Blocks until the process exits. There is no timeout.

    Args:
        cmd: Command to run, either as a string or list of arguments
        middleware: Middleware receiving every output line
        cwd: Working directory for the process

    Returns:
        Tuple of return code, processed stdout lines and processed stderr lines

    Raises:
        FileNotFoundError: If the executable does not exist
    """
    if isinstance(cmd, str):
        cmd = shlex.split(cmd)

    process = subprocess.Popen(
        cmd,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        bufsize=1,
        cwd=cwd,
    )

    def stream_output(stream: Any, stream_type: str) -> list[T]:
        captured: list[T] = []
        for line in iter(stream.readline, ""):
            if line:
                processed = middleware.process(line.rstrip(), stream_type)
                if processed is not None:
                    captured.append(processed)
        stream.close()
        return captured

    stdout_lines: list[T] = []
    stderr_lines: list[T] = []

    stdout_thread = Thread(
        target=lambda: stdout_lines.extend(stream_output(process.stdout, "stdout"))
    )
    stderr_thread = Thread(
        target=lambda: stderr_lines.extend(stream_output(process.stderr, "stderr"))
    )
    stdout_thread.daemon = True
    stderr_thread.daemon = True
    stdout_thread.start()
    stderr_thread.start()

    return_code = process.wait()

    stdout_thread.join()
    stderr_thread.join()

    return return_code, stdout_lines, stderr_lines
