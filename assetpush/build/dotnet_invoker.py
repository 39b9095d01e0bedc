"""Build invoker backed by the dotnet CLI."""

import logging
import shlex
import subprocess
import time
from pathlib import Path

from assetpush.build.models import BuildResult
from assetpush.config.models import AssetpushSettings
from assetpush.core.errors import BuildError
from assetpush.integrations.models import IntegrationRecord
from assetpush.utils import stream_process
from assetpush.utils.stream_process import OutputMiddleware


logger = logging.getLogger(__name__)

# File the class library template creates and the integration does not need
TEMPLATE_SOURCE_FILE = "Class1.cs"


class LoggerOutputMiddleware(OutputMiddleware[str]):
    """Middleware that forwards build output to a logger.

    stdout goes to DEBUG, stderr to WARNING.
    """

    def __init__(self, log: logging.Logger, prefix: str = "") -> None:
        self.log = log
        self.prefix = prefix

    def process(self, line: str, stream_type: str) -> str:
        if stream_type == "stdout":
            self.log.debug("%s%s", self.prefix, line)
        else:
            self.log.warning("%s%s", self.prefix, line)
        return line


class DotnetBuildInvoker:
    """Create and publish integration class library projects with dotnet."""

    def __init__(
        self,
        executable: str = "dotnet",
        configuration: str = "Release",
        target_framework: str = "netstandard2.0",
        project_template: str = "classlib",
    ) -> None:
        self.executable = executable
        self.configuration = configuration
        self.target_framework = target_framework
        self.project_template = project_template

    def output_dir(self, workspace_dir: Path) -> Path:
        """Conventional publish output folder of a workspace."""
        return (
            workspace_dir
            / "bin"
            / self.configuration
            / self.target_framework
            / "publish"
        )

    def check_available(self) -> bool:
        """Check if the dotnet executable is available on the system."""
        cmd = [self.executable, "--version"]
        try:
            result = subprocess.run(cmd, check=True, capture_output=True, text=True)
        except FileNotFoundError:
            logger.warning("%s executable not found in PATH", self.executable)
            return False
        except subprocess.CalledProcessError as e:
            stderr = e.stderr.strip() if e.stderr else "unknown error"
            logger.warning("Command failed: %s - error: %s", " ".join(cmd), stderr)
            return False

        logger.debug("%s is available: %s", self.executable, result.stdout.strip())
        return True

    def _run(self, cmd: list[str], workspace_dir: Path, prefix: str) -> int:
        cmd_str = " ".join(shlex.quote(arg) for arg in cmd)
        logger.debug("Running in %s: %s", workspace_dir, cmd_str)
        middleware = LoggerOutputMiddleware(logger, prefix=prefix)
        return_code, _stdout, _stderr = stream_process.run_command(
            cmd, middleware, cwd=workspace_dir
        )
        return return_code

    def initialize(self, record: IntegrationRecord, workspace_dir: Path) -> None:
        """Create a class library project in the workspace.

        Raises:
            BuildError: If dotnet is missing or the template cannot be created
        """
        cmd = [self.executable, "new", self.project_template]
        try:
            workspace_dir.mkdir(parents=True, exist_ok=True)
            return_code = self._run(cmd, workspace_dir, f"[{record.name}] ")
        except FileNotFoundError as e:
            raise BuildError(
                f"Build tool '{self.executable}' not found: {e}",
                {"integration": record.name},
            ) from e
        except OSError as e:
            raise BuildError(
                f"Cannot create build project for '{record.name}': {e}",
                {"integration": record.name},
            ) from e

        if return_code != 0:
            raise BuildError(
                f"'{self.executable} new {self.project_template}' failed for "
                f"'{record.name}' with exit code {return_code}",
                {"integration": record.name, "return_code": return_code},
            )

        (workspace_dir / TEMPLATE_SOURCE_FILE).unlink(missing_ok=True)
        logger.info("Created build project for %s in %s", record.name, workspace_dir)

    def build(self, record: IntegrationRecord, workspace_dir: Path) -> BuildResult:
        """Run ``dotnet publish`` for an integration and wait for it."""
        cmd = [self.executable, "publish", "-c", self.configuration]
        output_dir = self.output_dir(workspace_dir)

        if not workspace_dir.is_dir():
            return BuildResult.failed(
                record.name, f"Build workspace {workspace_dir} does not exist"
            )

        logger.info("Building %s", record.name)
        start_time = time.time()
        try:
            return_code = self._run(cmd, workspace_dir, f"[{record.name}] ")
        except FileNotFoundError as e:
            return BuildResult.failed(
                record.name, f"Build tool '{self.executable}' not found: {e}"
            )
        except (OSError, subprocess.SubprocessError) as e:
            return BuildResult.failed(record.name, f"Build could not be started: {e}")
        elapsed = time.time() - start_time

        if return_code != 0:
            return BuildResult.failed(
                record.name,
                f"'{' '.join(cmd)}' exited with code {return_code}",
                return_code=return_code,
                build_time_seconds=elapsed,
            )

        logger.info("Built %s in %.1fs", record.name, elapsed)
        return BuildResult(
            success=True,
            integration=record.name,
            output_dir=output_dir,
            return_code=return_code,
            build_time_seconds=elapsed,
            messages=[f"Published {record.name} to {output_dir}"],
        )


def create_build_invoker(settings: AssetpushSettings) -> DotnetBuildInvoker:
    """Create the dotnet build invoker configured from settings."""
    return DotnetBuildInvoker(
        executable=settings.build_executable,
        configuration=settings.build_configuration,
        target_framework=settings.target_framework,
        project_template=settings.project_template,
    )
