"""External build invocation."""

from assetpush.build.dotnet_invoker import DotnetBuildInvoker, create_build_invoker
from assetpush.build.models import BuildResult
from assetpush.build.protocols import BuildInvokerProtocol


__all__ = [
    "BuildInvokerProtocol",
    "BuildResult",
    "DotnetBuildInvoker",
    "create_build_invoker",
]
