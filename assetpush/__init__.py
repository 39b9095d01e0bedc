"""assetpush - publish NuGet integrations into a Unity project."""

from importlib.metadata import distribution

from .manifest.models import Manifest
from .publish.models import PublishResult


__version__ = distribution(__package__ or "assetpush").version

__all__ = [
    "Manifest",
    "PublishResult",
    "__version__",
]
