"""Link manifest domain models."""

from enum import Enum

from pydantic import ConfigDict, Field

from assetpush.models.base import AssetpushBaseModel


class PreserveMode(str, Enum):
    """Retention level the stripping step applies to a manifest entry."""

    FULL = "full"
    ALL = "all"
    FIELDS = "fields"
    METHODS = "methods"
    NOTHING = "nothing"


DEFAULT_PRESERVE_MODE = PreserveMode.FULL


class ManifestModel(AssetpushBaseModel):
    """Base for manifest models; attribute values are kept exactly as read."""

    model_config = ConfigDict(str_strip_whitespace=False)


class ManifestTypeEntry(ManifestModel):
    """A child element of an assembly entry.

    Usually a ``<type>``, but ``<namespace>`` and any other element the linker
    understands are carried the same way under their own ``tag``. Content nested
    below the element (``<method>``, ``<field>``, ...) is kept as verbatim XML in
    ``raw_children``.
    """

    tag: str = "type"
    full_name: str | None = None
    preserve_mode: str | None = None
    extra_attributes: dict[str, str] = Field(default_factory=dict)
    raw_children: list[str] = Field(default_factory=list)


class ManifestEntry(ManifestModel):
    """One ``<assembly>`` element of the link manifest.

    ``preserve_mode`` is kept as a plain string so entries written by hand or
    by other tools survive a merge untouched, even with values outside
    :class:`PreserveMode`.
    """

    full_name: str
    preserve_mode: str | None = None
    extra_attributes: dict[str, str] = Field(default_factory=dict)
    types: list[ManifestTypeEntry] = Field(default_factory=list)


class Manifest(ManifestModel):
    """Ordered collection of manifest entries."""

    entries: list[ManifestEntry] = Field(default_factory=list)

    def names(self) -> list[str]:
        """Entry names in manifest order."""
        return [entry.full_name for entry in self.entries]

    def get(self, full_name: str) -> ManifestEntry | None:
        """Return the first entry with the given name."""
        for entry in self.entries:
            if entry.full_name == full_name:
                return entry
        return None

    def __contains__(self, full_name: object) -> bool:
        return any(entry.full_name == full_name for entry in self.entries)
