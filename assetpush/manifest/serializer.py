"""Text form of the link manifest.

The manifest is a small XML document::

    <linker>
    	<assembly fullname="Newtonsoft.Json" preserve="full" />
    	<assembly fullname="Some.Library">
    		<type fullname="Some.Library.Thing" preserve="all" />
    		<namespace fullname="Some.Library.Extra" preserve="all" />
    		<type fullname="Some.Library.Other">
    			<method name="Run" />
    		</type>
    	</assembly>
    </linker>

Output is deterministic: tab indentation, ``fullname`` before ``preserve``
followed by any other attributes in their original order, no XML declaration
and a single trailing newline. Text produced by :func:`serialize_manifest`
parses back to an equal manifest and serializes to the same bytes.
"""

import copy
import logging
import xml.etree.ElementTree as ET

from assetpush.core.errors import ManifestParseError
from assetpush.manifest.models import Manifest, ManifestEntry, ManifestTypeEntry


logger = logging.getLogger(__name__)

ROOT_TAG = "linker"
ASSEMBLY_TAG = "assembly"
TYPE_TAG = "type"
NAME_ATTRIBUTE = "fullname"
PRESERVE_ATTRIBUTE = "preserve"


def _split_attributes(
    element: ET.Element,
) -> tuple[str, str | None, dict[str, str]]:
    attributes = dict(element.attrib)
    full_name = attributes.pop(NAME_ATTRIBUTE, None)
    if full_name is None or not full_name.strip():
        raise ManifestParseError(
            f"<{element.tag}> element is missing its '{NAME_ATTRIBUTE}' attribute",
            {"element": element.tag},
        )
    preserve = attributes.pop(PRESERVE_ATTRIBUTE, None)
    return full_name, preserve, attributes


def _verbatim(element: ET.Element) -> str:
    detached = copy.deepcopy(element)
    for node in detached.iter():
        if node.text is not None and not node.text.strip():
            node.text = None
        if node.tail is not None and not node.tail.strip():
            node.tail = None
    detached.tail = None
    return ET.tostring(detached, encoding="unicode")


def _parse_child(element: ET.Element) -> ManifestTypeEntry:
    attributes = dict(element.attrib)
    full_name = attributes.pop(NAME_ATTRIBUTE, None)
    if element.tag == TYPE_TAG and (full_name is None or not full_name.strip()):
        raise ManifestParseError(
            f"<{TYPE_TAG}> element is missing its '{NAME_ATTRIBUTE}' attribute",
            {"element": element.tag},
        )
    preserve = attributes.pop(PRESERVE_ATTRIBUTE, None)
    return ManifestTypeEntry(
        tag=element.tag,
        full_name=full_name,
        preserve_mode=preserve,
        extra_attributes=attributes,
        raw_children=[_verbatim(child) for child in element],
    )


def _parse_assembly(element: ET.Element) -> ManifestEntry:
    full_name, preserve, extra = _split_attributes(element)
    types = [_parse_child(child) for child in element]
    return ManifestEntry(
        full_name=full_name,
        preserve_mode=preserve,
        extra_attributes=extra,
        types=types,
    )


def parse_manifest(text: str) -> Manifest:
    """Parse manifest text.

    Children of an assembly (``<type>``, ``<namespace>`` and others) are kept
    with their attributes, and anything nested below them is carried as
    verbatim XML, so rewriting a parsed manifest never loses content. Only
    top level elements other than ``<assembly>`` are rejected.

    Raises:
        ManifestParseError: If the text is not a well formed link manifest
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise ManifestParseError(f"Link manifest is not valid XML: {e}") from e

    if root.tag != ROOT_TAG:
        raise ManifestParseError(
            f"Expected <{ROOT_TAG}> root element, found <{root.tag}>",
            {"root": root.tag},
        )

    entries = []
    for element in root:
        if element.tag != ASSEMBLY_TAG:
            raise ManifestParseError(
                f"Unsupported element <{element.tag}> in link manifest",
                {"element": element.tag},
            )
        entries.append(_parse_assembly(element))

    logger.debug("Parsed link manifest with %d entries", len(entries))
    return Manifest(entries=entries)


def _attributes(
    full_name: str | None, preserve: str | None, extra: dict[str, str]
) -> dict[str, str]:
    attributes = {}
    if full_name is not None:
        attributes[NAME_ATTRIBUTE] = full_name
    if preserve is not None:
        attributes[PRESERVE_ATTRIBUTE] = preserve
    attributes.update(extra)
    return attributes


def serialize_manifest(manifest: Manifest) -> str:
    """Render a manifest as deterministic XML text."""
    root = ET.Element(ROOT_TAG)
    for entry in manifest.entries:
        assembly = ET.SubElement(
            root,
            ASSEMBLY_TAG,
            _attributes(entry.full_name, entry.preserve_mode, entry.extra_attributes),
        )
        for type_entry in entry.types:
            child = ET.SubElement(
                assembly,
                type_entry.tag,
                _attributes(
                    type_entry.full_name,
                    type_entry.preserve_mode,
                    type_entry.extra_attributes,
                ),
            )
            child.extend(ET.fromstring(raw) for raw in type_entry.raw_children)

    ET.indent(root, space="\t")
    return ET.tostring(root, encoding="unicode") + "\n"
