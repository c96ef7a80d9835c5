"""POM metadata parsing.

Extracts the two facts license resolution needs from a raw POM document:
the first declared license name and the parent POM coordinate.

Documents are parsed with ElementTree, ignoring XML namespaces. POMs are
third-party data and often malformed, so a document that is not
well-formed XML is scanned for the same tags with regular expressions
instead. Nothing in this module raises on bad input: a missing or
incomplete block yields None.
"""

from __future__ import annotations

import re
from typing import Optional
from xml.etree import ElementTree
from xml.sax.saxutils import unescape

from license_check.models.coordinate import PackageCoordinate

_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)
_CDATA_RE = re.compile(r"<!\[CDATA\[(.*?)\]\]>", re.DOTALL)


def _block_re(tag: str) -> re.Pattern[str]:
    return re.compile(rf"<{tag}(?:\s[^>]*)?>(.*?)</{tag}\s*>", re.DOTALL)


_LICENSE_RE = _block_re("license")
_PARENT_RE = _block_re("parent")
_NAME_RE = _block_re("name")
_GROUP_ID_RE = _block_re("groupId")
_ARTIFACT_ID_RE = _block_re("artifactId")
_VERSION_RE = _block_re("version")


def parse_document(document: str) -> Optional[ElementTree.Element]:
    """Parse a POM into an element tree with namespaces removed.

    Args:
        document: Raw POM text.

    Returns:
        Root element, or None if the document is not well-formed XML.
    """
    try:
        root = ElementTree.fromstring(document)
    except ElementTree.ParseError:
        return None

    for element in root.iter():
        if isinstance(element.tag, str) and element.tag.startswith("{"):
            element.tag = element.tag.split("}", 1)[1]
    return root


def _clean(text: Optional[str]) -> Optional[str]:
    if text is None:
        return None
    text = text.strip()
    return text or None


def _scan(pattern: re.Pattern[str], text: str) -> Optional[str]:
    """Return the inner text of the first block matched by ``pattern``."""
    match = pattern.search(text)
    if match is None:
        return None
    return match.group(1)


def _scan_text(pattern: re.Pattern[str], text: str) -> Optional[str]:
    inner = _scan(pattern, text)
    if inner is None:
        return None
    inner = _CDATA_RE.sub(lambda m: m.group(1), inner)
    return _clean(unescape(inner))


def parse_license_name(document: str) -> Optional[str]:
    """Extract the first declared license name from a POM.

    Only the first ``<license>`` block is considered; additional licenses
    are ignored.

    Args:
        document: Raw POM text.

    Returns:
        The license name, or None if there is no license block or the
        first block has no name.
    """
    root = parse_document(document)
    if root is not None:
        license_element = next(root.iter("license"), None)
        if license_element is None:
            return None
        name_element = next(license_element.iter("name"), None)
        if name_element is None:
            return None
        return _clean("".join(name_element.itertext()))

    stripped = _COMMENT_RE.sub("", document)
    block = _scan(_LICENSE_RE, stripped)
    if block is None:
        return None
    return _scan_text(_NAME_RE, block)


def parse_parent_coordinate(document: str) -> Optional[PackageCoordinate]:
    """Extract the parent POM coordinate from a POM.

    Args:
        document: Raw POM text.

    Returns:
        The parent coordinate, or None if there is no parent block or it
        is missing its groupId, artifactId or version.
    """
    root = parse_document(document)
    if root is not None:
        parent = next(root.iter("parent"), None)
        if parent is None:
            return None
        group_id = _clean(parent.findtext("groupId"))
        artifact_id = _clean(parent.findtext("artifactId"))
        version = _clean(parent.findtext("version"))
    else:
        stripped = _COMMENT_RE.sub("", document)
        block = _scan(_PARENT_RE, stripped)
        if block is None:
            return None
        group_id = _scan_text(_GROUP_ID_RE, block)
        artifact_id = _scan_text(_ARTIFACT_ID_RE, block)
        version = _scan_text(_VERSION_RE, block)

    if group_id is None or artifact_id is None or version is None:
        return None
    return PackageCoordinate(group_id=group_id, artifact_id=artifact_id, version=version)
