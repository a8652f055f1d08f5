"""Shared XML parsing helpers with secure defaults."""

from pathlib import Path
from xml.etree.ElementTree import Element

from defusedxml import ElementTree as SafeET


def parse_xml_file(path: Path) -> Element:
    """Parse an XML file with DTDs, entity declarations and external references forbidden.

    Raises:
        xml.etree.ElementTree.ParseError: If the document is malformed.
        defusedxml.DefusedXmlException: If the document declares a DTD or entities.
    """
    tree = SafeET.parse(
        str(path),
        forbid_dtd=True,
        forbid_entities=True,
        forbid_external=True,
    )
    return tree.getroot()


def local_name(tag: str) -> str:
    """Strip an XML namespace from a tag name ('{ns}groupId' -> 'groupId')."""
    return tag.rsplit("}", 1)[-1]


def find_child(element: Element, name: str) -> Element | None:
    """Return the first direct child with the given local name, ignoring namespaces."""
    for child in element:
        if isinstance(child.tag, str) and local_name(child.tag) == name:
            return child
    return None


def element_text(element: Element | None) -> str | None:
    """Return the stripped text content of an element, or None when blank."""
    if element is None:
        return None
    text = "".join(element.itertext()).strip()
    return text or None
