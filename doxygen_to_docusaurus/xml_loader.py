"""Logic for parsing Doxygen XML documents into attributed node trees."""

import re
from pathlib import Path

from lxml import etree

from doxygen_to_docusaurus.attributed_node import AttributedNode, AttributeValue
from doxygen_to_docusaurus.errors import XmlLoadError

_NAMESPACE_PREFIXES = {
    "http://www.w3.org/XML/1998/namespace": "xml",
    "http://www.w3.org/2001/XMLSchema-instance": "xsi",
}

_INTEGER_RE = re.compile(r"^-?\d+$")


def load_xml_file(path: Path) -> AttributedNode:
    """Parse an XML file and return its root element as an AttributedNode."""
    parser = etree.XMLParser(remove_comments=True, remove_pis=True, huge_tree=True)
    try:
        tree = etree.parse(str(path), parser)
    except (OSError, etree.XMLSyntaxError) as e:
        msg = f"Cannot parse {path}: {e}"
        raise XmlLoadError(msg) from e
    return element_to_node(tree.getroot())


def load_xml_string(text: str | bytes) -> AttributedNode:
    """Parse an XML document held in memory."""
    data = text.encode("utf-8") if isinstance(text, str) else text
    parser = etree.XMLParser(remove_comments=True, remove_pis=True, huge_tree=True)
    try:
        root = etree.fromstring(data, parser)
    except etree.XMLSyntaxError as e:
        msg = f"Cannot parse XML: {e}"
        raise XmlLoadError(msg) from e
    return element_to_node(root)


def element_to_node(element: etree._Element) -> AttributedNode:
    """Convert an lxml element, keeping text and child order."""
    node = AttributedNode(
        name=_local_name(element.tag),
        attributes={
            _attribute_name(key): _typed_value(value)
            for key, value in element.attrib.items()
        },
    )
    if element.text:
        node.children.append(element.text)
    for child in element:
        if isinstance(child.tag, str):
            node.children.append(element_to_node(child))
        if child.tail:
            node.children.append(child.tail)
    return node


def _local_name(tag: str) -> str:
    return etree.QName(tag).localname


def _attribute_name(key: str) -> str:
    qname = etree.QName(key)
    if qname.namespace is None:
        return qname.localname
    prefix = _NAMESPACE_PREFIXES.get(qname.namespace)
    return f"{prefix}:{qname.localname}" if prefix else qname.localname


def _typed_value(value: str) -> AttributeValue:
    # Leading zeros would be lost in a round-trip, keep those as text.
    digits = value.lstrip("-")
    if _INTEGER_RE.match(value) and (digits == "0" or not digits.startswith("0")):
        return int(value)
    return value
