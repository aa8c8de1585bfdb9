"""Conversion between lxml trees and immutable tree values.

lxml keeps character data in ``text``/``tail`` slots rather than as nodes.
``from_lxml`` turns those slots into ``Text`` children in document order and
drops comments; ``to_lxml`` performs the reverse for serialization.
"""

from typing import Dict, List, Optional, Tuple

from lxml import etree

from .model import Element, Text, UnsupportedNodeError, XmlValue

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"


def _node_kind(node: etree._Element) -> str:
    if node.tag is etree.PI:
        return "processing-instruction"
    if node.tag is etree.Entity:
        return "entity-reference"
    return type(node).__name__


def _qualified_tag(node: etree._Element) -> str:
    local_name = etree.QName(node).localname
    if node.prefix:
        return f"{node.prefix}:{local_name}"
    return local_name


def _qualified_attribute(node: etree._Element, name: str) -> str:
    if not name.startswith("{"):
        return name
    qname = etree.QName(name)
    if qname.namespace == XML_NAMESPACE:
        return f"xml:{qname.localname}"
    for prefix, uri in node.nsmap.items():
        if prefix and uri == qname.namespace:
            return f"{prefix}:{qname.localname}"
    return qname.localname


def from_lxml(node: etree._Element) -> Element:
    """Convert a parsed lxml element into an ``Element`` tree value.

    Args:
        node: An lxml element (not a comment or processing instruction)

    Returns:
        The equivalent immutable Element

    Raises:
        UnsupportedNodeError: If the subtree holds a node that is neither an
            element, text nor a comment
    """
    if not isinstance(node.tag, str):
        raise UnsupportedNodeError(_node_kind(node))

    children: List[XmlValue] = []
    if node.text:
        children.append(Text(node.text))
    for child in node:
        if child.tag is etree.Comment:
            pass
        elif isinstance(child.tag, str):
            children.append(from_lxml(child))
        else:
            raise UnsupportedNodeError(_node_kind(child))
        if child.tail:
            children.append(Text(child.tail))

    attributes: List[Tuple[str, str]] = [
        (_qualified_attribute(node, name), value) for name, value in node.attrib.items()
    ]
    return Element(_qualified_tag(node), tuple(attributes), tuple(children))


def _split_prefix(name: str) -> Tuple[Optional[str], str]:
    prefix, sep, local_name = name.partition(":")
    if not sep or not prefix or not local_name:
        return None, name
    return prefix, local_name


def _placeholder_namespace(prefix: str) -> str:
    return f"urn:typed-xml:prefix:{prefix}"


def _lxml_name(name: str, nsmap: Dict[str, str]) -> str:
    prefix, local_name = _split_prefix(name)
    if prefix is None:
        return name
    if prefix == "xml":
        return "{%s}%s" % (XML_NAMESPACE, local_name)
    uri = _placeholder_namespace(prefix)
    nsmap[prefix] = uri
    return "{%s}%s" % (uri, local_name)


def to_lxml(element: Element) -> etree._Element:
    """Convert an ``Element`` tree value into an lxml element.

    Unprefixed names carry no namespace. A ``prefix:local`` name is bound to
    a placeholder URI declared for that prefix, so the prefix survives
    serialization and ``from_lxml`` reads back the same name. The ``xml``
    prefix keeps its reserved namespace.

    Consecutive Text children are concatenated into the preceding ``text`` or
    ``tail`` slot.

    Raises:
        ValueError: If lxml rejects a tag or attribute name
    """
    nsmap: Dict[str, str] = {}
    tag = _lxml_name(element.tag, nsmap)
    attributes = [(_lxml_name(name, nsmap), value) for name, value in element.attributes]

    node = etree.Element(tag, nsmap=nsmap or None)
    for name, value in attributes:
        node.set(name, value)

    last: Optional[etree._Element] = None
    for child in element.children:
        if isinstance(child, Text):
            if last is None:
                node.text = (node.text or "") + child.content
            else:
                last.tail = (last.tail or "") + child.content
        else:
            last = to_lxml(child)
            node.append(last)
    return node
