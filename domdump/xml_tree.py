"""Expose an ``xml.dom.minidom`` tree as a DOM node tree."""

from __future__ import annotations

from typing import List, Tuple, cast
from xml.dom import Node as XmlNode
from xml.dom import minidom

from .dom_model import (
    Attribute,
    CDataSection,
    Comment,
    Document,
    DocumentFragment,
    DocumentType,
    Element,
    EntityReference,
    Node,
    OpaqueNode,
    ProcessingInstruction,
    Text,
)

_PARENT_TYPES = (
    XmlNode.ELEMENT_NODE,
    XmlNode.DOCUMENT_NODE,
    XmlNode.DOCUMENT_FRAGMENT_NODE,
)


def _attributes(element: minidom.Element) -> List[Attribute]:
    attrs = element.attributes
    result: List[Attribute] = []
    for index in range(attrs.length):
        attr = attrs.item(index)
        result.append(Attribute(name=attr.name, value=attr.value))
    return result


def _convert_shallow(node: minidom.Node) -> Node:
    kind = node.nodeType
    if kind == XmlNode.ELEMENT_NODE:
        return Element(
            tag=node.tagName,
            namespace=node.namespaceURI,
            attributes=_attributes(node),
        )
    if kind == XmlNode.DOCUMENT_NODE:
        return Document()
    if kind == XmlNode.DOCUMENT_FRAGMENT_NODE:
        return DocumentFragment()
    if kind == XmlNode.ATTRIBUTE_NODE:
        return Attribute(name=node.name, value=node.value)
    if kind == XmlNode.TEXT_NODE:
        return Text(data=node.data)
    if kind == XmlNode.CDATA_SECTION_NODE:
        return CDataSection(data=node.data)
    if kind == XmlNode.COMMENT_NODE:
        return Comment(data=node.data)
    if kind == XmlNode.DOCUMENT_TYPE_NODE:
        return DocumentType(
            name=node.name,
            public_id=node.publicId,
            system_id=node.systemId,
            internal_subset=node.internalSubset,
        )
    if kind == XmlNode.PROCESSING_INSTRUCTION_NODE:
        return ProcessingInstruction(target=node.target, data=node.data)
    if kind == XmlNode.ENTITY_REFERENCE_NODE:
        return EntityReference(name=node.nodeName)
    return OpaqueNode(node_name=node.nodeName, kind=kind)


def tree_from_minidom(root: minidom.Node) -> Node:
    """Convert a minidom node and its descendants, keeping document order."""
    converted = _convert_shallow(root)
    if root.nodeType not in _PARENT_TYPES:
        return converted

    stack: List[Tuple[minidom.Node, Node]] = [(root, converted)]
    while stack:
        source, target = stack.pop()
        for child in source.childNodes:
            node = _convert_shallow(child)
            target.children.append(node)  # type: ignore[union-attr]
            if child.nodeType in _PARENT_TYPES:
                stack.append((child, node))
    return converted


def tree_from_xml(markup: str) -> Document:
    """Parse well-formed XML with minidom and convert the document.

    Parse errors (``xml.parsers.expat.ExpatError``) propagate to the caller.
    """
    dom = minidom.parseString(markup)
    try:
        return cast(Document, tree_from_minidom(dom))
    finally:
        dom.unlink()


__all__ = ["tree_from_minidom", "tree_from_xml"]
