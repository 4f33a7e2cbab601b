"""Expose a BeautifulSoup parse tree as a DOM node tree."""

from __future__ import annotations

import re
from typing import List, Tuple, cast

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import CData, Comment as SoupComment, Declaration, Doctype
from bs4.element import ProcessingInstruction as SoupProcessingInstruction

from .dom_model import (
    Attribute,
    CDataSection,
    Comment,
    Document,
    DocumentType,
    Element,
    Node,
    OpaqueNode,
    ProcessingInstruction,
    Text,
    XHTML_NAMESPACE,
)

DOCTYPE_RE = re.compile(
    r"""
    ^\s*(?:doctype\s+)?
    (?P<name>[^\s\[>]*)
    (?:
        \s+PUBLIC\s+(?P<pq>["'])(?P<public>.*?)(?P=pq)
        (?:\s+(?P<sq>["'])(?P<system>.*?)(?P=sq))?
      |
        \s+SYSTEM\s+(?P<oq>["'])(?P<system_only>.*?)(?P=oq)
    )?
    \s*(?:\[(?P<subset>.*)\])?
    \s*$
    """,
    re.IGNORECASE | re.DOTALL | re.VERBOSE,
)


def parse_doctype(text: str) -> DocumentType:
    """Split the body of a ``<!DOCTYPE ...>`` declaration into its fields.

    Text that does not have the name/PUBLIC/SYSTEM/subset shape is kept whole
    as the name so it is written back unchanged.
    """
    match = DOCTYPE_RE.match(text)
    if not match:
        return DocumentType(name=text.strip())
    system_id = match.group("system")
    if system_id is None:
        system_id = match.group("system_only")
    return DocumentType(
        name=match.group("name"),
        public_id=match.group("public"),
        system_id=system_id,
        internal_subset=match.group("subset"),
    )


def _processing_instruction(text: str) -> ProcessingInstruction:
    # html.parser keeps the closing "?" of "<?target data?>" in the text.
    if text.endswith("?"):
        text = text[:-1]
    parts = text.split(None, 1)
    if not parts:
        return ProcessingInstruction(target="")
    data = parts[1].strip() if len(parts) > 1 else ""
    return ProcessingInstruction(target=parts[0], data=data)


def _convert_string(string: NavigableString) -> Node:
    text = str(string)
    if isinstance(string, CData):
        return CDataSection(data=text)
    if isinstance(string, SoupComment):
        return Comment(data=text)
    if isinstance(string, Doctype):
        return parse_doctype(text)
    if isinstance(string, SoupProcessingInstruction):
        return _processing_instruction(text)
    if isinstance(string, Declaration):
        return OpaqueNode(node_name=text)
    return Text(data=text)


def _convert_tag(tag: Tag, assume_xhtml: bool) -> Element:
    namespace = tag.namespace
    if namespace is None and assume_xhtml:
        namespace = XHTML_NAMESPACE
    attributes = []
    for name, value in tag.attrs.items():
        if isinstance(value, (list, tuple)):
            value = " ".join(value)
        attributes.append(Attribute(name=name, value="" if value is None else str(value)))
    return Element(tag=tag.name, namespace=namespace, attributes=attributes)


def _convert_shallow(item: object, assume_xhtml: bool) -> Node:
    if isinstance(item, BeautifulSoup):
        return Document()
    if isinstance(item, Tag):
        return _convert_tag(item, assume_xhtml)
    if isinstance(item, NavigableString):
        return _convert_string(item)
    return OpaqueNode(node_name=type(item).__name__)


def tree_from_soup(root: object, *, assume_xhtml: bool = True) -> Node:
    """Convert a BeautifulSoup object (or any tag inside one) into DOM nodes.

    HTML parsers do not record namespaces; with ``assume_xhtml`` every element
    without one is placed in the XHTML namespace, as a browser would do.
    """
    converted = _convert_shallow(root, assume_xhtml)
    if not isinstance(root, Tag):
        return converted

    stack: List[Tuple[Tag, Node]] = [(root, converted)]
    while stack:
        source, target = stack.pop()
        for child in source.contents:
            node = _convert_shallow(child, assume_xhtml)
            target.children.append(node)  # type: ignore[union-attr]
            if isinstance(child, Tag):
                stack.append((child, node))
    return converted


def tree_from_html(markup: str, *, assume_xhtml: bool = True) -> Document:
    """Parse ``markup`` with BeautifulSoup's html.parser and convert the result."""
    soup = BeautifulSoup(markup, "html.parser", multi_valued_attributes=None)
    return cast(Document, tree_from_soup(soup, assume_xhtml=assume_xhtml))


__all__ = ["DOCTYPE_RE", "parse_doctype", "tree_from_html", "tree_from_soup"]
