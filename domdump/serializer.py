"""Serialize a DOM node tree back into markup."""

from __future__ import annotations

from typing import Iterable, List, Union

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
    ProcessingInstruction,
    Text,
)

VOID_ELEMENTS = frozenset({"meta", "link", "img", "br", "hr", "input"})
RAW_TEXT_ELEMENTS = frozenset({"script"})

ENTITY_ESCAPES = {
    "<": "&lt;",
    ">": "&gt;",
    "&": "&amp;",
    '"': "&quot;",
}

TEXT_ESCAPE_CHARS = frozenset("<>&")
ATTRIBUTE_ESCAPE_CHARS = frozenset('<&"')

# A doctype system id of "." stands for "no system id".
_NO_SYSTEM_ID = "."

_Pending = Union[Node, str]


def escape_char(char: str) -> str:
    """Return the entity for ``char``, or a numeric character reference."""
    replacement = ENTITY_ESCAPES.get(char)
    if replacement is None:
        replacement = f"&#{ord(char)};"
    return replacement


def escape(data: str, chars: Iterable[str]) -> str:
    """Escape every occurrence of ``chars`` in ``data``, leaving the rest untouched."""
    escapable = chars if isinstance(chars, frozenset) else frozenset(chars)
    if not any(char in escapable for char in data):
        return data
    return "".join(escape_char(char) if char in escapable else char for char in data)


def escape_text(data: str) -> str:
    return escape(data, TEXT_ESCAPE_CHARS)


def escape_attribute(value: str) -> str:
    return escape(value, ATTRIBUTE_ESCAPE_CHARS)


def serialize_attribute(attr: Attribute) -> str:
    return f' {attr.name.lower()}="{escape_attribute(attr.value or "")}"'


def serialize_doctype(doctype: DocumentType) -> str:
    parts = ["<!DOCTYPE ", doctype.name]
    system_id = doctype.system_id if doctype.system_id != _NO_SYSTEM_ID else None
    if doctype.public_id:
        parts.append(f' PUBLIC "{doctype.public_id}')
        if system_id:
            parts.append(f'" "{system_id}')
        parts.append('">')
    elif system_id:
        parts.append(f' SYSTEM "{system_id}">')
    else:
        if doctype.internal_subset:
            parts.append(f" [{doctype.internal_subset}]")
        parts.append(">")
    return "".join(parts)


def _fallback(node: object) -> str:
    name = getattr(node, "node_name", None)
    if name is None:
        name = type(node).__name__
    return f"??{name}"


def _raw_text(node: object) -> str:
    return getattr(node, "data", None) or ""


def _open_element(element: Element, out: List[str], pending: List[_Pending]) -> None:
    tag = element.tag.lower()
    out.append(f"<{tag}")
    for attr in element.attributes:
        out.append(serialize_attribute(attr))

    is_html = element.is_html
    if not element.children and (not is_html or tag in VOID_ELEMENTS):
        out.append("/>")
        return

    out.append(">")
    if is_html and tag in RAW_TEXT_ELEMENTS:
        if element.children:
            out.append(_raw_text(element.children[0]))
        out.append(f"</{tag}>")
        return

    pending.append(f"</{tag}>")
    pending.extend(reversed(element.children))


def _serialize_into(root: Node, out: List[str]) -> None:
    # Explicit stack: strings are literal output (closing tags), anything else
    # is a node still to be visited.
    pending: List[_Pending] = [root]
    while pending:
        node = pending.pop()
        if isinstance(node, str):
            out.append(node)
        elif isinstance(node, Element):
            _open_element(node, out, pending)
        elif isinstance(node, (Document, DocumentFragment)):
            pending.extend(reversed(node.children))
        elif isinstance(node, Attribute):
            out.append(serialize_attribute(node))
        elif isinstance(node, Text):
            out.append(escape_text(node.data or ""))
        elif isinstance(node, CDataSection):
            out.append(f"<![CDATA[{node.data or ''}]]>")
        elif isinstance(node, Comment):
            out.append(f"<!--{node.data or ''}-->")
        elif isinstance(node, DocumentType):
            out.append(serialize_doctype(node))
        elif isinstance(node, ProcessingInstruction):
            out.append(f"<?{node.target} {node.data or ''}?>")
        elif isinstance(node, EntityReference):
            out.append(f"&{node.name.lower()};")
        else:
            out.append(_fallback(node))


def serialize(root: Node) -> str:
    """Serialize ``root`` and everything below it into a markup string.

    Children are visited in document order. Node kinds without a dedicated
    rendering are written as ``??`` followed by the node name, so a single odd
    node never aborts the dump.
    """
    out: List[str] = []
    _serialize_into(root, out)
    return "".join(out)


__all__ = [
    "ATTRIBUTE_ESCAPE_CHARS",
    "ENTITY_ESCAPES",
    "RAW_TEXT_ELEMENTS",
    "TEXT_ESCAPE_CHARS",
    "VOID_ELEMENTS",
    "escape",
    "escape_attribute",
    "escape_char",
    "escape_text",
    "serialize",
    "serialize_attribute",
    "serialize_doctype",
]
