"""Read-only DOM node model consumed by the serializer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar, List, Optional

XHTML_NAMESPACE = "http://www.w3.org/1999/xhtml"


class NodeType(IntEnum):
    """DOM node-type codes."""

    ELEMENT = 1
    ATTRIBUTE = 2
    TEXT = 3
    CDATA_SECTION = 4
    ENTITY_REFERENCE = 5
    ENTITY = 6
    PROCESSING_INSTRUCTION = 7
    COMMENT = 8
    DOCUMENT = 9
    DOCUMENT_TYPE = 10
    DOCUMENT_FRAGMENT = 11
    NOTATION = 12


@dataclass
class Attribute:
    name: str
    value: str = ""
    node_type: ClassVar[NodeType] = NodeType.ATTRIBUTE


@dataclass
class Element:
    tag: str
    namespace: Optional[str] = None
    attributes: List[Attribute] = field(default_factory=list)
    children: List["Node"] = field(default_factory=list)
    node_type: ClassVar[NodeType] = NodeType.ELEMENT

    @property
    def is_html(self) -> bool:
        return self.namespace == XHTML_NAMESPACE


@dataclass
class Text:
    data: str = ""
    node_type: ClassVar[NodeType] = NodeType.TEXT


@dataclass
class CDataSection:
    data: str = ""
    node_type: ClassVar[NodeType] = NodeType.CDATA_SECTION


@dataclass
class Comment:
    data: str = ""
    node_type: ClassVar[NodeType] = NodeType.COMMENT


@dataclass
class Document:
    children: List["Node"] = field(default_factory=list)
    node_type: ClassVar[NodeType] = NodeType.DOCUMENT


@dataclass
class DocumentFragment:
    children: List["Node"] = field(default_factory=list)
    node_type: ClassVar[NodeType] = NodeType.DOCUMENT_FRAGMENT


@dataclass
class DocumentType:
    name: str
    public_id: Optional[str] = None
    system_id: Optional[str] = None
    internal_subset: Optional[str] = None
    node_type: ClassVar[NodeType] = NodeType.DOCUMENT_TYPE


@dataclass
class ProcessingInstruction:
    target: str
    data: str = ""
    node_type: ClassVar[NodeType] = NodeType.PROCESSING_INSTRUCTION


@dataclass
class EntityReference:
    name: str
    node_type: ClassVar[NodeType] = NodeType.ENTITY_REFERENCE


@dataclass
class OpaqueNode:
    """Entity, notation or any node kind without a dedicated variant.

    The serializer renders these with a diagnostic marker instead of failing.
    """

    node_name: str
    kind: Optional[int] = None

    @property
    def node_type(self) -> Optional[int]:
        return self.kind


Node = (
    Element
    | Attribute
    | Text
    | CDataSection
    | Comment
    | Document
    | DocumentFragment
    | DocumentType
    | ProcessingInstruction
    | EntityReference
    | OpaqueNode
)

ParentNode = Element | Document | DocumentFragment


__all__ = [
    "Attribute",
    "CDataSection",
    "Comment",
    "Document",
    "DocumentFragment",
    "DocumentType",
    "Element",
    "EntityReference",
    "Node",
    "NodeType",
    "OpaqueNode",
    "ParentNode",
    "ProcessingInstruction",
    "Text",
    "XHTML_NAMESPACE",
]
