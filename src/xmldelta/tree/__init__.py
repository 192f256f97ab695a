"""Node model consumed by the change log.

Key Components:
    NodeKind: Closed enumeration of node kinds with DOM node-type numbers
    Node, AttributeCollection, NodeLocator: Protocols the change log relies on
    Element, Text, Attribute, Comment, ProcessingInstruction, Document:
        Default DOM-style node model
    from_lxml: Conversion of lxml trees into the DOM model
    DOMLocator: XPath and character-position resolution for DOM nodes
"""

from .dom import (
    Attribute,
    AttributeMap,
    Comment,
    Document,
    Element,
    ProcessingInstruction,
    Text,
    from_lxml,
)
from .locator import DOMLocator, xpath_child_number
from .nodes import AttributeCollection, Node, NodeKind, NodeLocator

__all__ = [
    "Attribute",
    "AttributeMap",
    "Comment",
    "Document",
    "Element",
    "ProcessingInstruction",
    "Text",
    "from_lxml",
    "DOMLocator",
    "xpath_child_number",
    "AttributeCollection",
    "Node",
    "NodeKind",
    "NodeLocator",
]
