"""DOM-style node model for trees being diffed.

Unlike lxml, where character data hangs off ``text`` and ``tail``, this model
keeps text as first-class child nodes. Adjacent text siblings are allowed so
that split and merged text nodes can be addressed by character position.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Union

from lxml import etree

from .nodes import NodeKind


@dataclass(eq=False)
class Attribute:
    """Attribute node owned by an element."""

    name: str
    value: str = ""
    owner: Optional["Element"] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        """Validate attribute values."""
        if not self.name:
            raise ValueError("Attribute name cannot be empty")

    @property
    def kind(self) -> NodeKind:
        return NodeKind.ATTRIBUTE

    @property
    def length(self) -> int:
        return len(self.value)

    @property
    def attributes(self) -> None:
        return None


class AttributeMap:
    """Attributes of an element in document order, with lookup by name."""

    def __init__(self, owner: Optional["Element"] = None) -> None:
        self._owner = owner
        self._items: Dict[str, Attribute] = {}

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Attribute]:
        return iter(list(self._items.values()))

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def __repr__(self) -> str:
        return f"AttributeMap({self.to_dict()!r})"

    def get(self, name: str) -> Optional[Attribute]:
        """Get the attribute node with the given name."""
        return self._items.get(name)

    def item(self, index: int) -> Attribute:
        """Get the attribute node at a position in document order."""
        try:
            return list(self._items.values())[index]
        except IndexError:
            raise IndexError("Attribute index out of range") from None

    def set(self, name: str, value: str) -> Attribute:
        """Set an attribute value, keeping the position of an existing one."""
        if not isinstance(name, str) or not isinstance(value, str):
            raise TypeError("Attribute name and value must be strings")

        existing = self._items.get(name)
        if existing is not None:
            existing.value = value
            return existing

        attribute = Attribute(name, value, owner=self._owner)
        self._items[name] = attribute
        return attribute

    def remove(self, name: str) -> bool:
        """Remove an attribute and detach it from the element."""
        attribute = self._items.pop(name, None)
        if attribute is None:
            return False
        attribute.owner = None
        return True

    def to_dict(self) -> Dict[str, str]:
        return {name: attr.value for name, attr in self._items.items()}


@dataclass(eq=False)
class Text:
    """Character data node."""

    value: str = ""
    parent: Optional["ParentNode"] = field(default=None, repr=False)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.TEXT

    @property
    def name(self) -> str:
        return "#text"

    @property
    def length(self) -> int:
        return len(self.value)

    @property
    def attributes(self) -> None:
        return None


@dataclass(eq=False)
class Comment:
    """Comment node."""

    value: str = ""
    parent: Optional["ParentNode"] = field(default=None, repr=False)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.COMMENT

    @property
    def name(self) -> str:
        return "#comment"

    @property
    def length(self) -> int:
        return len(self.value)

    @property
    def attributes(self) -> None:
        return None


@dataclass(eq=False)
class ProcessingInstruction:
    """Processing instruction node; the target is its name, the data its value."""

    target: str
    data: str = ""
    parent: Optional["ParentNode"] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if not self.target:
            raise ValueError("Processing instruction target cannot be empty")

    @property
    def kind(self) -> NodeKind:
        return NodeKind.PROCESSING_INSTRUCTION

    @property
    def name(self) -> str:
        return self.target

    @property
    def value(self) -> str:
        return self.data

    @property
    def length(self) -> int:
        return len(self.data)

    @property
    def attributes(self) -> None:
        return None


ChildNode = Union["Element", Text, Comment, ProcessingInstruction]


class _Container:
    """Child list management shared by elements and documents."""

    children: List[ChildNode]

    def _adopt(self, child: Any) -> None:
        if not isinstance(child, (Element, Text, Comment, ProcessingInstruction)):
            raise TypeError("Child must be an Element, Text, Comment or "
                            "ProcessingInstruction instance")
        if child.parent is not None:
            child.parent.remove(child)
        child.parent = self

    def append(self, child: ChildNode) -> ChildNode:
        """Append a child node and establish the parent relationship."""
        self._adopt(child)
        self.children.append(child)
        return child

    def insert(self, index: int, child: ChildNode) -> ChildNode:
        """Insert a child node at a specific index."""
        if not (0 <= index <= len(self.children)):
            raise IndexError("Child index out of range")
        self._adopt(child)
        self.children.insert(index, child)
        return child

    def remove(self, child: ChildNode) -> bool:
        """Remove a child node and clear the parent relationship."""
        for index, existing in enumerate(self.children):
            if existing is child:
                del self.children[index]
                child.parent = None
                return True
        return False

    def index(self, child: ChildNode) -> int:
        """Get the 0-based position of a child node."""
        for index, existing in enumerate(self.children):
            if existing is child:
                return index
        raise ValueError("Node is not a child of this parent")


@dataclass(eq=False)
class Element(_Container):
    """Element node with ordered attributes and child nodes."""

    tag: str
    attributes: AttributeMap = field(default_factory=AttributeMap)
    children: List[ChildNode] = field(default_factory=list)
    parent: Optional["ParentNode"] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        """Validate the tag and bind attributes and children to this element."""
        if not self.tag:
            raise ValueError("Element tag cannot be empty")

        initial = self.attributes
        self.attributes = AttributeMap(owner=self)
        if isinstance(initial, AttributeMap):
            initial = initial.to_dict()
        for name, value in dict(initial).items():
            self.attributes.set(name, value)

        children, self.children = list(self.children), []
        for child in children:
            self.append(child)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.ELEMENT

    @property
    def name(self) -> str:
        return self.tag

    @property
    def value(self) -> None:
        return None

    @property
    def length(self) -> int:
        return 0

    @property
    def text(self) -> str:
        """Concatenated character data of all descendant text nodes."""
        parts = []
        for child in self.children:
            if isinstance(child, Text):
                parts.append(child.value)
            elif isinstance(child, Element):
                parts.append(child.text)
        return "".join(parts)

    def get_attribute(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get attribute value with optional default."""
        attribute = self.attributes.get(name)
        return attribute.value if attribute is not None else default

    def set_attribute(self, name: str, value: str) -> Attribute:
        """Set attribute value."""
        return self.attributes.set(name, value)

    def iter(self) -> Iterator["Element"]:
        """Iterate over this element and all descendant elements in document order."""
        yield self
        for child in self.children:
            if isinstance(child, Element):
                yield from child.iter()


@dataclass(eq=False)
class Document(_Container):
    """Document node holding the document element and top-level siblings."""

    children: List[ChildNode] = field(default_factory=list)

    def __post_init__(self) -> None:
        children, self.children = list(self.children), []
        for child in children:
            self.append(child)

    @property
    def root(self) -> Optional[Element]:
        """The document element, if any."""
        for child in self.children:
            if isinstance(child, Element):
                return child
        return None


ParentNode = Union[Element, Document]


_XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"


def _qualified_name(
    name: str, nsmap: Dict[Optional[str], str], is_attribute: bool = False
) -> str:
    """Render a Clark-notation name with the prefix declared for its namespace.

    Elements in the default namespace keep their local name. Any other name
    whose namespace has no declared prefix stays in Clark notation so that it
    cannot collide with an unqualified name.
    """
    qname = etree.QName(name)
    if qname.namespace is None:
        return qname.localname
    if qname.namespace == _XML_NAMESPACE:
        return f"xml:{qname.localname}"
    for prefix, uri in nsmap.items():
        if uri == qname.namespace and prefix:
            return f"{prefix}:{qname.localname}"
    if not is_attribute and nsmap.get(None) == qname.namespace:
        return qname.localname
    return qname.text


def _convert_lxml_node(node: Any, strip_whitespace: bool) -> Optional[ChildNode]:
    if isinstance(node, etree._Comment):
        return Comment(node.text or "")
    if isinstance(node, etree._ProcessingInstruction):
        return ProcessingInstruction(node.target, node.text or "")
    if isinstance(node, etree._Entity):
        return Text(node.text or "")
    if not isinstance(node.tag, str):
        return None

    element = Element(_qualified_name(node.tag, node.nsmap))
    for name, value in node.attrib.items():
        element.set_attribute(_qualified_name(name, node.nsmap, is_attribute=True), value)

    def add_text(data: Optional[str]) -> None:
        if data and not (strip_whitespace and not data.strip()):
            element.append(Text(data))

    add_text(node.text)
    for child in node:
        converted = _convert_lxml_node(child, strip_whitespace)
        if converted is not None:
            element.append(converted)
        add_text(child.tail)

    return element


def from_lxml(source: Any, strip_whitespace: bool = False) -> Document:
    """Convert an lxml element or element tree into a DOM document.

    Top-level comments and processing instructions around the root element
    are kept as document children.

    Args:
        source: ``lxml.etree._Element`` or ``lxml.etree._ElementTree``
        strip_whitespace: Drop whitespace-only text nodes

    Returns:
        Document whose children mirror the lxml tree
    """
    root = source.getroot() if hasattr(source, "getroot") else source
    if root is None:
        raise ValueError("Cannot convert an empty element tree")

    document = Document()
    top_level = list(reversed(list(root.itersiblings(preceding=True))))
    top_level.append(root)
    top_level.extend(root.itersiblings())

    for node in top_level:
        converted = _convert_lxml_node(node, strip_whitespace)
        if converted is not None:
            document.append(converted)

    return document
