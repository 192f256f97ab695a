"""Node abstraction consumed by the change log.

The change log never touches a concrete document implementation. It only
needs the few node capabilities declared here, so any tree that provides
them (the bundled DOM model, or an adapter over another library) can be
diffed.
"""

from enum import Enum
from typing import Iterator, Optional, Protocol, runtime_checkable


class NodeKind(Enum):
    """Closed set of node kinds, valued by their DOM node-type number."""

    ELEMENT = 1
    ATTRIBUTE = 2
    TEXT = 3
    PROCESSING_INSTRUCTION = 7
    COMMENT = 8
    OTHER = 0

    @property
    def is_named(self) -> bool:
        """Check if nodes of this kind carry a meaningful name."""
        return self in (
            NodeKind.ELEMENT,
            NodeKind.ATTRIBUTE,
            NodeKind.PROCESSING_INSTRUCTION,
        )

    @classmethod
    def from_dom_type(cls, dom_type: int) -> "NodeKind":
        """Map a DOM node-type number to a kind, unknown numbers to OTHER."""
        for kind in cls:
            if kind.value == dom_type:
                return kind
        return cls.OTHER


@runtime_checkable
class AttributeCollection(Protocol):
    """Ordered attribute nodes of an element, queryable by name."""

    def __len__(self) -> int:
        ...

    def __iter__(self) -> Iterator["Node"]:
        ...

    def get(self, name: str) -> Optional["Node"]:
        ...


@runtime_checkable
class Node(Protocol):
    """Minimal node shape: kind, name, value, text length and attributes."""

    @property
    def kind(self) -> NodeKind:
        ...

    @property
    def name(self) -> Optional[str]:
        ...

    @property
    def value(self) -> Optional[str]:
        ...

    @property
    def length(self) -> int:
        ...

    @property
    def attributes(self) -> Optional[AttributeCollection]:
        ...


@runtime_checkable
class NodeLocator(Protocol):
    """Addresses nodes inside their owning document."""

    def get_xpath(self, node: Node) -> str:
        """Return a stable XPath address for node."""
        ...

    def resolve_char_position(self, node: Node) -> int:
        """Return the 1-based character offset of node, or < 1 if unresolvable."""
        ...
