"""XPath addressing and character positions for DOM nodes.

Paths use ``node()`` steps so that every node kind, text included, has an
address: ``/node()[1]/node()[3]`` or ``/node()[1]/@id``. XPath sees a run of
adjacent text siblings as a single text node, so all members of such a run
share one child number and are told apart by their character position.
"""

from typing import Any, List

from .dom import Attribute, Document
from .nodes import NodeKind


def _siblings(node: Any) -> List[Any]:
    parent = getattr(node, "parent", None)
    if parent is None:
        return [node]
    return parent.children


def xpath_child_number(node: Any) -> int:
    """Get the 1-based XPath position of node among its parent's children.

    A text node directly following another text node does not start a new
    position.
    """
    number = 0
    previous_was_text = False
    for sibling in _siblings(node):
        is_text = sibling.kind is NodeKind.TEXT
        if not (is_text and previous_was_text):
            number += 1
        if sibling is node:
            return number
        previous_was_text = is_text
    raise ValueError("Node is not a child of its parent")


class DOMLocator:
    """Node locator for trees built from ``xmldelta.tree.dom`` nodes.

    Detached nodes are addressed as the only child of an implicit document.
    """

    def get_xpath(self, node: Any) -> str:
        """Return the ``node()`` XPath of node."""
        if isinstance(node, Attribute):
            if node.owner is None:
                raise ValueError(f"Attribute '{node.name}' is not owned by an element")
            return f"{self.get_xpath(node.owner)}/@{node.name}"
        if isinstance(node, Document):
            return "/"

        steps = []
        current = node
        while True:
            steps.append(f"node()[{xpath_child_number(current)}]")
            parent = current.parent
            if parent is None or isinstance(parent, Document):
                break
            current = parent

        return "/" + "/".join(reversed(steps))

    def resolve_char_position(self, node: Any) -> int:
        """Return the 1-based offset of a text node within its text run.

        Non-text nodes always start at position 1. A detached text node has
        no text run and resolves to 0.
        """
        if node.kind is not NodeKind.TEXT:
            return 1
        if getattr(node, "parent", None) is None:
            return 0

        position = 1
        for sibling in node.parent.children:
            if sibling is node:
                return position
            if sibling.kind is NodeKind.TEXT:
                position += sibling.length
            else:
                position = 1
        return 0
