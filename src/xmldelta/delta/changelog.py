"""Append-only log of the edits that turn one XML tree into another.

A diff driver walks both trees, decides which nodes correspond, and reports
each edit to a ``ChangeLog`` in discovery order. The log resolves node
addresses at call time through a ``NodeLocator`` and stores plain records, so
it can be encoded long after the trees have been modified.
"""

from typing import Any, Iterable, Iterator, List, Optional, Tuple

from xmldelta.shared import DeltaStatistics, get_logger
from xmldelta.tree import DOMLocator, Node, NodeKind, NodeLocator

from .changes import (
    CHANGE_TYPES,
    Change,
    ChangeKind,
    Delete,
    InvalidChangeError,
    Insert,
    Move,
    PreconditionError,
    Update,
)


class ChangeLog:
    """Ordered record of insert, delete, move and update operations.

    Not safe for concurrent mutation; a log belongs to a single diff run.

    Example:
        >>> log = ChangeLog()
        >>> log.insert(element, "/node()[1]", 2, 1)
        >>> log.update(old_text, new_text)
        >>> [change.kind.value for change in log]
        ['insert', 'update']
    """

    def __init__(
        self,
        locator: Optional[NodeLocator] = None,
        changes: Optional[Iterable[Change]] = None,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize the change log.

        Args:
            locator: Resolves node paths and character positions,
                defaults to ``DOMLocator``
            changes: Records to seed the log with, in order
            correlation_id: Optional ID attached to log messages
        """
        self.locator: NodeLocator = locator if locator is not None else DOMLocator()
        self.correlation_id = correlation_id
        self.logger = get_logger(__name__, correlation_id, "changelog")
        self._changes: List[Change] = []

        for change in changes or ():
            if not isinstance(change, CHANGE_TYPES):
                raise InvalidChangeError(
                    f"Not a change record: {type(change).__name__}"
                )
            self._changes.append(change)

    @classmethod
    def from_changes(
        cls,
        changes: Iterable[Change],
        locator: Optional[NodeLocator] = None
    ) -> "ChangeLog":
        """Create a log holding existing records, e.g. ones kept from an earlier run."""
        return cls(locator=locator, changes=changes)

    def __len__(self) -> int:
        return len(self._changes)

    def __iter__(self) -> Iterator[Change]:
        return iter(tuple(self._changes))

    def __repr__(self) -> str:
        return f"ChangeLog({self.statistics().to_dict()!r})"

    def _append(self, change: Change) -> None:
        self._changes.append(change)
        self.logger.debug(
            f"Recorded {change.kind.value}",
            extra={"change": change, "position": len(self._changes)}
        )

    def insert(self, node: Node, parent: str, child_no: int, charpos: int) -> None:
        """Append an insert of node as child ``child_no`` of ``parent``.

        Pass ``charpos=1`` when the character position is irrelevant; it is
        then left out of the record. An element's attributes are inserted
        right after it, addressed at the element's new position.

        Args:
            node: Node being inserted
            parent: XPath of the node that becomes its parent
            child_no: Child number node takes among the parent's children
            charpos: Character position to insert at
        """
        kind = node.kind
        self._append(Insert(
            parent=parent,
            node_kind=kind,
            node_name=node.name if kind.is_named else None,
            value=node.value,
            child_no=None if kind is NodeKind.ATTRIBUTE else child_no,
            charpos=charpos if charpos > 1 else None,
        ))

        if kind is NodeKind.ELEMENT and node.attributes is not None:
            element_path = f"{parent}/node()[{child_no}]"
            for attribute in node.attributes:
                self.insert(attribute, element_path, 0, 1)

    def delete_node(self, node: Node) -> None:
        """Append a delete of node.

        Text deletions record the character offset and length of the text,
        unless the offset cannot be resolved.
        """
        charpos = length = None
        if node.kind is NodeKind.TEXT:
            position = self.locator.resolve_char_position(node)
            if position >= 1:
                charpos, length = position, node.length

        self._append(Delete(
            node=self.locator.get_xpath(node),
            charpos=charpos,
            length=length,
        ))

    def move(self, node: Node, parent: str, child_no: int, new_charpos: int) -> None:
        """Append a move of node under ``parent``.

        Args:
            node: Node being moved
            parent: XPath of the new parent
            child_no: Child number node takes among the new parent's children
            new_charpos: Character position at the destination, >= 1

        Raises:
            PreconditionError: If new_charpos is below 1
        """
        if new_charpos < 1:
            self.logger.warning(
                "Rejected move with invalid character position",
                extra={"new_charpos": new_charpos, "parent": parent}
            )
            raise PreconditionError(
                f"New character position must be >= 1, got {new_charpos}"
            )

        self._append(Move(
            node=self.locator.get_xpath(node),
            old_charpos=self.locator.resolve_char_position(node),
            new_charpos=new_charpos,
            parent=parent,
            child_no=child_no,
            length=node.length if node.kind is NodeKind.TEXT else None,
        ))

    def update(self, old: Node, new: Node) -> None:
        """Append an update turning ``old`` into ``new``.

        Elements are renamed to ``new``'s name and their attributes are
        reconciled first; any other node takes ``new``'s value.
        """
        path = self.locator.get_xpath(old)
        if old.kind is NodeKind.ELEMENT:
            self._update_attributes(old, new, path)
            self._append(Update(node=path, node_name=new.name))
        else:
            self._append(Update(node=path, node_value=new.value))

    def _update_attributes(self, old: Node, new: Node, path: str) -> None:
        """Record the edits making old's attributes equal to new's."""
        old_attrs = old.attributes
        new_attrs = new.attributes

        for old_attr in old_attrs or ():
            new_attr = new_attrs.get(old_attr.name) if new_attrs is not None else None
            if new_attr is None:
                self.delete_node(old_attr)
            elif old_attr.value != new_attr.value:
                self.update(old_attr, new_attr)

        for new_attr in new_attrs or ():
            if old_attrs is None or old_attrs.get(new_attr.name) is None:
                self.insert(new_attr, path, 0, 1)

    def get_changes(self) -> Tuple[Change, ...]:
        """Get all records in log order."""
        return tuple(self._changes)

    def _get_changes_by_kind(self, kind: ChangeKind) -> List[Any]:
        return [change for change in self._changes if change.kind is kind]

    def get_inserted(self) -> List[Insert]:
        """Get insert records in log order."""
        return self._get_changes_by_kind(ChangeKind.INSERT)

    def get_deleted(self) -> List[Delete]:
        """Get delete records in log order."""
        return self._get_changes_by_kind(ChangeKind.DELETE)

    def get_moved(self) -> List[Move]:
        """Get move records in log order."""
        return self._get_changes_by_kind(ChangeKind.MOVE)

    def get_updated(self) -> List[Update]:
        """Get update records in log order."""
        return self._get_changes_by_kind(ChangeKind.UPDATE)

    def statistics(self) -> DeltaStatistics:
        """Count the records of each kind."""
        return DeltaStatistics(
            inserted=len(self.get_inserted()),
            deleted=len(self.get_deleted()),
            moved=len(self.get_moved()),
            updated=len(self.get_updated()),
        )
