"""Change records accumulated by the change log.

Each record is an immutable snapshot of one edit, addressed with paths in the
original tree's coordinate space at the time it was recorded. Optional fields
are ``None`` when absent.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from xmldelta.tree import NodeKind


class ChangeKind(Enum):
    """Discriminant of a change record; values are the DUL element names."""

    INSERT = "insert"
    DELETE = "delete"
    MOVE = "move"
    UPDATE = "update"


class DeltaError(Exception):
    """Base exception for change log and DUL errors."""


class PreconditionError(DeltaError, ValueError):
    """Raised when an operation is called with arguments it cannot record."""


class InvalidChangeError(DeltaError, TypeError):
    """Raised when an object outside the closed set of change records is encoded."""


def _check_position(name: str, value: Optional[int]) -> None:
    if value is not None and value < 1:
        raise PreconditionError(f"{name} must be >= 1, got {value}")


@dataclass(frozen=True)
class Insert:
    """A node inserted as child ``child_no`` of ``parent``."""

    parent: str
    node_kind: NodeKind
    node_name: Optional[str] = None
    value: Optional[str] = None
    child_no: Optional[int] = None
    charpos: Optional[int] = None

    def __post_init__(self) -> None:
        if self.charpos is not None and self.charpos <= 1:
            raise PreconditionError(
                f"charpos is only recorded when > 1, got {self.charpos}"
            )

    @property
    def kind(self) -> ChangeKind:
        return ChangeKind.INSERT


@dataclass(frozen=True)
class Delete:
    """A node removed from the tree; text deletions carry offset and length."""

    node: str
    charpos: Optional[int] = None
    length: Optional[int] = None

    def __post_init__(self) -> None:
        _check_position("charpos", self.charpos)

    @property
    def kind(self) -> ChangeKind:
        return ChangeKind.DELETE


@dataclass(frozen=True)
class Move:
    """A node relocated under ``parent``; text moves carry their length."""

    node: str
    old_charpos: int
    new_charpos: int
    parent: str
    child_no: int
    length: Optional[int] = None

    def __post_init__(self) -> None:
        _check_position("new_charpos", self.new_charpos)

    @property
    def kind(self) -> ChangeKind:
        return ChangeKind.MOVE


@dataclass(frozen=True)
class Update:
    """A renamed element (``node_name``) or a changed value (``node_value``)."""

    node: str
    node_name: Optional[str] = None
    node_value: Optional[str] = None

    @property
    def kind(self) -> ChangeKind:
        return ChangeKind.UPDATE


Change = Union[Insert, Delete, Move, Update]

CHANGE_TYPES = (Insert, Delete, Move, Update)
