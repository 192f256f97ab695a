"""Change recording and DUL encoding.

Key Components:
    ChangeLog: Append-only log of insert, delete, move and update records
    Insert, Delete, Move, Update: Immutable change records
    DULEncoder: Converts a change log into a DUL document
    encode, to_dul: Functional shortcuts around DULEncoder
"""

from .changelog import ChangeLog
from .changes import (
    Change,
    ChangeKind,
    Delete,
    DeltaError,
    Insert,
    InvalidChangeError,
    Move,
    PreconditionError,
    Update,
)
from .dul import DULEncoder, encode, to_dul

__all__ = [
    "ChangeLog",
    "Change",
    "ChangeKind",
    "Delete",
    "DeltaError",
    "Insert",
    "InvalidChangeError",
    "Move",
    "PreconditionError",
    "Update",
    "DULEncoder",
    "encode",
    "to_dul",
]
