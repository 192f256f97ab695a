"""XML delta recording and DUL encoding.

Records the edit operations that turn one XML tree into another and writes
them out as a DUL (Diff Update Language) document.

Progressive API Disclosure:
- Level 1: ChangeLog plus to_dul() with the default node model
- Level 2: DeltaConfig presets and DULEncoder for legacy-compatible output
- Level 3: Custom NodeLocator implementations for other document models
"""

__version__ = "0.1.0"
__author__ = "xmldelta Team"

from .delta import (
    ChangeKind,
    ChangeLog,
    Delete,
    DeltaError,
    DULEncoder,
    Insert,
    InvalidChangeError,
    Move,
    PreconditionError,
    Update,
    encode,
    to_dul,
)
from .shared.config import DeltaConfig, EmissionPolicy
from .shared.result import DeltaStatistics
from .tree import DOMLocator, NodeKind, from_lxml

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Recording and encoding
    "ChangeLog",
    "to_dul",
    "encode",

    # Change records
    "ChangeKind",
    "Insert",
    "Delete",
    "Move",
    "Update",
    "DeltaStatistics",

    # Level 2: Configuration
    "DeltaConfig",
    "EmissionPolicy",
    "DULEncoder",

    # Level 3: Node model
    "NodeKind",
    "DOMLocator",
    "from_lxml",

    # Errors
    "DeltaError",
    "PreconditionError",
    "InvalidChangeError",
]
