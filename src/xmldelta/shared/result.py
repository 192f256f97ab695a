"""Summary objects describing the contents of a change log."""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class DeltaStatistics:
    """Number of recorded changes per kind."""

    inserted: int = 0
    deleted: int = 0
    moved: int = 0
    updated: int = 0

    def __post_init__(self) -> None:
        """Validate counts."""
        for name in ("inserted", "deleted", "moved", "updated"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0")

    @property
    def total(self) -> int:
        """Total number of recorded changes."""
        return self.inserted + self.deleted + self.moved + self.updated

    @property
    def is_empty(self) -> bool:
        """Check if no change was recorded, i.e. both trees are equal."""
        return self.total == 0

    def to_dict(self) -> Dict[str, int]:
        """Convert statistics to dictionary representation."""
        return {
            "inserted": self.inserted,
            "deleted": self.deleted,
            "moved": self.moved,
            "updated": self.updated,
            "total": self.total,
        }
