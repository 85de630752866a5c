"""Domain Types - rich types that replace bare strings across the codebase.

Invariants:
    - All valid workflow states encoded as RecordStatus - no raw string matching
    - Collection values double as MongoDB collection names and JSON file stems

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
    - NewType for RecordId: zero runtime cost, ids stay plain strings on the wire
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

RecordId = NewType("RecordId", str)


# ─── Enums ───────────────────────────────────────────────────────

class RecordStatus(str, Enum):
    """Moderation workflow stage shared by reports and coordinates."""
    PENDING = "pending"
    REVIEWED = "reviewed"
    RESOLVED = "resolved"


class Collection(str, Enum):
    """Named record collections."""
    REPORTS = "reports"
    COORDINATES = "coordinates"

    @property
    def label(self) -> str:
        """Singular, human-readable resource name used in messages."""
        return _LABELS[self]


_LABELS = {
    Collection.REPORTS: "Report",
    Collection.COORDINATES: "Coordinate",
}
