# src/pathing/result.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from spec.types import Position

# Reasons attached to an empty path.
REASON_ALREADY_AT_TARGET = "already_at_target"
REASON_UNREACHABLE = "unreachable"
REASON_EXPANSION_LIMIT = "expansion_limit"


@dataclass(frozen=True)
class SearchResult:
    """Structured result for one search call.

    `path` follows the find() contract (origin excluded, target last).
    `reason` is None on success and explains an empty path otherwise, so
    callers can tell "already there" apart from "no route".
    """

    path: List[Position] = field(default_factory=list)
    reached: bool = False
    expanded: int = 0           # nodes closed
    discovered: int = 0         # nodes allocated in the node table
    cost: Optional[float] = None
    reason: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.reached and self.reason is None

    def to_dict(self) -> dict:
        return {
            "path": [p.as_tuple() for p in self.path],
            "reached": self.reached,
            "expanded": self.expanded,
            "discovered": self.discovered,
            "cost": self.cost,
            "reason": self.reason,
        }
