# concrete distance heuristics
# src/pathing/heuristics.py
"""
Distance heuristics for 8-connected grids.

Each heuristic is a metric, so it is consistent with respect to step costs
measured by the same heuristic (which is how the A* engine prices a step).
`unit` scales every estimate.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Dict

from spec.pathfinding import Heuristic
from spec.types import Position


@dataclass(frozen=True)
class ManhattanHeuristic:
    """Sum of axis deltas. A diagonal step costs 2 units."""

    unit: float = 1.0

    def estimate(self, a: Position, b: Position) -> float:
        return self.unit * (abs(a.x - b.x) + abs(a.y - b.y))


@dataclass(frozen=True)
class ChebyshevHeuristic:
    """Largest axis delta. Every Moore step costs 1 unit."""

    unit: float = 1.0

    def estimate(self, a: Position, b: Position) -> float:
        return self.unit * max(abs(a.x - b.x), abs(a.y - b.y))


@dataclass(frozen=True)
class EuclideanHeuristic:
    """Straight-line distance."""

    unit: float = 1.0

    def estimate(self, a: Position, b: Position) -> float:
        return self.unit * math.hypot(a.x - b.x, a.y - b.y)


@dataclass(frozen=True)
class OctileHeuristic:
    """Orthogonal steps cost 1, diagonal steps sqrt(2)."""

    unit: float = 1.0

    def estimate(self, a: Position, b: Position) -> float:
        dx, dy = abs(a.x - b.x), abs(a.y - b.y)
        return self.unit * ((max(dx, dy) - min(dx, dy)) + math.sqrt(2) * min(dx, dy))


HEURISTICS: Dict[str, Callable[..., Heuristic]] = {
    "manhattan": ManhattanHeuristic,
    "chebyshev": ChebyshevHeuristic,
    "euclidean": EuclideanHeuristic,
    "octile": OctileHeuristic,
}


def heuristic_by_name(name: str, unit: float = 1.0) -> Heuristic:
    """Build a registered heuristic. Raises KeyError for unknown names."""
    try:
        factory = HEURISTICS[name.lower()]
    except KeyError:
        raise KeyError(
            f"Unknown heuristic {name!r}; expected one of {sorted(HEURISTICS)}"
        ) from None
    if unit <= 0:
        raise ValueError(f"Heuristic unit must be positive, got {unit}")
    return factory(unit=unit)
