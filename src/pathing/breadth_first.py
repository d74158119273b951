# breadth-first alternative strategy
# src/pathing/breadth_first.py
"""
Breadth-first search over the Moore neighbourhood.

Every step costs 1, so the result has the fewest possible steps. Useful as
a heuristic-free baseline and as a drop-in PathfindingAlgorithm.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Dict, List, Optional

from monitoring.bus import EventBus
from spec.pathfinding import TraversabilityOracle
from spec.types import Position
from .base import PathfindingStrategy
from .result import (
    REASON_ALREADY_AT_TARGET,
    REASON_EXPANSION_LIMIT,
    REASON_UNREACHABLE,
    SearchResult,
)


class BreadthFirstPathfinder(PathfindingStrategy):
    """Uniform-cost FIFO search; same result contract as A*."""

    name = "breadth_first"

    def __init__(
        self,
        oracle: TraversabilityOracle,
        *,
        max_expansions: Optional[int] = None,
        bus: Optional[EventBus] = None,
    ) -> None:
        super().__init__(oracle, bus=bus)
        if max_expansions is not None and max_expansions < 0:
            raise ValueError(f"max_expansions must be >= 0, got {max_expansions}")
        self._max_expansions = max_expansions

    def _search(self, origin: Position, target: Position) -> SearchResult:
        if origin == target:
            return SearchResult(reached=True, discovered=1, cost=0.0, reason=REASON_ALREADY_AT_TARGET)

        came_from: Dict[Position, Optional[Position]] = {origin: None}
        frontier: Deque[Position] = deque([origin])
        expanded = 0

        while frontier:
            if self._max_expansions is not None and expanded >= self._max_expansions:
                return SearchResult(
                    expanded=expanded,
                    discovered=len(came_from),
                    reason=REASON_EXPANSION_LIMIT,
                )

            current = frontier.popleft()
            expanded += 1

            for nxt in self.neighbours(current):
                if nxt in came_from or not self.traversable(nxt):
                    continue
                came_from[nxt] = current
                if nxt == target:
                    path = _reconstruct_path(came_from, target)
                    return SearchResult(
                        path=path,
                        reached=True,
                        expanded=expanded,
                        discovered=len(came_from),
                        cost=float(len(path)),
                    )
                frontier.append(nxt)

        return SearchResult(
            expanded=expanded,
            discovered=len(came_from),
            reason=REASON_UNREACHABLE,
        )


def _reconstruct_path(
    came_from: Dict[Position, Optional[Position]],
    current: Position,
) -> List[Position]:
    """Path from the origin's successor up to `current`."""
    path: List[Position] = []
    while came_from[current] is not None:
        path.append(current)
        current = came_from[current]  # type: ignore[assignment]
    path.reverse()
    return path
