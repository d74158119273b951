# A* pathfinding over a traversability oracle
# src/pathing/astar.py
"""
A* search on an unbounded 8-connected grid.

- Step cost between adjacent cells is the heuristic's estimate for that step.
- Queue priority is accumulated cost plus the estimate to the target.
- Open nodes live in an OpenSet (membership set + lazily cleaned heap).
- Closed nodes are final and never reopened, which keeps parent chains
  acyclic and bounds total work even with a poor heuristic.

This module holds no state between calls.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, List, Optional

from monitoring.bus import EventBus
from spec.pathfinding import Heuristic, TraversabilityOracle
from spec.types import Position
from .base import PathfindingStrategy
from .node import Node, NodeTable
from .open_set import OpenSet
from .result import (
    REASON_ALREADY_AT_TARGET,
    REASON_EXPANSION_LIMIT,
    REASON_UNREACHABLE,
    SearchResult,
)


class AStarPathfinder(PathfindingStrategy):
    """
    PathfindingAlgorithm that uses A* to find a cheapest route.

    With an admissible, consistent heuristic the returned path has minimal
    total step cost. An unreachable target is only detected after the whole
    reachable region has been expanded; pass `max_expansions` to cap that.
    """

    name = "astar"

    def __init__(
        self,
        oracle: TraversabilityOracle,
        heuristic: Heuristic,
        *,
        max_expansions: Optional[int] = None,
        bus: Optional[EventBus] = None,
    ) -> None:
        super().__init__(oracle, bus=bus)
        if max_expansions is not None and max_expansions < 0:
            raise ValueError(f"max_expansions must be >= 0, got {max_expansions}")
        self._heuristic = heuristic
        self._max_expansions = max_expansions

    @property
    def heuristic(self) -> Heuristic:
        return self._heuristic

    @property
    def max_expansions(self) -> Optional[int]:
        return self._max_expansions

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def _search(self, origin: Position, target: Position) -> SearchResult:
        nodes = NodeTable()
        start = nodes.get_or_create(origin)
        start.cost = 0.0
        end = nodes.get_or_create(target)

        open_set = OpenSet()
        open_set.push(start, self._heuristic.estimate(origin, target))

        expanded = 0
        reached = False
        limited = False

        while open_set:
            active = open_set.pop_cheapest(nodes)
            if active is None:
                break

            if active.position == target:
                reached = True
                break

            if self._max_expansions is not None and expanded >= self._max_expansions:
                limited = True
                break

            open_set.discard(active)
            active.close()
            expanded += 1

            for position in self.neighbours(active.position):
                if self.traversable(position):
                    self._compare(active, nodes.get_or_create(position), open_set, target)

        if reached:
            path = reconstruct_path(nodes, origin, end)
            reason = None if path else REASON_ALREADY_AT_TARGET
            return SearchResult(
                path=path,
                reached=True,
                expanded=expanded,
                discovered=len(nodes),
                cost=end.cost,
                reason=reason,
            )

        return SearchResult(
            path=[],
            reached=False,
            expanded=expanded,
            discovered=len(nodes),
            cost=None,
            reason=REASON_EXPANSION_LIMIT if limited else REASON_UNREACHABLE,
        )

    def _compare(
        self,
        active: Node,
        other: Node,
        open_set: OpenSet,
        target: Position,
    ) -> None:
        """Relax `other` through `active` if that is a cheaper route."""
        if other.is_closed:
            return

        assert active.cost is not None
        cost = active.cost + self._heuristic.estimate(active.position, other.position)
        if other.is_costed and cost >= other.cost:  # type: ignore[operator]
            return

        other.relax(cost, active.position)
        open_set.push(other, cost + self._heuristic.estimate(other.position, target))


def reconstruct_path(nodes: NodeTable, origin: Position, end: Node) -> List[Position]:
    """
    Walk parent links from `end` back to `origin`.

    The origin is excluded and the end position is last. A node without a
    parent (never reached, or the origin itself) yields an empty path.
    """
    if not end.has_parent:
        return []

    shortest: Deque[Position] = deque()
    position = end.position
    while position != origin:
        shortest.appendleft(position)
        parent = nodes[position].parent
        # Every relaxed node has a parent, and only the origin lacks one.
        assert parent is not None
        position = parent
    return list(shortest)
