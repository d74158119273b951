# Pathfinding capability interfaces
# src/spec/pathfinding.py

from __future__ import annotations

from typing import List, Protocol

from .types import Position


class Heuristic(Protocol):
    """Estimates the cost of travelling between two positions.

    Implementations must return a non-negative number. For A* to return
    optimal paths the estimate must be admissible (never overestimates) and
    consistent (respects the triangle inequality between adjacent cells).
    Nothing checks this at runtime.
    """

    def estimate(self, a: Position, b: Position) -> float:
        ...


class TraversabilityOracle(Protocol):
    """Answers whether a grid cell may be entered.

    Queried once per candidate neighbour per expansion; expected to be
    side-effect free for the duration of a search.
    """

    def traversable(self, position: Position) -> bool:
        ...


class PathfindingAlgorithm(Protocol):
    """Abstract route finder between two grid positions.

    Contract for `find`:
      - the result never contains `origin`
      - when a route exists, the last element is `target`
      - empty when no route exists, or when origin == target
      - consecutive positions (origin -> first included) differ by at most
        one unit in each coordinate

    A* is the reference strategy; breadth-first and others can be swapped
    in without callers noticing.
    """

    def find(self, origin: Position, target: Position) -> List[Position]:
        ...
