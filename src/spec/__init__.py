# src/spec/__init__.py

from __future__ import annotations

"""
Public interface surface for the pathfinding core.

Re-exports the shared value types and the capability protocols that the
search strategies in `pathing` implement or consume. Concrete strategies
live in src/pathing/.
"""

from .types import Position
from .pathfinding import Heuristic, PathfindingAlgorithm, TraversabilityOracle

__all__ = [
    "Position",
    "Heuristic",
    "PathfindingAlgorithm",
    "TraversabilityOracle",
]
