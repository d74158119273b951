"""
Grid pathfinding engine.

Provides:
- AStarPathfinder: reference A* strategy (heuristic-guided, optimal)
- BreadthFirstPathfinder: fewest-steps FIFO strategy
- GridMap / PredicateOracle: traversability oracles
- Heuristics: manhattan, chebyshev, euclidean, octile
- Config: YAML-backed strategy selection
"""

from __future__ import annotations

from .astar import AStarPathfinder, reconstruct_path
from .base import MOORE_OFFSETS, PathfindingStrategy
from .breadth_first import BreadthFirstPathfinder
from .config import PathfindingConfig, build_pathfinder, load_config
from .grid import GridMap, PredicateOracle
from .heuristics import (
    HEURISTICS,
    ChebyshevHeuristic,
    EuclideanHeuristic,
    ManhattanHeuristic,
    OctileHeuristic,
    heuristic_by_name,
)
from .node import Node, NodeStatus, NodeTable
from .open_set import OpenSet
from .result import SearchResult

__all__ = [
    "AStarPathfinder",
    "BreadthFirstPathfinder",
    "PathfindingStrategy",
    "MOORE_OFFSETS",
    "reconstruct_path",
    "PathfindingConfig",
    "build_pathfinder",
    "load_config",
    "GridMap",
    "PredicateOracle",
    "HEURISTICS",
    "ChebyshevHeuristic",
    "EuclideanHeuristic",
    "ManhattanHeuristic",
    "OctileHeuristic",
    "heuristic_by_name",
    "Node",
    "NodeStatus",
    "NodeTable",
    "OpenSet",
    "SearchResult",
]
