# per-search node bookkeeping
# src/pathing/node.py
"""
Node records and the per-search node table.

A Node wraps a Position with the best known accumulated cost, a parent
link and an open/closed status. Parents are stored as positions, i.e. keys
into the NodeTable, not as object references; the table is the arena.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterator, Optional

from spec.types import Position


class NodeStatus(Enum):
    UNTOUCHED = "untouched"   # allocated, never reached
    OPEN = "open"             # candidate for expansion
    CLOSED = "closed"         # finalized, never reconsidered


class Node:
    """Bookkeeping record for one position during one search."""

    __slots__ = ("position", "cost", "parent", "status")

    def __init__(self, position: Position) -> None:
        self.position = position
        self.cost: Optional[float] = None
        self.parent: Optional[Position] = None
        self.status = NodeStatus.UNTOUCHED

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------

    @property
    def is_open(self) -> bool:
        return self.status is NodeStatus.OPEN

    @property
    def is_closed(self) -> bool:
        return self.status is NodeStatus.CLOSED

    @property
    def is_costed(self) -> bool:
        return self.cost is not None

    @property
    def has_parent(self) -> bool:
        return self.parent is not None

    def open(self) -> None:
        if self.is_closed:
            raise RuntimeError(f"Closed node at {self.position} cannot be reopened")
        self.status = NodeStatus.OPEN

    def close(self) -> None:
        self.status = NodeStatus.CLOSED

    # ------------------------------------------------------------------
    # Relaxation
    # ------------------------------------------------------------------

    def relax(self, cost: float, parent: Position) -> None:
        """
        Record a cheaper route to this node via `parent`.

        Cost and parent always change together; the cost never increases
        and a closed node is final.
        """
        if self.is_closed:
            raise RuntimeError(f"Closed node at {self.position} cannot be relaxed")
        if self.cost is not None and cost >= self.cost:
            raise ValueError(
                f"Relaxation of {self.position} must lower its cost "
                f"({cost} >= {self.cost})"
            )
        self.cost = cost
        self.parent = parent

    def __repr__(self) -> str:
        return (
            f"Node(position={self.position!r}, cost={self.cost!r}, "
            f"parent={self.parent!r}, status={self.status.name})"
        )


class NodeTable:
    """
    Position -> Node arena for a single search.

    Guarantees exactly one Node per distinct position; nodes are created
    lazily on first reference and discarded with the table.
    """

    def __init__(self) -> None:
        self._nodes: Dict[Position, Node] = {}

    def get_or_create(self, position: Position) -> Node:
        node = self._nodes.get(position)
        if node is None:
            node = Node(position)
            self._nodes[position] = node
        return node

    def __getitem__(self, position: Position) -> Node:
        return self._nodes[position]

    def __contains__(self, position: object) -> bool:
        return position in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes.values())
