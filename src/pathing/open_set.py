# open set paired with a lazily-cleaned priority queue
# src/pathing/open_set.py
"""
Open set for best-first search.

Two structures over the same nodes:
- a membership set for O(1) "is open" checks and removal
- a binary heap for O(log n) cheapest-first extraction

The heap is never cleaned eagerly. Entries for nodes that were closed, or
whose cost has since been lowered (and re-pushed), stay in the heap and are
dropped when they surface in pop_cheapest().
"""

from __future__ import annotations

import heapq
import itertools
from typing import List, Optional, Set, Tuple

from spec.types import Position
from .node import Node, NodeTable

# (priority, insertion sequence, cost at push time, position)
HeapEntry = Tuple[float, int, float, Position]


class OpenSet:
    """Open-set membership paired with a lazy-deletion priority queue."""

    def __init__(self) -> None:
        self._members: Set[Position] = set()
        self._heap: List[HeapEntry] = []
        self._sequence = itertools.count()
        self.stale_discarded = 0

    def push(self, node: Node, priority: float) -> None:
        """
        Mark `node` open and queue it under `priority`.

        Re-pushing an already open node (after relaxation) leaves the older
        entry in the heap; it becomes stale because its cost no longer
        matches the node.
        """
        if node.cost is None:
            raise ValueError(f"Cannot queue uncosted node at {node.position}")
        node.open()
        self._members.add(node.position)
        heapq.heappush(
            self._heap,
            (priority, next(self._sequence), node.cost, node.position),
        )

    def discard(self, node: Node) -> None:
        """Drop `node` from membership. Its heap entries go stale."""
        self._members.discard(node.position)

    def pop_cheapest(self, nodes: NodeTable) -> Optional[Node]:
        """
        Return the open node with the smallest priority, or None.

        Ties resolve by insertion order. The returned node is still a member;
        the caller closes and discards it.
        """
        while self._heap:
            _, _, cost, position = heapq.heappop(self._heap)
            node = nodes[position]
            if node.is_open and node.cost == cost:
                return node
            self.stale_discarded += 1
        return None

    @property
    def queued(self) -> int:
        """Number of heap entries, stale ones included."""
        return len(self._heap)

    def __contains__(self, node: object) -> bool:
        return isinstance(node, Node) and node.position in self._members

    def __len__(self) -> int:
        return len(self._members)

    def __bool__(self) -> bool:
        return bool(self._members)
