# shared glue for pathfinding strategies
# src/pathing/base.py
"""
Base class for search strategies.

Holds the traversability oracle, the Moore neighbourhood enumeration and
the logging/monitoring wrapper around a single search. Subclasses only
implement `_search`.
"""

from __future__ import annotations

import logging
import uuid
from typing import Iterator, List, Optional, Tuple

from monitoring.bus import EventBus
from monitoring.events import EventType
from monitoring.logger import log_event
from spec.pathfinding import TraversabilityOracle
from spec.types import Position
from .result import SearchResult

log = logging.getLogger(__name__)

# dx outer, dy inner; fixed order keeps searches deterministic.
MOORE_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy)
    for dx in (-1, 0, 1)
    for dy in (-1, 0, 1)
    if (dx, dy) != (0, 0)
)


class PathfindingStrategy:
    """
    Common base for PathfindingAlgorithm implementations.

    All per-search state lives inside `_search`; instances only hold
    configuration, so one instance can serve any number of calls, including
    from several threads if the oracle and heuristic allow it.
    """

    name = "strategy"

    def __init__(
        self,
        oracle: TraversabilityOracle,
        *,
        bus: Optional[EventBus] = None,
    ) -> None:
        self._oracle = oracle
        self._bus = bus

    @property
    def oracle(self) -> TraversabilityOracle:
        return self._oracle

    def traversable(self, position: Position) -> bool:
        return bool(self._oracle.traversable(position))

    @staticmethod
    def neighbours(position: Position) -> Iterator[Position]:
        """Yield the 8 Moore neighbours of `position`, unfiltered."""
        for dx, dy in MOORE_OFFSETS:
            yield position.translate(dx, dy)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def find(self, origin: Position, target: Position) -> List[Position]:
        """Return the route from origin to target (origin excluded)."""
        return self.search(origin, target).path

    def search(self, origin: Position, target: Position) -> SearchResult:
        """Run one search and report it to the log and the event bus."""
        correlation_id = uuid.uuid4().hex if self._bus is not None else None
        self._publish(
            EventType.SEARCH_STARTED,
            "Search started",
            {"origin": origin.as_tuple(), "target": target.as_tuple()},
            correlation_id,
        )
        log.debug("%s search %s -> %s", self.name, origin, target)

        result = self._search(origin, target)

        log.debug(
            "%s search %s -> %s finished: reached=%s length=%d expanded=%d reason=%s",
            self.name,
            origin,
            target,
            result.reached,
            len(result.path),
            result.expanded,
            result.reason,
        )
        self._publish(
            EventType.PATH_FOUND if result.success else EventType.PATH_NOT_FOUND,
            "Path found" if result.success else "No path",
            {
                "origin": origin.as_tuple(),
                "target": target.as_tuple(),
                "length": len(result.path),
                "expanded": result.expanded,
                "cost": result.cost,
                "reason": result.reason,
            },
            correlation_id,
        )
        return result

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _search(self, origin: Position, target: Position) -> SearchResult:
        raise NotImplementedError

    def _publish(
        self,
        event_type: EventType,
        message: str,
        payload: dict,
        correlation_id: Optional[str],
    ) -> None:
        if self._bus is None:
            return
        payload = dict(payload, algorithm=self.name)
        log_event(
            bus=self._bus,
            module=f"pathing.{self.name}",
            event_type=event_type,
            message=message,
            payload=payload,
            correlation_id=correlation_id,
        )
