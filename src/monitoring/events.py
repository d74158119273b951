# path: src/monitoring/events.py
"""
Event schemas for search monitoring.

This module defines:
- EventType enum
- MonitoringEvent (structured search events)

All events are JSON-serializable via `.to_dict()` and are intended
for use with monitoring.bus.EventBus and monitoring.logger.JsonFileLogger.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum, auto
from typing import Any, Dict, Optional


# ============================================================
# Event Types
# ============================================================

class EventType(Enum):
    """Typed monitoring events emitted by the search strategies."""

    # A find() call began
    SEARCH_STARTED = auto()

    # A find() call ended with a route to the target
    PATH_FOUND = auto()

    # A find() call ended without a route (unreachable, trivial, or limited)
    PATH_NOT_FOUND = auto()

    # Generic log messages
    LOG = auto()


# ============================================================
# Monitoring Event Structure
# ============================================================

@dataclass
class MonitoringEvent:
    """
    Runtime event emitted by a pathfinding strategy or the CLI.

    All fields must be JSON-safe.
    """

    ts: float                   # UNIX timestamp (seconds)
    module: str                 # Source module string ("pathing.astar", "cli", ...)
    event_type: EventType       # Enum describing the event class
    message: str                # Short human-readable description
    payload: Dict[str, Any]     # Structured data (origin, target, path length, ...)
    correlation_id: Optional[str] = None  # Groups the start/end events of one search

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-safe dict for loggers."""
        data = asdict(self)
        data["event_type"] = self.event_type.name  # store name, not enum
        return data
