"""
Monitoring for pathfinding searches.

Provides:
- EventBus: in-process pub/sub for MonitoringEvents
- JsonFileLogger: JSONL sink subscribed to a bus
- log_event: helper to build and publish an event
"""

from __future__ import annotations

from .bus import EventBus
from .events import EventType, MonitoringEvent
from .logger import JsonFileLogger, log_event

__all__ = [
    "EventBus",
    "EventType",
    "MonitoringEvent",
    "JsonFileLogger",
    "log_event",
]
