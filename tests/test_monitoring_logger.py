#tests/test_monitoring_logger.py
"""
Tests for monitoring.logger.JsonFileLogger and log_event.

Covers:
- JSON structure validity
- Parent directory creation
- Unsubscribe on close
- Search events written end to end
"""

from __future__ import annotations

import json
from pathlib import Path

from monitoring.bus import EventBus
from monitoring.events import EventType
from monitoring.logger import JsonFileLogger, log_event
from pathing.astar import AStarPathfinder
from pathing.grid import GridMap
from pathing.heuristics import ChebyshevHeuristic
from spec.types import Position


def test_json_file_logger_writes_valid_json(tmp_path: Path):
    bus = EventBus()
    log_path = tmp_path / "events.log"

    logger = JsonFileLogger(log_path, bus)

    log_event(
        bus=bus,
        module="test.module",
        event_type=EventType.LOG,
        message="hello world",
        payload={"a": 1, "b": "x"},
        correlation_id="search-123",
    )

    logger.close()

    lines = log_path.read_text(encoding="utf-8").strip().splitlines()
    assert len(lines) == 1

    data = json.loads(lines[0])

    assert data["module"] == "test.module"
    assert data["event_type"] == "LOG"
    assert data["message"] == "hello world"
    assert data["payload"] == {"a": 1, "b": "x"}
    assert data["correlation_id"] == "search-123"
    assert isinstance(data["ts"], (int, float))


def test_logger_parent_dir_created(tmp_path: Path):
    log_path = tmp_path / "nested" / "logs" / "events.log"

    bus = EventBus()
    with JsonFileLogger(log_path, bus):
        log_event(
            bus=bus,
            module="test.module",
            event_type=EventType.LOG,
            message="hello",
        )

    assert log_path.exists()
    assert log_path.read_text(encoding="utf-8").strip()


def test_close_unsubscribes(tmp_path: Path):
    bus = EventBus()
    logger = JsonFileLogger(tmp_path / "events.log", bus)

    logger.close()

    assert len(bus) == 0
    # Publishing after close must not touch the closed file.
    log_event(bus=bus, module="m", event_type=EventType.LOG, message="late")


def test_search_events_logged(tmp_path: Path):
    bus = EventBus()
    log_path = tmp_path / "search.log"
    finder = AStarPathfinder(GridMap(width=3, height=3), ChebyshevHeuristic(), bus=bus)

    with JsonFileLogger(log_path, bus):
        finder.find(Position(0, 0), Position(2, 2))

    records = [json.loads(line) for line in log_path.read_text(encoding="utf-8").splitlines()]
    assert [r["event_type"] for r in records] == ["SEARCH_STARTED", "PATH_FOUND"]
    assert records[0]["module"] == "pathing.astar"
    assert records[1]["payload"]["target"] == [2, 2]
