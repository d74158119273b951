#tests/test_monitoring_event_bus.py
"""
Tests for monitoring.bus.EventBus

Covers:
- Publish/subscribe behavior
- Unsubscribe behavior
- Ordering guarantees
- Failing subscribers do not block others
- Basic thread-safety smoke check
"""

from __future__ import annotations

import threading
from typing import List

from monitoring.bus import EventBus
from monitoring.events import EventType, MonitoringEvent


def make_event(ts: float, module: str = "test", msg: str = "msg") -> MonitoringEvent:
    return MonitoringEvent(
        ts=ts,
        module=module,
        event_type=EventType.LOG,
        message=msg,
        payload={},
        correlation_id=None,
    )


def test_event_bus_publish_subscribe_basic():
    bus = EventBus()
    received: List[MonitoringEvent] = []

    bus.subscribe(received.append)
    bus.publish(make_event(1.0, msg="first"))
    bus.publish(make_event(2.0, msg="second"))

    assert [e.message for e in received] == ["first", "second"]


def test_event_bus_unsubscribe():
    bus = EventBus()
    received: List[MonitoringEvent] = []

    def subscriber(evt: MonitoringEvent) -> None:
        received.append(evt)

    bus.subscribe(subscriber)
    bus.unsubscribe(subscriber)
    bus.unsubscribe(subscriber)  # second call is a no-op

    bus.publish(make_event(1.0))

    assert received == []
    assert len(bus) == 0


def test_event_bus_ordering_guarantee():
    bus = EventBus()
    seen: List[int] = []

    bus.subscribe(lambda evt: seen.append(int(evt.ts)))

    for ts in [1, 2, 3, 4, 5]:
        bus.publish(make_event(float(ts)))

    assert seen == [1, 2, 3, 4, 5]


def test_failing_subscriber_does_not_stop_delivery():
    bus = EventBus()
    received: List[MonitoringEvent] = []

    def broken(evt: MonitoringEvent) -> None:
        raise RuntimeError("boom")

    bus.subscribe(broken)
    bus.subscribe(received.append)

    bus.publish(make_event(1.0))

    assert len(received) == 1


def test_clear_removes_subscribers():
    bus = EventBus()
    bus.subscribe(lambda evt: None)
    bus.clear()

    assert len(bus) == 0


def test_event_to_dict_uses_enum_name():
    data = make_event(3.0).to_dict()

    assert data["event_type"] == "LOG"
    assert data["ts"] == 3.0


def test_event_bus_thread_safety_smoke():
    """
    Multiple threads publishing simultaneously should not crash
    and subscribers should receive every event.
    """
    bus = EventBus()
    count = 100

    received: List[MonitoringEvent] = []
    lock = threading.Lock()

    def subscriber(evt: MonitoringEvent) -> None:
        with lock:
            received.append(evt)

    bus.subscribe(subscriber)

    def publisher_thread(start: int) -> None:
        for i in range(start, start + count):
            bus.publish(make_event(float(i)))

    threads = [
        threading.Thread(target=publisher_thread, args=(0,)),
        threading.Thread(target=publisher_thread, args=(1000,)),
    ]

    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(received) == 2 * count
