from __future__ import annotations

import pytest

from multicast.app.event_bus import EventBus
from multicast.engine import PROGRESS_REPORTER, SignatureMismatch


def test_event_bus_publish_and_unsubscribe() -> None:
    bus = EventBus()
    received: list[tuple[str, object, object]] = []

    unsubscribe_a = bus.subscribe(lambda sender, event: received.append(("a", sender, event)))
    unsubscribe_b = bus.subscribe(lambda sender, event: received.append(("b", sender, event)))

    bus.publish("src", "hello")
    assert received == [("a", "src", "hello"), ("b", "src", "hello")]

    received.clear()
    unsubscribe_a()
    bus.publish("src", "world")
    assert received == [("b", "src", "world")]

    received.clear()
    unsubscribe_b()
    bus.publish("src", "ignored")
    assert received == []


def test_event_bus_unsubscribe_callable_is_idempotent() -> None:
    bus = EventBus(PROGRESS_REPORTER)
    received: list[int] = []

    bus.subscribe(received.append)
    unsubscribe = bus.subscribe(received.append)

    unsubscribe()
    unsubscribe()

    bus.publish(40)
    assert received == [40]


def test_event_bus_rejects_mismatched_subscriber() -> None:
    bus = EventBus()

    with pytest.raises(SignatureMismatch):
        bus.subscribe(lambda: None)

    assert len(bus.callbacks) == 0


def test_event_bus_unsubscribe_during_publish_affects_next_publish_only() -> None:
    bus = EventBus(PROGRESS_REPORTER)
    received: list[str] = []

    def second(percent_complete: int) -> None:
        received.append("second")

    def first(percent_complete: int) -> None:
        received.append("first")
        bus.unsubscribe(second)

    bus.subscribe(first)
    bus.subscribe(second)

    bus.publish(0)
    assert received == ["first", "second"]

    received.clear()
    bus.publish(10)
    assert received == ["first"]
