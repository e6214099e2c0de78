"""Tests for the in-memory event bus."""

import pytest

from dailynotes.events import EventBus


def test_emit_calls_handlers_in_order():
    bus = EventBus()
    calls = []
    bus.on("x", lambda v: calls.append(("a", v)))
    bus.on("x", lambda v: calls.append(("b", v)))
    bus.emit("x", 1)
    assert calls == [("a", 1), ("b", 1)]


def test_emit_only_reaches_named_event():
    bus = EventBus()
    calls = []
    bus.on("x", calls.append)
    bus.emit("y", 1)
    assert calls == []


def test_unsubscribe_callable():
    bus = EventBus()
    calls = []
    unsubscribe = bus.on("x", calls.append)
    unsubscribe()
    bus.emit("x", 1)
    assert calls == []
    assert bus.handler_count("x") == 0


def test_off_unknown_handler_is_noop():
    bus = EventBus()
    bus.off("x", print)
    assert bus.handler_count("x") == 0


def test_handler_errors_propagate():
    bus = EventBus()

    def boom(_):
        raise RuntimeError("boom")

    bus.on("x", boom)
    with pytest.raises(RuntimeError):
        bus.emit("x", 1)


def test_handler_may_unsubscribe_during_emit():
    bus = EventBus()
    calls = []

    def once(v):
        calls.append(v)
        bus.off("x", once)

    bus.on("x", once)
    bus.emit("x", 1)
    bus.emit("x", 2)
    assert calls == [1]
