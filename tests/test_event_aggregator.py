import queue
from dataclasses import dataclass

import pytest

from nvgui.event_aggregator import EventAggregator


@dataclass
class Ping:
    value: int


@dataclass
class Pong:
    value: int


class SubPing(Ping):
    pass


def test_register_then_send():
    aggregator = EventAggregator()
    receiver = aggregator.register_event(Ping)
    aggregator.send(Ping(1))
    assert receiver.get_nowait() == Ping(1)


def test_send_before_register_is_delivered():
    aggregator = EventAggregator()
    aggregator.send(Ping(1))
    aggregator.send(Ping(2))
    receiver = aggregator.register_event(Ping)
    assert [receiver.get_nowait(), receiver.get_nowait()] == [Ping(1), Ping(2)]


def test_types_are_routed_separately():
    aggregator = EventAggregator()
    pings = aggregator.register_event(Ping)
    pongs = aggregator.register_event(Pong)
    aggregator.send(Pong(3))
    aggregator.send(Ping(4))
    assert pings.get_nowait() == Ping(4)
    assert pongs.get_nowait() == Pong(3)
    assert pings.empty() and pongs.empty()


def test_subclass_has_its_own_channel():
    aggregator = EventAggregator()
    pings = aggregator.register_event(Ping)
    aggregator.send(SubPing(5))
    with pytest.raises(queue.Empty):
        pings.get_nowait()


def test_double_register_raises():
    aggregator = EventAggregator()
    aggregator.register_event(Ping)
    with pytest.raises(RuntimeError, match="already registered"):
        aggregator.register_event(Ping)


def test_register_after_claiming_unclaimed_raises():
    aggregator = EventAggregator()
    aggregator.send(Ping(1))
    aggregator.register_event(Ping)
    with pytest.raises(RuntimeError):
        aggregator.register_event(Ping)


def test_builtin_list_events():
    aggregator = EventAggregator()
    receiver = aggregator.register_event(list)
    aggregator.send(["a", "b"])
    assert receiver.get_nowait() == ["a", "b"]