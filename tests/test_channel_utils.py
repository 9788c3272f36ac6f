import logging
import queue

import pytest

from nvgui.channel_utils import LoggingSender


def test_send_delivers_message():
    channel = queue.SimpleQueue()
    sender = LoggingSender(channel, "numbers")
    sender.send(5)
    assert channel.get_nowait() == 5


def test_send_preserves_order():
    channel = queue.SimpleQueue()
    sender = LoggingSender(channel, "words")
    for word in ["a", "b", "c"]:
        sender.send(word)
    assert [channel.get_nowait() for _ in range(3)] == ["a", "b", "c"]


def test_send_logs_channel_name_and_message(caplog):
    channel = queue.SimpleQueue()
    sender = LoggingSender(channel, "my_channel")
    with caplog.at_level(logging.DEBUG, logger="nvgui.channel_utils"):
        sender.send("payload")
    messages = [record.getMessage() for record in caplog.records]
    assert "my_channel 'payload'" in messages


class _ClosedChannel:
    def put(self, item):
        raise BrokenPipeError("receiver gone")


def test_send_propagates_channel_error():
    sender = LoggingSender(_ClosedChannel(), "closed")
    with pytest.raises(BrokenPipeError):
        sender.send(1)