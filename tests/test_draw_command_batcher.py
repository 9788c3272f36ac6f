import queue

import pytest

from nvgui.editor.draw_command_batcher import DrawCommandBatcher
from nvgui.event_aggregator import EventAggregator


@pytest.fixture
def aggregator():
    return EventAggregator()


def test_batch_holds_queued_commands_in_order(aggregator):
    receiver = aggregator.register_event(list)
    batcher = DrawCommandBatcher(aggregator)
    batcher.queue("first")
    batcher.queue("second")
    batcher.queue("third")
    batcher.send_batch()
    assert receiver.get_nowait() == ["first", "second", "third"]


def test_empty_batch_is_sent(aggregator):
    receiver = aggregator.register_event(list)
    DrawCommandBatcher(aggregator).send_batch()
    assert receiver.get_nowait() == []


def test_batches_do_not_repeat_commands(aggregator):
    receiver = aggregator.register_event(list)
    batcher = DrawCommandBatcher(aggregator)
    batcher.queue(1)
    batcher.send_batch()
    batcher.queue(2)
    batcher.send_batch()
    assert receiver.get_nowait() == [1]
    assert receiver.get_nowait() == [2]
    with pytest.raises(queue.Empty):
        receiver.get_nowait()


def test_batch_sent_before_registration_is_kept(aggregator):
    batcher = DrawCommandBatcher(aggregator)
    batcher.queue("early")
    batcher.send_batch()
    receiver = aggregator.register_event(list)
    assert receiver.get_nowait() == ["early"]


def test_nothing_sent_until_send_batch(aggregator):
    receiver = aggregator.register_event(list)
    batcher = DrawCommandBatcher(aggregator)
    batcher.queue("waiting")
    with pytest.raises(queue.Empty):
        receiver.get_nowait()