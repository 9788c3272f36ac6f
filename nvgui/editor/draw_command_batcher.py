"""Collects draw commands and sends them on in batches."""

from __future__ import annotations

import queue
from typing import Any, Optional

from nvgui.event_aggregator import EVENT_AGGREGATOR, EventAggregator


class DrawCommandBatcher:
    """Queues draw commands until a batch is sent.

    A batch is a ``list`` of commands, sent through the aggregator so the
    receiver registered for ``list`` gets it.
    """

    def __init__(self, aggregator: Optional[EventAggregator] = None) -> None:
        self._aggregator = aggregator if aggregator is not None else EVENT_AGGREGATOR
        self._pending: queue.SimpleQueue = queue.SimpleQueue()

    def queue(self, draw_command: Any) -> None:
        """Add a command to the current batch."""
        self._pending.put(draw_command)

    def _drain(self):
        while True:
            try:
                yield self._pending.get_nowait()
            except queue.Empty:
                return

    def send_batch(self) -> None:
        """Send every queued command, in order, as one list."""
        self._aggregator.send(list(self._drain()))