"""Routes events to a single subscriber per event type."""

from __future__ import annotations

import queue
import threading
from typing import Any

from nvgui.channel_utils import LoggingSender


def _type_name(event_type: type) -> str:
    return f"{event_type.__module__}.{event_type.__qualname__}"


class EventAggregator:
    """Distributes events by their exact type.

    Any component may send events of any type; only one component may
    register to receive a given type. Events sent before the receiver
    registers are kept and handed over when it does.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._senders: dict[type, LoggingSender] = {}
        self._unclaimed_receivers: dict[type, queue.SimpleQueue] = {}

    def _sender_for(self, event_type: type) -> LoggingSender:
        with self._lock:
            sender = self._senders.get(event_type)
            if sender is None:
                receiver: queue.SimpleQueue = queue.SimpleQueue()
                sender = LoggingSender(receiver, _type_name(event_type))
                self._senders[event_type] = sender
                self._unclaimed_receivers[event_type] = receiver
            return sender

    def send(self, event: Any) -> None:
        """Send an event to whoever receives events of its type."""
        self._sender_for(type(event)).send(event)

    def register_event(self, event_type: type) -> queue.SimpleQueue:
        """Claim the receiving queue for an event type.

        Raises RuntimeError when the type already has a receiver.
        """
        with self._lock:
            receiver = self._unclaimed_receivers.pop(event_type, None)
            if receiver is not None:
                return receiver
            if event_type in self._senders:
                raise RuntimeError("EventAggregator: type already registered")
            receiver = queue.SimpleQueue()
            self._senders[event_type] = LoggingSender(receiver, _type_name(event_type))
            return receiver


EVENT_AGGREGATOR = EventAggregator()