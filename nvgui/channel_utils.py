"""Channel senders that log every message they send."""

from __future__ import annotations

import logging
from typing import Any, Protocol

log = logging.getLogger(__name__)


class _Channel(Protocol):
    def put(self, item: Any) -> None: ...


class LoggingSender:
    """Wraps a channel's sending side and logs each message at debug level."""

    def __init__(self, channel: _Channel, channel_name: str) -> None:
        self.channel = channel
        self.channel_name = channel_name

    def send(self, message: Any) -> None:
        """Log the message, then put it on the channel."""
        log.debug("%s %r", self.channel_name, message)
        self.channel.put(message)

    def __repr__(self) -> str:
        return f"LoggingSender({self.channel_name!r})"