"""Decides whether the renderer needs to draw the next frame."""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Optional

log = logging.getLogger(__name__)


class RedrawScheduler:
    """Tracks queued frames and the earliest scheduled redraw time.

    Times are values of ``clock``, which defaults to ``time.monotonic``.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._scheduled_frame: Optional[float] = None
        self._frame_queued = True

    def schedule(self, when: float) -> None:
        """Request a redraw at ``when``, keeping the earliest request."""
        log.debug("Redraw scheduled for %r", when)
        with self._lock:
            if self._scheduled_frame is None or when < self._scheduled_frame:
                self._scheduled_frame = when

    def queue_next_frame(self) -> None:
        """Request that the next frame be drawn."""
        log.debug("Next frame queued")
        with self._lock:
            self._frame_queued = True

    def should_draw(self) -> bool:
        """Report whether to draw now, consuming the request that says so."""
        with self._lock:
            if self._frame_queued:
                self._frame_queued = False
                return True
            if self._scheduled_frame is not None and self._scheduled_frame < self._clock():
                self._scheduled_frame = None
                return True
            return False