"""Dot visibility and the bounded hour-change channel."""
from __future__ import annotations

import logging
from collections import deque

from sweepclock.geometry import HOURS

_logger = logging.getLogger(__name__)


def dot_visibility(hour: int) -> tuple[bool, ...]:
    """Dot ``i`` is shown iff ``i <= hour`` and ``i > hour - 12``."""
    return tuple(hour - HOURS < i <= hour for i in range(HOURS))


class HourChannel:
    """Bounded queue of hour changes, consumed latest-wins.

    Publishing onto a full channel silently drops the oldest pending hour.
    """

    def __init__(self, capacity: int = HOURS) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._queue: deque[int] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._queue.maxlen or 0

    def __len__(self) -> int:
        return len(self._queue)

    def publish(self, hour: int) -> None:
        if not 0 <= hour < HOURS:
            raise ValueError(f"hour must be in 0..{HOURS - 1}, got {hour}")
        if len(self._queue) == self._queue.maxlen:
            _logger.debug("hour channel full, dropping hour %d", self._queue[0])
        self._queue.append(hour)

    def take_latest(self) -> int | None:
        """Return the most recent pending hour and discard everything older."""
        if not self._queue:
            return None
        latest = self._queue[-1]
        if len(self._queue) > 1:
            _logger.debug(
                "collapsing %d pending hours into %d", len(self._queue), latest
            )
        self._queue.clear()
        return latest
