from __future__ import annotations

from typing import Callable


class ActivityTracker:
    """Holds the timestamp of the most recent user activity."""

    def __init__(self, clock: Callable[[], int]) -> None:
        self._clock = clock
        self._last_activity_ms = clock()

    @property
    def last_activity_ms(self) -> int:
        return self._last_activity_ms

    def record(self) -> int:
        self._last_activity_ms = self._clock()
        return self._last_activity_ms

    def elapsed_ms(self, now_ms: int) -> int:
        return now_ms - self._last_activity_ms
