"""
Timer source used by the idle monitor.

The monitor never sleeps or spawns threads; it asks a scheduler for periodic
callbacks and cancels them through the returned handle. The desktop app uses
``QtScheduler`` (Qt event loop); tests drive a manual scheduler.
"""

from __future__ import annotations

import time
from typing import Any, Callable, Protocol

TimerHandle = Any


class Scheduler(Protocol):
    def call_every(self, interval_ms: int, callback: Callable[[], None]) -> TimerHandle:
        ...

    def cancel(self, handle: TimerHandle) -> None:
        ...


def now_ms() -> int:
    return int(time.time() * 1000)
