from __future__ import annotations

from typing import Callable, List, Optional

import pytest

from packages.core.monitor.idle_monitor import IdleMonitor

START_MS = 1_700_000_000_000  # millisecond component is 0


class ManualTimer:
    def __init__(self, seq: int, interval_ms: int, callback: Callable[[], None], due_ms: int) -> None:
        self.seq = seq
        self.interval_ms = interval_ms
        self.callback = callback
        self.due_ms = due_ms
        self.fired = 0


class ManualScheduler:
    """Scheduler + clock for tests; timers fire only when ``advance`` is called."""

    def __init__(self, start_ms: int = START_MS) -> None:
        self.now_ms = start_ms
        self.timers: List[ManualTimer] = []
        self._seq = 0

    def clock(self) -> int:
        return self.now_ms

    def call_every(self, interval_ms: int, callback: Callable[[], None]) -> ManualTimer:
        self._seq += 1
        timer = ManualTimer(self._seq, interval_ms, callback, self.now_ms + interval_ms)
        self.timers.append(timer)
        return timer

    def cancel(self, handle: ManualTimer) -> None:
        if handle in self.timers:
            self.timers.remove(handle)

    def timers_for(self, callback_name: str) -> List[ManualTimer]:
        return [t for t in self.timers if getattr(t.callback, "__name__", "") == callback_name]

    def advance(self, ms: int) -> None:
        target = self.now_ms + ms
        while True:
            due = [t for t in self.timers if t.due_ms <= target]
            if not due:
                break
            timer = min(due, key=lambda t: (t.due_ms, t.seq))
            self.now_ms = timer.due_ms
            timer.due_ms += timer.interval_ms
            timer.fired += 1
            timer.callback()
        self.now_ms = target


class RecordingNotifier:
    def __init__(self) -> None:
        self.messages: List[tuple] = []

    def notify(self, title: str, body: str) -> None:
        self.messages.append((title, body))

    def bodies(self) -> List[str]:
        return [body for _, body in self.messages]


class RecordingSound:
    def __init__(self) -> None:
        self.played: List[str] = []

    def play(self, sound_type: str) -> None:
        self.played.append(sound_type)


def monitor_config(**overrides) -> dict:
    cfg = {
        "idle_threshold_ms": 60_000,
        "check_interval_ms": 1000,
        "display_interval_ms": 100,
        "sound_enabled": True,
        "sound_type": "beep",
        "sound_repeat_ms": 5000,
    }
    cfg.update(overrides)
    return cfg


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def sound() -> RecordingSound:
    return RecordingSound()


@pytest.fixture
def make_monitor(scheduler, notifier, sound):
    def _make(config: Optional[dict] = None, **overrides) -> IdleMonitor:
        return IdleMonitor(
            config=config or monitor_config(**overrides),
            scheduler=scheduler,
            notifier=notifier,
            sound=sound,
            clock=scheduler.clock,
        )
    return _make
