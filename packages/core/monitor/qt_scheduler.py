from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import QObject, QTimer


class QtScheduler:
    """Scheduler backed by QTimer; callbacks run on the owning thread's event loop."""

    def __init__(self, parent: Optional[QObject] = None) -> None:
        self._parent = parent

    def call_every(self, interval_ms: int, callback: Callable[[], None]) -> QTimer:
        timer = QTimer(self._parent)
        timer.setInterval(max(1, int(interval_ms)))
        timer.timeout.connect(callback)  # type: ignore[arg-type]
        timer.start()
        return timer

    def cancel(self, handle: QTimer) -> None:
        # stop() guarantees no further timeout on this thread
        handle.stop()
        handle.deleteLater()
