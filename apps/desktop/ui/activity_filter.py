from __future__ import annotations

from PySide6.QtCore import QEvent, QObject
from PySide6.QtGui import QCursor

from packages.core.monitor.idle_monitor import IdleMonitor

# Direct user input only. Window activation is excluded: the app raises its
# own alarm box, and that activation must not count as the user coming back.
ACTIVITY_EVENTS = {
    QEvent.Type.KeyPress,
    QEvent.Type.MouseButtonPress,
    QEvent.Type.MouseMove,
    QEvent.Type.Wheel,
}


class ActivityEventFilter(QObject):
    """Application-wide event filter feeding input events to the idle monitor."""

    def __init__(self, monitor: IdleMonitor, parent=None) -> None:
        super().__init__(parent)
        self._monitor = monitor
        self._last_cursor = QCursor.pos()

    def eventFilter(self, source: QObject, event: QEvent) -> bool:
        if event.type() in ACTIVITY_EVENTS and self._monitor.is_monitoring():
            if self._is_real_input(event):
                self._monitor.record_activity()
        return super().eventFilter(source, event)

    def _is_real_input(self, event: QEvent) -> bool:
        if event.type() != QEvent.Type.MouseMove:
            return True
        # A window appearing under a still cursor can produce moves too
        pos = event.globalPosition().toPoint()
        if pos == self._last_cursor:
            return False
        self._last_cursor = pos
        return True
