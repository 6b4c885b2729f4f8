from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

log = logging.getLogger(__name__)

# Repeat alerts arrive every few seconds during an alarm; keep each toast shorter.
TOAST_SECONDS = 3


class Notifier(Protocol):
    def notify(self, title: str, body: str) -> None:
        ...


class ToastNotifierWin10:
    """
    Windows toast. While a toast is still on screen further alerts are
    dropped rather than queued behind it.
    """

    def __init__(self, toaster: Optional[Any] = None) -> None:
        if toaster is None:
            from win10toast import ToastNotifier

            toaster = ToastNotifier()
        self._toaster = toaster

    def notify(self, title: str, body: str) -> None:
        if self._toaster.notification_active():
            log.debug("Toast still visible, dropping %r", body)
            return
        try:
            self._toaster.show_toast(title, body, duration=TOAST_SECONDS, threaded=True)
        except Exception:
            log.exception("Failed to show toast %r", body)
