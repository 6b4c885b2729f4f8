"""
Notification and sound backends for the current platform.
"""

from __future__ import annotations

import logging
import sys
from typing import Tuple

from PySide6.QtWidgets import QApplication, QSystemTrayIcon

from packages.core.alerts.notifier import Notifier, ToastNotifierWin10
from packages.core.alerts.sound import SoundPlayer, WinBeepSound
from packages.core.monitor.types import SoundType

log = logging.getLogger(__name__)


class TrayNotifier:
    def __init__(self, tray: QSystemTrayIcon) -> None:
        self._tray = tray

    def notify(self, title: str, body: str) -> None:
        if not self._tray.isVisible():
            log.info("%s: %s", title, body)
            return
        self._tray.showMessage(title, body, QSystemTrayIcon.MessageIcon.Warning, 4000)


class QtBeepSound:
    """System bell; there is no portable way to play tones, so every type beeps once."""

    def play(self, sound_type: SoundType) -> None:
        QApplication.beep()


def build_alert_backends(tray: QSystemTrayIcon) -> Tuple[Notifier, SoundPlayer]:
    if sys.platform == "win32":
        return ToastNotifierWin10(), WinBeepSound()
    return TrayNotifier(tray), QtBeepSound()
