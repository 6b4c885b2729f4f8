"""
Reusable widgets for the desktop window.
"""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QVBoxLayout, QLabel, QPushButton

from packages.core.monitor.types import StatusDisplay

from .theme import pill_object_name


class Card(QFrame):
    """Card container with rounded corners."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("Card")
        self.layout = QVBoxLayout(self)
        self.layout.setContentsMargins(16, 16, 16, 16)
        self.layout.setSpacing(12)


class PrimaryButton(QPushButton):
    def __init__(self, text: str = "", parent=None):
        super().__init__(text, parent)
        self.setObjectName("PrimaryButton")


class SecondaryButton(QPushButton):
    def __init__(self, text: str = "", parent=None):
        super().__init__(text, parent)
        self.setObjectName("SecondaryButton")


class DangerButton(QPushButton):
    def __init__(self, text: str = "", parent=None):
        super().__init__(text, parent)
        self.setObjectName("DangerButton")


class StatusPill(QLabel):
    """Countdown pill; its object name (and so its colour) tracks the severity."""

    def __init__(self, text: str = "", parent=None):
        super().__init__(text, parent)
        self.setAlignment(Qt.AlignCenter)
        self.setObjectName("StatusPillPaused")

    def show_status(self, status: StatusDisplay, monitoring: bool) -> None:
        self.setText(status.text)
        name = pill_object_name(status.severity, monitoring)
        if name != self.objectName():
            self.setObjectName(name)
            # Re-polish so the object-name selector applies
            self.style().unpolish(self)
            self.style().polish(self)
