"""
Alarm lifecycle: INACTIVE <-> ACTIVE.

Both explicit dismissal and recorded activity go through ``acknowledge()``.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from packages.core.alerts.messages import build_alert_payload
from packages.core.alerts.notifier import Notifier

from .dispatch import safe_call
from .sound_loop import SoundLoop
from .types import AlarmState, MonitorConfig

log = logging.getLogger(__name__)


class AlarmController:
    def __init__(
        self,
        sound_loop: SoundLoop,
        record_activity: Callable[[], None],
        notifier: Optional[Notifier] = None,
        emit: Optional[Callable[[str, str], None]] = None,
    ) -> None:
        self._sound = sound_loop
        self._record_activity = record_activity
        self._notifier = notifier
        self._emit = emit
        self._state: AlarmState = "INACTIVE"
        self._sound_expected = False

    @property
    def state(self) -> AlarmState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state == "ACTIVE"

    def enter(self, cfg: MonitorConfig, reason: str = "") -> bool:
        if self._state == "ACTIVE":
            return False

        self._state = "ACTIVE"
        self._sound_expected = self._sound.start(cfg)
        log.info("Alarm entered: %s", reason)

        self._notify("IDLE_ALARM")
        safe_call(self._emit, "ALARM_STARTED", reason)
        self._check_invariants()
        return True

    def acknowledge(self, reason: str = "activity") -> bool:
        if self._state != "ACTIVE":
            return False

        self._state = "INACTIVE"
        self._sound.stop()
        self._sound_expected = False
        self._record_activity()
        log.info("Alarm acknowledged (%s)", reason)

        self._notify("WELCOME_BACK")
        safe_call(self._emit, "ALARM_CLEARED", reason)
        self._check_invariants()
        return True

    def _notify(self, kind: str) -> None:
        if self._notifier is None:
            return
        payload = build_alert_payload(kind)
        safe_call(self._notifier.notify, payload["title"], payload["body"])

    def _check_invariants(self) -> None:
        if self._state == "INACTIVE" and self._sound.is_running:
            log.error("Sound loop still running while alarm is inactive")
        elif self._state == "ACTIVE" and self._sound_expected and not self._sound.is_running:
            log.error("Alarm active but sound loop is not armed")
