from __future__ import annotations

import logging
from typing import Callable, Optional

from .dispatch import safe_call
from .scheduler import Scheduler, TimerHandle
from .types import MonitorConfig, SoundType

log = logging.getLogger(__name__)


class SoundLoop:
    """
    Repeating audible alert. Plays once on start, then every
    ``sound_repeat_ms`` until stopped. Owned by the alarm controller.
    """

    def __init__(self, scheduler: Scheduler, on_alert: Callable[[SoundType], None]) -> None:
        self._scheduler = scheduler
        self._on_alert = on_alert
        self._handle: Optional[TimerHandle] = None
        self._sound_type: SoundType = "beep"
        self.alerts_fired = 0

    @property
    def is_running(self) -> bool:
        return self._handle is not None

    def start(self, cfg: MonitorConfig) -> bool:
        """Start the loop. Returns False when sound is disabled and nothing was armed."""
        self.stop()
        if not cfg.sound_enabled:
            log.info("Sound disabled, alarm will be silent")
            return False

        self._sound_type = cfg.sound_type
        self._fire()
        self._handle = self._scheduler.call_every(cfg.sound_repeat_ms, self._fire)
        log.info("Sound loop started (%s every %dms)", cfg.sound_type, cfg.sound_repeat_ms)
        return True

    def stop(self) -> None:
        if self._handle is None:
            return
        handle, self._handle = self._handle, None
        self._scheduler.cancel(handle)
        log.info("Sound loop stopped after %d alert(s)", self.alerts_fired)

    def _fire(self) -> None:
        self.alerts_fired += 1
        safe_call(self._on_alert, self._sound_type)
