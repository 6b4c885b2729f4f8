"""
Idle monitoring session.

Owns the idle-check and display timers, the activity baseline and the alarm.
All callbacks run on a single event loop, so state transitions need no locks.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from packages.core.alerts.messages import build_alert_payload
from packages.core.alerts.notifier import Notifier
from packages.core.alerts.sound import SoundPlayer

from .activity import ActivityTracker
from .alarm import AlarmController
from .dispatch import safe_call
from .display import paused_status, render_status
from .idle_evaluator import evaluate_idle
from .scheduler import Scheduler, TimerHandle, now_ms
from .sound_loop import SoundLoop
from .types import IdlePhase, MonitorConfig, MonitorState, SoundType, StatusDisplay

log = logging.getLogger(__name__)


def _now_iso() -> str:
    return time.strftime("%Y-%m-%dT%H:%M:%S", time.localtime())


class IdleMonitor:
    """
    Raises an alarm when no activity is recorded for ``idle_threshold_ms``
    and keeps it sounding until acknowledged.
    """

    def __init__(
        self,
        config: dict,
        scheduler: Scheduler,
        notifier: Optional[Notifier] = None,
        sound: Optional[SoundPlayer] = None,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self._cfg = self._parse_config(config)
        self._scheduler = scheduler
        self._clock = clock
        self._notifier = notifier
        self._sound_player = sound

        self._monitoring = False
        self._phase: IdlePhase = "PAUSED"
        self._idle_timer: Optional[TimerHandle] = None
        self._display_timer: Optional[TimerHandle] = None

        self._activity = ActivityTracker(clock)
        self._sound_loop = SoundLoop(scheduler, self._on_sound_alert)
        self._alarm = AlarmController(
            self._sound_loop,
            record_activity=self.record_activity,
            notifier=notifier,
            emit=self._emit,
        )

        self._event_cb: Optional[Callable[[dict], None]] = None
        self._display_cb: Optional[Callable[[StatusDisplay], None]] = None
        self._last_display: StatusDisplay = paused_status()

    @staticmethod
    def _parse_config(config: dict) -> MonitorConfig:
        """Parse config dict into MonitorConfig."""
        return MonitorConfig(
            idle_threshold_ms=config.get("idle_threshold_ms", 5 * 60_000),
            check_interval_ms=config.get("check_interval_ms", 1000),
            display_interval_ms=config.get("display_interval_ms", 100),
            sound_enabled=config.get("sound_enabled", True),
            sound_type=config.get("sound_type", "beep"),
            sound_repeat_ms=config.get("sound_repeat_ms", 5000),
        )

    def on_event(self, cb: Callable[[dict], None]) -> None:
        self._event_cb = cb

    def on_display(self, cb: Callable[[StatusDisplay], None]) -> None:
        self._display_cb = cb

    @property
    def config(self) -> MonitorConfig:
        return self._cfg

    def update_config(self, config: dict) -> None:
        """
        Swap in a new config snapshot. Threshold and sound settings are read on
        the next tick; tick intervals are latched when a timer is armed, so a
        change to either of them re-arms both timers.
        """
        new_cfg = self._parse_config(config)
        old_cfg, self._cfg = self._cfg, new_cfg

        intervals_changed = (
            old_cfg.check_interval_ms != new_cfg.check_interval_ms
            or old_cfg.display_interval_ms != new_cfg.display_interval_ms
        )
        if self._monitoring and intervals_changed:
            self._stop_timers()
            self._arm_timers()
            log.info(
                "Timers re-armed: check every %dms, display every %dms",
                new_cfg.check_interval_ms,
                new_cfg.display_interval_ms,
            )
        self._emit("CONFIG_APPLIED", f"idle threshold {new_cfg.idle_threshold_ms}ms")

    def get_state(self) -> MonitorState:
        return MonitorState(
            monitoring=self._monitoring,
            alarm_state=self._alarm.state,
            last_activity_ms=self._activity.last_activity_ms,
            idle_timer_armed=self._idle_timer is not None,
            display_timer_armed=self._display_timer is not None,
            sound_timer_armed=self._sound_loop.is_running,
            idle_phase=self._phase,
        )

    def is_monitoring(self) -> bool:
        return self._monitoring

    def is_alarm_active(self) -> bool:
        return self._alarm.is_active

    def elapsed_ms(self) -> int:
        return self._activity.elapsed_ms(self._clock())

    def start(self) -> None:
        self._monitoring = True
        self._phase = "WORKING"
        self._stop_timers()
        self._arm_timers()
        self.record_activity()
        log.info("Monitoring started (idle threshold %dms)", self._cfg.idle_threshold_ms)
        self._emit("MONITORING_STARTED", "")

    def stop(self) -> None:
        # An active alarm keeps sounding; only acknowledgment silences it.
        self._monitoring = False
        self._phase = "PAUSED"
        self._stop_timers()
        self._refresh_display()
        log.info("Monitoring stopped")
        self._emit("MONITORING_STOPPED", "")

    def record_activity(self) -> None:
        self._activity.record()
        if self._monitoring:
            self._phase = "WORKING"
        if self._alarm.is_active:
            self._alarm.acknowledge("activity")

    def acknowledge_alarm(self) -> bool:
        return self._alarm.acknowledge("dismissed")

    def reset_timer(self) -> None:
        self.record_activity()
        log.info("Idle timer reset")

    def current_display(self) -> StatusDisplay:
        cfg = self._cfg
        now = self._clock()
        return render_status(
            now,
            monitoring=self._monitoring,
            alarm_active=self._alarm.is_active,
            elapsed_ms=self._activity.elapsed_ms(now),
            threshold_ms=cfg.idle_threshold_ms,
        )

    @property
    def last_display(self) -> StatusDisplay:
        return self._last_display

    def _arm_timers(self) -> None:
        cfg = self._cfg
        self._idle_timer = self._scheduler.call_every(cfg.check_interval_ms, self._check_idle)
        self._display_timer = self._scheduler.call_every(cfg.display_interval_ms, self._refresh_display)

    def _stop_timers(self) -> None:
        if self._idle_timer is not None:
            handle, self._idle_timer = self._idle_timer, None
            self._scheduler.cancel(handle)
        if self._display_timer is not None:
            handle, self._display_timer = self._display_timer, None
            self._scheduler.cancel(handle)

    def _check_idle(self) -> None:
        cfg = self._cfg
        decision = evaluate_idle(
            self._clock(),
            self._activity.last_activity_ms,
            cfg.idle_threshold_ms,
            monitoring=self._monitoring,
            alarm_active=self._alarm.is_active,
        )
        if decision.phase != self._phase:
            log.debug(
                "Idle phase %s -> %s (%dms remaining)",
                self._phase,
                decision.phase,
                decision.remaining_ms,
            )
            self._phase = decision.phase
        if decision.trigger_alarm:
            reason = f"idle {decision.elapsed_ms / 1000:.1f}s >= {cfg.idle_threshold_ms / 1000:.0f}s"
            self._alarm.enter(cfg, reason=reason)

    def _refresh_display(self) -> None:
        self._last_display = self.current_display()
        log.debug("Display: %s (%s)", self._last_display.text, self._last_display.severity)
        safe_call(self._display_cb, self._last_display)

    def _on_sound_alert(self, sound_type: SoundType) -> None:
        if self._sound_player is not None:
            safe_call(self._sound_player.play, sound_type)
        if self._notifier is not None:
            payload = build_alert_payload("SOUND_ALERT")
            safe_call(self._notifier.notify, payload["title"], payload["body"])

    def _emit(self, event_type: str, reason: str) -> None:
        safe_call(self._event_cb, {"type": event_type, "at": _now_iso(), "reason": reason})
