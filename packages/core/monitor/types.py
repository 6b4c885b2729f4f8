from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from packages.shared.config import SoundType

AlarmState = Literal["INACTIVE", "ACTIVE"]
Severity = Literal["normal", "warning", "error"]
IdlePhase = Literal["PAUSED", "WORKING", "IDLE_PENDING", "ALARM"]


@dataclass(frozen=True)
class MonitorConfig:
    """Snapshot of the values the monitor reads on every tick. All durations in ms."""
    idle_threshold_ms: int
    check_interval_ms: int
    display_interval_ms: int
    sound_enabled: bool
    sound_type: SoundType
    sound_repeat_ms: int


@dataclass(frozen=True)
class MonitorState:
    """Read-only view of a session for UI and tests."""
    monitoring: bool = False
    alarm_state: AlarmState = "INACTIVE"
    last_activity_ms: int = 0
    idle_timer_armed: bool = False
    display_timer_armed: bool = False
    sound_timer_armed: bool = False
    idle_phase: IdlePhase = "PAUSED"


@dataclass(frozen=True)
class StatusDisplay:
    text: str
    severity: Severity = "normal"
    icon: str = ""
