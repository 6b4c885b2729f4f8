"""
Idle decision made on every idle-check tick.

State machine: WORKING -> IDLE_PENDING -> ALARM
"""

from __future__ import annotations

from dataclasses import dataclass

from .types import IdlePhase


@dataclass(frozen=True)
class IdleDecision:
    phase: IdlePhase
    elapsed_ms: int
    remaining_ms: int
    trigger_alarm: bool = False


def evaluate_idle(
    now_ms: int,
    last_activity_ms: int,
    idle_threshold_ms: int,
    *,
    monitoring: bool,
    alarm_active: bool,
) -> IdleDecision:
    """
    Decide whether this tick should enter the alarm.

    The alarm is triggered only on the tick where the threshold is reached
    while no alarm is active, so one idle episode produces one trigger.
    """
    elapsed = now_ms - last_activity_ms
    remaining = max(0, idle_threshold_ms - elapsed)

    if not monitoring:
        return IdleDecision("PAUSED", elapsed, remaining)
    if alarm_active:
        return IdleDecision("ALARM", elapsed, remaining)
    if elapsed >= idle_threshold_ms:
        return IdleDecision("ALARM", elapsed, remaining, trigger_alarm=True)
    if elapsed > 0:
        return IdleDecision("IDLE_PENDING", elapsed, remaining)
    return IdleDecision("WORKING", elapsed, remaining)
