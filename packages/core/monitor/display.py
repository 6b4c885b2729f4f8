"""
Status text for the countdown indicator.

Everything here is computed from the arguments alone; the blink phase comes
from the millisecond component of ``now_ms`` rather than a stored toggle.
"""

from __future__ import annotations

from .types import Severity, StatusDisplay

ICON_PAUSED = "⏸"
ICON_ALERT = "🔔"
ICON_ACTIVE = "✔"

# Progress tiers, checked top-down against percent of threshold remaining
PROGRESS_ICONS = [
    (75, "✔"),
    (50, "⌚"),
    (25, "⚠"),
]
PROGRESS_ICON_LAST = "✖"

ERROR_BELOW_MS = 30_000
WARNING_BELOW_MS = 60_000
BLINK_PHASE_MS = 500


def paused_status() -> StatusDisplay:
    return StatusDisplay(f"{ICON_PAUSED} Paused", "normal", ICON_PAUSED)


def active_status() -> StatusDisplay:
    return StatusDisplay(f"{ICON_ACTIVE} Active", "normal", ICON_ACTIVE)


def alarm_status(now_ms: int) -> StatusDisplay:
    if now_ms % 1000 < BLINK_PHASE_MS:
        return StatusDisplay(f"{ICON_ALERT} IDLE!", "error", ICON_ALERT)
    return StatusDisplay(f"{ICON_ALERT} GET BACK TO WORK!", "error", ICON_ALERT)


def progress_icon(remaining_ms: int, threshold_ms: int) -> str:
    percent = (remaining_ms * 100) // threshold_ms
    for floor, icon in PROGRESS_ICONS:
        if percent > floor:
            return icon
    return PROGRESS_ICON_LAST


def severity_for(remaining_ms: int) -> Severity:
    if remaining_ms < ERROR_BELOW_MS:
        return "error"
    if remaining_ms < WARNING_BELOW_MS:
        return "warning"
    return "normal"


def format_remaining(remaining_ms: int) -> str:
    minutes = remaining_ms // 60_000
    seconds = (remaining_ms % 60_000) // 1000
    tenths = (remaining_ms % 1000) // 100
    return f"{minutes}m {seconds}.{tenths}s"


def render_status(
    now_ms: int,
    *,
    monitoring: bool,
    alarm_active: bool,
    elapsed_ms: int,
    threshold_ms: int,
) -> StatusDisplay:
    if not monitoring:
        return paused_status()

    if alarm_active:
        return alarm_status(now_ms)

    if threshold_ms <= 0:
        return active_status()

    remaining = max(0, threshold_ms - elapsed_ms)
    # <= 0: the display tick ran before the idle check caught up.
    # >= threshold: the baseline was just reset.
    if remaining <= 0 or remaining >= threshold_ms:
        return active_status()

    icon = progress_icon(remaining, threshold_ms)
    return StatusDisplay(f"{icon} {format_remaining(remaining)}", severity_for(remaining), icon)
