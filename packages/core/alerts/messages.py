from __future__ import annotations

TITLE = "Get Back To Work"

_BODIES = {
    "IDLE_ALARM": "You have been idle for too long! Get back to work!",
    "SOUND_ALERT": "Get back to work!",
    "WELCOME_BACK": "Welcome back to work!",
    "MONITORING_STARTED": "Idle monitoring started",
    "MONITORING_STOPPED": "Idle monitoring stopped",
    "TIMER_RESET": "Timer reset",
}


def build_alert_payload(kind: str, detail: str = "") -> dict:
    body = _BODIES.get(kind, kind.replace("_", " ").capitalize())
    if detail:
        body = f"{body}: {detail}"
    return {"title": TITLE, "body": body}


def idle_time_changed_payload(minutes: float) -> dict:
    return {"title": TITLE, "body": f"Idle time set to {minutes:g} minutes"}
