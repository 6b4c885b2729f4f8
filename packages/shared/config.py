from __future__ import annotations

import logging
from typing import Any, List, Literal

from pydantic import BaseModel, Field, ValidationError

log = logging.getLogger(__name__)

SoundType = Literal["beep", "alarm", "notification"]

# Idle time choices offered by the "Change Idle Time" menu (minutes)
IDLE_TIME_PRESETS: List[int] = [1, 2, 5, 10, 15, 30]


class AppConfig(BaseModel):
    idle_time_in_minutes: float = Field(default=5, gt=0)
    check_interval_in_seconds: float = Field(default=1, gt=0)
    sound_enabled: bool = True
    sound_type: SoundType = "beep"
    sound_repeat_seconds: float = Field(default=5, gt=0)
    display_interval_ms: int = Field(default=100, ge=10)

    def to_monitor_config(self) -> dict:
        return {
            "idle_threshold_ms": int(self.idle_time_in_minutes * 60_000),
            "check_interval_ms": int(self.check_interval_in_seconds * 1000),
            "display_interval_ms": self.display_interval_ms,
            "sound_enabled": self.sound_enabled,
            "sound_type": self.sound_type,
            "sound_repeat_ms": int(self.sound_repeat_seconds * 1000),
        }


def apply_config_update(cfg: AppConfig, **changes: Any) -> AppConfig:
    """
    Return a copy of ``cfg`` with ``changes`` applied.

    The merged values are validated as a whole. On any validation error the
    original config is returned untouched, so a bad value never leaves the
    threshold half-updated.
    """
    merged = {**cfg.model_dump(), **changes}
    try:
        return AppConfig.model_validate(merged)
    except ValidationError as e:
        log.warning("Rejected config update %s: %s", changes, e.errors(include_url=False))
        return cfg
