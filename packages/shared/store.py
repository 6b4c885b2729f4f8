"""
JSON persistence for :class:`AppConfig`.

A missing or unreadable file is replaced with defaults so the monitor can
always start.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import ValidationError

from packages.shared.config import AppConfig
from packages.shared.paths import config_path, ensure_app_dirs

log = logging.getLogger(__name__)


class ConfigStore:
    def __init__(self) -> None:
        ensure_app_dirs()
        self._path = config_path()

    def load(self) -> AppConfig:
        if not self._path.exists():
            log.info("No config at %s, writing defaults", self._path)
            return self._restore_defaults()

        try:
            data: Any = json.loads(self._path.read_text(encoding="utf-8"))
            cfg = AppConfig.model_validate(data)
        except (OSError, ValueError, ValidationError):
            log.warning("Invalid config at %s, restoring defaults", self._path, exc_info=True)
            return self._restore_defaults()

        log.info(
            "Loaded config from %s (idle %s min, sound %s)",
            self._path,
            cfg.idle_time_in_minutes,
            cfg.sound_type if cfg.sound_enabled else "off",
        )
        return cfg

    def save(self, cfg: AppConfig) -> None:
        self._path.write_text(cfg.model_dump_json(indent=2), encoding="utf-8")
        log.info("Saved config to %s", self._path)

    def path(self) -> str:
        return str(self._path)

    def _restore_defaults(self) -> AppConfig:
        cfg = AppConfig()
        self.save(cfg)
        return cfg
