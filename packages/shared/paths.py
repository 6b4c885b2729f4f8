"""
Where Get Back To Work keeps its files.

``GET_BACK_TO_WORK_HOME`` points everything at one directory (portable
installs, tests); otherwise files live under ``%APPDATA%`` or the home dir.
"""

from __future__ import annotations

import os
from pathlib import Path

APP_NAME = "GetBackToWork"
HOME_ENV = "GET_BACK_TO_WORK_HOME"

CONFIG_FILENAME = "config.json"
LOG_FILENAME = "idle-monitor.log"


def app_data_dir() -> Path:
    override = os.environ.get(HOME_ENV)
    if override:
        return Path(override).expanduser()
    base = os.environ.get("APPDATA") or str(Path.home())
    return Path(base) / APP_NAME


def config_path() -> Path:
    return app_data_dir() / CONFIG_FILENAME


def log_path() -> Path:
    return app_data_dir() / "logs" / LOG_FILENAME


def ensure_app_dirs() -> Path:
    """Create the data and log directories; returns the data directory."""
    root = app_data_dir()
    log_path().parent.mkdir(parents=True, exist_ok=True)
    return root
