from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from typing import Union

from packages.shared.paths import ensure_app_dirs, log_path

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """
    Console plus a rotating file next to the config. ``level`` accepts a name
    ("DEBUG") so it can come straight from the command line; DEBUG shows the
    per-tick idle phase and display lines.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")

    ensure_app_dirs()
    root = logging.getLogger()
    root.setLevel(level)

    if root.handlers:
        return

    fmt = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(fmt)
    root.addHandler(console)

    file_handler = RotatingFileHandler(str(log_path()), maxBytes=1_000_000, backupCount=2, encoding="utf-8")
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)
    logging.getLogger(__name__).info("Logging to %s at %s", log_path(), logging.getLevelName(level))
