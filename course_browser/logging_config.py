from __future__ import annotations

import logging
import os
from typing import Optional

from pythonjsonlogger import jsonlogger

PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(
        level: Optional[int] = None,
        force_format: Optional[str] = None,
) -> None:
    """
    Configure the root logger for the course browser.

    Format (first match wins):
        1) force_format argument ("json" or "plain")
        2) env var COURSE_BROWSER_LOG_FORMAT
        3) "json"

    Level: the `level` argument, else env var COURSE_BROWSER_LOG_LEVEL
    (a level name such as "DEBUG"), else INFO.
    """
    format_mode = (force_format or os.getenv("COURSE_BROWSER_LOG_FORMAT", "json")).lower()

    if level is None:
        level_name = os.getenv("COURSE_BROWSER_LOG_LEVEL", "INFO").upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    handler = logging.StreamHandler()
    if format_mode == "plain":
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
    else:
        # Structured `extra={...}` fields end up as JSON keys.
        handler.setFormatter(jsonlogger.JsonFormatter(JSON_FORMAT))

    # Replace existing handlers so reloads don't duplicate output
    root.handlers.clear()
    root.addHandler(handler)

    # Dash's dev server logs every request at INFO
    logging.getLogger("werkzeug").setLevel(max(level, logging.WARNING))
