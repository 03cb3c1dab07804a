from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from ..core.config import DATA_DIR

LOG_LEVEL = os.getenv("DESK_CALENDAR_LOG_LEVEL", "INFO").upper()
LOG_DIR = Path(os.getenv("DESK_CALENDAR_LOG_DIR") or DATA_DIR / "logs")

_INITIALIZED = False


def configure_logging(*, level: Optional[str] = None, log_dir: Optional[Path] = None) -> None:
    """Configure application-wide logging with console and rotating file output."""

    global _INITIALIZED
    if _INITIALIZED:
        return

    resolved_level = getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO)
    target_dir = log_dir or LOG_DIR
    target_dir.mkdir(parents=True, exist_ok=True)
    log_path = target_dir / "desk_calendar.log"

    handlers: list[logging.Handler] = [
        logging.StreamHandler(),
        RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=5, encoding="utf-8"),
    ]

    logging.basicConfig(
        level=resolved_level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )

    _INITIALIZED = True
    logging.getLogger(__name__).debug("Logging configured. Output file: %s", log_path)
