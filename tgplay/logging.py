from __future__ import annotations

import logging
import os
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from .settings import Settings


def _resolve_log_dir(settings: Settings) -> Path:
    """Resolve the log directory.

    - If TGPLAY_LOG_DIR is absolute, use it directly.
    - Otherwise, treat it as relative to the app directory.
    """
    p = Path(settings.TGPLAY_LOG_DIR).expanduser()
    if p.is_absolute():
        return p
    return Path(settings.TGPLAY_HOME) / p


def setup_logging(settings: Settings) -> Path:
    """Send ``tgplay`` logs to a rotating file and return its path.

    Rotation:
      - Daily rotation at midnight.
      - Keep the last `TGPLAY_LOG_BACKUP_COUNT` rotated files.

    Notes:
      - No console handler: the live display owns the terminal.
      - Safe to call more than once (handlers are reset).
    """
    log_dir = _resolve_log_dir(settings)
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / "tgplay.log"

    level_name = str(settings.TGPLAY_LOG_LEVEL or "INFO").upper().strip()
    level = getattr(logging, level_name, logging.INFO)

    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

    file_handler = TimedRotatingFileHandler(
        filename=str(log_file),
        when="midnight",
        interval=1,
        backupCount=max(0, int(settings.TGPLAY_LOG_BACKUP_COUNT or 0)),
        encoding="utf-8",
        utc=False,
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(fmt))

    logger = logging.getLogger("tgplay")
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []
    logger.setLevel(level)
    logger.addHandler(file_handler)
    logger.propagate = False

    logger.debug("logging enabled (file=%s, level=%s)", os.fspath(log_file), level_name)
    return log_file
