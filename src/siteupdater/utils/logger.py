"""Application logger for siteupdater.

Records go to a rotating file under the platform log directory, the console
is left to command output. ``SITEUPDATER_LOG_LEVEL`` (a level name such as
``INFO``) raises the threshold, which is DEBUG otherwise.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "siteupdater"
LOG_LEVEL_ENV = "SITEUPDATER_LOG_LEVEL"

_LOG_FILE = "siteupdater.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3
_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

_logger: logging.Logger | None = None


def get_log_file() -> Path:
    return Path(user_log_dir(APP_NAME)) / _LOG_FILE


def _level_from_env() -> int:
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not name:
        return logging.DEBUG
    level = logging.getLevelName(name)
    # Unknown names come back as "Level <name>"
    return level if isinstance(level, int) else logging.DEBUG


def get_logger() -> logging.Logger:
    """Return the ``siteupdater`` logger, attaching the file handler on first call.

    Module loggers (``logging.getLogger(__name__)``) inside the package
    propagate into this one.
    """
    global _logger
    if _logger is not None:
        return _logger

    log_file = get_log_file()
    log_file.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))

    logger = logging.getLogger(APP_NAME)
    logger.setLevel(_level_from_env())
    if not logger.handlers:
        logger.addHandler(handler)
    logger.propagate = False

    _logger = logger
    return _logger
