"""Logger configuration bootstrap.

The interactive view owns the terminal, so diagnostics go to a rotating log
file under the platform's user log directory instead of the console.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

LOGGER_NAME = "treegenerator"
LOG_FILENAME = "treegenerator.log"
DEFAULT_LOG_FILE = Path(user_log_dir(LOGGER_NAME, appauthor=False)) / LOG_FILENAME
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: int = logging.WARNING, log_file: Path | None = None) -> logging.Logger:
    """Attach a rotating file handler to the package logger.

    Calling again replaces previously installed handlers. When the log file
    cannot be opened the logger falls back to a ``NullHandler``.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    target = Path(log_file) if log_file is not None else DEFAULT_LOG_FILE
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.handlers.RotatingFileHandler(
            target,
            maxBytes=1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
    except OSError:
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger


__all__ = ["DEFAULT_LOG_FILE", "LOGGER_NAME", "configure_logging"]
