"""
Logging for the feed service.

Services and endpoints log through ``logging.getLogger(__name__)``:
successful writes at INFO, degraded reads and store failures at
WARNING/ERROR.  Passwords and hashes never reach a log record.

``configure_logging`` is what ``create_app`` calls: it installs the
handlers once and lines uvicorn's own loggers up with the configured
level, so request logs and application logs share one threshold.
"""

import logging
from pathlib import Path
from typing import Optional

from .config import Settings


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> bool:
    """Attach a console handler, and a file handler when ``logfile`` is set.

    Does nothing if the root logger already has handlers (a test runner
    or an earlier call installed them).  Returns whether handlers were
    installed.  Unknown level names fall back to ``INFO``.
    """
    root = logging.getLogger()
    if root.handlers:
        return False

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    return True


def configure_logging(config: Settings) -> None:
    """Set up logging from the application settings."""
    level = getattr(logging, config.log_level.upper(), logging.INFO)
    installed = setup_logging(config.log_level, config.log_file or None)
    for name in SERVER_LOGGERS:
        logging.getLogger(name).setLevel(level)
    if installed:
        logging.getLogger(__name__).debug(
            "Logging at %s%s",
            logging.getLevelName(level),
            f", also to {config.log_file}" if config.log_file else "",
        )
