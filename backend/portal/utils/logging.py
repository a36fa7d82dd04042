"""Logging for the portal backend.

Every module logs through ``get_logger(__name__)``, which places it under
the ``portal`` logger. That logger writes to the console from import time
on; ``setup_logging(settings)`` adds the rotating log file at startup.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from portal.settings import Settings, settings as default_settings

LOG_FORMAT = "[%(asctime)s.%(msecs)03d][%(levelname)s][%(filename)s:%(lineno)d]: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER_NAME = "portal"
CONSOLE_HANDLER_NAME = "portal-console"
LOG_FILE_NAME = "portal.log"


def _formatter() -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)


def _portal_logger(debug: bool) -> logging.Logger:
    """The ``portal`` logger with its console handler installed once."""
    portal_logger = logging.getLogger(ROOT_LOGGER_NAME)

    if not any(h.get_name() == CONSOLE_HANDLER_NAME for h in portal_logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(_formatter())
        portal_logger.addHandler(console_handler)
        portal_logger.setLevel(logging.DEBUG if debug else logging.INFO)

    return portal_logger


def setup_logging(settings: Settings = default_settings) -> logging.Logger:
    """Add the rotating file handler for ``settings``.

    The file is ``{logs_root}/portal.log``. When the logs directory cannot
    be created, logging stays console-only.

    Returns:
        The ``portal`` logger
    """
    portal_logger = _portal_logger(settings.debug)
    portal_logger.setLevel(logging.DEBUG if settings.debug else logging.INFO)

    log_dir = settings.get_logs_root()
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        portal_logger.warning(f"Log directory {log_dir} unavailable, logging to console only: {e}")
        return portal_logger

    log_file = str(Path(log_dir) / LOG_FILE_NAME)
    if not any(isinstance(h, RotatingFileHandler) and h.baseFilename == log_file for h in portal_logger.handlers):
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=settings.log_max_bytes,
            backupCount=settings.log_backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(_formatter())
        portal_logger.addHandler(file_handler)
        portal_logger.debug(f"Logging to {log_file}")

    return portal_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name, typically __name__ of the calling module

    Returns:
        Logger inside the ``portal.`` namespace (records propagate to the
        root logger too, which is where pytest's caplog listens)
    """
    _portal_logger(default_settings.debug)

    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"

    return logging.getLogger(name)
