# -*- coding: utf-8 -*-
"""
Logging configuration.

One "startupflo" logger with a rotating file handler and a console handler.
Modules obtain child loggers through get_logger(__name__).
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Optional

# Will be set by setup_logger
_logger: Optional[logging.Logger] = None

# Keys whose values never reach a log line
SENSITIVE_KEYS = ("password", "confirm_password", "confirmPassword",
                  "accessToken", "refreshToken", "access_token", "refresh_token")


def setup_logger() -> logging.Logger:
    """
    Setup application logger with file and console handlers.
    """
    global _logger

    # Import here to avoid circular imports
    from app.config import Config

    Config.LOGS_DIR.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("startupflo")
    logger.setLevel(Config.LOG_LEVEL)
    logger.handlers.clear()

    # File handler with rotation (everything)
    file_handler = RotatingFileHandler(
        Config.LOG_PATH,
        maxBytes=Config.LOG_MAX_BYTES,
        backupCount=Config.LOG_BACKUP_COUNT,
        encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    logger.addHandler(file_handler)

    # Console handler (INFO and above)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter("%(levelname)-8s | %(message)s"))
    logger.addHandler(console_handler)

    _logger = logger
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger for a module.
    """
    global _logger

    if _logger is None:
        _logger = setup_logger()

    return _logger.getChild(name)


def mask_sensitive(data: Dict[str, Any]) -> Dict[str, Any]:
    """Return a shallow copy of a request/response body safe for logging."""
    masked = {}
    for key, value in data.items():
        if key in SENSITIVE_KEYS and value:
            masked[key] = "********"
        elif isinstance(value, dict):
            masked[key] = mask_sensitive(value)
        else:
            masked[key] = value
    return masked
