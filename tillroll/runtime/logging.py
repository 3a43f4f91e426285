"""Centralized logging configuration for tillroll.

Usage:
    from tillroll.runtime import get_logger
    logger = get_logger(__name__)

    logger.debug("Per-stage parse results")
    logger.info("Request handled")

Environment variables:
    TILLROLL_LOG_LEVEL: Set log level (DEBUG, INFO, WARNING, ERROR). Default: INFO
"""

import logging
import os
import sys

DEFAULT_LOG_LEVEL = logging.INFO

LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"
LOG_FORMAT_DEBUG = "%(levelname)s [%(name)s:%(lineno)d] %(message)s"

LOGGER_NAMESPACE = "tillroll"

_LEVEL_NAMES = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}

_logging_configured = False


def configure_logging(level: int | None = None) -> None:
    """Install a stderr handler on the tillroll logger namespace (once).

    Args:
        level: Log level to use. If None, reads TILLROLL_LOG_LEVEL
               or uses DEFAULT_LOG_LEVEL.
    """
    global _logging_configured

    if _logging_configured:
        return

    if level is None:
        env_level = os.environ.get("TILLROLL_LOG_LEVEL", "").upper()
        level = _LEVEL_NAMES.get(env_level, DEFAULT_LOG_LEVEL)

    log_format = LOG_FORMAT_DEBUG if level == logging.DEBUG else LOG_FORMAT

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(log_format))

    root_logger = logging.getLogger(LOGGER_NAMESPACE)
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    root_logger.propagate = False

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name (typically __name__)."""
    configure_logging()
    # Module names already start with "tillroll." inside the package
    if name == LOGGER_NAMESPACE or name.startswith(f"{LOGGER_NAMESPACE}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


def set_log_level(level: int) -> None:
    """Change the log level at runtime.

    Args:
        level: New log level (e.g., logging.DEBUG)
    """
    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(level)

    for handler in logger.handlers:
        if level == logging.DEBUG:
            handler.setFormatter(logging.Formatter(LOG_FORMAT_DEBUG))
        else:
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
