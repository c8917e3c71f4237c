"""Logging configuration for the qubit_field command line."""

import logging
from pathlib import Path
from typing import Optional

from .config import LOG_FORMAT, LOG_LEVEL


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[Path] = None,
    name: str = "qubit_field",
) -> logging.Logger:
    """
    Attach handlers to the package logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ...); defaults to
            QUBIT_FIELD_LOG_LEVEL.
        log_file: Optional file to mirror console output into.
        name: Logger to configure.

    Returns:
        The configured logger.
    """
    if level is None:
        level = LOG_LEVEL
    numeric = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger(name)
    logger.setLevel(numeric)
    for h in logger.handlers[:]:
        h.close()
        logger.removeHandler(h)

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(numeric)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
