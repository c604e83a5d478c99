"""
Centralized logging configuration.
"""

import logging
import sys

# Libraries that log every polling round trip at INFO
_NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: int | str = logging.INFO) -> None:
    """Configure application-wide logging."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=level,
        stream=sys.stdout,
    )
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name."""
    return logging.getLogger(name)
