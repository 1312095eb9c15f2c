"""Process-wide logging setup."""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_NOISY_LOGGERS = (
    "uvicorn.access",
    "sqlalchemy.engine",
    "urllib3",
    "google.auth",
    "cachecontrol",
    "httpx",
)


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """Install a single stdout handler on the root logger."""

    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper() if isinstance(level, str) else level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root_logger


__all__ = ["configure_logging"]
