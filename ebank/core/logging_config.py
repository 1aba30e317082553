"""
Logging configuration for the e-bank service.

Creates a rotating file logger under LOG_DIR (when set) plus a console handler.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ebank.core.config import LOG_DIR, LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

MAX_BYTES = 10 * 1024 * 1024  # 10 MB
BACKUP_COUNT = 5

SERVICE_LOGGER = "ebank"


def _setup_service_logger(name: str, log_dir: str, level: int) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level)
    # Avoid duplicate handlers if setup_logging is called multiple times
    logger.handlers = []
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)

    if log_dir:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            path / "ebank.log",
            maxBytes=MAX_BYTES,
            backupCount=BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
    return logger


def setup_logging(level: str = LOG_LEVEL, log_dir: str = LOG_DIR) -> None:
    """
    Configure root + service loggers for the e-bank backend.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logging.getLogger().setLevel(numeric_level)
    _setup_service_logger(SERVICE_LOGGER, log_dir, numeric_level)

    # SQL statements are echoed through SQL_ECHO, keep the engine logger quiet otherwise
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Convenience wrapper to get a logger under the service namespace.
    """
    if name == SERVICE_LOGGER or name.startswith(SERVICE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{SERVICE_LOGGER}.{name}")
