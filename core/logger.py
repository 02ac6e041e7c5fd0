"""Logging setup shared by the API, services and database seeding.

Every module asks `get_logger("package.module")` for its logger. All loggers
share one stream handler and, unless ``LOG_DIR`` is set to an empty string,
one size-rotated ``app.log`` file.

Environment:
    LOG_DIR: directory for ``app.log`` (default ``<repo>/logs``; empty disables the file).
    LOG_LEVEL: level name such as ``DEBUG`` (default ``INFO``).
    LOG_MAX_BYTES / LOG_BACKUP_COUNT: rotation policy (default 5 MB x 3).
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import List

LOG_DIR = os.getenv("LOG_DIR", os.path.join(os.path.dirname(__file__), "..", "logs"))
LOG_LEVEL = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)
LOG_MAX_BYTES = int(os.getenv("LOG_MAX_BYTES", str(5 * 1024 * 1024)))
LOG_BACKUP_COUNT = int(os.getenv("LOG_BACKUP_COUNT", "3"))
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _build_handlers(log_dir: str) -> List[logging.Handler]:
    formatter = logging.Formatter(LOG_FORMAT)
    stream = logging.StreamHandler()
    stream.setFormatter(formatter)
    handlers = [stream]
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        rotating = RotatingFileHandler(
            os.path.join(log_dir, "app.log"), maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT,
        )
        rotating.setFormatter(formatter)
        handlers.append(rotating)
    return handlers


_handlers = _build_handlers(LOG_DIR)


def get_logger(name: str = __name__, level: int = LOG_LEVEL) -> logging.Logger:
    """Return ``name``'s logger attached to the shared handlers.

    Repeated calls for one name return the same logger without stacking
    handlers, so module-level ``logger = get_logger(...)`` is safe on reload.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(level)
        for handler in _handlers:
            logger.addHandler(handler)
    return logger
