"""
Shared utilities: logging and locking.
"""

from .logger import GateLogger, get_logger, setup_logger, ROOT_LOGGER_NAME
from .rwlock import ReadWriteLock

__all__ = [
    "GateLogger",
    "get_logger",
    "setup_logger",
    "ROOT_LOGGER_NAME",
    "ReadWriteLock",
]
