"""
Logging system for rustgate.
Provides human-readable logs on stderr and an optional daily log file.

Library modules log through logging.getLogger(__name__); everything below
the "rustgate" logger is routed to the handlers configured here.
"""

import copy
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

ROOT_LOGGER_NAME = "rustgate"


# ANSI color codes for terminal output
class Colors:
    RESET = "\033[0m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"
    BOLD = "\033[1m"


class ColoredFormatter(logging.Formatter):
    """Custom formatter with colors for console output."""

    LEVEL_COLORS = {
        logging.DEBUG: Colors.CYAN,
        logging.INFO: Colors.GREEN,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.BOLD + Colors.RED,
    }

    def format(self, record):
        # Work on a copy so the file handler never sees escape codes
        record = copy.copy(record)
        color = self.LEVEL_COLORS.get(record.levelno, Colors.WHITE)
        record.levelname = f"{color}{record.levelname}{Colors.RESET}"
        record.msg = f"{color}{record.msg}{Colors.RESET}"
        return super().format(record)


class GateLogger:
    """
    Central logging system for rustgate.

    Features:
    - Console output with colors (stderr, so stdout stays machine-readable)
    - Optional file output, one file per day
    """

    _instance: Optional['GateLogger'] = None
    _initialized: bool = False

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, log_dir: str = "", log_level: str = "WARNING"):
        if GateLogger._initialized:
            return

        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        self.main_logger = self._create_logger(ROOT_LOGGER_NAME, log_level)

        GateLogger._initialized = True

    def _create_logger(self, name: str, level: str) -> logging.Logger:
        """Create a configured logger instance."""
        logger = logging.getLogger(name)
        logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
        logger.handlers.clear()
        logger.propagate = False

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(ColoredFormatter(
            "%(asctime)s | %(levelname)s | %(message)s",
            datefmt="%H:%M:%S"
        ))
        logger.addHandler(console_handler)

        if self.log_dir is not None:
            log_file = self.log_dir / f"rustgate_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setFormatter(logging.Formatter(
                "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S"
            ))
            logger.addHandler(file_handler)

        return logger

    def info(self, msg: str, *args, **kwargs):
        """Log info message."""
        self.main_logger.info(msg, *args, **kwargs)

    def debug(self, msg: str, *args, **kwargs):
        """Log debug message."""
        self.main_logger.debug(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        """Log warning message."""
        self.main_logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        """Log error message."""
        self.main_logger.error(msg, *args, **kwargs)

    def gate(self, name: str, selector: str, result: bool | None, **kwargs):
        """
        Log a gate evaluation with structured format.

        Args:
            name: Gate or attribute name
            selector: Selector text that was evaluated
            result: Evaluation result, None when evaluation failed
            **kwargs: Additional fields
        """
        outcome = "ERROR" if result is None else ("TRUE" if result else "FALSE")
        parts = [f"[GATE:{outcome}]", f"name={name}", f"selector={selector}"]
        for key, value in kwargs.items():
            parts.append(f"{key}={value}")

        msg = " | ".join(parts)
        if result is None:
            self.main_logger.warning(msg)
        else:
            self.main_logger.info(msg)


# Global logger instance
_logger: Optional[GateLogger] = None


def get_logger(log_dir: str = "", log_level: str = "WARNING") -> GateLogger:
    """Get or create the global logger instance."""
    global _logger
    if _logger is None:
        _logger = GateLogger(log_dir, log_level)
    return _logger


def setup_logger(log_dir: str = "", log_level: str = "WARNING") -> GateLogger:
    """Initialize the logger with custom settings."""
    global _logger
    GateLogger._initialized = False
    GateLogger._instance = None
    _logger = GateLogger(log_dir, log_level)
    return _logger
