# utils/logger.py
"""
Centralized logging configuration for MapMeasure.
Provides consistent logging across all modules with file and console output.
"""

import logging
import logging.handlers
from pathlib import Path
from constants import (
    LOG_FORMAT,
    LOG_DATE_FORMAT,
    LOG_DIR_NAME,
    LOG_FILE_NAME,
    LOG_MAX_BYTES,
    LOG_BACKUP_COUNT
)


_loggers = {}  # Cache for loggers


def setup_logging(log_dir: str = None, level: int = logging.INFO) -> Path:
    """
    Set up the root logger with file and console handlers.

    Args:
        log_dir: Directory to store log files. If None, uses ~/.mapmeasure/logs.
        level: Logging level (default: INFO)

    Returns:
        Path of the log file
    """
    if log_dir is None:
        log_dir = Path.home() / LOG_DIR_NAME / "logs"
    else:
        log_dir = Path(log_dir)

    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    formatter = logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    # File handler with rotation
    file_handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=LOG_MAX_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding='utf-8'
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    # Only show warnings and errors in console
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    root_logger.info("=" * 60)
    root_logger.info("MapMeasure logging initialized")
    root_logger.info(f"Log file: {log_file}")
    root_logger.info("=" * 60)

    return log_file


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Name of the module (typically __name__)

    Returns:
        Logger instance configured with the application's settings
    """
    if name not in _loggers:
        logger = logging.getLogger(name)
        _loggers[name] = logger

    return _loggers[name]


def log_exception(logger: logging.Logger, exc: Exception, context: str = None) -> None:
    """
    Log an exception with context information and its traceback.

    Args:
        logger: Logger instance to use
        exc: Exception to log
        context: Additional context information
    """
    msg = "Exception occurred"
    if context:
        msg += f" during {context}"
    msg += f": {type(exc).__name__}: {str(exc)}"

    # The exception may already have been handled, so pass it explicitly
    logger.error(msg, exc_info=(type(exc), exc, exc.__traceback__))
