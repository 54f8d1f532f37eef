"""
Logging Module for the TCG title parser.

Architecture:
- Structured logging (JSON format for production)
- Console handler with colour coding for development
- Optional rotating file handler per service
- Environment-aware configuration (see tcgtitle.config)

The parser core only logs at DEBUG level, so library callers see nothing
unless they lower LOG_LEVEL. The command-line service logs its session
summary at INFO.
"""

import logging
import sys
import json
from logging.handlers import RotatingFileHandler
from datetime import datetime, timezone
from typing import Optional

from tcgtitle.config import config


# Attributes every LogRecord carries; anything else came in through `extra=`
_RESERVED_ATTRS = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class StructuredFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.
    Outputs one JSON object per line for log aggregators.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "service": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Context passed with extra={...} (e.g. session_id, title)
        extra = {
            key: value for key, value in vars(record).items()
            if key not in _RESERVED_ATTRS and not key.startswith("_")
        }
        if extra:
            log_data["extra"] = extra

        return json.dumps(log_data, ensure_ascii=False, default=str)


class ColoredConsoleFormatter(logging.Formatter):
    """
    Colored console formatter for development.
    """

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Work on a copy so other handlers still see the plain level name
        record = logging.makeLogRecord(vars(record))
        color = self.COLORS.get(record.levelname, self.RESET)
        record.levelname = f"{color}{record.levelname:8}{self.RESET}"
        return super().format(record)


def get_logger(
    service_name: str,
    log_level: Optional[str] = None,
    enable_console: bool = True,
    enable_file: Optional[bool] = None,
    enable_json: Optional[bool] = None,
) -> logging.Logger:
    """
    Get a configured logger for a service.

    Args:
        service_name: Name of the service (e.g., 'title_parser', 'cli')
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_console: Enable console output (stderr)
        enable_file: Enable file output with rotation (defaults to config.LOG_TO_FILE)
        enable_json: Use JSON format (defaults to True in production)

    Returns:
        Configured logger instance

    Usage:
        logger = get_logger('title_parser')
        logger.debug('Parsed title', extra={'title': title})
    """
    if log_level is None:
        log_level = config.LOG_LEVEL
    level = getattr(logging, log_level.upper(), logging.INFO)

    if enable_json is None:
        enable_json = config.is_production
    if enable_file is None:
        enable_file = config.LOG_TO_FILE

    logger = logging.getLogger(service_name)
    logger.setLevel(level)
    logger.handlers.clear()  # Clear existing handlers to avoid duplicates

    # Console goes to stderr so stdout stays clean for JSON output
    if enable_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)

        if enable_json:
            console_formatter = StructuredFormatter()
        else:
            console_formatter = ColoredConsoleFormatter(
                fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )

        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

    if enable_file:
        config.LOGS_DIR.mkdir(parents=True, exist_ok=True)
        log_file = config.LOGS_DIR / f"{service_name}.log"

        # Rotating file handler: 10MB per file, keep 5 backups
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(level)

        if enable_json:
            file_formatter = StructuredFormatter()
        else:
            file_formatter = logging.Formatter(
                fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(module)s:%(funcName)s:%(lineno)d | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )

        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    # Prevent propagation to root logger
    logger.propagate = False

    return logger


def log_execution_time(logger: logging.Logger):
    """
    Decorator to log function execution time.

    Usage:
        @log_execution_time(logger)
        def run_batch():
            pass
    """
    import functools
    import time

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.time()
            try:
                result = func(*args, **kwargs)
                execution_time = time.time() - start_time
                logger.info(
                    f"{func.__name__} executed successfully",
                    extra={"execution_time_seconds": execution_time},
                )
                return result
            except Exception:
                execution_time = time.time() - start_time
                logger.error(
                    f"{func.__name__} failed after {execution_time:.2f}s",
                    exc_info=True,
                    extra={"execution_time_seconds": execution_time},
                )
                raise

        return wrapper

    return decorator
