"""Logging configuration for the Community Hub backend.

Sets up readable, colour-coded console logs for development and structured
JSON logs for production, plus a per-host log file under the configured
log directory.
"""

import json
import logging
import os
import socket
import sys
import traceback
from datetime import UTC, datetime
from pathlib import Path
from typing import ClassVar

from .config import get_settings_instance

# Guard against double configuration when setup_logging() is called both at
# import-time and again during lifespan startup
_LOGGING_CONFIGURED = False

_ROOT_LOGGER_NAME = "community_hub"

# Attributes every LogRecord carries; anything else came in through ``extra``
_RESERVED_RECORD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "getMessage",
    }
)


class ColoredFormatter(logging.Formatter):
    """Colored formatter for human-readable logs with aligned logger names."""

    COLORS: ClassVar[dict[str, str]] = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",
    }

    def __init__(self, use_colors: bool = True) -> None:
        super().__init__()
        self.use_colors = use_colors and sys.stdout.isatty()

    def format(self, record: logging.LogRecord) -> str:
        level_color = self.COLORS.get(record.levelname, "") if self.use_colors else ""
        reset_color = self.COLORS["RESET"] if self.use_colors else ""

        timestamp = datetime.fromtimestamp(record.created, UTC).strftime("%Y-%m-%d %H:%M:%S")

        logger_name = record.name
        if len(logger_name) > 25:
            logger_name = logger_name[:22] + "..."
        logger_name = f"{logger_name:25}"

        message = record.getMessage()

        extra_fields = []
        for key, value in record.__dict__.items():
            if key in _RESERVED_RECORD_ATTRS or value is None:
                continue
            # Only include short scalar extras to keep lines readable
            if isinstance(value, (str, int, float, bool)) and len(str(value)) < 100:
                extra_fields.append(f"{key}={value}")

        log_line = f"{timestamp} - {level_color}{record.levelname:8}{reset_color} - {logger_name} - {message}"
        if extra_fields:
            log_line += f" | {' '.join(extra_fields)}"

        if record.exc_info:
            exc_info = traceback.format_exception(*record.exc_info)
            log_line += f"\n{level_color}Exception:{reset_color}\n" + "".join(exc_info)

        return log_line


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging (for production/monitoring)."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            exc_type = record.exc_info[0]
            log_data["exception"] = {
                "type": exc_type.__name__ if exc_type is not None else "Unknown",
                "message": str(record.exc_info[1]),
                "traceback": traceback.format_exception(*record.exc_info),
            }

        for key, value in record.__dict__.items():
            if key not in _RESERVED_RECORD_ATTRS:
                log_data[key] = value

        return json.dumps(log_data, default=str)


def setup_logging() -> None:
    """Configure root, application, SQLAlchemy and uvicorn loggers once."""
    global _LOGGING_CONFIGURED  # noqa: PLW0603
    if _LOGGING_CONFIGURED:
        return

    settings = get_settings_instance()
    level = getattr(logging, settings.log_level)

    use_colors = settings.environment == "development" and sys.stdout.isatty()
    formatter = JSONFormatter() if settings.log_format == "json" else ColoredFormatter(use_colors=use_colors)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)

    # Hostname in the filename so replicas sharing a volume don't clobber each other
    log_dir = Path(settings.log_dir)
    os.makedirs(log_dir, exist_ok=True)
    log_file_path = log_dir / f"community_hub_{socket.gethostname()}.log"
    file_handler = logging.FileHandler(log_file_path, encoding="utf-8")
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)

    logging.getLogger(_ROOT_LOGGER_NAME).setLevel(level)

    # SQLAlchemy logs every statement at INFO; keep it quiet unless echo is requested
    sqlalchemy_level = logging.INFO if settings.database_echo else logging.WARNING
    for logger_name in ("sqlalchemy", "sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite"):
        log = logging.getLogger(logger_name)
        log.handlers.clear()
        log.setLevel(sqlalchemy_level)
        log.addHandler(console_handler)
        log.addHandler(file_handler)
        log.propagate = False

    # Route uvicorn through our formatter; request logging is done by TimingMiddleware
    for logger_name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        log = logging.getLogger(logger_name)
        log.handlers.clear()
        log.setLevel(min(level, logging.WARNING) if logger_name == "uvicorn.access" else level)
        log.addHandler(console_handler)
        log.addHandler(file_handler)
        log.propagate = False

    logging.getLogger(_ROOT_LOGGER_NAME).info(
        "Logging configured",
        extra={
            "log_level": settings.log_level,
            "log_format": settings.log_format,
            "environment": settings.environment,
            "use_colors": use_colors,
        },
    )
    _LOGGING_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under the application logger."""
    if name == _ROOT_LOGGER_NAME or name.startswith(_ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")
