"""
Centralized logging configuration for the diagnostic scoring service.

Provides structured logging with appropriate levels, formatting, and
context tracking (participant, operation, request) for debugging and monitoring.
"""

from __future__ import annotations

import json
import logging
import logging.config
import time
from collections.abc import Callable
from datetime import datetime, timezone
from functools import wraps
from pathlib import Path
from types import TracebackType
from typing import Any, ParamSpec, TypeVar

from .config import LoggingConfig, get_settings

P = ParamSpec("P")
R = TypeVar("R")

ROOT_LOGGER = "diagnostic"
CONTEXT_KEYS = ("participant", "operation", "request_id", "test_type")


class StructuredFormatter(logging.Formatter):
    """Custom formatter that outputs structured JSON logs."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as structured JSON."""
        log_entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        for key in CONTEXT_KEYS:
            if hasattr(record, key):
                log_entry[key] = getattr(record, key)
        if hasattr(record, "unresolved_dimensions"):
            log_entry["unresolved_dimensions"] = record.unresolved_dimensions

        if record.exc_info:
            exc_type, exc_value, exc_tb = record.exc_info
            if exc_type is not None and exc_value is not None:
                log_entry["exception"] = {
                    "type": exc_type.__name__,
                    "message": str(exc_value),
                    "traceback": self.formatException((exc_type, exc_value, exc_tb)),
                }

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class ContextFilter(logging.Filter):
    """Filter that adds request context to log records."""

    def __init__(self):
        super().__init__()
        self.context: dict[str, Any] = {}

    def set_context(self, **kwargs: Any) -> None:
        self.context.update(kwargs)

    def clear_context(self) -> None:
        self.context.clear()

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in self.context.items():
            setattr(record, key, value)
        return True


context_filter = ContextFilter()


def _handler(kind: str, level: str, formatter: str, **options: Any) -> dict[str, Any]:
    return {"class": kind, "level": level, "formatter": formatter, "filters": ["context"], **options}


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    structured: bool = True,
    enable_console: bool = True,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
) -> None:
    """
    Install handlers on the ``diagnostic`` logger tree and the root logger.

    The file handler always writes JSON lines; ``structured`` only switches
    the console between JSON and the plain text format.

    Example:
        >>> setup_logging(level="DEBUG", log_file="./logs/diagnostic.log")
    """
    handlers: dict[str, dict[str, Any]] = {}
    if enable_console:
        handlers["console"] = _handler(
            "logging.StreamHandler",
            level,
            "structured" if structured else "standard",
            stream="ext://sys.stdout",
        )
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers["file"] = _handler(
            "logging.handlers.RotatingFileHandler",
            level,
            "structured",
            filename=log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )

    names = list(handlers)
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "structured": {"()": StructuredFormatter},
                "standard": {
                    "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "filters": {"context": {"()": lambda: context_filter}},
            "handlers": handlers,
            "loggers": {
                ROOT_LOGGER: {"level": level, "handlers": names, "propagate": False},
                "uvicorn.access": {"level": "WARNING", "handlers": names, "propagate": False},
            },
            "root": {"level": level, "handlers": names},
        }
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger namespaced under ``diagnostic``.

    Example:
        >>> get_logger("application.api").name
        'diagnostic.application.api'
    """
    prefix = f"{ROOT_LOGGER}."
    full = name if name.startswith(prefix) or name == ROOT_LOGGER else f"{prefix}{name}"
    return logging.getLogger(full)


def set_context(**kwargs: Any) -> None:
    """
    Set logging context variables.

    Example:
        >>> set_context(participant="Ana", request_id="abc123")
    """
    context_filter.set_context(**kwargs)


def clear_context() -> None:
    context_filter.clear_context()


class LogContext:
    """Context manager for temporary logging context."""

    def __init__(self, **kwargs: Any):
        self.context: dict[str, Any] = kwargs
        self.previous_context: dict[str, Any] = {}

    def __enter__(self) -> LogContext:
        self.previous_context = context_filter.context.copy()
        context_filter.set_context(**self.context)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        context_filter.context = self.previous_context


def log_operation(
    operation: str, logger: logging.Logger | None = None
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """
    Decorator for logging function operations with their duration.

    Example:
        >>> @log_operation("score_diagnostic")
        ... def score_diagnostic(questions, responses):
        ...     pass
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            func_logger = logger or get_logger(func.__module__)

            with LogContext(operation=operation):
                func_logger.debug(f"Starting {operation}")
                started = time.perf_counter()
                try:
                    result = func(*args, **kwargs)
                except Exception as e:
                    func_logger.error(f"Failed {operation}: {str(e)}", exc_info=True)
                    raise
                duration = time.perf_counter() - started
                func_logger.info(f"Completed {operation} in {duration:.3f}s")
                return result

        return wrapper

    return decorator


def configure_logging(config: LoggingConfig | None = None) -> None:
    """
    Apply a ``LoggingConfig``; defaults to the current settings.

    Example:
        >>> configure_logging()  # honours LOG_LEVEL, LOG_FILE_PATH, APP_ENVIRONMENT ...
    """
    config = config or get_settings().logging
    setup_logging(
        level=config.level,
        log_file=config.file_path,
        structured=config.structured,
        enable_console=config.console_enabled,
        max_bytes=config.max_bytes,
        backup_count=config.backup_count,
    )
    get_logger(__name__).debug(
        "Logging configured at %s for %s", config.level, get_settings().app.environment
    )


if not logging.getLogger().handlers:
    configure_logging()
