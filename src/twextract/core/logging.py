#!/usr/bin/env python3
"""
Structured logging for twextract with context propagation.

Features:
- Environment-driven configuration (LOG_LEVEL, LOG_OUTPUT)
- JSON output in production, readable lines in development
- Context management (e.g. a per-tweet id) through contextvars
- Library-friendly "none" output mode that installs no handlers
"""
from __future__ import annotations

import json
import logging
import logging.handlers
import os
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import Any, Dict, Optional

_request_context: ContextVar[Dict[str, Any]] = ContextVar("request_context", default={})

_RESERVED_RECORD_KEYS = frozenset(
    (
        "name", "msg", "args", "levelname", "levelno", "pathname", "filename", "module",
        "lineno", "funcName", "created", "msecs", "relativeCreated", "thread", "threadName",
        "processName", "process", "message", "exc_info", "exc_text", "stack_info", "context",
        "taskName",
    )
)


class StructuredFormatter(logging.Formatter):
    """
    Formatter that outputs JSON for production or readable format for development.
    """

    def __init__(self, use_json: bool = False):
        self.use_json = use_json
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        context = _request_context.get({})
        if getattr(record, "context", None):
            context = {**context, **record.context}

        if self.use_json:
            return self._format_json(record, context)
        return self._format_readable(record, context)

    def _format_json(self, record: logging.LogRecord, context: Dict[str, Any]) -> str:
        """Format log record as JSON."""
        log_entry = {
            "timestamp": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "module": record.name,
            "message": record.getMessage(),
        }
        if context:
            log_entry["context"] = context
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_RECORD_KEYS:
                log_entry[key] = value

        return json.dumps(log_entry, default=str)

    def _format_readable(self, record: logging.LogRecord, context: Dict[str, Any]) -> str:
        """Format log record in human-readable format."""
        timestamp = self.formatTime(record, datefmt="%Y-%m-%d %H:%M:%S")

        context_str = ""
        if context:
            context_str = " | " + " ".join(f"{k}={v}" for k, v in context.items())

        base_msg = f"{timestamp} | {record.levelname:5} | {record.name} | {record.getMessage()}{context_str}"
        if record.exc_info:
            base_msg += f"\n{self.formatException(record.exc_info)}"
        return base_msg


class ContextLogger(logging.LoggerAdapter):
    """
    Logger adapter that automatically includes context in log messages.
    """

    def __init__(self, logger: logging.Logger, extra: Optional[Dict[str, Any]] = None):
        super().__init__(logger, extra or {})

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple[str, Dict[str, Any]]:
        context = _request_context.get({})
        if self.extra:
            context = {**context, **self.extra}

        if kwargs.get("extra"):
            call_context = kwargs["extra"].pop("context", {})
            context = {**context, **call_context}

        kwargs.setdefault("extra", {})
        kwargs["extra"]["context"] = context
        return msg, kwargs


def get_log_level() -> str:
    """Get log level from environment or default to INFO."""
    return os.environ.get("LOG_LEVEL", "INFO").upper()


def get_log_output() -> str:
    """Get log output mode (console, file, both, none) from environment."""
    return os.environ.get("LOG_OUTPUT", "console").lower()


def is_production_env() -> bool:
    """Detect if running in production environment."""
    env_indicators = [
        os.environ.get("ENVIRONMENT") == "production",
        os.environ.get("ENV") == "production",
        os.environ.get("TWEXTRACT_ENV") == "production",
        os.environ.get("KUBERNETES_SERVICE_HOST") is not None,
    ]
    return any(env_indicators)


def setup_structured_logging(
    name: str,
    log_level: Optional[str] = None,
    log_output: Optional[str] = None,
    force_json: Optional[bool] = None,
    context: Optional[Dict[str, Any]] = None,
) -> ContextLogger:
    """
    Setup standardized structured logging.

    Args:
        name: Logger name (typically __name__)
        log_level: Log level override (DEBUG, INFO, WARNING, ERROR)
        log_output: Output mode override (console, file, both, none)
        force_json: Force JSON output regardless of environment detection
        context: Default context to include in all log messages

    Returns:
        ContextLogger instance with structured logging configured
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        return ContextLogger(logger, context)

    level = (log_level or get_log_level()).upper()
    output = log_output or get_log_output()
    use_json = force_json if force_json is not None else is_production_env()

    logger.setLevel(getattr(logging, level, logging.INFO))

    if output == "none":
        # Library mode: leave handling to whoever configures the root logger
        logger.addHandler(logging.NullHandler())
        return ContextLogger(logger, context)

    formatter = StructuredFormatter(use_json=use_json)

    if output in ("console", "both"):
        _setup_console_handlers(logger, formatter)
    if output in ("file", "both"):
        _setup_file_handler(logger, formatter, name)

    logger.propagate = False
    return ContextLogger(logger, context)


def _setup_console_handlers(logger: logging.Logger, formatter: StructuredFormatter) -> None:
    """Route DEBUG/INFO to stdout and WARNING and above to stderr."""
    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(formatter)
    stdout_handler.setLevel(logging.DEBUG)
    stdout_handler.addFilter(lambda record: record.levelno < logging.WARNING)
    logger.addHandler(stdout_handler)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    stderr_handler.setLevel(logging.WARNING)
    logger.addHandler(stderr_handler)


def _setup_file_handler(logger: logging.Logger, formatter: StructuredFormatter, name: str) -> None:
    """Setup rotating file handler under ./logs."""
    logs_dir = Path(os.environ.get("TWEXTRACT_LOG_DIR", Path.cwd() / "logs"))
    logs_dir.mkdir(parents=True, exist_ok=True)

    module_basename = name.split(".")[-1]
    file_handler = logging.handlers.RotatingFileHandler(
        logs_dir / f"{module_basename}.log",
        maxBytes=5 * 1024 * 1024,  # 5MB
        backupCount=3,
    )
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)


def set_context(**kwargs: Any) -> None:
    """
    Set logging context for the current execution context.

    Args:
        **kwargs: Context key-value pairs (e.g., tweet_id="123")
    """
    _request_context.set({**_request_context.get({}), **kwargs})


def get_context() -> Dict[str, Any]:
    """Get current logging context."""
    return _request_context.get({}).copy()


class LogContext:
    """
    Context manager for temporary logging context.

    Usage:
        with LogContext(tweet_id="123"):
            logger.info("Extracting entities")  # Will include context
    """

    def __init__(self, **kwargs: Any):
        self.new_context = kwargs
        self.old_context: Dict[str, Any] = {}

    def __enter__(self):
        self.old_context = get_context()
        set_context(**{**self.old_context, **self.new_context})
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        _request_context.set(self.old_context)


def get_logger(
    name: str,
    log_level: Optional[str] = None,
    include_console: Optional[bool] = None,
    include_file: Optional[bool] = None,
    context: Optional[Dict[str, Any]] = None,
) -> ContextLogger:
    """
    Get a structured logger, translating console/file flags into an output mode.
    """
    if include_console is False and include_file is True:
        output = "file"
    elif include_console is True and include_file is False:
        output = "console"
    elif include_console is True and include_file is True:
        output = "both"
    elif include_console is False:
        output = "none"
    else:
        output = None

    return setup_structured_logging(name=name, log_level=log_level, log_output=output, context=context)
