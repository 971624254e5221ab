"""
Structured logging configuration

Provides consistent logging across the service with:
- JSON output for production and log files
- Colourised human-readable output for development
- Request and pipeline-run correlation IDs
- Redaction of secret-looking fields
"""

import json
import logging
import os
import sys
from contextvars import ContextVar
from datetime import datetime, UTC
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

SENSITIVE_KEY_TOKENS = ("password", "secret", "token", "api_key", "apikey", "authorization")

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)
run_id_var: ContextVar[Optional[str]] = ContextVar("run_id", default=None)

# Attributes every LogRecord carries; anything else came in through `extra`
_STANDARD_RECORD_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
    "taskName",
}


def _is_sensitive_key(key: str) -> bool:
    lowered = key.lower()
    return any(token in lowered for token in SENSITIVE_KEY_TOKENS)


def redact(value: Any, key: str = "") -> Any:
    """Recursively mask values stored under secret-looking keys."""
    if isinstance(value, dict):
        return {
            child_key: "***REDACTED***" if _is_sensitive_key(str(child_key)) else redact(child_value, str(child_key))
            for child_key, child_value in value.items()
        }
    if isinstance(value, (list, tuple)):
        return type(value)(redact(item, key) for item in value)
    if isinstance(value, str) and key and _is_sensitive_key(key):
        return "***REDACTED***"
    return value


def _correlation_ids() -> Dict[str, str]:
    ids = {}
    request_id = request_id_var.get()
    if request_id:
        ids["request_id"] = request_id
    run_id = run_id_var.get()
    if run_id:
        ids["run_id"] = run_id
    return ids


class StructuredFormatter(logging.Formatter):
    """JSON formatter for production and file logs"""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        log_data.update(_correlation_ids())

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": self.formatException(record.exc_info),
            }

        extra = {
            key: value
            for key, value in vars(record).items()
            if key not in _STANDARD_RECORD_ATTRS
            and not key.startswith("_")
            and key not in ("request_id", "run_id")
            and not callable(value)
        }
        if extra:
            log_data["extra"] = redact(extra)

        return json.dumps(log_data, default=str)


class DevelopmentFormatter(logging.Formatter):
    """Human-readable formatter for development"""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
        "RESET": "\033[0m",
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.COLORS["RESET"])
        reset = self.COLORS["RESET"]
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S.%f")[:-3]

        ids = _correlation_ids()
        context_parts = []
        if "request_id" in ids:
            context_parts.append(f"req:{ids['request_id'][:8]}")
        if "run_id" in ids:
            context_parts.append(f"run:{ids['run_id'][:8]}")
        context = f" [{', '.join(context_parts)}]" if context_parts else ""

        line = (
            f"{color}{timestamp}{reset} "
            f"{color}{record.levelname:8s}{reset} "
            f"{record.name:30s}{context} "
            f"{record.getMessage()}"
        )
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class LoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that merges bound context into every record"""

    def process(self, msg: str, kwargs: Any) -> tuple:
        extra = dict(self.extra or {})
        extra.update(kwargs.get("extra") or {})
        extra.update(_correlation_ids())
        kwargs["extra"] = extra
        return msg, kwargs


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    use_json: bool = False,
) -> None:
    """
    Configure application logging

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path for a rotating JSON log file
        use_json: If True, console output is JSON; otherwise human-readable
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(StructuredFormatter() if use_json else DevelopmentFormatter())
    root_logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=int(os.getenv("LOG_MAX_BYTES", str(20 * 1024 * 1024))),
            backupCount=int(os.getenv("LOG_BACKUP_COUNT", "5")),
            encoding="utf-8",
        )
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(StructuredFormatter())
        root_logger.addHandler(file_handler)

    # Suppress noisy third-party loggers
    for noisy in ("urllib3", "httpx", "httpcore", "asyncio", "google_genai"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def get_logger(name: str, **extra: Any) -> LoggerAdapter:
    """
    Get a logger with optional bound context

    Example:
        logger = get_logger(__name__, component="video_synthesizer")
        logger.info("Submitting narration", extra={"presenter_id": "Anna"})
    """
    return LoggerAdapter(logging.getLogger(name), extra)


def set_request_id(request_id: str) -> None:
    request_id_var.set(request_id)


def set_run_id(run_id: str) -> None:
    run_id_var.set(run_id)


def clear_context() -> None:
    request_id_var.set(None)
    run_id_var.set(None)


class LogTimer:
    """Context manager that logs start, completion and failure of an operation"""

    def __init__(self, logger: logging.LoggerAdapter, operation: str, level: int = logging.INFO):
        self.logger = logger
        self.operation = operation
        self.level = level
        self.start_time: Optional[float] = None

    def __enter__(self) -> "LogTimer":
        self.start_time = datetime.now().timestamp()
        self.logger.log(self.level, f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, _exc_tb) -> None:
        duration = datetime.now().timestamp() - self.start_time
        if exc_type:
            self.logger.error(
                f"Failed: {self.operation}",
                extra={"duration_seconds": duration, "error": str(exc_val)},
            )
        else:
            self.logger.log(
                self.level,
                f"Completed: {self.operation}",
                extra={"duration_seconds": duration},
            )
