"""Logging and metric hooks for backend calls.

Every call the Filesystem facade forwards runs inside an OperationContext,
so log records emitted during it carry the key and operation name.
"""

import json
import logging
import sys
import time
from contextvars import ContextVar
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable

key_var: ContextVar[str | None] = ContextVar("key", default=None)
operation_var: ContextVar[str | None] = ContextVar("operation", default=None)


class LogLevel(str, Enum):
    """Log levels matching Python's logging module."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class OperationContext:
    """Marks the backend key and operation for the duration of a call.

    Example:
        with OperationContext("reports/q3.pdf", "read"):
            content = backend.read("reports/q3.pdf")
    """

    def __init__(self, key: str, operation: str) -> None:
        self.key = key
        self.operation = operation
        self._key_token: Any = None
        self._operation_token: Any = None

    def __enter__(self) -> "OperationContext":
        self._key_token = key_var.set(self.key)
        self._operation_token = operation_var.set(self.operation)
        return self

    def __exit__(self, *args: Any) -> None:
        operation_var.reset(self._operation_token)
        key_var.reset(self._key_token)


def current_operation() -> dict[str, str]:
    """Key and operation of the backend call in progress, if any."""
    context = {}
    key = key_var.get()
    if key is not None:
        context["key"] = key
    operation = operation_var.get()
    if operation is not None:
        context["operation"] = operation
    return context


class StorageFormatter(logging.Formatter):
    """Formats records as one JSON object per line.

    The current operation context and a ``duration_ms`` extra are included
    when present.
    """

    def format(self, record: logging.LogRecord) -> str:
        data: dict[str, Any] = {
            "level": record.levelname,
            "message": record.getMessage(),
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "logger": record.name,
        }
        context = current_operation()
        if context:
            data["context"] = context
        duration_ms = getattr(record, "duration_ms", None)
        if duration_ms is not None:
            data["duration_ms"] = duration_ms
        return json.dumps(data)


class Timer:
    """Wall-clock timer for a backend call, in milliseconds."""

    def __init__(self) -> None:
        self.start_time: float = 0
        self.end_time: float = 0

    @property
    def duration_ms(self) -> float:
        return (self.end_time - self.start_time) * 1000

    def __enter__(self) -> "Timer":
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, *args: Any) -> None:
        self.end_time = time.perf_counter()


# Metric collection hook type
MetricCallback = Callable[[str, float, dict[str, Any]], None]

_metric_callbacks: list[MetricCallback] = []


def register_metric_callback(callback: MetricCallback) -> None:
    """Register a callback to receive metric events.

    Args:
        callback: Function(name, value, labels) to call on metrics
    """
    _metric_callbacks.append(callback)


def unregister_metric_callback(callback: MetricCallback) -> None:
    """Remove a previously registered callback. No-op if unknown."""
    if callback in _metric_callbacks:
        _metric_callbacks.remove(callback)


def emit_metric(name: str, value: float, labels: dict[str, Any] | None = None) -> None:
    """Send a metric to every registered callback.

    A failing callback never breaks the storage operation that emitted it.
    """
    labels = labels or {}
    for callback in _metric_callbacks:
        try:
            callback(name, value, labels)
        except Exception:
            pass


def emit_counter(name: str, labels: dict[str, Any] | None = None) -> None:
    emit_metric(name, 1.0, labels)


def emit_timer(name: str, duration_ms: float, labels: dict[str, Any] | None = None) -> None:
    emit_metric(name, duration_ms, labels)


def configure_logging(level: LogLevel = LogLevel.INFO, format: str = "json") -> None:
    """Install a stdout handler on the ``lazyfs`` logger.

    Args:
        level: Minimum log level
        format: "json" for StorageFormatter, "text" for plain lines
    """
    package_logger = logging.getLogger("lazyfs")
    package_logger.setLevel(level.value)
    package_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    if format == "json":
        handler.setFormatter(StorageFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        ))
    package_logger.addHandler(handler)
