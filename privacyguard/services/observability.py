"""
Structured logging for scan and compliance operations.
"""

import json
import logging
import os
import threading
from collections import deque
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import List, Optional

from ..models.config import ObservabilityConfig
from ..models.observability import (
    LogLevel, LogContext, LogEntry, create_log_context, utcnow
)
from ..exceptions import ObservabilityException


class StructuredLogger:
    """Structured logger with JSON output and context propagation."""

    def __init__(
        self,
        name: str = "privacyguard",
        level: LogLevel = LogLevel.INFO,
        log_format: str = "json",
        log_file: Optional[str] = None,
        enabled: bool = True
    ):
        """
        Initialize structured logger.

        Args:
            name: Logger name
            level: Log level
            log_format: Log format ("json" or "text")
            log_file: Optional log file path
            enabled: Whether records are emitted at all
        """
        self.name = name
        self.level = level
        self.log_format = log_format
        self.log_file = log_file
        self.enabled = enabled

        # Thread-local storage for context
        self._local = threading.local()

        self._logger = logging.getLogger(name)
        self._logger.setLevel(level.python_level)
        self._logger.propagate = False
        self._logger.handlers.clear()
        self._setup_handlers()

        # Log entries kept for retrieval
        self._log_entries: deque = deque(maxlen=1000)
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: ObservabilityConfig) -> "StructuredLogger":
        """Create a logger from observability configuration."""
        return cls(
            name=config.logger_name,
            level=LogLevel.from_name(config.log_level),
            log_format=config.log_format,
            log_file=config.log_file,
            enabled=config.logging_enabled
        )

    def _setup_handlers(self) -> None:
        """Setup log handlers."""
        if not self.enabled:
            self._logger.addHandler(logging.NullHandler())
            return

        self._logger.addHandler(logging.StreamHandler())

        if self.log_file:
            try:
                self._logger.addHandler(logging.FileHandler(self.log_file))
            except OSError as e:
                raise ObservabilityException(
                    f"Cannot open log file '{self.log_file}': {str(e)}"
                )

        if self.log_format == "json":
            formatter = JsonFormatter()
        else:
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )

        for handler in self._logger.handlers:
            handler.setLevel(self.level.python_level)
            handler.setFormatter(formatter)

    def set_context(self, context: LogContext) -> None:
        """Set logging context for current thread."""
        self._local.context = context

    def get_context(self) -> Optional[LogContext]:
        """Get logging context for current thread."""
        return getattr(self._local, 'context', None)

    def clear_context(self) -> None:
        """Clear logging context for current thread."""
        if hasattr(self._local, 'context'):
            delattr(self._local, 'context')

    @contextmanager
    def operation(self, operation: str, component: Optional[str] = None, **metadata):
        """
        Bind a fresh log context for the duration of an operation.

        The previous context, if any, is restored afterwards.
        """
        previous = self.get_context()
        context = create_log_context(operation=operation, component=component, **metadata)
        self.set_context(context)
        try:
            yield context
        finally:
            if previous is None:
                self.clear_context()
            else:
                self.set_context(previous)

    def log(
        self,
        level: LogLevel,
        message: str,
        context: Optional[LogContext] = None,
        exception: Optional[Exception] = None,
        **kwargs
    ) -> None:
        """
        Log a structured message.

        Args:
            level: Log level
            message: Log message
            context: Optional log context (uses thread-local if not provided)
            exception: Optional exception to log
            **kwargs: Additional context data
        """
        if not self.enabled or level.python_level < self.level.python_level:
            return

        if context is None:
            context = self.get_context()

        if context is None:
            context = create_log_context()

        if kwargs:
            context = LogContext(
                correlation_id=context.correlation_id,
                operation=context.operation,
                component=context.component,
                location=context.location,
                metadata={**context.metadata, **kwargs}
            )

        log_entry = LogEntry(
            timestamp=utcnow(),
            level=level,
            message=message,
            context=context,
            logger_name=self.name,
            exception=str(exception) if exception else None
        )

        with self._lock:
            self._log_entries.append(log_entry)

        if self.log_format == "json":
            self._logger.log(level.python_level, json.dumps(log_entry.to_dict(), default=str))
        else:
            self._logger.log(level.python_level, self._format_text_message(log_entry))

    def _format_text_message(self, log_entry: LogEntry) -> str:
        """Format log entry for text output."""
        parts = [log_entry.message]

        if log_entry.context.correlation_id:
            parts.append(f"correlation_id={log_entry.context.correlation_id}")

        if log_entry.context.operation:
            parts.append(f"operation={log_entry.context.operation}")

        if log_entry.context.location:
            parts.append(f"location={log_entry.context.location}")

        for key, value in log_entry.context.metadata.items():
            parts.append(f"{key}={value}")

        return " | ".join(parts)

    def debug(self, message: str, **kwargs) -> None:
        """Log debug message."""
        self.log(LogLevel.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        """Log info message."""
        self.log(LogLevel.INFO, message, **kwargs)

    def warn(self, message: str, **kwargs) -> None:
        """Log warning message."""
        self.log(LogLevel.WARN, message, **kwargs)

    def error(self, message: str, exception: Optional[Exception] = None, **kwargs) -> None:
        """Log error message."""
        self.log(LogLevel.ERROR, message, exception=exception, **kwargs)

    def get_recent_logs(self, limit: int = 100) -> List[LogEntry]:
        """Get recent log entries."""
        with self._lock:
            return list(self._log_entries)[-limit:]


class JsonFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        message = record.getMessage()

        # Messages from StructuredLogger are already JSON
        if message.startswith('{'):
            return message

        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "message": message,
            "logger": record.name,
            "thread_id": str(record.thread),
            "process_id": str(os.getpid())
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)
