"""
Observability models for structured logging.
"""

import uuid
from datetime import datetime, timezone
from typing import Dict, Optional, Any
from dataclasses import dataclass, field
from enum import Enum


class LogLevel(Enum):
    """Log levels for structured logging."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    FATAL = "FATAL"

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        """Resolve a level name, accepting stdlib spellings."""
        aliases = {"WARNING": "WARN", "CRITICAL": "FATAL"}
        upper = name.upper()
        return cls(aliases.get(upper, upper))

    @property
    def python_level(self) -> int:
        """Equivalent stdlib logging level."""
        return _PYTHON_LEVELS[self]


_PYTHON_LEVELS = {
    LogLevel.DEBUG: 10,
    LogLevel.INFO: 20,
    LogLevel.WARN: 30,
    LogLevel.ERROR: 40,
    LogLevel.FATAL: 50,
}


@dataclass
class LogContext:
    """Context information for structured logging."""

    correlation_id: str
    operation: Optional[str] = None
    component: Optional[str] = None
    location: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert log context to dictionary."""
        return {
            "correlation_id": self.correlation_id,
            "operation": self.operation,
            "component": self.component,
            "location": self.location,
            "metadata": self.metadata
        }


@dataclass
class LogEntry:
    """Structured log entry."""

    timestamp: datetime
    level: LogLevel
    message: str
    context: LogContext
    logger_name: str = "privacyguard"
    exception: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert log entry to dictionary for JSON serialization."""
        return {
            "timestamp": self.timestamp.isoformat(),
            "level": self.level.value,
            "message": self.message,
            "logger": self.logger_name,
            "exception": self.exception,
            **self.context.to_dict()
        }


def generate_correlation_id() -> str:
    """Generate a unique correlation ID."""
    return str(uuid.uuid4())


def create_log_context(
    operation: Optional[str] = None,
    component: Optional[str] = None,
    location: Optional[str] = None,
    correlation_id: Optional[str] = None,
    **metadata
) -> LogContext:
    """Create a log context with a fresh correlation ID unless one is given."""
    return LogContext(
        correlation_id=correlation_id or generate_correlation_id(),
        operation=operation,
        component=component,
        location=location,
        metadata=metadata
    )


def utcnow() -> datetime:
    """Timezone-aware current UTC time."""
    return datetime.now(timezone.utc)
