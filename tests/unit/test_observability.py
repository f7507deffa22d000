"""
Unit tests for StructuredLogger and related components.
"""

import json
import logging
import threading

import pytest

from privacyguard.services.observability import StructuredLogger, JsonFormatter
from privacyguard.models.config import ObservabilityConfig
from privacyguard.models.observability import (
    LogLevel, LogContext, LogEntry, create_log_context, generate_correlation_id, utcnow
)
from privacyguard.exceptions import ObservabilityException


class TestLogLevel:
    """Test cases for LogLevel."""

    def test_from_name(self):
        """Test resolving level names."""
        assert LogLevel.from_name("info") == LogLevel.INFO
        assert LogLevel.from_name("WARNING") == LogLevel.WARN
        assert LogLevel.from_name("critical") == LogLevel.FATAL

    def test_from_unknown_name(self):
        """Test resolving an unknown level name."""
        with pytest.raises(ValueError):
            LogLevel.from_name("VERBOSE")

    def test_python_level(self):
        """Test mapping onto stdlib levels."""
        assert LogLevel.DEBUG.python_level == logging.DEBUG
        assert LogLevel.WARN.python_level == logging.WARNING
        assert LogLevel.FATAL.python_level == logging.CRITICAL


class TestLogContext:
    """Test cases for LogContext."""

    def test_to_dict(self):
        """Test log context dictionary conversion."""
        context = LogContext(
            correlation_id="test-123",
            operation="scan",
            component="detection",
            location="notes.txt",
            metadata={"key": "value"}
        )

        result = context.to_dict()

        assert result["correlation_id"] == "test-123"
        assert result["operation"] == "scan"
        assert result["component"] == "detection"
        assert result["location"] == "notes.txt"
        assert result["metadata"] == {"key": "value"}

    def test_create_log_context(self):
        """Test creating contexts with fresh correlation IDs."""
        first = create_log_context(operation="scan", total=3)
        second = create_log_context(operation="scan")

        assert first.correlation_id != second.correlation_id
        assert first.metadata == {"total": 3}

    def test_create_log_context_with_correlation_id(self):
        """Test keeping a supplied correlation ID."""
        context = create_log_context(correlation_id="fixed")

        assert context.correlation_id == "fixed"

    def test_generate_correlation_id(self):
        """Test correlation ID format."""
        assert len(generate_correlation_id()) == 36


class TestLogEntry:
    """Test cases for LogEntry."""

    def test_to_dict(self):
        """Test log entry dictionary conversion."""
        timestamp = utcnow()
        entry = LogEntry(
            timestamp=timestamp,
            level=LogLevel.ERROR,
            message="Scan failed",
            context=LogContext(correlation_id="test-123", operation="scan"),
            exception="boom"
        )

        result = entry.to_dict()

        assert result["timestamp"] == timestamp.isoformat()
        assert result["level"] == "ERROR"
        assert result["message"] == "Scan failed"
        assert result["logger"] == "privacyguard"
        assert result["exception"] == "boom"
        assert result["correlation_id"] == "test-123"
        assert result["operation"] == "scan"


class TestStructuredLogger:
    """Test cases for StructuredLogger."""

    def setup_method(self):
        """Set up test fixtures."""
        self.logger = StructuredLogger(name="test-logger", level=LogLevel.DEBUG)

    def test_log_entry_stored(self):
        """Test that logged messages are retrievable."""
        self.logger.info("Content scanned", total_found=2)

        entries = self.logger.get_recent_logs()

        assert len(entries) == 1
        assert entries[0].message == "Content scanned"
        assert entries[0].level == LogLevel.INFO
        assert entries[0].context.metadata == {"total_found": 2}

    def test_level_filtering(self):
        """Test that messages below the level are dropped."""
        logger = StructuredLogger(name="test-filter", level=LogLevel.WARN)

        logger.debug("hidden")
        logger.info("hidden")
        logger.warn("shown")
        logger.error("shown too", exception=ValueError("bad"))

        entries = logger.get_recent_logs()
        assert [e.level for e in entries] == [LogLevel.WARN, LogLevel.ERROR]
        assert entries[1].exception == "bad"

    def test_disabled_logger(self):
        """Test that a disabled logger records nothing."""
        logger = StructuredLogger(name="test-disabled", enabled=False)

        logger.error("ignored")

        assert logger.get_recent_logs() == []

    def test_context_management(self):
        """Test thread-local context."""
        context = create_log_context(operation="scan")

        self.logger.set_context(context)
        assert self.logger.get_context() is context

        self.logger.clear_context()
        assert self.logger.get_context() is None

    def test_operation_binds_context(self):
        """Test that entries inside an operation share its correlation ID."""
        with self.logger.operation("assess", component="manager", location="a.txt") as context:
            self.logger.info("first")
            self.logger.info("second", score=50.0)

        entries = self.logger.get_recent_logs()
        assert all(e.context.correlation_id == context.correlation_id for e in entries)
        assert entries[0].context.operation == "assess"
        assert entries[1].context.location == "a.txt"
        assert entries[1].context.metadata == {"score": 50.0}
        assert self.logger.get_context() is None

    def test_operation_restores_previous_context(self):
        """Test nesting operations."""
        outer = create_log_context(operation="outer")
        self.logger.set_context(outer)

        with self.logger.operation("inner"):
            assert self.logger.get_context().operation == "inner"

        assert self.logger.get_context() is outer

    def test_operation_restores_context_on_error(self):
        """Test that the context is restored when an operation fails."""
        with pytest.raises(RuntimeError):
            with self.logger.operation("failing"):
                raise RuntimeError("boom")

        assert self.logger.get_context() is None

    def test_kwargs_do_not_mutate_bound_context(self):
        """Test that per-call metadata stays on the entry."""
        context = create_log_context(operation="scan")
        self.logger.set_context(context)

        self.logger.info("message", extra_key=1)

        assert context.metadata == {}

    def test_context_is_thread_local(self):
        """Test that contexts do not leak between threads."""
        self.logger.set_context(create_log_context(operation="main"))
        seen = []

        thread = threading.Thread(target=lambda: seen.append(self.logger.get_context()))
        thread.start()
        thread.join()

        assert seen == [None]

    def test_recent_logs_limit(self):
        """Test limiting retrieved entries."""
        for i in range(5):
            self.logger.info(f"message {i}")

        entries = self.logger.get_recent_logs(limit=2)

        assert [e.message for e in entries] == ["message 3", "message 4"]

    def test_json_output(self, capsys):
        """Test that records are emitted as JSON."""
        logger = StructuredLogger(name="test-json", level=LogLevel.INFO)

        logger.info("Content scanned", total_found=1)

        line = capsys.readouterr().err.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["message"] == "Content scanned"
        assert record["metadata"] == {"total_found": 1}

    def test_text_output(self, capsys):
        """Test text formatting."""
        logger = StructuredLogger(name="test-text", log_format="text")

        logger.info("Content scanned", total_found=1)

        output = capsys.readouterr().err
        assert "Content scanned" in output
        assert "total_found=1" in output

    def test_log_file(self, tmp_path):
        """Test writing records to a file."""
        log_file = tmp_path / "privacy.log"
        logger = StructuredLogger(name="test-file", log_file=str(log_file))

        logger.info("written")
        for handler in logger._logger.handlers:
            handler.flush()

        assert "written" in log_file.read_text()

    def test_unwritable_log_file(self, tmp_path):
        """Test that an unopenable log file is reported."""
        with pytest.raises(ObservabilityException):
            StructuredLogger(name="test-bad-file", log_file=str(tmp_path / "missing" / "x.log"))

    def test_from_config(self):
        """Test creating a logger from configuration."""
        logger = StructuredLogger.from_config(
            ObservabilityConfig(log_level="warning", logger_name="test-config")
        )

        assert logger.name == "test-config"
        assert logger.level == LogLevel.WARN


class TestJsonFormatter:
    """Test cases for JsonFormatter."""

    def setup_method(self):
        """Set up test fixtures."""
        self.formatter = JsonFormatter()

    def _record(self, message):
        return logging.LogRecord(
            name="test", level=logging.INFO, pathname=__file__, lineno=1,
            msg=message, args=(), exc_info=None
        )

    def test_passes_json_through(self):
        """Test that pre-rendered JSON is kept."""
        message = json.dumps({"message": "done"})

        assert self.formatter.format(self._record(message)) == message

    def test_wraps_plain_messages(self):
        """Test that plain messages are wrapped."""
        result = json.loads(self.formatter.format(self._record("plain")))

        assert result["message"] == "plain"
        assert result["level"] == "INFO"
        assert result["logger"] == "test"
