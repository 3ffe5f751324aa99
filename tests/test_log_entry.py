"""Tests for log levels and log entries"""

import pytest

from otel_log_format import LogEntry, LogLevel
from otel_log_format.core.log_level import SEVERITY_NUMBERS, severity_number


class TestLogLevel:
    """Test log level functionality."""

    def test_log_levels(self):
        assert LogLevel.DEBUG < LogLevel.INFO
        assert LogLevel.INFO < LogLevel.NOTICE
        assert LogLevel.NOTICE < LogLevel.WARNING
        assert LogLevel.WARNING < LogLevel.ERROR
        assert LogLevel.ERROR < LogLevel.CRIT
        assert LogLevel.CRIT < LogLevel.ALERT
        assert LogLevel.ALERT < LogLevel.EMERG

    def test_from_string(self):
        assert LogLevel.from_string("DEBUG") == LogLevel.DEBUG
        assert LogLevel.from_string("warning") == LogLevel.WARNING

    def test_from_string_invalid(self):
        with pytest.raises(ValueError):
            LogLevel.from_string("verbose")

    def test_label(self):
        assert LogLevel.EMERG.label == "emerg"
        assert str(LogLevel.INFO) == "info"


class TestSeverityNumber:
    """Test OpenTelemetry severity mapping."""

    @pytest.mark.parametrize("level,expected", [
        ("debug", 5),
        ("info", 9),
        ("warning", 13),
        ("error", 17),
        ("emerg", 21),
        ("alert", 21),
    ])
    def test_known_levels(self, level, expected):
        assert severity_number(level) == expected

    def test_enum_levels(self):
        assert severity_number(LogLevel.ERROR) == 17

    def test_unknown_levels(self):
        assert severity_number("verbose") is None
        assert severity_number("notice") is None
        assert severity_number("DEBUG") is None

    def test_table(self):
        assert SEVERITY_NUMBERS["alert"] == SEVERITY_NUMBERS["emerg"]


class TestLogEntry:
    """Test log entry structure."""

    def test_create_entry(self):
        entry = LogEntry(level="info", message="Test message")
        assert entry.level == "info"
        assert entry.message == "Test message"
        assert entry.args == ()
        assert entry.logger_name == ""

    def test_enum_level_normalized(self):
        entry = LogEntry(level=LogLevel.WARNING, message="Test")
        assert entry.level == "warning"

    def test_unknown_level_kept(self):
        entry = LogEntry(level="Verbose", message="Test")
        assert entry.level == "Verbose"

    def test_meta_without_args(self):
        entry = LogEntry(level="info", message="Test")
        assert entry.meta() == {}

    def test_meta_single_mapping(self):
        extra = {"key1": "value1"}
        entry = LogEntry(level="info", message="Test", args=(extra,))
        meta = entry.meta()
        assert meta == {"key1": "value1"}
        meta["key2"] = "value2"
        assert extra == {"key1": "value1"}

    def test_meta_single_scalar(self):
        entry = LogEntry(level="info", message="Test", args=("value",))
        assert entry.meta() == {"splat": ["value"]}

    def test_meta_many_args(self):
        entry = LogEntry(level="info", message="Test", args=({"a": 1}, 2, "three"))
        assert entry.meta() == {"splat": [{"a": 1}, 2, "three"]}

    def test_to_dict(self):
        entry = LogEntry(level="debug", message="Test", args=(1,))
        data = entry.to_dict()
        assert data["level"] == "debug"
        assert data["message"] == "Test"
        assert data["args"] == [1]

    def test_from_dict(self):
        original = LogEntry(level="error", message="Boom", args=({"code": 3},), logger_name="app")
        restored = LogEntry.from_dict(original.to_dict())
        assert restored.level == "error"
        assert restored.args == ({"code": 3},)
        assert restored.logger_name == "app"
        assert restored.timestamp == original.timestamp
