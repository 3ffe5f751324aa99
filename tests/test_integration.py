"""Tests for host logging integration"""

import io
import json
import logging

import pytest

from otel_log_format import (
    FormatterConfig,
    LogEntry,
    OpenTelemetryLoggingFormatter,
    opentelemetry_log_format,
)
from otel_log_format.filters import LevelFilter
from otel_log_format.formatters import JSONFormatter


class ArrayWriter:
    """Collects formatted records, like a sink would."""

    def __init__(self):
        self.records = []

    def write(self, record) -> None:
        self.records.append(record)


@pytest.fixture
def log_stream():
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    logger = logging.getLogger("otel_log_format.tests")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    logger.addHandler(handler)
    yield logger, handler, stream
    logger.removeHandler(handler)


def last_line(stream):
    return json.loads(stream.getvalue().strip().splitlines()[-1])


class TestOpentelemetryLogFormat:
    """Test the pipeline format step."""

    def test_camel_case_config(self):
        fmt = opentelemetry_log_format({
            "filename": __file__,
            "restrictAttributesTo": ["key1", "key2", "key3"],
            "metaCharacterLimit": 100,
            "bodyCharacterLimit": 10,
        })
        writer = ArrayWriter()
        writer.write(fmt(LogEntry("debug", "test message", args=({"key1": "test", "metakey1": "metavalue1"},))))

        record = writer.records[-1]
        assert len(record.body) <= 10
        assert len(record.attributes["_meta"]) <= 100
        assert record.attributes["key1"] == "test"
        assert record.resource["pathname"] == __file__
        assert record.resource["service.instance.id"]

    def test_service_name_from_env(self, monkeypatch):
        monkeypatch.setenv("OTEL_SERVICE_NAME", "app-main-server")
        fmt = opentelemetry_log_format()
        assert fmt(LogEntry("info", "msg")).resource["service.name"] == "app-main-server"

    def test_config_object(self):
        config = FormatterConfig(use_traces=False)
        fmt = opentelemetry_log_format(config)
        assert fmt.formatter.config is config

    def test_pipeline_filters_on_level(self):
        fmt = opentelemetry_log_format()
        level_filter = LevelFilter(min_level="warning")
        writer = ArrayWriter()
        for level in ("debug", "info", "warning", "error"):
            record = fmt(LogEntry(level, f"{level} message"))
            if level_filter(record):
                writer.write(JSONFormatter().format(record))

        assert len(writer.records) == 2
        assert all("level" not in json.loads(line) for line in writer.records)


class TestOpenTelemetryLoggingFormatter:
    """Test the standard library logging formatter."""

    def test_basic_record(self, log_stream):
        logger, handler, stream = log_stream
        handler.setFormatter(OpenTelemetryLoggingFormatter())
        logger.info("Application %s", "started")

        data = last_line(stream)
        assert data["body"] == "Application started"
        assert data["severity_text"] == "info"
        assert data["severity_number"] == 9
        assert data["attributes"] == {}
        assert data["resource"]["pathname"] == __file__
        assert "level" not in data

    def test_level_mapping(self, log_stream):
        logger, handler, stream = log_stream
        handler.setFormatter(OpenTelemetryLoggingFormatter())

        expected = [
            (logger.debug, "debug", 5),
            (logger.warning, "warning", 13),
            (logger.error, "error", 17),
            (logger.critical, "emerg", 21),
        ]
        for log, text, number in expected:
            log("msg")
            data = last_line(stream)
            assert data["severity_text"] == text
            assert data["severity_number"] == number

    def test_custom_level(self, log_stream):
        logger, handler, stream = log_stream
        handler.setFormatter(OpenTelemetryLoggingFormatter())
        logging.addLevelName(15, "VERBOSE")
        logger.log(15, "msg")

        data = last_line(stream)
        assert data["severity_text"] == "verbose"
        assert data["severity_number"] is None

    def test_extra_fields_structured(self, log_stream):
        logger, handler, stream = log_stream
        handler.setFormatter(OpenTelemetryLoggingFormatter({
            "restrictAttributesTo": ["user_id"],
            "discardAttributesFrom": ["token"],
        }))
        logger.info("login", extra={"user_id": 7, "ip": "10.0.0.1", "token": "abc"})

        attributes = last_line(stream)["attributes"]
        assert attributes["user_id"] == 7
        assert json.loads(attributes["_meta"]) == {"ip": "10.0.0.1"}
        assert "token" not in attributes

    def test_mapping_message(self, log_stream):
        logger, handler, stream = log_stream
        handler.setFormatter(OpenTelemetryLoggingFormatter())
        logger.info({"event": "signup", "plan": "pro"})

        data = last_line(stream)
        assert data["body"] == ""
        assert data["attributes"] == {"event": "signup", "plan": "pro"}

    def test_exception_info(self, log_stream):
        logger, handler, stream = log_stream
        handler.setFormatter(OpenTelemetryLoggingFormatter())
        try:
            raise ValueError("bad input")
        except ValueError:
            logger.exception("failed")

        attributes = last_line(stream)["attributes"]
        assert attributes["exception.type"] == "ValueError"
        assert attributes["exception.message"] == "bad input"
        assert "Traceback" in attributes["exception.stacktrace"]

    def test_configured_filename_wins(self):
        formatter = OpenTelemetryLoggingFormatter(FormatterConfig(filename="service.py"))
        record = logging.LogRecord("app", logging.INFO, "/src/app.py", 10, "msg", (), None)
        assert formatter.format_record(record).resource["pathname"] == "service.py"

    def test_to_entry(self):
        formatter = OpenTelemetryLoggingFormatter()
        record = logging.LogRecord("app", logging.WARNING, "/src/app.py", 10, "disk %d%%", (91,), None)
        record.mount = "/var"
        entry = formatter.to_entry(record)
        assert entry.level == "warning"
        assert entry.message == "disk 91%"
        assert entry.args == ({"mount": "/var"},)
        assert entry.logger_name == "app"
