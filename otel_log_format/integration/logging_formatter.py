"""
Standard library ``logging`` integration

Lets ``logging`` handlers emit OpenTelemetry JSON records.
"""

from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Callable, Dict, Optional, Union
import logging

from otel_log_format.core.formatter_config import FormatterConfig
from otel_log_format.core.log_entry import LogEntry
from otel_log_format.core.log_level import LogLevel
from otel_log_format.core.otel_formatter import OpenTelemetryFormatter
from otel_log_format.core.telemetry_record import TelemetryRecord
from otel_log_format.formatters.base_formatter import BaseFormatter
from otel_log_format.formatters.json_formatter import JSONFormatter


# Attributes every LogRecord has; anything else came in through ``extra=``
_STANDARD_RECORD_ATTRIBUTES = frozenset(
    logging.LogRecord("", logging.NOTSET, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}

_LEVEL_NAMES = {
    logging.DEBUG: LogLevel.DEBUG,
    logging.INFO: LogLevel.INFO,
    logging.WARNING: LogLevel.WARNING,
    logging.ERROR: LogLevel.ERROR,
    logging.CRITICAL: LogLevel.EMERG,
}


def _as_config(config: Union[FormatterConfig, Mapping, None]) -> FormatterConfig:
    if config is None:
        return FormatterConfig.default()
    if isinstance(config, FormatterConfig):
        return config
    return FormatterConfig.from_dict(config)


def opentelemetry_log_format(
    config: Union[FormatterConfig, Mapping, None] = None
) -> Callable[[LogEntry], TelemetryRecord]:
    """
    Build a format step for a host logging pipeline.

    Args:
        config: FormatterConfig, or a mapping using the camelCase option
            names (``restrictAttributesTo``, ``bodyCharacterLimit``, ...)

    Returns:
        Callable formatting one LogEntry with the configured filename

    Example:
        fmt = opentelemetry_log_format({
            "filename": __file__,
            "restrictAttributesTo": ["key1", "key2"],
            "bodyCharacterLimit": 10,
        })
        record = fmt(LogEntry("debug", "test message"))
    """
    formatter = OpenTelemetryFormatter(_as_config(config))

    def format_entry(entry: LogEntry) -> TelemetryRecord:
        return formatter.format(entry, formatter.config.filename)

    format_entry.formatter = formatter
    return format_entry


class OpenTelemetryLoggingFormatter(logging.Formatter):
    """
    ``logging.Formatter`` producing OpenTelemetry records.

    Fields passed with ``extra=`` become the entry's metadata; a mapping
    passed as the message becomes attributes with an empty body. The
    record's ``pathname`` is used as the ``pathname`` resource attribute
    unless the configuration sets a filename.

    Example:
        handler = logging.StreamHandler()
        handler.setFormatter(OpenTelemetryLoggingFormatter(
            FormatterConfig(restrict_attributes_to={"user_id"})
        ))
        logging.getLogger("app").addHandler(handler)
    """

    def __init__(
        self,
        config: Union[FormatterConfig, Mapping, None] = None,
        serializer: Optional[BaseFormatter] = None,
    ):
        super().__init__()
        self.otel_formatter = OpenTelemetryFormatter(_as_config(config))
        self.serializer = serializer or JSONFormatter()

    def format(self, record: logging.LogRecord) -> str:
        """
        Format a logging record as serialized OpenTelemetry JSON.

        Args:
            record: Record from the logging pipeline

        Returns:
            Serialized telemetry record
        """
        return self.serializer.format(self.format_record(record))

    def format_record(self, record: logging.LogRecord) -> TelemetryRecord:
        """
        Convert a logging record into a TelemetryRecord.

        Args:
            record: Record from the logging pipeline

        Returns:
            New TelemetryRecord
        """
        filename = self.otel_formatter.config.filename or record.pathname
        return self.otel_formatter.format(self.to_entry(record), filename)

    def to_entry(self, record: logging.LogRecord) -> LogEntry:
        """Translate a logging record into a LogEntry."""
        extra = self._extra(record)
        return LogEntry(
            level=self._level(record),
            message=self._message(record),
            args=(extra,) if extra else (),
            thread_id=record.thread or 0,
            thread_name=record.threadName or "",
            logger_name=record.name,
        )

    @staticmethod
    def _level(record: logging.LogRecord) -> str:
        level = _LEVEL_NAMES.get(record.levelno)
        if level is not None:
            return level.label
        return record.levelname.lower()

    @staticmethod
    def _message(record: logging.LogRecord) -> Any:
        if isinstance(record.msg, Mapping) and not record.args:
            return dict(record.msg)
        return record.getMessage()

    def _extra(self, record: logging.LogRecord) -> Dict[str, Any]:
        extra = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _STANDARD_RECORD_ATTRIBUTES
        }
        if record.exc_info and record.exc_info[0] is not None:
            exc_type, exc_value, _ = record.exc_info
            extra["exception.type"] = exc_type.__name__
            extra["exception.message"] = str(exc_value)
            extra["exception.stacktrace"] = self.formatException(record.exc_info)
        return extra

    def __repr__(self) -> str:
        """String representation."""
        return f"OpenTelemetryLoggingFormatter(formatter={self.otel_formatter!r})"
