"""
OpenTelemetry log record formatter

Turns a raw LogEntry into a TelemetryRecord.
"""

from __future__ import annotations
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

from otel_log_format.core.attributes import (
    BODY_CHAR_LENGTH_ATTRIBUTE,
    BODY_TOO_LARGE_ATTRIBUTE,
    build_attribute_strategy,
    to_json,
)
from otel_log_format.core.formatter_config import FormatterConfig
from otel_log_format.core.log_entry import LogEntry
from otel_log_format.core.log_level import severity_number
from otel_log_format.core.telemetry_record import TelemetryRecord
from otel_log_format.core.trace_context import TraceContext, get_trace_context


MISSING_BODY = ""
PATHNAME_ATTRIBUTE = "pathname"


class OpenTelemetryFormatter:
    """
    Format log entries as OpenTelemetry log records.

    Built once per pipeline and called once per log event. The formatter
    keeps no per-call state: each record gets its own copy of the resource
    attributes, so an instance can be shared between threads.

    Example:
        formatter = OpenTelemetryFormatter(FormatterConfig(
            restrict_attributes_to={"user_id"},
            body_character_limit=200,
        ))
        record = formatter.format(LogEntry("info", "login", ({"user_id": 7},)))
    """

    def __init__(self, config: Optional[FormatterConfig] = None):
        self._config = config or FormatterConfig.default()
        self._resource = self._config.resolved_resource()
        self._attributes = build_attribute_strategy(self._config)

    @property
    def config(self) -> FormatterConfig:
        """Active configuration."""
        return self._config

    def format(self, entry: LogEntry, filename: Optional[str] = None) -> TelemetryRecord:
        """
        Format a log entry.

        Args:
            entry: Raw log entry
            filename: Source file reported as the ``pathname`` resource
                attribute; falls back to the configured filename

        Returns:
            New TelemetryRecord
        """
        resource = dict(self._resource)
        resource[PATHNAME_ATTRIBUTE] = filename or self._config.filename or ""

        trace_context = get_trace_context() if self._config.use_traces else TraceContext.empty()
        body, raw_attributes = self._extract_body(entry)

        return TelemetryRecord(
            body=body,
            severity_number=severity_number(entry.level),
            severity_text=entry.level,
            attributes=self._attributes.collect(raw_attributes, self._config.discard_attributes_from),
            timestamp=self._timestamp(),
            trace_id=trace_context.trace_id,
            span_id=trace_context.span_id,
            trace_flags=trace_context.trace_flags,
            resource=resource,
            level=entry.level,
        )

    def _extract_body(self, entry: LogEntry) -> Tuple[str, Dict[str, Any]]:
        """Split the entry into body text and raw attributes."""
        raw_attributes = entry.meta()
        message = entry.message

        if isinstance(message, Mapping):
            # Message fields win over call arguments
            raw_attributes.update(message)
            return MISSING_BODY, raw_attributes

        body = self._body_text(message)
        limit = self._config.body_character_limit
        if len(body) > limit:
            raw_attributes[BODY_CHAR_LENGTH_ATTRIBUTE] = len(body)
            raw_attributes[BODY_TOO_LARGE_ATTRIBUTE] = True
            body = body[:max(limit, 0)]
        return body, raw_attributes

    @staticmethod
    def _body_text(message: Any) -> str:
        if isinstance(message, str):
            return message
        if isinstance(message, (list, tuple)):
            return to_json(message)
        return str(message)

    @staticmethod
    def _timestamp() -> str:
        return datetime.now(timezone.utc).isoformat(timespec="milliseconds")

    def __call__(self, entry: LogEntry, filename: Optional[str] = None) -> TelemetryRecord:
        """Allow formatters to be callable."""
        return self.format(entry, filename)

    def __repr__(self) -> str:
        """String representation."""
        return f"OpenTelemetryFormatter(config={self._config!r}, attributes={self._attributes!r})"
