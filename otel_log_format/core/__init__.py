"""
Core module for the OpenTelemetry log format

This module contains the fundamental classes:
- OpenTelemetryFormatter: LogEntry -> TelemetryRecord transformation
- FormatterConfig: Configuration management
- LogEntry: Raw log entry data structure
- TelemetryRecord: Normalized output record
- LogLevel: Log level enumeration and severity mapping
"""

from otel_log_format.core.otel_formatter import OpenTelemetryFormatter
from otel_log_format.core.formatter_config import FormatterConfig
from otel_log_format.core.log_entry import LogEntry
from otel_log_format.core.telemetry_record import TelemetryRecord
from otel_log_format.core.log_level import LogLevel, SEVERITY_NUMBERS, severity_number
from otel_log_format.core.trace_context import TraceContext, get_trace_context

__all__ = [
    "OpenTelemetryFormatter",
    "FormatterConfig",
    "LogEntry",
    "TelemetryRecord",
    "LogLevel",
    "SEVERITY_NUMBERS",
    "severity_number",
    "TraceContext",
    "get_trace_context",
]
