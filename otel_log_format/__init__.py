"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

OpenTelemetry Log Format - Converts structured log entries into
OpenTelemetry log records
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from otel_log_format.core.otel_formatter import OpenTelemetryFormatter
from otel_log_format.core.formatter_config import FormatterConfig
from otel_log_format.core.log_entry import LogEntry
from otel_log_format.core.log_level import LogLevel
from otel_log_format.core.telemetry_record import TelemetryRecord
from otel_log_format.integration import OpenTelemetryLoggingFormatter, opentelemetry_log_format

# Import submodules (not all classes by default)
from otel_log_format import filters
from otel_log_format import formatters

__all__ = [
    "OpenTelemetryFormatter",
    "FormatterConfig",
    "LogEntry",
    "LogLevel",
    "TelemetryRecord",
    "OpenTelemetryLoggingFormatter",
    "opentelemetry_log_format",
    "filters",
    "formatters",
]
