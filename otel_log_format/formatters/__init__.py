"""
Record formatters module

Serializers applied to telemetry records before they reach a sink.
"""

from otel_log_format.formatters.base_formatter import BaseFormatter
from otel_log_format.formatters.json_formatter import JSONFormatter

__all__ = [
    "BaseFormatter",
    "JSONFormatter",
]
