"""
Host pipeline integration

Plugs the OpenTelemetry formatter into logging pipelines.
"""

from otel_log_format.integration.logging_formatter import (
    OpenTelemetryLoggingFormatter,
    opentelemetry_log_format,
)

__all__ = ["OpenTelemetryLoggingFormatter", "opentelemetry_log_format"]
