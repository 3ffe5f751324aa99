#!/usr/bin/env python3
"""Basic usage example"""

import logging

from opentelemetry import trace
from opentelemetry.trace import NonRecordingSpan, SpanContext, TraceFlags

from otel_log_format import FormatterConfig, LogEntry, OpenTelemetryFormatter, OpenTelemetryLoggingFormatter
from otel_log_format.formatters import JSONFormatter


def main():
    config = FormatterConfig(
        filename=__file__,
        restrict_attributes_to={"user_id", "request_id"},
        discard_attributes_from={"password"},
        body_character_limit=80,
        meta_character_limit=200,
    )

    # Format entries directly
    formatter = OpenTelemetryFormatter(config)
    serializer = JSONFormatter(indent=2)
    print(serializer.format(formatter.format(
        LogEntry("info", "User logged in", ({"user_id": 42, "browser": "firefox", "password": "x"},))
    )))

    # Records written inside a span carry its ids
    span = NonRecordingSpan(SpanContext(
        trace_id=0x0AF7651916CD43DD8448EB211C80319C,
        span_id=0x00F067AA0BA902B7,
        is_remote=False,
        trace_flags=TraceFlags(TraceFlags.SAMPLED),
    ))
    with trace.use_span(span):
        print(serializer.format(formatter.format(LogEntry("error", {"event": "payment_failed"}))))

    # Plug into the standard logging module
    handler = logging.StreamHandler()
    handler.setFormatter(OpenTelemetryLoggingFormatter(config))
    logger = logging.getLogger("example")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.warning("Disk usage at %d%%", 91, extra={"request_id": "r-1", "mount": "/var"})


if __name__ == "__main__":
    main()
