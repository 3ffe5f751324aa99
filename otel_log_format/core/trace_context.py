"""
Trace correlation for log records

Reads the active span from the OpenTelemetry context.
"""

from typing import NamedTuple

from opentelemetry import trace


class TraceContext(NamedTuple):
    """Identifiers tying a log record to the active span."""

    trace_id: str
    span_id: str
    trace_flags: int

    @classmethod
    def empty(cls) -> "TraceContext":
        """Context used when no span is active or tracing is disabled."""
        return cls("", "", 0)


def get_trace_context() -> TraceContext:
    """
    Look up the span active in the current context.

    Returns:
        Hex encoded ids and trace flags, or the empty context when no
        valid span is active
    """
    span_context = trace.get_current_span().get_span_context()
    if not span_context.is_valid:
        return TraceContext.empty()
    return TraceContext(
        trace_id=trace.format_trace_id(span_context.trace_id),
        span_id=trace.format_span_id(span_context.span_id),
        trace_flags=int(span_context.trace_flags),
    )
