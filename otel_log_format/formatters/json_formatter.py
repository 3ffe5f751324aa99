"""
JSON formatter for telemetry records

Formats records as JSON objects
"""

from typing import Optional

from otel_log_format.core.serialization import safe_dumps
from otel_log_format.core.telemetry_record import TelemetryRecord
from otel_log_format.formatters.base_formatter import BaseFormatter


class JSONFormatter(BaseFormatter):
    """
    Format telemetry records as JSON objects.

    The level side channel is not part of the output.
    """

    def __init__(
        self,
        indent: Optional[int] = None,
        ensure_ascii: bool = False,
        sort_keys: bool = False
    ):
        """
        Initialize JSON formatter.

        Args:
            indent: JSON indentation (None for compact, 2 for readable)
            ensure_ascii: Escape non-ASCII characters
            sort_keys: Sort object keys

        Example:
            # Compact JSON (one line per record)
            formatter = JSONFormatter()

            # Pretty-printed JSON
            formatter = JSONFormatter(indent=2)
        """
        self.indent = indent
        self.ensure_ascii = ensure_ascii
        self.sort_keys = sort_keys

    def format(self, record: TelemetryRecord) -> str:
        """
        Format record as JSON.

        Args:
            record: Telemetry record to format

        Returns:
            JSON string
        """
        return safe_dumps(
            record.to_dict(),
            indent=self.indent,
            ensure_ascii=self.ensure_ascii,
            sort_keys=self.sort_keys
        )

    def __repr__(self) -> str:
        """String representation."""
        return f"JSONFormatter(indent={self.indent})"
