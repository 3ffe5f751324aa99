"""
Base formatter interface

Serializes telemetry records for sinks.
"""

from abc import ABC, abstractmethod
from otel_log_format.core.telemetry_record import TelemetryRecord


class BaseFormatter(ABC):
    """
    Abstract base class for record formatters.

    Formatters convert TelemetryRecord objects into strings. Only the
    fields of ``TelemetryRecord.to_dict()`` may be written out.
    """

    @abstractmethod
    def format(self, record: TelemetryRecord) -> str:
        """
        Format a telemetry record into a string.

        Args:
            record: The record to format

        Returns:
            Formatted string representation of the record
        """
        pass

    def __call__(self, record: TelemetryRecord) -> str:
        """Allow formatters to be callable."""
        return self.format(record)
