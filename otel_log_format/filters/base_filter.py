"""
Base filter interface
"""

from abc import ABC, abstractmethod
from otel_log_format.core.telemetry_record import TelemetryRecord


class BaseFilter(ABC):
    """
    Abstract base class for record filters.

    Filters decide whether a formatted record is dispatched or discarded.
    """

    @abstractmethod
    def should_log(self, record: TelemetryRecord) -> bool:
        """
        Determine if a record should be dispatched.

        Args:
            record: The telemetry record to filter

        Returns:
            True if the record should be dispatched, False otherwise
        """
        pass

    def __call__(self, record: TelemetryRecord) -> bool:
        """Allow filters to be callable."""
        return self.should_log(record)
