"""
Level-based filter

Filters records on the level carried next to the serialized fields
"""

from typing import Optional, Union
from otel_log_format.core.log_level import LogLevel
from otel_log_format.core.telemetry_record import TelemetryRecord
from otel_log_format.filters.base_filter import BaseFilter


class LevelFilter(BaseFilter):
    """
    Filter records based on their original log level.

    Allows filtering by minimum and/or maximum level. Levels that are not
    LogLevel names cannot be ranked and always pass.
    """

    def __init__(
        self,
        min_level: Optional[Union[LogLevel, str]] = None,
        max_level: Optional[Union[LogLevel, str]] = None
    ):
        """
        Initialize level filter.

        Args:
            min_level: Minimum log level (inclusive). If None, no minimum.
            max_level: Maximum log level (inclusive). If None, no maximum.

        Raises:
            ValueError: If a bound is not a known level name

        Example:
            # Only dispatch warning and above
            filter = LevelFilter(min_level=LogLevel.WARNING)

            # Only dispatch debug to info
            filter = LevelFilter(min_level="debug", max_level="info")
        """
        self.min_level = self._to_level(min_level)
        self.max_level = self._to_level(max_level)

    @staticmethod
    def _to_level(level: Optional[Union[LogLevel, str]]) -> Optional[LogLevel]:
        if level is None or isinstance(level, LogLevel):
            return level
        return LogLevel.from_string(level)

    def should_log(self, record: TelemetryRecord) -> bool:
        """
        Check if record's level is within the specified range.

        Args:
            record: Telemetry record to check

        Returns:
            True if record level is within range or unknown, False otherwise
        """
        try:
            level = LogLevel.from_string(record.level)
        except ValueError:
            return True

        if self.min_level is not None and level < self.min_level:
            return False

        if self.max_level is not None and level > self.max_level:
            return False

        return True

    def __repr__(self) -> str:
        """String representation."""
        return f"LevelFilter(min={self.min_level}, max={self.max_level})"
