"""
Log level enumeration and OpenTelemetry severity mapping

Levels follow the syslog names used by host logging pipelines.
"""

from enum import IntEnum
from typing import Dict, Optional, Union


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Values grow with severity so levels can be compared for filtering.
    """

    DEBUG = 10      # Debug information
    INFO = 20       # Informational messages
    NOTICE = 25     # Normal but significant events
    WARNING = 30    # Warning messages
    ERROR = 40      # Error messages
    CRIT = 50       # Critical conditions
    ALERT = 60      # Action must be taken immediately
    EMERG = 70      # System is unusable

    def __str__(self) -> str:
        """String representation of log level."""
        return self.label

    @property
    def label(self) -> str:
        """Lower-case level name as emitted in ``severity_text``."""
        return self.name.lower()

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        name = level_str.upper()
        if name in cls.__members__:
            return cls[name]
        raise ValueError(f"Invalid log level: {level_str}")


# OpenTelemetry severity numbers for the levels that have one
SEVERITY_NUMBERS: Dict[str, int] = {
    "debug": 5,
    "info": 9,
    "warning": 13,
    "error": 17,
    "emerg": 21,
    "alert": 21,
}


def level_text(level: Union[str, LogLevel]) -> str:
    """Return the textual form of a level, leaving unknown strings untouched."""
    if isinstance(level, LogLevel):
        return level.label
    return str(level)


def severity_number(level: Union[str, LogLevel]) -> Optional[int]:
    """
    Map a level to its OpenTelemetry severity number.

    Args:
        level: Level name or LogLevel

    Returns:
        Severity number, or None for levels outside the table
    """
    return SEVERITY_NUMBERS.get(level_text(level))
