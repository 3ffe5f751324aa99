"""
Log entry data structure

The raw record handed over by a host logging pipeline.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Tuple, Union
import threading

from otel_log_format.core.log_level import LogLevel, level_text


SPLAT_KEY = "splat"


@dataclass
class LogEntry:
    """
    Log entry data structure.

    Contains the level, the message and the extra arguments given to a
    single logging call. ``message`` may be a string, a list or a mapping.
    """

    level: Union[str, LogLevel]
    message: Any
    args: Tuple[Any, ...] = ()
    timestamp: datetime = field(default_factory=datetime.now)
    thread_id: int = field(default_factory=threading.get_ident)
    thread_name: str = field(default_factory=lambda: threading.current_thread().name)
    logger_name: str = ""

    def __post_init__(self):
        """Normalize log entry after initialization."""
        self.level = level_text(self.level)
        self.args = tuple(self.args)

    def meta(self) -> Dict[str, Any]:
        """
        Extract the extra metadata carried by the call arguments.

        No arguments give an empty mapping, a single mapping argument is
        used directly (as a shallow copy), anything else is wrapped as
        ``{"splat": [args...]}`` in call order.

        Returns:
            New dictionary of raw attributes
        """
        if not self.args:
            return {}
        if len(self.args) == 1 and isinstance(self.args[0], Mapping):
            return dict(self.args[0])
        return {SPLAT_KEY: list(self.args)}

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log entry to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "level": self.level,
            "message": self.message,
            "args": list(self.args),
            "timestamp": self.timestamp.isoformat(),
            "thread_id": self.thread_id,
            "thread_name": self.thread_name,
            "logger_name": self.logger_name,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LogEntry":
        """
        Create log entry from dictionary.

        Args:
            data: Dictionary with log entry data

        Returns:
            New LogEntry instance
        """
        timestamp = data.get("timestamp")
        return cls(
            level=data["level"],
            message=data["message"],
            args=tuple(data.get("args", ())),
            timestamp=datetime.fromisoformat(timestamp) if timestamp else datetime.now(),
            thread_id=data.get("thread_id", 0),
            thread_name=data.get("thread_name", ""),
            logger_name=data.get("logger_name", ""),
        )

    def __str__(self) -> str:
        """String representation."""
        return (
            f"[{self.timestamp.strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]}] "
            f"[{self.level:8}] "
            f"[{self.thread_name}] "
            f"{self.message}"
        )
