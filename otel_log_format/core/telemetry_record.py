"""
Normalized OpenTelemetry log record
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


# Field names, in order, that sinks receive
RECORD_FIELDS = (
    "body",
    "severity_number",
    "severity_text",
    "attributes",
    "timestamp",
    "trace_id",
    "span_id",
    "trace_flags",
    "resource",
)


@dataclass
class TelemetryRecord:
    """
    Log record shaped after the OpenTelemetry log data model.

    ``level`` is the original level of the entry. It stays on the record so
    the host pipeline can filter on it, and is left out of ``to_dict()``.
    """

    body: str
    severity_number: Optional[int]
    severity_text: str
    attributes: Dict[str, Any] = field(default_factory=dict)
    timestamp: str = ""
    trace_id: str = ""
    span_id: str = ""
    trace_flags: int = 0
    resource: Dict[str, Any] = field(default_factory=dict)
    level: str = field(default="", repr=False)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert record to its serializable dictionary.

        Returns:
            Dictionary with the produced field names only
        """
        return {name: getattr(self, name) for name in RECORD_FIELDS}
