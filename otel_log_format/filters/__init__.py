"""
Record filters module

Filters applied by the host pipeline to formatted records.
"""

from otel_log_format.filters.base_filter import BaseFilter
from otel_log_format.filters.level_filter import LevelFilter

__all__ = [
    "BaseFilter",
    "LevelFilter",
]
