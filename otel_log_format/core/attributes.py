"""
Attribute classification strategies

Two modes exist. The simple mode passes attributes through, the structured
mode keeps an allow-list of keys as attributes and packs everything else
into a single size-limited ``_meta`` string.
"""

from abc import ABC, abstractmethod
from typing import Any, AbstractSet, Dict, FrozenSet, Mapping

from otel_log_format.core.formatter_config import FormatterConfig
from otel_log_format.core.serialization import safe_dumps


BODY_TOO_LARGE_ATTRIBUTE = "log_body_too_large"
BODY_CHAR_LENGTH_ATTRIBUTE = "log_body_character_length"

META_ATTRIBUTE = "_meta"
META_TOO_LARGE_ATTRIBUTE = "log_meta_too_large"
META_CHAR_LENGTH_ATTRIBUTE = "log_meta_character_length"

RESERVED_ATTRIBUTES: FrozenSet[str] = frozenset({
    BODY_TOO_LARGE_ATTRIBUTE,
    BODY_CHAR_LENGTH_ATTRIBUTE,
    META_TOO_LARGE_ATTRIBUTE,
    META_CHAR_LENGTH_ATTRIBUTE,
})


def to_json(value: Any) -> str:
    """Serialize to compact JSON, never raising on attribute values."""
    return safe_dumps(value, separators=(",", ":"), ensure_ascii=False)


class AttributeStrategy(ABC):
    """
    Abstract base class for attribute classification.

    Strategies turn raw attributes into the ``attributes`` of a record.
    """

    @abstractmethod
    def collect(self, raw_attributes: Mapping[str, Any], discard: AbstractSet[str]) -> Dict[str, Any]:
        """
        Build output attributes.

        Args:
            raw_attributes: Attributes taken from the entry
            discard: Keys dropped before anything else

        Returns:
            New attribute dictionary
        """
        pass

    def __call__(self, raw_attributes: Mapping[str, Any], discard: AbstractSet[str]) -> Dict[str, Any]:
        """Allow strategies to be callable."""
        return self.collect(raw_attributes, discard)


class SimpleAttributes(AttributeStrategy):
    """Pass every attribute that is not discarded through unchanged."""

    def collect(self, raw_attributes: Mapping[str, Any], discard: AbstractSet[str]) -> Dict[str, Any]:
        return {key: value for key, value in raw_attributes.items() if key not in discard}

    def __repr__(self) -> str:
        """String representation."""
        return "SimpleAttributes()"


class StructuredAttributes(AttributeStrategy):
    """
    Split attributes into allowed keys and a serialized meta bucket.

    The reserved overflow attributes are always allowed, so they never end
    up inside the meta bucket.
    """

    def __init__(self, restrict_to: AbstractSet[str], meta_character_limit: int):
        """
        Initialize structured strategy.

        Args:
            restrict_to: Keys kept as top-level attributes
            meta_character_limit: Maximum length of the serialized bucket
        """
        self.restrict_to = frozenset(restrict_to) | RESERVED_ATTRIBUTES
        self.meta_character_limit = meta_character_limit

    def collect(self, raw_attributes: Mapping[str, Any], discard: AbstractSet[str]) -> Dict[str, Any]:
        attributes: Dict[str, Any] = {}
        meta: Dict[str, Any] = {}
        for key, value in raw_attributes.items():
            if key in discard:
                continue
            if key in self.restrict_to:
                attributes[key] = value
            else:
                meta[key] = value

        if meta:
            serialized = to_json(meta)
            if len(serialized) > self.meta_character_limit:
                attributes[META_CHAR_LENGTH_ATTRIBUTE] = len(serialized)
                attributes[META_TOO_LARGE_ATTRIBUTE] = True
                serialized = serialized[:max(self.meta_character_limit, 0)]
            attributes[META_ATTRIBUTE] = serialized
        return attributes

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"StructuredAttributes(restrict_to={sorted(self.restrict_to)}, "
            f"meta_limit={self.meta_character_limit})"
        )


def build_attribute_strategy(config: FormatterConfig) -> AttributeStrategy:
    """
    Select the strategy matching a configuration.

    Args:
        config: Formatter configuration

    Returns:
        StructuredAttributes when an allow-list is configured, else
        SimpleAttributes
    """
    if config.structured:
        return StructuredAttributes(config.restrict_attributes_to, config.meta_character_limit)
    return SimpleAttributes()
