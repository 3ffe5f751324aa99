"""
Formatter configuration management
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from importlib import metadata
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Optional
from urllib.parse import unquote
import os
import socket


DEFAULT_META_CHARACTER_LIMIT = 1000
DEFAULT_BODY_CHARACTER_LIMIT = 500
DEFAULT_SERVICE_NAME = "unknown_service"

SERVICE_NAME_ENV = "OTEL_SERVICE_NAME"
RESOURCE_ATTRIBUTES_ENV = "OTEL_RESOURCE_ATTRIBUTES"

# camelCase option name -> dataclass field
_CONFIG_KEYS = {
    "resourceAttributes": "resource_attributes",
    "useTraces": "use_traces",
    "restrictAttributesTo": "restrict_attributes_to",
    "discardAttributesFrom": "discard_attributes_from",
    "metaCharacterLimit": "meta_character_limit",
    "bodyCharacterLimit": "body_character_limit",
    "filename": "filename",
}


def _sdk_version() -> str:
    try:
        return metadata.version("opentelemetry-api")
    except metadata.PackageNotFoundError:
        return "unknown"


def parse_resource_attributes_env(value: Optional[str]) -> Dict[str, str]:
    """
    Parse an ``OTEL_RESOURCE_ATTRIBUTES`` style string.

    Args:
        value: Comma separated ``key=value`` pairs, values percent-encoded

    Returns:
        Parsed attributes; malformed pairs are skipped
    """
    attributes: Dict[str, str] = {}
    if not value:
        return attributes
    for pair in value.split(","):
        key, sep, raw = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            continue
        attributes[key] = unquote(raw.strip())
    return attributes


def default_resource_attributes() -> Dict[str, Any]:
    """
    Build the default resource attributes from the host environment.

    Returns:
        Service identity, instance id and SDK identity attributes
    """
    attributes: Dict[str, Any] = {
        "service.name": os.environ.get(SERVICE_NAME_ENV) or DEFAULT_SERVICE_NAME,
        "service.instance.id": socket.gethostname(),
        "telemetry.sdk.language": "python",
        "telemetry.sdk.name": "opentelemetry",
        "telemetry.sdk.version": _sdk_version(),
    }
    attributes.update(parse_resource_attributes_env(os.environ.get(RESOURCE_ATTRIBUTES_ENV)))
    return attributes


def _as_name_set(value: Any, name: str) -> FrozenSet[str]:
    if value is None:
        return frozenset()
    if isinstance(value, str):
        return frozenset([value])
    if not isinstance(value, Iterable):
        raise TypeError(f"{name} must be an iterable of attribute names")
    return frozenset(value)


@dataclass(frozen=True)
class FormatterConfig:
    """
    OpenTelemetry formatter configuration.

    Immutable once constructed. An empty ``restrict_attributes_to`` selects
    the simple attribute mode, a non-empty one the structured mode.
    """

    # Resource settings
    resource_attributes: Mapping = field(default_factory=dict)
    filename: str = ""

    # Trace correlation
    use_traces: bool = True

    # Attribute settings
    restrict_attributes_to: FrozenSet[str] = frozenset()
    discard_attributes_from: FrozenSet[str] = frozenset()

    # Size limits
    meta_character_limit: int = DEFAULT_META_CHARACTER_LIMIT
    body_character_limit: int = DEFAULT_BODY_CHARACTER_LIMIT

    # Holds a read-only mapping, so instances cannot be dict keys
    __hash__ = None

    def __post_init__(self):
        """Normalize configuration after initialization."""
        resource = self.resource_attributes
        if resource is None:
            resource = {}
        if not isinstance(resource, Mapping):
            raise TypeError("resource_attributes must be a mapping")

        # Frozen dataclass: normalized values go through object.__setattr__
        object.__setattr__(self, "resource_attributes", MappingProxyType(dict(resource)))
        object.__setattr__(self, "filename", self.filename or "")
        object.__setattr__(
            self,
            "restrict_attributes_to",
            _as_name_set(self.restrict_attributes_to, "restrict_attributes_to"),
        )
        object.__setattr__(
            self,
            "discard_attributes_from",
            _as_name_set(self.discard_attributes_from, "discard_attributes_from"),
        )
        if self.meta_character_limit is None:
            object.__setattr__(self, "meta_character_limit", DEFAULT_META_CHARACTER_LIMIT)
        if self.body_character_limit is None:
            object.__setattr__(self, "body_character_limit", DEFAULT_BODY_CHARACTER_LIMIT)

    @property
    def structured(self) -> bool:
        """Whether attributes are split into restricted keys and a meta bucket."""
        return bool(self.restrict_attributes_to)

    def resolved_resource(self) -> Dict[str, Any]:
        """
        Merge user resource attributes over the defaults.

        Returns:
            New dictionary, user values winning on collision
        """
        resource = default_resource_attributes()
        resource.update(self.resource_attributes)
        return resource

    @classmethod
    def default(cls) -> "FormatterConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def from_dict(cls, data: Mapping) -> "FormatterConfig":
        """
        Create configuration from a plain mapping.

        Accepts both the camelCase option names (``restrictAttributesTo``)
        and the field names (``restrict_attributes_to``). ``None`` values
        keep the defaults and unknown keys are ignored.

        Args:
            data: Configuration mapping

        Returns:
            New FormatterConfig instance
        """
        fields = set(_CONFIG_KEYS.values())
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            name = _CONFIG_KEYS.get(key, key)
            if name in fields and value is not None:
                kwargs[name] = value
        return cls(**kwargs)

    def __repr__(self) -> str:
        """String representation."""
        mode = "structured" if self.structured else "simple"
        return (
            f"FormatterConfig(mode={mode}, "
            f"use_traces={self.use_traces}, "
            f"body_limit={self.body_character_limit}, "
            f"meta_limit={self.meta_character_limit})"
        )
