"""
JSON encoding that accepts any attribute value
"""

from collections.abc import Mapping
from typing import Any, FrozenSet
import json


CIRCULAR_REFERENCE = "[Circular]"

_JSON_SCALAR_KEYS = (int, float, bool, type(None))


def _key_text(key: Any) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, _JSON_SCALAR_KEYS):
        return json.dumps(key)
    return str(key)


def make_jsonable(value: Any, _seen: FrozenSet[int] = frozenset()) -> Any:
    """
    Rebuild containers so ``json.dumps`` can encode them.

    Mapping keys are turned into strings the way json writes them and a container
    nested inside itself is replaced by ``"[Circular]"``. Other values are
    left for the encoder's ``default``.

    Args:
        value: Value to rebuild

    Returns:
        Value made of plain dicts and lists
    """
    if not isinstance(value, (Mapping, list, tuple)):
        return value
    if id(value) in _seen:
        return CIRCULAR_REFERENCE
    seen = _seen | {id(value)}
    if isinstance(value, Mapping):
        return {
            _key_text(key): make_jsonable(item, seen)
            for key, item in value.items()
        }
    return [make_jsonable(item, seen) for item in value]


def safe_dumps(value: Any, **options: Any) -> str:
    """
    Serialize to JSON without raising on awkward values.

    Unknown types go through ``str``. If encoding still fails on mapping
    keys or reference cycles, the value is rebuilt with make_jsonable and
    encoded again.

    Args:
        value: Value to serialize
        **options: Extra ``json.dumps`` options

    Returns:
        JSON string
    """
    try:
        return json.dumps(value, default=str, **options)
    except (TypeError, ValueError):
        return json.dumps(make_jsonable(value), default=str, **options)
