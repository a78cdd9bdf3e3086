"""Typed field accessors over parsed document mappings.

Each accessor looks up *key* on a mapping node and coerces the value the
way a lenient data binder would:

  - absent key or explicit null → *default*
  - value of the expected type  → value
  - coercible scalar            → coerced value (e.g. ``"29"`` → ``29``)
  - anything else               → :class:`SchemaError`

YAML plain scalars reach these accessors as text, so numbers and flags
are always converted here rather than by the loader.
"""

from __future__ import annotations

from typing import Any, Mapping

from logevent.errors import SchemaError

_TRUE_STRINGS = frozenset({"true", "yes", "on"})
_FALSE_STRINGS = frozenset({"false", "no", "off"})


def _type_name(value: Any) -> str:
    return type(value).__name__


def coerce_str(value: Any, key: str) -> str:
    """Coerce a scalar document value to a string."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    raise SchemaError(f"'{key}' must be a string, got {_type_name(value)}")


def get_str(node: Mapping, key: str, default: str = "") -> str:
    value = node.get(key)
    if value is None:
        return default
    return coerce_str(value, key)


def get_int(node: Mapping, key: str, default: int = 0) -> int:
    value = node.get(key)
    if value is None:
        return default
    # bool is an int subclass; a flag is never a valid number here
    if isinstance(value, bool):
        raise SchemaError(f"'{key}' must be an integer, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise SchemaError(f"'{key}' must be an integer, got '{value}'") from None
    raise SchemaError(f"'{key}' must be an integer, got {_type_name(value)}")


def get_bool(node: Mapping, key: str, default: bool = False) -> bool:
    value = node.get(key)
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise SchemaError(f"'{key}' must be a boolean, got {value!r}")


def get_mapping(node: Mapping, key: str) -> Mapping | None:
    """Return the nested mapping under *key*, or None when absent."""
    value = node.get(key)
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise SchemaError(f"'{key}' must be a mapping, got {_type_name(value)}")
    return value


def get_sequence(node: Mapping, key: str) -> list | None:
    """Return the sequence under *key*, or None when absent."""
    value = node.get(key)
    if value is None:
        return None
    if not isinstance(value, (list, tuple)):
        raise SchemaError(f"'{key}' must be a sequence, got {_type_name(value)}")
    return list(value)
