"""Map a parsed document tree onto a :class:`LogEvent`.

The root must be a mapping. Its keys are walked once: recognized keys are
dispatched to a field extractor or structural decoder, anything else is
ignored so newer producers can add fields. A document with no recognized
key at all is rejected rather than decoded into an empty event.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Mapping

from logevent.errors import SchemaError, StructureError
from logevent.fields import get_bool, get_int, get_mapping, get_str
from logevent.models import Level, LogEvent
from logevent.structures import (
    decode_context_map,
    decode_context_stack,
    decode_marker,
    decode_source,
    decode_thrown,
)

logger = logging.getLogger(__name__)

# document key → (LogEvent attribute, extractor reading the key off the root)
_SCALAR_FIELDS: dict[str, tuple[str, Callable[[Mapping, str], Any]]] = {
    "timeMillis": ("time_millis", get_int),
    "thread": ("thread", get_str),
    "loggerName": ("logger_name", get_str),
    "message": ("message", get_str),
    "endOfBatch": ("end_of_batch", get_bool),
    "loggerFqcn": ("logger_fqcn", get_str),
    "threadId": ("thread_id", get_int),
    "threadPriority": ("thread_priority", get_int),
}

# document key → (LogEvent attribute, decoder for the nested node)
_STRUCTURE_FIELDS: dict[str, tuple[str, Callable[[Any], Any]]] = {
    "marker": ("marker", decode_marker),
    "thrown": ("thrown", decode_thrown),
    "contextStack": ("context_stack", decode_context_stack),
    "contextMap": ("context_map", decode_context_map),
    "source": ("source", decode_source),
}

RECOGNIZED_FIELDS = frozenset(_SCALAR_FIELDS) | frozenset(_STRUCTURE_FIELDS) | {
    "level",
    "instant",
}


def decode_level(value: Any) -> Level:
    if not isinstance(value, str):
        raise SchemaError(f"'level' must be a string, got {type(value).__name__}")
    try:
        return Level.from_name(value)
    except KeyError:
        raise SchemaError(
            f"'level' must be one of {[lvl.name for lvl in Level]}, got '{value}'"
        ) from None


def instant_to_millis(node: Mapping) -> int:
    """Convert an ``instant`` node (epochSecond + nanoOfSecond) to epoch millis."""
    seconds = get_int(node, "epochSecond")
    nanos = get_int(node, "nanoOfSecond")
    return seconds * 1000 + nanos // 1_000_000


def _check_required(root: Mapping, required_fields: Iterable[str]) -> None:
    for name in required_fields:
        if root.get(name) is None:
            raise SchemaError(f"Missing required field: '{name}'")


def decode_event(root: Any, required_fields: Iterable[str] = ()) -> LogEvent:
    """Decode a document root into a :class:`LogEvent`.

    Args:
        root: The parsed document tree.
        required_fields: Document keys that must be present and non-null
            in addition to the "at least one recognized field" rule.

    Returns:
        The fully assembled, immutable event.

    Raises:
        StructureError: If *root* is not a mapping.
        SchemaError: If no recognized field is present, a required field is
            missing, or a field has the wrong shape.
    """
    if not isinstance(root, Mapping):
        raise StructureError(
            f"Expected a mapping at the document root, got {type(root).__name__}"
        )

    values: dict[str, Any] = {}
    instant = None
    recognized = 0

    for key, value in root.items():
        if key not in RECOGNIZED_FIELDS:
            logger.debug("Ignoring unrecognized field %r", key)
            continue
        recognized += 1
        if key in _SCALAR_FIELDS:
            attr, extract = _SCALAR_FIELDS[key]
            values[attr] = extract(root, key)
        elif value is None:
            continue
        elif key == "level":
            values["level"] = decode_level(value)
        elif key == "instant":
            instant = get_mapping(root, "instant")
        else:
            attr, decode = _STRUCTURE_FIELDS[key]
            values[attr] = decode(value)

    if recognized == 0:
        raise SchemaError(
            f"No recognized log event fields in document (keys: {sorted(map(str, root))})"
        )
    _check_required(root, required_fields)

    if instant is not None and root.get("timeMillis") is None:
        values["time_millis"] = instant_to_millis(instant)

    return LogEvent(**values)
