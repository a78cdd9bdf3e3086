"""Decoders for the composite parts of a log event.

Markers and throwables are trees in the source document, so each decoder
is a plain recursive function over the nested mapping it is handed.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from logevent.errors import SchemaError
from logevent.fields import (
    coerce_str,
    get_bool,
    get_int,
    get_mapping,
    get_sequence,
    get_str,
)
from logevent.models import Marker, Source, StackTraceElement, Thrown


def _require_mapping(node: Any, what: str) -> Mapping:
    if not isinstance(node, Mapping):
        raise SchemaError(f"{what} must be a mapping, got {type(node).__name__}")
    return node


# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------


def decode_marker(node: Any) -> Marker:
    """Decode a marker and, recursively, its ``parents``, preserving order."""
    node = _require_mapping(node, "marker")
    if node.get("name") is None:
        raise SchemaError("marker is missing required field 'name'")
    parents = get_sequence(node, "parents") or []
    return Marker(
        name=get_str(node, "name"),
        parents=tuple(decode_marker(parent) for parent in parents),
    )


# ---------------------------------------------------------------------------
# Throwables
# ---------------------------------------------------------------------------


def decode_stack_trace_element(node: Any) -> StackTraceElement:
    """Decode one stack frame; missing scalars fall back to their defaults."""
    node = _require_mapping(node, "stack trace element")
    return StackTraceElement(
        class_name=get_str(node, "class"),
        method=get_str(node, "method"),
        file=get_str(node, "file"),
        line=get_int(node, "line"),
        exact=get_bool(node, "exact"),
        location=get_str(node, "location"),
        version=get_str(node, "version"),
    )


def decode_thrown(node: Any) -> Thrown:
    """Decode a throwable with its stack trace, cause chain and suppressed list."""
    node = _require_mapping(node, "thrown")
    message = get_str(node, "message")
    frames = get_sequence(node, "extendedStackTrace") or []
    suppressed = get_sequence(node, "suppressed") or []
    cause = get_mapping(node, "cause")
    return Thrown(
        name=get_str(node, "name"),
        message=message,
        localized_message=get_str(node, "localizedMessage", message),
        common_element_count=get_int(node, "commonElementCount"),
        extended_stack_trace=tuple(decode_stack_trace_element(f) for f in frames),
        cause=decode_thrown(cause) if cause is not None else None,
        suppressed=tuple(decode_thrown(s) for s in suppressed),
    )


# ---------------------------------------------------------------------------
# Source location and context
# ---------------------------------------------------------------------------


def decode_source(node: Any) -> Source:
    node = _require_mapping(node, "source")
    return Source(
        class_name=get_str(node, "class"),
        method=get_str(node, "method"),
        file=get_str(node, "file"),
        line=get_int(node, "line"),
    )


def decode_context_map(node: Any) -> Mapping[str, str]:
    """Decode ``contextMap`` into a read-only str → str mapping."""
    node = _require_mapping(node, "contextMap")
    entries = {}
    for key in node:
        entries[str(key)] = get_str(node, key)
    return MappingProxyType(entries)


def decode_context_stack(node: Any) -> tuple[str, ...]:
    """Decode ``contextStack`` into a tuple, keeping push order."""
    if not isinstance(node, (list, tuple)):
        raise SchemaError(
            f"contextStack must be a sequence, got {type(node).__name__}"
        )
    return tuple(
        "" if item is None else coerce_str(item, "contextStack") for item in node
    )
