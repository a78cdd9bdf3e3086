"""Human-readable rendering of decoded events — text and colorized (ANSI)."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

from logevent.models import Level, LogEvent, Marker, Thrown

# ANSI color codes
COLORS = {
    Level.FATAL: "\033[35m",  # magenta
    Level.ERROR: "\033[31m",  # red
    Level.WARN: "\033[33m",   # yellow
    Level.INFO: "\033[32m",   # green
    Level.DEBUG: "\033[36m",  # cyan
    Level.TRACE: "\033[36m",  # cyan
}
RESET = "\033[0m"


def format_timestamp(time_millis: int) -> str:
    """Render epoch millis as ``YYYY-MM-DD HH:MM:SS.mmm`` in UTC.

    Values outside the range :mod:`datetime` supports are shown as raw millis.
    """
    try:
        dt = datetime.fromtimestamp(time_millis / 1000, tz=timezone.utc)
    except (OverflowError, ValueError, OSError):
        return str(time_millis)
    return dt.strftime("%Y-%m-%d %H:%M:%S.") + f"{time_millis % 1000:03d}"


def format_marker(marker: Marker) -> str:
    """``child[ parent[ grandparent ] ]`` style rendering of a marker tree."""
    if not marker.parents:
        return marker.name
    parents = ", ".join(format_marker(p) for p in marker.parents)
    return f"{marker.name}[ {parents} ]"


def format_thrown(thrown: Thrown, indent: str = "") -> list[str]:
    """Render a throwable like a stack trace, including causes and suppressed."""
    title = f"{thrown.name}: {thrown.message}" if thrown.message else thrown.name
    lines = [f"{indent}{title}"]
    for frame in thrown.extended_stack_trace:
        location = f"{frame.file}:{frame.line}" if frame.file else "Unknown Source"
        lines.append(
            f"{indent}\tat {frame.class_name}.{frame.method}({location}) "
            f"[{frame.location}:{frame.version}]"
        )
    if thrown.common_element_count:
        lines.append(f"{indent}\t... {thrown.common_element_count} more")
    for suppressed in thrown.suppressed:
        nested = format_thrown(suppressed, indent + "\t")
        nested[0] = f"{indent}\tSuppressed: {nested[0].lstrip()}"
        lines.extend(nested)
    if thrown.cause is not None:
        nested = format_thrown(thrown.cause, indent)
        nested[0] = f"{indent}Caused by: {nested[0].lstrip()}"
        lines.extend(nested)
    return lines


def _detail_lines(event: LogEvent) -> list[str]:
    lines = []
    if event.marker is not None:
        lines.append(f"  marker: {format_marker(event.marker)}")
    if event.context_stack:
        lines.append(f"  contextStack: {', '.join(event.context_stack)}")
    if event.context_map:
        pairs = ", ".join(f"{k}={v}" for k, v in sorted(event.context_map.items()))
        lines.append(f"  contextMap: {{{pairs}}}")
    if event.source is not None:
        src = event.source
        lines.append(f"  source: {src.class_name}.{src.method}({src.file}:{src.line})")
    if event.thrown is not None:
        lines.extend(format_thrown(event.thrown))
    return lines


def _level_name(event: LogEvent) -> str:
    return event.level.name if event.level is not None else "-"


def format_text(event: LogEvent) -> str:
    """``timestamp [LEVEL] [thread] logger - message`` plus detail lines."""
    header = (
        f"{format_timestamp(event.time_millis)} [{_level_name(event)}] "
        f"[{event.thread}] {event.logger_name} - {event.message}"
    )
    return "\n".join([header, *_detail_lines(event)])


def format_color(event: LogEvent) -> str:
    """Same as :func:`format_text` with an ANSI-colored level."""
    color = COLORS.get(event.level, "")
    header = (
        f"{format_timestamp(event.time_millis)} [{color}{_level_name(event)}{RESET}] "
        f"[{event.thread}] {event.logger_name} - {event.message}"
    )
    return "\n".join([header, *_detail_lines(event)])


def get_formatter(color: bool = False) -> Callable[[LogEvent], str]:
    """Factory that returns the right formatter based on args."""
    if color:
        return format_color
    return format_text
