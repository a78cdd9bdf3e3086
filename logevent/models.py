"""Immutable log event model — every decoder output maps to this schema."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Level(Enum):
    """Event severity, valued by log4j intLevel (lower is more severe)."""

    OFF = 0
    FATAL = 100
    ERROR = 200
    WARN = 300
    INFO = 400
    DEBUG = 500
    TRACE = 600
    ALL = 2147483647

    @classmethod
    def from_name(cls, name: str) -> Level:
        """Look up a level by name, ignoring case.

        Raises:
            KeyError: If *name* is not a standard level.
        """
        return cls[name.strip().upper()]

    def is_more_specific_than(self, other: Level) -> bool:
        return self.value <= other.value


@dataclass(frozen=True)
class Marker:
    name: str
    parents: tuple[Marker, ...] = ()

    def is_instance_of(self, name: str) -> bool:
        """True if this marker or any of its ancestors is called *name*."""
        if self.name == name:
            return True
        return any(parent.is_instance_of(name) for parent in self.parents)


@dataclass(frozen=True)
class StackTraceElement:
    class_name: str = ""
    method: str = ""
    file: str = ""
    line: int = 0
    exact: bool = False
    location: str = ""
    version: str = ""


@dataclass(frozen=True)
class Thrown:
    name: str = ""
    message: str = ""
    localized_message: str = ""
    common_element_count: int = 0
    extended_stack_trace: tuple[StackTraceElement, ...] = ()
    cause: Thrown | None = None
    suppressed: tuple[Thrown, ...] = ()

    def cause_chain(self) -> list[Thrown]:
        """Return this throwable followed by each nested cause, outermost first."""
        chain = []
        current: Thrown | None = self
        while current is not None:
            chain.append(current)
            current = current.cause
        return chain


@dataclass(frozen=True)
class Source:
    class_name: str = ""
    method: str = ""
    file: str = ""
    line: int = 0


def _empty_context_map() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True)
class LogEvent:
    time_millis: int = 0
    thread: str = ""
    level: Level | None = None
    logger_name: str = ""
    message: str = ""
    logger_fqcn: str = ""
    end_of_batch: bool = False
    thread_id: int = 0
    thread_priority: int = 0
    marker: Marker | None = None
    thrown: Thrown | None = None
    context_stack: tuple[str, ...] = ()
    context_map: Mapping[str, str] = field(default_factory=_empty_context_map)
    source: Source | None = None
