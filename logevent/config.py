"""Configuration loading from environment variables and an optional YAML file."""

from __future__ import annotations

import codecs
import logging
import os
from dataclasses import dataclass, replace
from typing import Any, Mapping

import yaml

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("yaml", "json")


def _split_fields(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return ()
    return tuple(part.strip() for part in raw.split(",") if part.strip())


@dataclass(frozen=True)
class Config:
    """Immutable decoder configuration.

    ``required_fields`` lists document keys that must be present on every
    event; by default only "at least one recognized field" is enforced.
    """

    encoding: str = "utf-8"
    input_format: str = "yaml"
    required_fields: tuple[str, ...] = ()
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.input_format not in SUPPORTED_FORMATS:
            raise ValueError(
                f"input_format must be one of {list(SUPPORTED_FORMATS)}, "
                f"got '{self.input_format}'"
            )
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"Unknown encoding '{self.encoding}'") from None
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level '{self.log_level}'")

    @classmethod
    def from_env(cls) -> Config:
        """Create a Config instance, overriding defaults with env vars."""
        return cls(
            encoding=os.environ.get("LOGEVENT_ENCODING", "utf-8"),
            input_format=os.environ.get("LOGEVENT_FORMAT", "yaml").lower(),
            required_fields=_split_fields(os.environ.get("LOGEVENT_REQUIRED_FIELDS")),
            log_level=os.environ.get("LOG_LEVEL", "WARNING").upper(),
        )

    def with_overrides(self, data: Mapping[str, Any]) -> Config:
        """Return a copy with keys from a parsed YAML config applied."""
        overrides: dict[str, Any] = {}
        if "encoding" in data:
            overrides["encoding"] = str(data["encoding"])
        if "format" in data:
            overrides["input_format"] = str(data["format"]).lower()
        if "required_fields" in data:
            fields = data["required_fields"] or []
            if isinstance(fields, str):
                fields = _split_fields(fields)
            overrides["required_fields"] = tuple(str(f) for f in fields)
        if "log_level" in data:
            overrides["log_level"] = str(data["log_level"]).upper()
        return replace(self, **overrides)


def load_yaml_config(path: str | None) -> dict:
    """Load decoder settings from a YAML file. Returns empty dict if no path."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    logger.info("Loaded YAML config from %s", path)
    return data


def load_config(path: str | None = None) -> Config:
    """Build Config from env vars, then apply the YAML file at *path* on top."""
    return Config.from_env().with_overrides(load_yaml_config(path))
