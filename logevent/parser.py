"""Public entry points: parse one serialized log event into a LogEvent.

All four ``parse_from*`` methods funnel into :meth:`LogEventParser.parse_text`,
so the same logical payload yields the same event whatever its origin.
Parsers hold only immutable settings and can be shared between threads.
"""

from __future__ import annotations

import logging
from typing import Any, BinaryIO, TextIO

from logevent.config import Config
from logevent.decoder import decode_event
from logevent.errors import DecodeError, SchemaError
from logevent.inputs import read_payload, read_stream
from logevent.models import LogEvent
from logevent.syntax import load_json, load_yaml

logger = logging.getLogger(__name__)


class LogEventParser:
    """Base parser; subclasses supply the document syntax."""

    format_name = ""

    def __init__(self, config: Config | None = None):
        self._config = config if config is not None else Config()

    @property
    def config(self) -> Config:
        return self._config

    def load_document(self, text: str) -> Any:
        raise NotImplementedError

    def parse_text(self, text: str) -> LogEvent:
        try:
            document = self.load_document(text)
            try:
                return decode_event(document, self._config.required_fields)
            except RecursionError as exc:
                raise SchemaError("Log event nests too deeply to decode") from exc
        except DecodeError as exc:
            logger.debug("Failed to decode %s log event: %s", self.format_name, exc)
            raise

    def parse_from(self, text: str) -> LogEvent:
        """Parse an in-memory string."""
        return self.parse_text(read_payload(text))

    def parse_from_bytes(
        self, data: bytes, offset: int = 0, length: int | None = None
    ) -> LogEvent:
        """Parse ``data[offset:offset + length]``; bytes outside are ignored."""
        return self.parse_text(
            read_payload(data, offset, length, encoding=self._config.encoding)
        )

    def parse_from_reader(self, stream: TextIO) -> LogEvent:
        """Parse everything readable from a character stream (left open)."""
        return self.parse_text(read_stream(stream, self._config.encoding))

    def parse_from_stream(self, stream: BinaryIO) -> LogEvent:
        """Parse everything readable from a byte stream (left open)."""
        return self.parse_text(read_stream(stream, self._config.encoding))


class YamlLogEventParser(LogEventParser):
    format_name = "yaml"

    def load_document(self, text: str) -> Any:
        return load_yaml(text)


class JsonLogEventParser(LogEventParser):
    format_name = "json"

    def load_document(self, text: str) -> Any:
        return load_json(text)


_PARSERS = {
    "yaml": YamlLogEventParser,
    "json": JsonLogEventParser,
}


def get_parser(config: Config | None = None) -> LogEventParser:
    """Factory that returns the parser matching ``config.input_format``."""
    config = config if config is not None else Config()
    return _PARSERS[config.input_format](config)
