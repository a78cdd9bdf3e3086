"""Normalize the supported input surfaces into one text payload.

Accepted inputs:
  1. ``str``                              → used as-is
  2. ``bytes`` / ``bytearray`` / ``memoryview`` → the ``offset``/``length``
     window, decoded with *encoding*
  3. character stream (``read()`` → str)  → read to the end
  4. byte stream (``read()`` → bytes)     → read to the end, decoded

Streams are read fully but never closed; the caller owns them.
"""

from __future__ import annotations

import logging
from typing import Any

from logevent.errors import DocumentSyntaxError, InputError

logger = logging.getLogger(__name__)

_BUFFER_TYPES = (bytes, bytearray, memoryview)


def decode_bytes(data: bytes, encoding: str = "utf-8") -> str:
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as exc:
        raise DocumentSyntaxError(f"Payload is not valid {encoding}: {exc}") from exc


def buffer_window(data: Any, offset: int = 0, length: int | None = None) -> bytes:
    """Return exactly ``data[offset:offset + length]`` as bytes.

    Raises:
        ValueError: If the window does not fit inside *data*.
    """
    view = memoryview(data).cast("B")
    size = len(view)
    if length is None:
        length = size - offset
    if offset < 0 or length < 0 or offset + length > size:
        raise ValueError(
            f"Window offset={offset} length={length} is outside buffer of {size} bytes"
        )
    return view[offset:offset + length].tobytes()


def read_stream(stream: Any, encoding: str = "utf-8") -> str:
    """Read a character or byte stream to completion.

    Raises:
        InputError: If the stream fails while being read.
        DocumentSyntaxError: If a character stream holds undecodable bytes.
    """
    try:
        content = stream.read()
    except UnicodeDecodeError as exc:
        raise DocumentSyntaxError(f"Stream is not valid text: {exc}") from exc
    except OSError as exc:
        raise InputError(f"Failed to read input stream: {exc}") from exc
    if isinstance(content, str):
        return content
    if isinstance(content, _BUFFER_TYPES):
        return decode_bytes(bytes(content), encoding)
    raise TypeError(
        f"Stream read() returned {type(content).__name__}, expected str or bytes"
    )


def read_payload(
    source: Any,
    offset: int = 0,
    length: int | None = None,
    encoding: str = "utf-8",
) -> str:
    """Turn any supported input into the text handed to the document loader."""
    if isinstance(source, str):
        return source
    if isinstance(source, _BUFFER_TYPES):
        return decode_bytes(buffer_window(source, offset, length), encoding)
    if hasattr(source, "read"):
        text = read_stream(source, encoding)
        logger.debug("Read %d characters from %s", len(text), type(source).__name__)
        return text
    raise TypeError(f"Unsupported input type: {type(source).__name__}")
