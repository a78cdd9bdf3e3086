"""Document loaders: raw text → generic tree of dicts, lists and scalars."""

from __future__ import annotations

import json
from typing import Any

import yaml

from logevent.errors import DocumentSyntaxError, EmptyInputError

_NULL_TAG = "tag:yaml.org,2002:null"


class TextScalarLoader(yaml.SafeLoader):
    """SafeLoader that keeps plain scalars as their source text.

    Only null is resolved implicitly. ``version: 1.10`` stays ``"1.10"`` and
    ``thread: 2017-04-25`` stays a string; the field accessors convert
    numbers and flags from text themselves.
    """


TextScalarLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag == _NULL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _require_content(text: str) -> None:
    if not text or not text.strip():
        raise EmptyInputError("Payload is empty")


def load_yaml(text: str) -> Any:
    """Parse a single YAML document with :class:`TextScalarLoader`.

    Raises:
        EmptyInputError: If *text* is blank or holds no document.
        DocumentSyntaxError: If *text* is not well-formed YAML or nests
            too deeply to load.
    """
    _require_content(text)
    try:
        document = yaml.load(text, Loader=TextScalarLoader)
    except yaml.YAMLError as exc:
        raise DocumentSyntaxError(f"Invalid YAML: {exc}") from exc
    except RecursionError as exc:
        raise DocumentSyntaxError("YAML document nests too deeply") from exc
    if document is None:
        raise EmptyInputError("YAML payload contains no document")
    return document


def load_json(text: str) -> Any:
    """Parse a JSON document with :func:`json.loads`.

    Raises:
        EmptyInputError: If *text* is blank or the literal ``null``.
        DocumentSyntaxError: If *text* is not well-formed JSON or nests
            too deeply to load.
    """
    _require_content(text)
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DocumentSyntaxError(f"Invalid JSON: {exc}") from exc
    except RecursionError as exc:
        raise DocumentSyntaxError("JSON document nests too deeply") from exc
    if document is None:
        raise EmptyInputError("JSON payload contains no document")
    return document
