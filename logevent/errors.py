"""Exceptions raised while turning a serialized log event into a LogEvent."""


class DecodeError(Exception):
    """Raised when a payload cannot be decoded into a log event."""


class EmptyInputError(DecodeError):
    """Raised when the payload has no content to parse."""


class DocumentSyntaxError(DecodeError):
    """Raised when the payload is not a well-formed document."""


class StructureError(DecodeError):
    """Raised when the document root is not a mapping."""


class SchemaError(DecodeError):
    """Raised when the document does not match the log event schema."""


class InputError(Exception):
    """Raised when an input stream cannot be read to completion."""
