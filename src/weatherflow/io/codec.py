"""Structured-document decoding backed by orjson."""

from __future__ import annotations

import orjson

JSONDecodeError = orjson.JSONDecodeError


class NotADocumentError(ValueError):
    """Decoded JSON was valid but not an object."""

    __slots__ = ("kind",)

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"expected a JSON object, got {kind}")


def decode_document(data: bytes | bytearray | memoryview | str) -> dict[str, object]:
    """Decode bytes into a keyed map.

    Raises:
        orjson.JSONDecodeError: malformed input
        NotADocumentError: well-formed JSON whose top level is not an object
    """
    value = orjson.loads(data)
    if not isinstance(value, dict):
        raise NotADocumentError(type(value).__name__)
    return value
