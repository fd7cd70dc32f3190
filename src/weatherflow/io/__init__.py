"""I/O collaborators: fetch (httpx), document decoding (orjson), console sink."""

from .codec import JSONDecodeError, NotADocumentError, decode_document
from .console import render, report
from .fetch import FetchOutcome, build_url, fetch, fetch_async, get

__all__ = [
    "FetchOutcome", "build_url", "fetch", "fetch_async", "get",
    "decode_document", "JSONDecodeError", "NotADocumentError",
    "render", "report",
]
