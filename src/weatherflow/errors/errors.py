"""Error codes for weather validation failures."""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    """Failure kinds, one per validation stage."""
    TRANSPORT_ERROR = "TRANSPORT_ERROR"
    UNKNOWN_RESPONSE_TYPE = "UNKNOWN_RESPONSE_TYPE"
    WRONG_STATUS_CODE = "WRONG_STATUS_CODE"
    NO_DATA = "NO_DATA"
    PARSE_ERROR = "PARSE_ERROR"
    INCORRECT_STRUCTURE = "INCORRECT_STRUCTURE"

    @property
    def summary(self) -> str:
        """Short human-readable description."""
        return _SUMMARIES[self]


_SUMMARIES: dict[ErrorCode, str] = {
    ErrorCode.TRANSPORT_ERROR: "transport error",
    ErrorCode.UNKNOWN_RESPONSE_TYPE: "unknown response type",
    ErrorCode.WRONG_STATUS_CODE: "wrong status code",
    ErrorCode.NO_DATA: "no data",
    ErrorCode.PARSE_ERROR: "parse error",
    ErrorCode.INCORRECT_STRUCTURE: "incorrect structure",
}

