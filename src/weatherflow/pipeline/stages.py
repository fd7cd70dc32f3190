"""Weather validation stages.

Each stage is a pure function from the previous stage's success value to a
new Result. Chained with flat_map they turn a raw fetch outcome into a
WeatherReading, or into the first ErrorDescriptor produced:

    check_transport        FetchOutcome        -> Transmission
    check_http_response    Transmission        -> HttpTransmission
    check_status_code      HttpTransmission    -> bytes | None
    check_data_not_empty   bytes | None        -> bytes
    parse_document         bytes               -> dict
    create_weather         dict                -> WeatherReading

Stages never raise for bad input and never log.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, NamedTuple, TypeAlias

import httpx

from weatherflow.domain import WeatherReading, WeatherType
from weatherflow.errors import Err, ErrorCode, ErrorDescriptor, Ok, Result, descriptor
from weatherflow.foundation.config import get_settings
from weatherflow.io.codec import decode_document

from .pipe import Pipeline

if TYPE_CHECKING:
    from weatherflow.io.fetch import FetchOutcome

WeatherResult: TypeAlias = Result[WeatherReading, ErrorDescriptor]

HTTP_OK = 200

# Plain ASCII numerals only: no padding, digit separators or other scripts
_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)
_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


class Transmission(NamedTuple):
    data: bytes | None
    response: object | None


class HttpTransmission(NamedTuple):
    data: bytes | None
    response: httpx.Response


def _domain() -> str:
    return get_settings().error_domain


# ─────────────────────────────────────────────────────────────────────────────
# Stages
# ─────────────────────────────────────────────────────────────────────────────


def check_transport(outcome: FetchOutcome) -> Result[Transmission, ErrorDescriptor]:
    """Fail with the transport error if the fetch did not complete."""
    data, response, error = outcome
    if error is not None:
        return Err(ErrorDescriptor.from_exception(ErrorCode.TRANSPORT_ERROR, error, domain=_domain()))
    return Ok(Transmission(data, response))


def check_http_response(transmission: Transmission) -> Result[HttpTransmission, ErrorDescriptor]:
    """Require an HTTP response rather than some lower-level one."""
    data, response = transmission
    if isinstance(response, httpx.Response):
        return Ok(HttpTransmission(data, response))
    return Err(descriptor(ErrorCode.UNKNOWN_RESPONSE_TYPE, "unknown response type", domain=_domain()))


def check_status_code(transmission: HttpTransmission) -> Result[bytes | None, ErrorDescriptor]:
    """Only 200 passes. Redirects and other 2xx codes fail."""
    data, response = transmission
    if response.status_code == HTTP_OK:
        return Ok(data)
    return Err(descriptor(ErrorCode.WRONG_STATUS_CODE, "wrong status code", domain=_domain(),
                          status_code=response.status_code))


def check_data_not_empty(data: bytes | None) -> Result[bytes, ErrorDescriptor]:
    if data is None:
        return Err(descriptor(ErrorCode.NO_DATA, "no data", domain=_domain()))
    return Ok(data)


def parse_document(data: bytes) -> Result[dict[str, object], ErrorDescriptor]:
    """Decode payload into a keyed map. Decode errors become Err, never propagate."""
    try:
        return Ok(decode_document(data))
    except ValueError as e:  # orjson.JSONDecodeError and NotADocumentError
        return Err(ErrorDescriptor.from_exception(ErrorCode.PARSE_ERROR, e, domain=_domain()))


def create_weather(document: dict[str, object]) -> WeatherResult:
    """Build a WeatherReading from string `type` and `temperature` fields.

    Any missing field, failed coercion or unknown category yields one
    INCORRECT_STRUCTURE error without saying which field was at fault.
    """
    type_field, temperature_field = document.get("type"), document.get("temperature")
    if not (_is_numeral(_INTEGER, type_field) and _is_numeral(_DECIMAL, temperature_field)):
        return _incorrect_structure()
    try:
        reading = WeatherReading(type=WeatherType(int(type_field)), temperature=float(temperature_field))
    except ValueError:  # category out of range or non-finite temperature
        return _incorrect_structure()
    return Ok(reading)


def _is_numeral(pattern: re.Pattern[str], field: object) -> bool:
    return isinstance(field, str) and pattern.fullmatch(field) is not None


def _incorrect_structure() -> WeatherResult:
    return Err(descriptor(ErrorCode.INCORRECT_STRUCTURE, "incorrect structure", domain=_domain()))


# ─────────────────────────────────────────────────────────────────────────────
# Composition
# ─────────────────────────────────────────────────────────────────────────────

WEATHER_STAGES = (
    check_transport,
    check_http_response,
    check_status_code,
    check_data_not_empty,
    parse_document,
    create_weather,
)

WEATHER_PIPELINE: Pipeline[FetchOutcome, WeatherReading, ErrorDescriptor] = Pipeline(WEATHER_STAGES)


def validate_weather(outcome: FetchOutcome, pipeline: Pipeline = WEATHER_PIPELINE) -> WeatherResult:
    """Run a fetch outcome through the validation stages."""
    return pipeline.run(outcome)
