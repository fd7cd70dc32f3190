"""weatherflow - a Result container and the validation pipeline it enables.

A small library showing railway-oriented composition: each fallible stage
returns a Result, stages are chained with flat_map, and the first failure
short-circuits the rest and reaches the caller unchanged.

Quick Start:
    >>> from weatherflow import Ok, Err
    >>> Ok(5).map(lambda x: x + 1).flat_map(lambda x: Ok(x * 2) if x > 0 else Err("neg"))
    Ok(12)

Weather pipeline:
    >>> from weatherflow import validate_weather, FetchOutcome
    >>> import httpx
    >>> response = httpx.Response(200, content=b'{"type": "2", "temperature": "21.5"}')
    >>> print(validate_weather(FetchOutcome(response.content, response, None)).ok())
    There's no bad weather, just bad clothing. It's 21.5ºC today, sunny.

Fetch and print (background thread, single completion callback):
    >>> from weatherflow import run_weather
    >>> run_weather().result()
"""

from .domain import WeatherReading, WeatherType
from .errors import (
    DEFAULT_DOMAIN,
    Err,
    ErrorCode,
    ErrorDescriptor,
    Ok,
    Result,
    descriptor,
    sequence,
    traverse,
)
from .foundation.config import WeatherflowSettings, clear_settings_cache, get_settings
from .io import FetchOutcome, build_url, decode_document, fetch, fetch_async, render, report
from .observability import configure_logging, get_logger, log_context
from .pipeline import (
    WEATHER_PIPELINE,
    WEATHER_STAGES,
    Pipeline,
    WeatherResult,
    check_data_not_empty,
    check_http_response,
    check_status_code,
    check_transport,
    create_weather,
    lift,
    parse_document,
    validate_weather,
)
from .runner import run_weather

__version__ = "0.1.0"

__all__ = [
    # Result container
    "Result", "Ok", "Err", "sequence", "traverse",
    # Errors
    "ErrorCode", "ErrorDescriptor", "descriptor", "DEFAULT_DOMAIN",
    # Domain
    "WeatherReading", "WeatherType",
    # Pipeline
    "Pipeline", "lift", "WeatherResult", "WEATHER_STAGES", "WEATHER_PIPELINE", "validate_weather",
    "check_transport", "check_http_response", "check_status_code",
    "check_data_not_empty", "parse_document", "create_weather",
    # I/O
    "FetchOutcome", "build_url", "fetch", "fetch_async", "decode_document", "render", "report",
    "run_weather",
    # Settings & logging
    "WeatherflowSettings", "get_settings", "clear_settings_cache",
    "configure_logging", "get_logger", "log_context",
]
