"""Fetch a random echo reading, validate it, and print the outcome."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from weatherflow.io import FetchOutcome, build_url, fetch, report
from weatherflow.observability import get_logger
from weatherflow.pipeline import WEATHER_PIPELINE, Pipeline, WeatherResult, validate_weather

if TYPE_CHECKING:
    from concurrent.futures import Future, ThreadPoolExecutor

    import httpx

log = get_logger("weatherflow.runner")


def run_weather(
    url: str | None = None,
    *,
    client: httpx.Client | None = None,
    executor: ThreadPoolExecutor | None = None,
    pipeline: Pipeline = WEATHER_PIPELINE,
    output: TextIO | None = None,
) -> Future[WeatherResult]:
    """Fetch `url` (random echo URL by default) and validate it in the completion callback.

    The future resolves to the final Result after it has been printed.
    """
    target = url or build_url()

    def on_complete(data: bytes | None, response: object | None, error: BaseException | None) -> WeatherResult:
        result = validate_weather(FetchOutcome(data, response, error), pipeline)
        result.match(
            ok=lambda reading: log.info("weather validated", url=target, type=str(reading.type),
                                        temperature=reading.temperature),
            err=lambda e: log.info("weather rejected", url=target, code=str(e.code)),
        )
        report(result, output=output)
        return result

    return fetch(target, on_complete, client=client, executor=executor)
