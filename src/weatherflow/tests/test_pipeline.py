"""Tests for stage composition and the end-to-end weather pipeline."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from weatherflow.domain import WeatherReading, WeatherType
from weatherflow.errors import Err, ErrorCode, ErrorDescriptor, Ok, Result, descriptor
from weatherflow.foundation.config import clear_settings_cache
from weatherflow.io import FetchOutcome
from weatherflow.pipeline import (
    WEATHER_PIPELINE,
    WEATHER_STAGES,
    Pipeline,
    lift,
    validate_weather,
)


def _outcome(status: int, payload: bytes | None) -> FetchOutcome:
    return FetchOutcome(payload, httpx.Response(status), None)


class Spy:
    """Wrap a stage and count invocations."""

    def __init__(self, stage: Callable[[object], Result[object, object]]) -> None:
        self.stage = stage
        self.calls = 0
        self.__name__ = stage.__name__

    def __call__(self, value: object) -> Result[object, object]:
        self.calls += 1
        return self.stage(value)


# ─────────────────────────────────────────────────────────────────────────────
# Generic Pipeline
# ─────────────────────────────────────────────────────────────────────────────


class TestPipeline:
    """Composition mechanics independent of the weather stages."""

    def test_empty_pipeline_wraps_value(self) -> None:
        assert Pipeline().run(3) == Ok(3)

    def test_builders_return_new_pipelines(self) -> None:
        base: Pipeline = Pipeline()
        extended = base >> (lambda x: Ok(x + 1))
        assert len(base) == 0
        assert len(extended) == 1
        assert extended(1) == Ok(2)

    def test_map_and_then(self) -> None:
        pipeline = Pipeline().map(str.strip).then(lambda s: Ok(int(s)) if s.isdigit() else Err("nan")).map(abs)
        assert pipeline.run(" 12 ") == Ok(12)
        assert pipeline.run(" x ") == Err("nan")

    def test_short_circuit_skips_later_stages(self) -> None:
        later = Spy(lambda x: Ok(x))
        pipeline = Pipeline() >> (lambda x: Err("stop")) >> later >> later
        assert pipeline.run(1) == Err("stop")
        assert later.calls == 0

    def test_lift_keeps_name(self) -> None:
        def double(x: int) -> int:
            return x * 2
        assert lift(double).__name__ == "double"
        assert Pipeline().map(double).names == ("double",)

    def test_weather_pipeline_order(self) -> None:
        assert WEATHER_PIPELINE.names == (
            "check_transport",
            "check_http_response",
            "check_status_code",
            "check_data_not_empty",
            "parse_document",
            "create_weather",
        )


# ─────────────────────────────────────────────────────────────────────────────
# Weather scenarios
# ─────────────────────────────────────────────────────────────────────────────


def test_scenario_sunny_reading() -> None:
    result = validate_weather(_outcome(200, b'{"type":"2","temperature":"21.5"}'))
    assert result == Ok(WeatherReading(type=WeatherType.SUNNY, temperature=21.5))


def test_scenario_not_found_short_circuits() -> None:
    spies = [Spy(stage) for stage in WEATHER_STAGES]
    result = validate_weather(_outcome(404, b'{"type":"2","temperature":"21.5"}'), Pipeline(tuple(spies)))

    assert result == Err(descriptor(ErrorCode.WRONG_STATUS_CODE, "wrong status code", status_code=404))
    assert [s.calls for s in spies] == [1, 1, 1, 0, 0, 0]


def test_scenario_no_data() -> None:
    result = validate_weather(_outcome(200, None))
    assert result.err().code is ErrorCode.NO_DATA


def test_scenario_unparseable() -> None:
    result = validate_weather(_outcome(200, b"not valid structured text"))
    assert result.err().code is ErrorCode.PARSE_ERROR


def test_scenario_category_out_of_range() -> None:
    result = validate_weather(_outcome(200, b'{"type":"9","temperature":"21.5"}'))
    assert result == Err(descriptor(ErrorCode.INCORRECT_STRUCTURE, "incorrect structure"))


def test_transport_failure_stops_at_first_stage() -> None:
    spies = [Spy(stage) for stage in WEATHER_STAGES]
    error = httpx.ReadTimeout("timed out")
    result = validate_weather(FetchOutcome(None, None, error), Pipeline(tuple(spies)))

    assert result.err().code is ErrorCode.TRANSPORT_ERROR
    assert result.err().cause is error
    assert [s.calls for s in spies] == [1, 0, 0, 0, 0, 0]


def test_unknown_response_type() -> None:
    result = validate_weather(FetchOutcome(b"{}", object(), None))
    assert result.err().code is ErrorCode.UNKNOWN_RESPONSE_TYPE


@pytest.mark.parametrize("outcome", [
    _outcome(200, b'{"type":"2","temperature":"21.5"}'),
    _outcome(404, None),
    _outcome(200, None),
    _outcome(200, b"not valid structured text"),
    _outcome(200, b'{"type":"9","temperature":"21.5"}'),
    _outcome(200, b'{"type":"2","temperature":"nan"}'),
])
def test_rerun_is_value_equal(outcome: FetchOutcome) -> None:
    first, second = validate_weather(outcome), validate_weather(outcome)
    assert first == second
    assert isinstance(first.ok() or first.err(), WeatherReading | ErrorDescriptor)


def test_error_domain_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WEATHERFLOW_ERROR_DOMAIN", "com.test")
    clear_settings_cache()
    result = validate_weather(_outcome(500, None))
    assert result.err().domain == "com.test"
    assert str(result.err()) == "[com.test:WRONG_STATUS_CODE] wrong status code (status_code=500)"
