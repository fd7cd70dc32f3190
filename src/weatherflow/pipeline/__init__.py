"""Validation pipeline: generic stage composition plus the weather stages."""

from .pipe import Pipeline, Stage, lift
from .stages import (
    WEATHER_PIPELINE,
    WEATHER_STAGES,
    HttpTransmission,
    Transmission,
    WeatherResult,
    check_data_not_empty,
    check_http_response,
    check_status_code,
    check_transport,
    create_weather,
    parse_document,
    validate_weather,
)

__all__ = [
    # Composition
    "Pipeline", "Stage", "lift",
    # Weather stages
    "check_transport", "check_http_response", "check_status_code",
    "check_data_not_empty", "parse_document", "create_weather",
    "WEATHER_STAGES", "WEATHER_PIPELINE", "validate_weather",
    # Types
    "Transmission", "HttpTransmission", "WeatherResult",
]
