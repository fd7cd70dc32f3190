"""Weather domain objects produced at the end of the validation pipeline."""

from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, ConfigDict


class WeatherType(IntEnum):
    """Closed set of weather categories, keyed by their wire value."""
    RAINY = 0
    STORMY = 1
    SUNNY = 2
    CLOUDY = 3

    def __str__(self) -> str:
        return self.name.lower()


class WeatherReading(BaseModel):
    """A validated weather observation."""

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    type: WeatherType
    temperature: float

    def render(self) -> str:
        """Display form."""
        return f"There's no bad weather, just bad clothing. It's {self.temperature}ºC today, {self.type}."

    __str__ = render
