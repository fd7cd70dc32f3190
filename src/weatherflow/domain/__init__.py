"""Domain types: WeatherType and WeatherReading."""

from .weather import WeatherReading, WeatherType

__all__ = ["WeatherReading", "WeatherType"]
