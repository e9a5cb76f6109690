"""Temperature conversion helpers."""

from __future__ import annotations

from models.readings import TemperatureUnit


def to_celsius(value: float, unit: TemperatureUnit) -> float:
    if unit is TemperatureUnit.fahrenheit:
        return (value - 32) * 5 / 9
    return value


def celsius_to_fahrenheit(value: float) -> float:
    return value * 9 / 5 + 32


def celsius_delta_to_fahrenheit(delta: float) -> float:
    """Convert a temperature difference; differences carry no 32° offset."""
    return delta * 9 / 5


def from_celsius(value: float, unit: TemperatureUnit) -> float:
    if unit is TemperatureUnit.fahrenheit:
        return celsius_to_fahrenheit(value)
    return value
