"""Human-readable detail lines for a verdict."""

from __future__ import annotations

from models.readings import TemperatureUnit


def format_number(value: float) -> str:
    """Shortest plain rendering, e.g. ``50`` or ``85.01``."""
    return f"{value:g}"


def format_temperature(value: float) -> str:
    return f"{value:.1f}"


def format_reading(value: float) -> str:
    """Exact rendering of a measured value, e.g. ``40.04`` or ``85.000001``."""
    text = repr(float(value))
    if text.endswith(".0"):
        return text[:-2]
    return text


def summary_lines(
    *,
    dew_point: float,
    margin: float,
    min_margin: float,
    relative_humidity: float,
    steel_temp: float,
    unit: TemperatureUnit,
) -> list[str]:
    """Summary metrics shown ahead of any rule warnings.

    All temperatures are expected in ``unit`` already.
    """
    symbol = unit.symbol
    return [
        f"Calculated Dew Point: {format_temperature(dew_point)}{symbol}",
        (
            f"Steel Temp minus Dew Point: {format_temperature(margin)}{symbol} "
            f"(Minimum Required: {format_number(min_margin)}{symbol})"
        ),
        f"Relative Humidity: {format_reading(relative_humidity)}%",
        f"Steel Temperature: {format_temperature(steel_temp)}{symbol}",
    ]


def dew_point_critical_line(min_margin_c: float) -> str:
    return f"Critical: Steel Temp must be at least {format_number(min_margin_c)}°C above the Dew Point."


def dew_point_borderline_line(min_margin_c: float) -> str:
    return f"Warning: Temperature difference is very close to the minimum {format_number(min_margin_c)}°C."


def humidity_exceeded_line(relative_humidity: float, max_relative_humidity: float) -> str:
    return (
        f"Warning: Relative Humidity ({format_reading(relative_humidity)}%) exceeds "
        f"the maximum limit of {format_number(max_relative_humidity)}%."
    )


def application_range_line(
    steel_temp: float, minimum: float, maximum: float, unit: TemperatureUnit
) -> str:
    symbol = unit.symbol
    return (
        f"Warning: Steel Temperature ({format_reading(steel_temp)}{symbol}) is outside "
        f"the typical range of {format_number(minimum)}{symbol} to {format_number(maximum)}{symbol}."
    )
