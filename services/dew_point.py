"""Magnus-Tetens dew point approximation."""

from __future__ import annotations

import math

from models.errors import ComputationError, InvalidInputError
from models.readings import DewPointResult, Reading
from services.units import to_celsius

# (a, b) coefficients for the 0..50 °C regime and for everything outside it.
_WARM_COEFFICIENTS = (17.27, 237.7)
_COLD_COEFFICIENTS = (22.46, 272.62)


def _coefficients(temp_c: float) -> tuple[float, float]:
    if 0 <= temp_c <= 50:
        return _WARM_COEFFICIENTS
    return _COLD_COEFFICIENTS


def calculate_dew_point_c(temp_c: float, rh: float) -> float:
    """Return the dew point in Celsius, rounded to two decimals.

    ``rh`` is relative humidity in percent and must be positive. Raises
    :class:`ComputationError` when the formula has no finite value for the
    given inputs.
    """
    if not math.isfinite(temp_c) or not math.isfinite(rh):
        raise InvalidInputError("Dew point inputs must be finite numbers.")
    if rh <= 0:
        raise InvalidInputError(f"Relative humidity must be positive, got {rh:g}.")

    a, b = _coefficients(temp_c)
    if b + temp_c == 0:
        raise ComputationError(f"Dew point is undefined at {temp_c:g}°C.")

    alpha = (a * temp_c) / (b + temp_c) + math.log(rh / 100)
    if a - alpha == 0:
        raise ComputationError(
            f"Dew point is undefined for {temp_c:g}°C at {rh:g}% relative humidity."
        )

    dew_point = (b * alpha) / (a - alpha)
    if not math.isfinite(dew_point):
        raise ComputationError(
            f"Dew point is not finite for {temp_c:g}°C at {rh:g}% relative humidity."
        )
    return round(dew_point, 2)


def compute_dew_point(reading: Reading) -> DewPointResult:
    air_temp_c = to_celsius(reading.air_temp, reading.unit)
    return DewPointResult(
        dew_point_c=calculate_dew_point_c(air_temp_c, reading.relative_humidity)
    )
