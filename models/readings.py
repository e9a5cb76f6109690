"""Value types shared by the decision engine and its boundaries."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from models.errors import InvalidInputError


class TemperatureUnit(str, Enum):
    """Unit system a reading was taken in."""

    celsius = "C"
    fahrenheit = "F"

    @property
    def symbol(self) -> str:
        return f"°{self.value}"

    @classmethod
    def parse(cls, raw: Any) -> "TemperatureUnit":
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            raise InvalidInputError(f"Unit must be 'C' or 'F', got {raw!r}.")
        candidate = raw.strip().upper()
        for unit in cls:
            if unit.value == candidate:
                return unit
        raise InvalidInputError(f"Unit must be 'C' or 'F', got {raw!r}.")


def _coerce_number(name: str, value: Any) -> float:
    if isinstance(value, bool):
        raise InvalidInputError(f"{name} must be a number.")
    if isinstance(value, str):
        value = value.strip()
        if not value:
            raise InvalidInputError(f"{name} is required.")
    if value is None:
        raise InvalidInputError(f"{name} is required.")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"{name} must be a number.") from exc
    if not math.isfinite(number):
        raise InvalidInputError(f"{name} must be a finite number.")
    return number


@dataclass(frozen=True, slots=True)
class Reading:
    """Site conditions captured for a single evaluation.

    Temperatures are in ``unit``; relative humidity is a percentage in the
    half-open range ``(0, 100]``.
    """

    steel_temp: float
    air_temp: float
    relative_humidity: float
    unit: TemperatureUnit = TemperatureUnit.celsius

    def __post_init__(self) -> None:
        object.__setattr__(self, "steel_temp", _coerce_number("Steel temperature", self.steel_temp))
        object.__setattr__(self, "air_temp", _coerce_number("Air temperature", self.air_temp))
        humidity = _coerce_number("Relative humidity", self.relative_humidity)
        if humidity <= 0 or humidity > 100:
            raise InvalidInputError(
                f"Relative humidity must be greater than 0 and at most 100, got {humidity:g}."
            )
        object.__setattr__(self, "relative_humidity", humidity)
        object.__setattr__(self, "unit", TemperatureUnit.parse(self.unit))

    @classmethod
    def from_raw(
        cls,
        steel_temp: Any,
        air_temp: Any,
        relative_humidity: Any,
        unit: Any = TemperatureUnit.celsius,
    ) -> "Reading":
        """Build a reading from untyped boundary input such as form fields."""
        return cls(
            steel_temp=steel_temp,
            air_temp=air_temp,
            relative_humidity=relative_humidity,
            unit=unit,
        )


@dataclass(frozen=True, slots=True)
class DewPointResult:
    dew_point_c: float


class DecisionStatus(str, Enum):
    """Painting decision, ordered by severity."""

    go = "GO"
    caution = "CAUTION"
    no_go = "NO-GO"

    @property
    def severity(self) -> int:
        return _SEVERITY_RANK[self]

    @property
    def severity_class(self) -> "SeverityClass":
        return _SEVERITY_CLASS[self]


class SeverityClass(str, Enum):
    success = "success"
    warning = "warning"
    danger = "danger"


_SEVERITY_RANK = {
    DecisionStatus.go: 0,
    DecisionStatus.caution: 1,
    DecisionStatus.no_go: 2,
}

_SEVERITY_CLASS = {
    DecisionStatus.go: SeverityClass.success,
    DecisionStatus.caution: SeverityClass.warning,
    DecisionStatus.no_go: SeverityClass.danger,
}


@dataclass(frozen=True, slots=True)
class Verdict:
    """Outcome of a single evaluation, ready for rendering."""

    status: DecisionStatus
    message: str
    details: tuple[str, ...] = ()

    @property
    def severity_class(self) -> SeverityClass:
        return self.status.severity_class
