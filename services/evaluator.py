"""Rule evaluation producing a GO / CAUTION / NO-GO verdict."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from functools import lru_cache
from typing import Optional

from models.readings import DecisionStatus, Reading, TemperatureUnit, Verdict
from services import presenter
from services.dew_point import compute_dew_point
from services.units import celsius_delta_to_fahrenheit, from_celsius, to_celsius
from settings import Settings, get_settings

logger = logging.getLogger(__name__)

SUITABLE_MESSAGE = "Conditions are suitable for painting."
DEW_POINT_MESSAGE = "DO NOT PAINT. Steel temperature is too close to or below the dew point."
BORDERLINE_MESSAGE = "CAUTION: Conditions are borderline. Monitor closely."
HUMIDITY_MESSAGE = "DO NOT PAINT. Relative Humidity is too high."
APPLICATION_RANGE_MESSAGE = "DO NOT PAINT. Steel temperature is outside the application range."


@dataclass(frozen=True)
class RuleThresholds:
    """Configured limits applied by :class:`DecisionEngine`.

    ``min_dew_point_margin_f`` is a display value in its own right and is not
    derived from the Celsius margin.
    """

    min_dew_point_margin_c: float = 3
    min_dew_point_margin_f: float = 5
    caution_band_c: float = 1
    max_relative_humidity: float = 85
    min_application_temp_c: float = 5
    max_application_temp_c: float = 40
    min_application_temp_f: float = 41
    max_application_temp_f: float = 104

    def __post_init__(self) -> None:
        if self.min_application_temp_c > self.max_application_temp_c:
            raise ValueError("Celsius application range minimum exceeds its maximum.")
        if self.min_application_temp_f > self.max_application_temp_f:
            raise ValueError("Fahrenheit application range minimum exceeds its maximum.")

    @classmethod
    def from_settings(cls, settings: Settings) -> "RuleThresholds":
        return cls(
            min_dew_point_margin_c=settings.min_dew_point_margin_c,
            min_dew_point_margin_f=settings.min_dew_point_margin_f,
            caution_band_c=settings.caution_band_c,
            max_relative_humidity=settings.max_relative_humidity,
            min_application_temp_c=settings.min_application_temp_c,
            max_application_temp_c=settings.max_application_temp_c,
            min_application_temp_f=settings.min_application_temp_f,
            max_application_temp_f=settings.max_application_temp_f,
        )

    def application_range(self, unit: TemperatureUnit) -> tuple[float, float]:
        if unit is TemperatureUnit.fahrenheit:
            return self.min_application_temp_f, self.max_application_temp_f
        return self.min_application_temp_c, self.max_application_temp_c

    def min_margin_display(self, unit: TemperatureUnit) -> float:
        if unit is TemperatureUnit.fahrenheit:
            return self.min_dew_point_margin_f
        return self.min_dew_point_margin_c

    def as_dict(self) -> dict[str, float]:
        return asdict(self)


class _Assessment:
    """Accumulates status and warnings while rules run.

    Status never moves to a less severe value.
    """

    def __init__(self) -> None:
        self.status = DecisionStatus.go
        self.message = SUITABLE_MESSAGE
        self.warnings: list[str] = []

    def escalate(self, status: DecisionStatus, message: str) -> None:
        if status.severity <= self.status.severity:
            return
        self.status = status
        self.message = message

    def escalate_from_go(self, message: str) -> None:
        if self.status is DecisionStatus.go:
            self.escalate(DecisionStatus.no_go, message)


class DecisionEngine:
    """Pure decision pipeline: normalize, compute dew point, apply rules, present."""

    def __init__(self, thresholds: Optional[RuleThresholds] = None) -> None:
        self.thresholds = thresholds or RuleThresholds()

    def evaluate(self, reading: Reading) -> Verdict:
        thresholds = self.thresholds
        unit = reading.unit
        steel_temp_c = to_celsius(reading.steel_temp, unit)
        dew_point_c = compute_dew_point(reading).dew_point_c
        margin_c = steel_temp_c - dew_point_c

        assessment = _Assessment()
        self._check_dew_point_margin(assessment, margin_c)
        self._check_humidity(assessment, reading.relative_humidity)
        self._check_application_range(assessment, reading.steel_temp, unit)

        details = presenter.summary_lines(
            dew_point=from_celsius(dew_point_c, unit),
            margin=(
                celsius_delta_to_fahrenheit(margin_c)
                if unit is TemperatureUnit.fahrenheit
                else margin_c
            ),
            min_margin=thresholds.min_margin_display(unit),
            relative_humidity=reading.relative_humidity,
            steel_temp=reading.steel_temp,
            unit=unit,
        )
        details.extend(assessment.warnings)

        logger.info(
            "Evaluated painting conditions",
            extra={
                "status": assessment.status.value,
                "unit": unit.value,
                "dew_point_c": dew_point_c,
                "margin_c": round(margin_c, 2),
            },
        )
        return Verdict(
            status=assessment.status,
            message=assessment.message,
            details=tuple(details),
        )

    def _check_dew_point_margin(self, assessment: _Assessment, margin_c: float) -> None:
        minimum = self.thresholds.min_dew_point_margin_c
        if margin_c < minimum:
            assessment.escalate(DecisionStatus.no_go, DEW_POINT_MESSAGE)
            assessment.warnings.append(presenter.dew_point_critical_line(minimum))
            logger.debug("Dew point margin below minimum", extra={"rule": "dew_point"})
        elif margin_c < minimum + self.thresholds.caution_band_c:
            assessment.escalate(DecisionStatus.caution, BORDERLINE_MESSAGE)
            assessment.warnings.append(presenter.dew_point_borderline_line(minimum))
            logger.debug("Dew point margin is borderline", extra={"rule": "dew_point"})

    def _check_humidity(self, assessment: _Assessment, relative_humidity: float) -> None:
        maximum = self.thresholds.max_relative_humidity
        if relative_humidity > maximum:
            assessment.escalate_from_go(HUMIDITY_MESSAGE)
            assessment.warnings.append(
                presenter.humidity_exceeded_line(relative_humidity, maximum)
            )
            logger.debug("Relative humidity above limit", extra={"rule": "humidity"})

    def _check_application_range(
        self, assessment: _Assessment, steel_temp: float, unit: TemperatureUnit
    ) -> None:
        minimum, maximum = self.thresholds.application_range(unit)
        if steel_temp < minimum or steel_temp > maximum:
            assessment.escalate_from_go(APPLICATION_RANGE_MESSAGE)
            assessment.warnings.append(
                presenter.application_range_line(steel_temp, minimum, maximum, unit)
            )
            logger.debug(
                "Steel temperature outside application range",
                extra={"rule": "application_range"},
            )


def evaluate(reading: Reading, thresholds: Optional[RuleThresholds] = None) -> Verdict:
    """Evaluate a reading with explicit thresholds, or the configured defaults."""
    if thresholds is None:
        return build_default_engine().evaluate(reading)
    return DecisionEngine(thresholds).evaluate(reading)


@lru_cache
def build_default_engine() -> DecisionEngine:
    """Factory that wires the engine with thresholds from settings."""
    return DecisionEngine(RuleThresholds.from_settings(get_settings()))
