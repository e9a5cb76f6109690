"""Pydantic schemas for the HTTP API layer."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from models.readings import DecisionStatus, Reading, SeverityClass, Verdict


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EvaluationRequest(_CamelModel):
    """Site conditions submitted for a painting decision."""

    air_temp: float = Field(..., description="Air temperature in the selected unit.")
    steel_temp: float = Field(..., description="Steel surface temperature in the selected unit.")
    relative_humidity: float = Field(..., description="Relative humidity in percent, (0, 100].")
    unit: str = Field(default="C", description="Unit system for both temperatures, 'C' or 'F'.")

    def to_reading(self) -> Reading:
        return Reading(
            steel_temp=self.steel_temp,
            air_temp=self.air_temp,
            relative_humidity=self.relative_humidity,
            unit=self.unit,
        )


class EvaluationResponse(_CamelModel):
    """Painting decision with explanatory detail lines."""

    status: DecisionStatus
    severity_class: SeverityClass
    message: str
    details: List[str] = Field(default_factory=list)

    @classmethod
    def from_verdict(cls, verdict: Verdict) -> "EvaluationResponse":
        return cls(
            status=verdict.status,
            severity_class=verdict.severity_class,
            message=verdict.message,
            details=list(verdict.details),
        )


class ThresholdsResponse(_CamelModel):
    """Limits currently applied by the decision engine."""

    min_dew_point_margin_c: float
    min_dew_point_margin_f: float
    caution_band_c: float
    max_relative_humidity: float
    min_application_temp_c: float
    max_application_temp_c: float
    min_application_temp_f: float
    max_application_temp_f: float
