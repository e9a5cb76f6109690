from __future__ import annotations

import math
import os
from dataclasses import dataclass
from functools import lru_cache


_MIN_MARGIN_C_ENV = "PAINT_MIN_DEW_POINT_MARGIN_C"
_MIN_MARGIN_F_ENV = "PAINT_MIN_DEW_POINT_MARGIN_F"
_CAUTION_BAND_ENV = "PAINT_CAUTION_BAND_C"
_MAX_RH_ENV = "PAINT_MAX_RELATIVE_HUMIDITY"
_MIN_APP_TEMP_C_ENV = "PAINT_MIN_APPLICATION_TEMP_C"
_MAX_APP_TEMP_C_ENV = "PAINT_MAX_APPLICATION_TEMP_C"
_MIN_APP_TEMP_F_ENV = "PAINT_MIN_APPLICATION_TEMP_F"
_MAX_APP_TEMP_F_ENV = "PAINT_MAX_APPLICATION_TEMP_F"
_LOG_LEVEL_ENV = "LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    min_dew_point_margin_c: float
    min_dew_point_margin_f: float
    caution_band_c: float
    max_relative_humidity: float
    min_application_temp_c: float
    max_application_temp_c: float
    min_application_temp_f: float
    max_application_temp_f: float
    log_level: str


def _read_float_env(name: str, default: float, positive: bool = False) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = float(candidate)
    except ValueError:
        return default
    if not math.isfinite(parsed):
        return default
    if positive and parsed <= 0:
        return default
    return parsed


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


def _read_range_env(
    min_name: str, max_name: str, defaults: tuple[float, float]
) -> tuple[float, float]:
    minimum = _read_float_env(min_name, defaults[0])
    maximum = _read_float_env(max_name, defaults[1])
    if minimum > maximum:
        return defaults
    return minimum, maximum


@lru_cache
def get_settings() -> Settings:
    min_temp_c, max_temp_c = _read_range_env(_MIN_APP_TEMP_C_ENV, _MAX_APP_TEMP_C_ENV, (5, 40))
    min_temp_f, max_temp_f = _read_range_env(_MIN_APP_TEMP_F_ENV, _MAX_APP_TEMP_F_ENV, (41, 104))
    return Settings(
        min_dew_point_margin_c=_read_float_env(_MIN_MARGIN_C_ENV, 3, positive=True),
        min_dew_point_margin_f=_read_float_env(_MIN_MARGIN_F_ENV, 5, positive=True),
        caution_band_c=_read_float_env(_CAUTION_BAND_ENV, 1, positive=True),
        max_relative_humidity=_read_float_env(_MAX_RH_ENV, 85, positive=True),
        min_application_temp_c=min_temp_c,
        max_application_temp_c=max_temp_c,
        min_application_temp_f=min_temp_f,
        max_application_temp_f=max_temp_f,
        log_level=_read_log_level("INFO"),
    )
