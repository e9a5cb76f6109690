from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.schemas import EvaluationResponse
from models.errors import PaintCheckError
from models.readings import Reading, TemperatureUnit
from services.evaluator import DecisionEngine, build_default_engine

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent / "templates"))


def get_engine() -> DecisionEngine:
    return build_default_engine()


def _form_context(
    air_temp: str = "",
    steel_temp: str = "",
    rh: str = "",
    unit: str = TemperatureUnit.celsius.value,
) -> dict[str, Any]:
    selected = unit.strip().upper() if unit else TemperatureUnit.celsius.value
    return {
        "form": {
            "air_temp": air_temp,
            "steel_temp": steel_temp,
            "rh": rh,
            "unit": selected,
        },
        "units": list(TemperatureUnit),
    }


router = APIRouter(include_in_schema=False)


@router.get("/ui", name="ui_index", response_class=HTMLResponse)
async def ui_index(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "ui/index.html",
        {**_form_context(), "result": None, "error": None},
    )


@router.post("/ui", name="ui_evaluate", response_class=HTMLResponse)
async def ui_evaluate(
    request: Request,
    air_temp: str = Form("", alias="airTemp"),
    steel_temp: str = Form("", alias="steelTemp"),
    rh: str = Form(""),
    unit: str = Form(TemperatureUnit.celsius.value),
    engine: DecisionEngine = Depends(get_engine),
) -> HTMLResponse:
    context = _form_context(air_temp=air_temp, steel_temp=steel_temp, rh=rh, unit=unit)
    result: Optional[EvaluationResponse] = None
    error: Optional[str] = None
    status_code = status.HTTP_200_OK

    try:
        reading = Reading.from_raw(
            steel_temp=steel_temp,
            air_temp=air_temp,
            relative_humidity=rh,
            unit=unit,
        )
        result = EvaluationResponse.from_verdict(engine.evaluate(reading))
    except PaintCheckError as exc:
        logger.warning("Rejected form submission", extra={"reason": str(exc)})
        error = str(exc)
        status_code = status.HTTP_400_BAD_REQUEST

    return templates.TemplateResponse(
        request,
        "ui/index.html",
        {**context, "result": result, "error": error},
        status_code=status_code,
    )
