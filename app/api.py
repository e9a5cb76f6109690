"""HTTP route definitions for the service."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from app.schemas import EvaluationRequest, EvaluationResponse, ThresholdsResponse
from models.errors import ComputationError, InvalidInputError
from services.evaluator import DecisionEngine, build_default_engine

router = APIRouter()


def get_engine() -> DecisionEngine:
    return build_default_engine()


@router.post(
    "/evaluate",
    response_model=EvaluationResponse,
    summary="Evaluate site conditions and return a painting decision.",
)
async def evaluate_conditions(
    payload: EvaluationRequest,
    engine: DecisionEngine = Depends(get_engine),
) -> EvaluationResponse:
    try:
        verdict = engine.evaluate(payload.to_reading())
    except InvalidInputError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc
    except ComputationError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        ) from exc
    return EvaluationResponse.from_verdict(verdict)


@router.get(
    "/thresholds",
    response_model=ThresholdsResponse,
    summary="Limits applied by the decision engine.",
)
async def get_thresholds(
    engine: DecisionEngine = Depends(get_engine),
) -> ThresholdsResponse:
    return ThresholdsResponse(**engine.thresholds.as_dict())


@router.get(
    "/health",
    summary="Health check endpoint.",
    status_code=status.HTTP_200_OK,
)
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.get(
    "/",
    summary="Root endpoint mirrors health information.",
    status_code=status.HTTP_200_OK,
)
async def root() -> dict[str, str]:
    return {"status": "ok", "detail": "See /health for service status and /ui for the checker."}
