"""Nutrition estimation and daily summary endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from health_tracker.api.models import (
    DailySummaryResponse,
    NutritionResponse,
    SummaryRequest,
)
from health_tracker.domain.nutrition import Provenance
from health_tracker.services.local_estimator import estimate_locally

if TYPE_CHECKING:
    from health_tracker.containers import AppContainer

router = APIRouter(prefix="/api", tags=["nutrition"])

_logger = logging.getLogger(__name__)

LOCAL_FALLBACK = "local"


@router.get("/nutrition", response_model=NutritionResponse)
async def lookup_nutrition(
    request: Request,
    q: str | None = None,
    query: str | None = None,
    fallback: str | None = None,
) -> NutritionResponse | JSONResponse:
    """Estimate nutrition from the upstream providers."""
    text = (q or query or "").strip()
    if not text:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Missing ?q="},
        )

    container: AppContainer = request.app.state.container
    try:
        estimate = await container.estimation_service.estimate(
            text, container.settings.api_ninjas_key
        )
    except Exception as exc:
        _logger.exception("Nutrition lookup failed: query=%s", text)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(exc)},
        )

    if fallback == LOCAL_FALLBACK and estimate.provenance is Provenance.NONE:
        estimate = estimate_locally(text)
    return NutritionResponse.from_estimate(estimate)


@router.get("/nutrition/local", response_model=NutritionResponse)
async def lookup_nutrition_locally(
    q: str | None = None, query: str | None = None
) -> NutritionResponse:
    """Estimate nutrition offline from the built-in reference foods."""
    return NutritionResponse.from_estimate(estimate_locally(q or query or ""))


@router.post("/summary", response_model=DailySummaryResponse)
async def summarize_day(
    payload: SummaryRequest, request: Request
) -> DailySummaryResponse:
    """Aggregate a day's entries into totals and a net energy balance."""
    container: AppContainer = request.app.state.container
    summary = container.summary_service.summarize(
        payload.to_entries(), baseline_kcal=payload.baseline_kcal
    )
    return DailySummaryResponse.from_summary(summary)
