"""Comparison API routes (stateless alignment)."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request

from recitation.alignment import align, derive_feedback
from recitation.config import Settings
from recitation.models.serializers import serialize_alignment_result, serialize_feedback
from routes.schemas import CompareRecitationRequest, CompareRequest, ComparisonResponse

logger = logging.getLogger("recitation.api.comparison")

router = APIRouter(prefix="/api", tags=["comparison"])


def _settings(request: Request) -> Settings:
    settings: Settings | None = getattr(request.app.state, "settings", None)
    if settings is None:
        raise HTTPException(status_code=500, detail="settings not initialized")
    return settings


def _reference_text(request: Request) -> str:
    text: str | None = getattr(request.app.state, "reference_text", None)
    if not text:
        raise HTTPException(status_code=500, detail="reference text not initialized")
    return text


def _compare(settings: Settings, recognized: str, reference: str) -> ComparisonResponse:
    result = align(recognized, reference, config=settings.aligner_config)
    payload = serialize_alignment_result(result)
    payload["feedback"] = serialize_feedback(derive_feedback(result))
    logger.info(
        "comparison done (words=%d, errors=%d, warnings=%d)",
        len(result.words),
        len(result.errors),
        len(result.warnings),
    )
    return ComparisonResponse.model_validate(payload)


@router.get("/reference/text", response_model=str)
async def get_reference_text(request: Request) -> str:
    return _reference_text(request)


@router.post("/compare", response_model=ComparisonResponse)
async def compare(request: Request, payload: CompareRequest) -> ComparisonResponse:
    """Compare recognized text with the given (or configured) reference text."""
    recognized = str(payload.recognized_text or "")
    if not recognized.strip():
        raise HTTPException(status_code=400, detail="Recognized text is required")
    reference = str(payload.reference_text or "").strip() or _reference_text(request)
    return _compare(_settings(request), recognized, reference)


@router.post("/compare-recitation", response_model=ComparisonResponse)
async def compare_recitation(
    request: Request, payload: CompareRecitationRequest
) -> ComparisonResponse:
    recited = str(payload.recited_text or "")
    if not recited.strip():
        raise HTTPException(status_code=400, detail="Recited text is required")
    reference = str(payload.reference_text or "")
    if not reference.strip():
        raise HTTPException(status_code=400, detail="Reference text is required")
    return _compare(_settings(request), recited, reference)
