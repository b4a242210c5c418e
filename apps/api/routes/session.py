"""Recitation session routes (one in-process session per app instance)."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from recitation.services import RecitationService
from routes.schemas import SessionResponse, TranscriptRequest

router = APIRouter(prefix="/api/session", tags=["session"])


def _recitation_service(request: Request) -> RecitationService:
    service: RecitationService | None = getattr(request.app.state, "recitation", None)
    if service is None:
        raise HTTPException(status_code=500, detail="recitation session not initialized")
    return service


def _snapshot(service: RecitationService) -> SessionResponse:
    return SessionResponse.model_validate(service.session.snapshot())


@router.get("", response_model=SessionResponse)
async def get_session(request: Request) -> SessionResponse:
    return _snapshot(_recitation_service(request))


@router.post("/transcript", response_model=SessionResponse)
async def process_transcript(request: Request, payload: TranscriptRequest) -> SessionResponse:
    """Apply the full accumulated transcript; blank transcripts change nothing."""
    service = _recitation_service(request)
    await service.process_transcript(payload.transcript)
    return _snapshot(service)


@router.post("/restart", response_model=SessionResponse)
async def restart_session(request: Request) -> SessionResponse:
    service = _recitation_service(request)
    service.restart()
    return _snapshot(service)
