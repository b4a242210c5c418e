"""Health check routes."""

from __future__ import annotations

from fastapi import APIRouter, Request
from pydantic import BaseModel

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    status: str  # "ok"
    comparison_provider: str | None = None
    reference_words: int | None = None


@router.get("/health", response_model=HealthResponse)
async def health(request: Request) -> HealthResponse:
    """Health check endpoint."""
    service = getattr(request.app.state, "recitation", None)
    if service is None:
        return HealthResponse(status="ok")
    return HealthResponse(
        status="ok",
        comparison_provider=service.provider.name,
        reference_words=service.session.total_words,
    )
