"""Reusable services (reference text, recitation processing)."""

from recitation.services.recitation_service import RecitationService
from recitation.services.reference_store import (
    FALLBACK_TEXT,
    load_reference_text,
    read_reference_text,
)

__all__ = ["FALLBACK_TEXT", "RecitationService", "load_reference_text", "read_reference_text"]
