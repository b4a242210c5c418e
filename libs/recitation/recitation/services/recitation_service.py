"""Async glue between a comparison provider and a recitation session."""

from __future__ import annotations

import logging

from recitation.providers.comparison.base import ComparisonProvider
from recitation.session.state_machine import RecitationSession

logger = logging.getLogger(__name__)


class RecitationService:
    """Feeds transcript updates through a comparison provider into one session.

    The provider call is awaited before the session is touched, and the
    session update itself never suspends. Overlapping calls must still be
    serialized by the caller; the most recently applied result wins.
    """

    def __init__(self, session: RecitationSession, provider: ComparisonProvider) -> None:
        self.session = session
        self.provider = provider

    async def process_transcript(self, full_transcript: str | None) -> bool:
        """Align `full_transcript` and apply it. Returns False for blank input."""
        transcript = str(full_transcript or "")
        if not transcript.strip():
            return False
        result = await self.provider.compare(transcript, self.session.flattened_reference())
        self.session.apply_alignment(result)
        logger.debug(
            "transcript processed (provider=%s, progress=%d%%)",
            self.provider.name,
            self.session.progress_percentage,
        )
        return True

    def restart(self) -> None:
        self.session.restart()

    async def close(self) -> None:
        await self.provider.close()
