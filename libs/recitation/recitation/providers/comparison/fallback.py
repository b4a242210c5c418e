"""Primary/fallback comparison provider."""

from __future__ import annotations

import logging

from recitation.exceptions import ProviderError
from recitation.models.alignment import AlignmentResult
from recitation.providers.comparison.base import ComparisonProvider

logger = logging.getLogger(__name__)


class FallbackComparisonProvider(ComparisonProvider):
    """Use `primary`; on ProviderError, compute the same result with `fallback`.

    Exactly one result is returned per call, so callers never have to choose
    between competing result sets.
    """

    def __init__(self, primary: ComparisonProvider, fallback: ComparisonProvider) -> None:
        self.primary = primary
        self.fallback = fallback
        self.name = f"{primary.name}+{fallback.name}"
        self.fallback_count = 0

    async def compare(self, recognized_text: str, reference_text: str) -> AlignmentResult:
        try:
            return await self.primary.compare(recognized_text, reference_text)
        except ProviderError as exc:
            self.fallback_count += 1
            logger.warning(
                "comparison provider failed, falling back (primary=%s, fallback=%s, error=%s)",
                self.primary.name,
                self.fallback.name,
                exc,
            )
            return await self.fallback.compare(recognized_text, reference_text)

    async def close(self) -> None:
        try:
            await self.primary.close()
        finally:
            await self.fallback.close()
