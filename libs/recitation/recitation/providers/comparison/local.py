"""In-process comparison using the local aligner."""

from __future__ import annotations

from recitation.alignment.aligner import AlignerConfig, align
from recitation.models.alignment import AlignmentResult
from recitation.providers.comparison.base import ComparisonProvider


class LocalComparisonProvider(ComparisonProvider):
    name = "local"

    def __init__(self, aligner_config: AlignerConfig | None = None) -> None:
        self.aligner_config = aligner_config

    async def compare(self, recognized_text: str, reference_text: str) -> AlignmentResult:
        return align(recognized_text, reference_text, config=self.aligner_config)
