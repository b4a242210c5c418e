"""Comparison provider base class."""

from abc import ABC, abstractmethod

from recitation.models.alignment import AlignmentResult


class ComparisonProvider(ABC):
    """Abstract base class for recited-vs-reference comparison backends.

    Every provider returns the same `AlignmentResult` shape, so local and
    remote computation are interchangeable.
    """

    name: str

    @abstractmethod
    async def compare(self, recognized_text: str, reference_text: str) -> AlignmentResult:
        """Compare recognized text against the reference text.

        Args:
            recognized_text: Accumulated transcript so far.
            reference_text: Flattened reference text (paragraphs joined by spaces).

        Returns:
            The alignment of the transcript against the reference.
        """
        ...

    async def close(self) -> None:  # pragma: no cover
        return None
