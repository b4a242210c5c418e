"""Core data models for recitation alignment."""

from recitation.models.alignment import (
    MISSED_WORD,
    AlignedWord,
    AlignmentError,
    AlignmentResult,
    AlignmentWarning,
    FeedbackItem,
    FeedbackType,
)
from recitation.models.reference import Paragraph, Position, ReferenceText, Word, WordStatus

__all__ = [
    "MISSED_WORD",
    "AlignedWord",
    "AlignmentError",
    "AlignmentResult",
    "AlignmentWarning",
    "FeedbackItem",
    "FeedbackType",
    "Paragraph",
    "Position",
    "ReferenceText",
    "Word",
    "WordStatus",
]
