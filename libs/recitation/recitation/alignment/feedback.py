"""Feedback derivation from an alignment result."""

from __future__ import annotations

from recitation.models.alignment import AlignmentResult, FeedbackItem, FeedbackType


def derive_feedback(result: AlignmentResult) -> list[FeedbackItem]:
    """Errors first (one per error entry), then one item per warning."""
    items = [
        FeedbackItem(
            type=FeedbackType.ERROR,
            title=f'Pronunciation error at word: "{error.word}"',
            description=f'Correct pronunciation: "{error.correct_word}"',
        )
        for error in result.errors
    ]
    items.extend(
        FeedbackItem(type=FeedbackType.WARNING, title=w.title, description=w.description)
        for w in result.warnings
    )
    return items
