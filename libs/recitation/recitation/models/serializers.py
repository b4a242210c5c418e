"""Serialization helpers for the JSON wire format (camelCase keys)."""

from __future__ import annotations

from typing import Any

from recitation.models.alignment import (
    AlignedWord,
    AlignmentError,
    AlignmentResult,
    AlignmentWarning,
    FeedbackItem,
    FeedbackType,
)
from recitation.models.reference import Position, ReferenceText


def serialize_alignment_result(result: AlignmentResult) -> dict[str, Any]:
    return {
        "words": [{"text": str(w.text), "isCorrect": bool(w.is_correct)} for w in result.words],
        "errors": [
            {"word": str(e.word), "correctWord": str(e.correct_word), "index": int(e.index)}
            for e in result.errors
        ],
        "warnings": [
            {"title": str(w.title), "description": str(w.description)} for w in result.warnings
        ],
    }


def deserialize_alignment_result(payload: dict[str, Any]) -> AlignmentResult:
    """Parse an AlignmentResult payload.

    Raises `ValueError` when the payload does not have the expected shape.
    """
    if not isinstance(payload, dict):
        raise ValueError(f"alignment result must be an object, got {type(payload).__name__}")

    def _items(key: str) -> list[dict[str, Any]]:
        raw = payload.get(key) or []
        if not isinstance(raw, list) or not all(isinstance(x, dict) for x in raw):
            raise ValueError(f"alignment result field {key!r} must be a list of objects")
        return raw

    try:
        words = [
            AlignedWord(text=str(item["text"]), is_correct=bool(item["isCorrect"]))
            for item in _items("words")
        ]
        errors = [
            AlignmentError(
                word=str(item["word"]),
                correct_word=str(item["correctWord"]),
                index=int(item["index"]),
            )
            for item in _items("errors")
        ]
        warnings = [
            AlignmentWarning(title=str(item["title"]), description=str(item.get("description", "")))
            for item in _items("warnings")
        ]
    except (KeyError, TypeError) as exc:
        raise ValueError(f"malformed alignment result: {exc!r}") from exc
    return AlignmentResult(words=words, errors=errors, warnings=warnings)


def serialize_feedback(items: list[FeedbackItem]) -> list[dict[str, str]]:
    return [
        {"type": FeedbackType(item.type).value, "title": item.title, "description": item.description}
        for item in items
    ]


def serialize_position(position: Position | None) -> dict[str, int] | None:
    if position is None:
        return None
    return {"paraIndex": int(position.para_index), "wordIndex": int(position.word_index)}


def serialize_reference_text(reference: ReferenceText) -> list[dict[str, Any]]:
    return [
        {"words": [{"text": w.text, "status": w.status.value} for w in para.words]}
        for para in reference.paragraphs
    ]
