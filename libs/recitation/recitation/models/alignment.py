"""Alignment result models (transient, recomputed per transcript)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

MISSED_WORD = "(missed)"


class FeedbackType(str, Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class AlignedWord:
    """One recited word (or a `(missed)` placeholder) and its verdict."""

    text: str
    is_correct: bool


@dataclass(frozen=True)
class AlignmentError:
    word: str
    correct_word: str
    index: int  # position in AlignmentResult.words


@dataclass(frozen=True)
class AlignmentWarning:
    title: str
    description: str


@dataclass
class AlignmentResult:
    words: list[AlignedWord] = field(default_factory=list)
    errors: list[AlignmentError] = field(default_factory=list)
    warnings: list[AlignmentWarning] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.words and not self.errors and not self.warnings


@dataclass(frozen=True)
class FeedbackItem:
    type: FeedbackType
    title: str
    description: str
