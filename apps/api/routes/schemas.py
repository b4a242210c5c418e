"""Request/response schemas (camelCase on the wire)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class CompareRequest(_CamelModel):
    recognized_text: str | None = Field(default=None, alias="recognizedText")
    reference_text: str | None = Field(default=None, alias="referenceText")


class CompareRecitationRequest(_CamelModel):
    recited_text: str | None = Field(default=None, alias="recitedText")
    reference_text: str | None = Field(default=None, alias="referenceText")


class AlignedWordOut(_CamelModel):
    text: str
    is_correct: bool = Field(alias="isCorrect")


class AlignmentErrorOut(_CamelModel):
    word: str
    correct_word: str = Field(alias="correctWord")
    index: int


class AlignmentWarningOut(_CamelModel):
    title: str
    description: str


class FeedbackOut(_CamelModel):
    type: str  # "error" | "warning"
    title: str
    description: str


class ComparisonResponse(_CamelModel):
    words: list[AlignedWordOut]
    errors: list[AlignmentErrorOut]
    warnings: list[AlignmentWarningOut]
    feedback: list[FeedbackOut]


class TranscriptRequest(_CamelModel):
    transcript: str = ""


class WordOut(_CamelModel):
    text: str
    status: str  # "pending" | "current" | "correct" | "error"


class ParagraphOut(_CamelModel):
    words: list[WordOut]


class PositionOut(_CamelModel):
    para_index: int = Field(alias="paraIndex")
    word_index: int = Field(alias="wordIndex")


class SessionResponse(_CamelModel):
    paragraphs: list[ParagraphOut]
    current_position: PositionOut | None = Field(default=None, alias="currentPosition")
    progress_percentage: int = Field(alias="progressPercentage")
    feedback: list[FeedbackOut]
    total_words: int = Field(alias="totalWords")
    is_complete: bool = Field(alias="isComplete")
