"""Recitation state machine: per-word status over a fixed reference text."""

from __future__ import annotations

import logging
from typing import Any

from recitation.alignment.aligner import DEFAULT_ALIGNER_CONFIG, AlignerConfig, align
from recitation.alignment.feedback import derive_feedback
from recitation.alignment.normalizer import normalize_text
from recitation.models.alignment import AlignmentResult, FeedbackItem
from recitation.models.reference import Position, ReferenceText, WordStatus
from recitation.models.serializers import (
    serialize_feedback,
    serialize_position,
    serialize_reference_text,
)

logger = logging.getLogger(__name__)


class RecitationSession:
    """Owns one reference text and its recitation progress.

    Each transcript update is aligned from scratch against the whole reference
    and mapped back positionally: the i-th aligned word sets the status of the
    i-th reference word (reading order). The engine does no locking; callers
    serialize calls.

    Word lifecycle: PENDING -> CURRENT -> CORRECT | ERROR. Only `restart()`
    (or `load_reference()`) brings a resolved word back to PENDING.
    """

    def __init__(
        self,
        reference_text: str | ReferenceText,
        *,
        aligner_config: AlignerConfig | None = None,
    ) -> None:
        self._aligner_config = aligner_config
        self._reference = ReferenceText()
        self._progress = 0
        self._feedback: list[FeedbackItem] = []
        self._cursor: Position | None = None
        self.load_reference(reference_text)

    @property
    def reference_state(self) -> ReferenceText:
        return self._reference

    @property
    def progress_percentage(self) -> int:
        return self._progress

    @property
    def feedback(self) -> list[FeedbackItem]:
        return list(self._feedback)

    @property
    def current_position(self) -> Position | None:
        return self._cursor

    @property
    def total_words(self) -> int:
        return self._reference.total_words

    @property
    def is_complete(self) -> bool:
        return self.total_words > 0 and self._cursor is None

    def flattened_reference(self) -> str:
        return self._reference.flatten()

    def load_reference(self, reference_text: str | ReferenceText) -> None:
        """Replace the reference text and start over.

        Tokens that normalize to nothing (standalone danda marks) are dropped,
        so the i-th reference word is always the i-th word the aligner sees.
        """
        if isinstance(reference_text, ReferenceText):
            reference_text = reference_text.to_text()
        self._reference = ReferenceText.from_text(reference_text, keep=self._is_scorable)
        logger.info(
            "reference loaded (paragraphs=%d, words=%d)",
            len(self._reference.paragraphs),
            self._reference.total_words,
        )
        self.restart()

    def restart(self) -> None:
        for _pos, word in self._reference.iter_words():
            word.status = WordStatus.PENDING
        self._progress = 0
        self._feedback = []
        self._advance_cursor()

    def process_transcript(self, full_transcript: str | None) -> None:
        """Align the whole transcript so far and update word statuses.

        Blank transcripts are ignored so already-resolved words are kept.
        """
        if not str(full_transcript or "").strip():
            return
        result = align(full_transcript, self.flattened_reference(), config=self._aligner_config)
        self.apply_alignment(result)

    def apply_alignment(self, result: AlignmentResult) -> None:
        """Apply an alignment result positionally onto the reference words.

        Aligned entries beyond the reference length are ignored; reference words
        beyond the aligned prefix keep their current status.
        """
        applied = 0
        for (_pos, word), aligned in zip(self._reference.iter_words(), result.words):
            word.status = WordStatus.CORRECT if aligned.is_correct else WordStatus.ERROR
            applied += 1
        if len(result.words) > applied:
            logger.debug("ignored %d aligned words past the reference", len(result.words) - applied)

        self._advance_cursor()
        self._progress = self._compute_progress()
        self._feedback = derive_feedback(result)

    def snapshot(self) -> dict[str, Any]:
        return {
            "paragraphs": serialize_reference_text(self._reference),
            "currentPosition": serialize_position(self._cursor),
            "progressPercentage": self._progress,
            "feedback": serialize_feedback(self._feedback),
            "totalWords": self.total_words,
            "isComplete": self.is_complete,
        }

    def _advance_cursor(self) -> None:
        # A stale CURRENT word (left behind by a shorter transcript) is still unresolved.
        cursor: Position | None = None
        for pos, word in self._reference.iter_words():
            if word.status == WordStatus.CURRENT:
                word.status = WordStatus.PENDING
            if cursor is None and word.status == WordStatus.PENDING:
                cursor = pos
        if cursor is not None:
            self._reference.word_at(cursor).status = WordStatus.CURRENT
        self._cursor = cursor

    def _compute_progress(self) -> int:
        total = self._reference.total_words
        if total == 0:
            return 0
        return (100 * self._reference.resolved_words) // total

    def _is_scorable(self, token: str) -> bool:
        scripts = (self._aligner_config or DEFAULT_ALIGNER_CONFIG).scripts
        return bool(normalize_text(token, scripts))
