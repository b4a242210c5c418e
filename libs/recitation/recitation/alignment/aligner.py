"""Sequential approximate alignment of a recited transcript against a reference.

The recited words are walked in order against a reference cursor:
- filler tokens and repeats of the previous reference word are dropped as hesitations;
- a recited word that matches the expected reference word is correct;
- otherwise a bounded lookahead tries to absorb small skips, emitting `(missed)`
  placeholders for the skipped reference words;
- anything else is an error against the expected reference word.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from recitation.alignment.matcher import DEFAULT_FUZZY_MIN_LENGTH, is_word_match
from recitation.alignment.normalizer import DEFAULT_SCRIPTS, normalize_text, tokenize_words
from recitation.models.alignment import (
    MISSED_WORD,
    AlignedWord,
    AlignmentError,
    AlignmentResult,
    AlignmentWarning,
)

logger = logging.getLogger(__name__)

DEFAULT_FILLER_WORDS: frozenset[str] = frozenset({"uh", "um", "ah", "er", "hmm"})

HESITATION_WARNING = AlignmentWarning(
    title="Slight hesitation detected",
    description="Try to maintain a consistent pace during recitation",
)
CONSECUTIVE_ERRORS_WARNING = AlignmentWarning(
    title="Multiple consecutive errors",
    description="You may need to review this section of the text",
)
OMISSION_WARNING = AlignmentWarning(
    title="Significant omission detected",
    description="Large portions of the text were not recited",
)


@dataclass(frozen=True)
class AlignerConfig:
    lookahead_window: int = 3
    fuzzy_min_length: int = DEFAULT_FUZZY_MIN_LENGTH
    consecutive_error_threshold: int = 3
    omission_ratio: float = 0.8
    filler_words: frozenset[str] = DEFAULT_FILLER_WORDS
    scripts: tuple[str, ...] = DEFAULT_SCRIPTS


DEFAULT_ALIGNER_CONFIG = AlignerConfig()


def _find_lookahead_match(
    word: str,
    reference_words: list[str],
    ref_pos: int,
    config: AlignerConfig,
) -> int | None:
    """Return the offset of the first reference word ahead of `ref_pos` matching `word`."""
    for offset in range(1, config.lookahead_window + 1):
        if ref_pos + offset >= len(reference_words):
            break
        if is_word_match(
            word, reference_words[ref_pos + offset], fuzzy_min_length=config.fuzzy_min_length
        ):
            return offset
    return None


def _is_hesitation(
    word: str, reference_words: list[str], ref_pos: int, config: AlignerConfig
) -> bool:
    if word.lower() in config.filler_words:
        return True
    if ref_pos == 0:
        return False
    # A repeat of the previous reference word, unless the reference repeats it too.
    return word == reference_words[ref_pos - 1] and word != reference_words[ref_pos]


def align(
    recognized: str | None,
    reference: str | None,
    *,
    config: AlignerConfig | None = None,
) -> AlignmentResult:
    """Align recognized text against reference text, word by word.

    Never raises for malformed input: empty or missing text on either side
    yields an empty result.
    """
    cfg = config or DEFAULT_ALIGNER_CONFIG
    recited_words = tokenize_words(normalize_text(recognized, cfg.scripts))
    reference_words = tokenize_words(normalize_text(reference, cfg.scripts))
    result = AlignmentResult()
    if not recited_words or not reference_words:
        return result

    hesitation_detected = False
    consecutive_errors = 0
    peak_consecutive_errors = 0
    ref_pos = 0

    for word in recited_words:
        if ref_pos >= len(reference_words):
            result.words.append(AlignedWord(text=word, is_correct=False))
            continue

        if _is_hesitation(word, reference_words, ref_pos, cfg):
            hesitation_detected = True
            continue

        expected = reference_words[ref_pos]
        if is_word_match(word, expected, fuzzy_min_length=cfg.fuzzy_min_length):
            result.words.append(AlignedWord(text=word, is_correct=True))
            consecutive_errors = 0
            ref_pos += 1
            continue

        offset = _find_lookahead_match(word, reference_words, ref_pos, cfg)
        if offset is not None:
            for k in range(offset):
                result.errors.append(
                    AlignmentError(
                        word=MISSED_WORD,
                        correct_word=reference_words[ref_pos + k],
                        index=len(result.words),
                    )
                )
                result.words.append(AlignedWord(text=MISSED_WORD, is_correct=False))
            result.words.append(AlignedWord(text=word, is_correct=True))
            ref_pos += offset + 1
            continue

        result.words.append(AlignedWord(text=word, is_correct=False))
        result.errors.append(
            AlignmentError(word=word, correct_word=expected, index=len(result.words) - 1)
        )
        consecutive_errors += 1
        peak_consecutive_errors = max(peak_consecutive_errors, consecutive_errors)
        ref_pos += 1

    if hesitation_detected:
        result.warnings.append(HESITATION_WARNING)
    if peak_consecutive_errors >= cfg.consecutive_error_threshold:
        result.warnings.append(CONSECUTIVE_ERRORS_WARNING)
    if len(recited_words) < len(reference_words) * cfg.omission_ratio:
        result.warnings.append(OMISSION_WARNING)

    logger.debug(
        "aligned recited=%d reference=%d words=%d errors=%d warnings=%d",
        len(recited_words),
        len(reference_words),
        len(result.words),
        len(result.errors),
        len(result.warnings),
    )
    return result
