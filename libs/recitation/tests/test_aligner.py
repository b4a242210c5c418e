from __future__ import annotations

from recitation.alignment.aligner import (
    CONSECUTIVE_ERRORS_WARNING,
    HESITATION_WARNING,
    OMISSION_WARNING,
    AlignerConfig,
    align,
)
from recitation.models.alignment import MISSED_WORD, AlignedWord, AlignmentError


def _verdicts(result) -> list[tuple[str, bool]]:
    return [(w.text, w.is_correct) for w in result.words]


def test_exact_match() -> None:
    result = align("ਸਤਿ ਨਾਮੁ", "ਸਤਿ ਨਾਮੁ")
    assert _verdicts(result) == [("ਸਤਿ", True), ("ਨਾਮੁ", True)]
    assert result.errors == []
    assert result.warnings == []


def test_single_substitution_is_an_error() -> None:
    result = align("ਸਤਿ ਨਾਲੁ", "ਸਤਿ ਨਾਮੁ")
    assert _verdicts(result) == [("ਸਤਿ", True), ("ਨਾਲੁ", False)]
    assert result.errors == [AlignmentError(word="ਨਾਲੁ", correct_word="ਨਾਮੁ", index=1)]
    assert result.warnings == []


def test_lookahead_repair_emits_missed_placeholder() -> None:
    result = align("ਨਾਮੁ ਕਰਤਾ", "ਸਤਿ ਨਾਮੁ ਕਰਤਾ")
    assert _verdicts(result) == [(MISSED_WORD, False), ("ਨਾਮੁ", True), ("ਕਰਤਾ", True)]
    assert result.errors == [AlignmentError(word=MISSED_WORD, correct_word="ਸਤਿ", index=0)]
    # 2 recited words against 3 reference words is below the 80% omission ratio.
    assert result.warnings == [OMISSION_WARNING]


def test_lookahead_repair_skips_several_words() -> None:
    result = align("ਸਤਿ ਪੁਰਖੁ ਨਿਰਭਉ", "ਸਤਿ ਨਾਮੁ ਕਰਤਾ ਪੁਰਖੁ ਨਿਰਭਉ")
    assert _verdicts(result) == [
        ("ਸਤਿ", True),
        (MISSED_WORD, False),
        (MISSED_WORD, False),
        ("ਪੁਰਖੁ", True),
        ("ਨਿਰਭਉ", True),
    ]
    assert [(e.correct_word, e.index) for e in result.errors] == [("ਨਾਮੁ", 1), ("ਕਰਤਾ", 2)]


def test_lookahead_is_bounded() -> None:
    reference = "ਸਤਿ ਨਾਮੁ ਕਰਤਾ ਪੁਰਖੁ ਨਿਰਭਉ"
    result = align("ਨਿਰਭਉ", reference)
    assert _verdicts(result) == [("ਨਿਰਭਉ", False)]
    assert result.errors == [AlignmentError(word="ਨਿਰਭਉ", correct_word="ਸਤਿ", index=0)]

    result = align("ਨਿਰਭਉ", reference, config=AlignerConfig(lookahead_window=4))
    assert _verdicts(result)[-1] == ("ਨਿਰਭਉ", True)
    assert len(result.errors) == 4


def test_repeated_word_is_filtered_as_hesitation() -> None:
    result = align("ਸਤਿ ਸਤਿ ਨਾਮੁ", "ਸਤਿ ਨਾਮੁ")
    assert _verdicts(result) == [("ਸਤਿ", True), ("ਨਾਮੁ", True)]
    assert result.errors == []
    assert result.warnings == [HESITATION_WARNING]


def test_filler_words_are_filtered_case_insensitively() -> None:
    result = align("ਸਤਿ UM hmm ਨਾਮੁ", "ਸਤਿ ਨਾਮੁ")
    assert _verdicts(result) == [("ਸਤਿ", True), ("ਨਾਮੁ", True)]
    assert result.warnings == [HESITATION_WARNING]


def test_repeated_reference_word_is_not_a_hesitation() -> None:
    result = align("ਵਾਹੁ ਵਾਹੁ ਗੁਰੂ", "ਵਾਹੁ ਵਾਹੁ ਗੁਰੂ")
    assert _verdicts(result) == [("ਵਾਹੁ", True), ("ਵਾਹੁ", True), ("ਗੁਰੂ", True)]
    assert result.warnings == []


def test_overflow_words_are_incorrect_without_error_entries() -> None:
    result = align("ਸਤਿ ਨਾਮੁ ਕਰਤਾ", "ਸਤਿ ਨਾਮੁ")
    assert result.words[-1] == AlignedWord(text="ਕਰਤਾ", is_correct=False)
    assert result.errors == []


def test_omission_warning() -> None:
    result = align("ਸਤਿ", "ਸਤਿ ਨਾਮੁ ਕਰਤਾ ਪੁਰਖੁ")
    assert _verdicts(result) == [("ਸਤਿ", True)]
    assert result.warnings == [OMISSION_WARNING]


def test_consecutive_errors_warning() -> None:
    result = align("foo bar baz qux", "ਸਤਿ ਨਾਮੁ ਕਰਤਾ ਪੁਰਖੁ")
    assert all(not w.is_correct for w in result.words)
    assert [e.correct_word for e in result.errors] == ["ਸਤਿ", "ਨਾਮੁ", "ਕਰਤਾ", "ਪੁਰਖੁ"]
    assert result.warnings == [CONSECUTIVE_ERRORS_WARNING]


def test_consecutive_errors_warning_kept_after_recovery() -> None:
    result = align("foo bar baz ਪੁਰਖੁ", "ਸਤਿ ਨਾਮੁ ਕਰਤਾ ਪੁਰਖੁ")
    assert result.words[-1] == AlignedWord(text="ਪੁਰਖੁ", is_correct=True)
    assert CONSECUTIVE_ERRORS_WARNING in result.warnings


def test_punctuation_and_danda_do_not_affect_alignment() -> None:
    result = align("ਸਤਿ, ਨਾਮੁ!", "ਸਤਿ ਨਾਮੁ ॥")
    assert _verdicts(result) == [("ਸਤਿ", True), ("ਨਾਮੁ", True)]


def test_empty_inputs_yield_empty_result() -> None:
    for recognized, reference in [("", "ਸਤਿ"), ("ਸਤਿ", ""), (None, None), ("॥ !", "ਸਤਿ")]:
        result = align(recognized, reference)
        assert result.is_empty


def test_align_is_deterministic() -> None:
    args = ("ਸਤਿ ਨਾਲੁ ਕਰਤਾ um ਪੁਰਖੁ", "ਸਤਿ ਨਾਮੁ ਕਰਤਾ ਪੁਰਖੁ ਨਿਰਭਉ")
    assert align(*args) == align(*args)
