from __future__ import annotations

from recitation.alignment import align, derive_feedback
from recitation.models.alignment import FeedbackType


def test_feedback_lists_errors_then_warnings() -> None:
    result = align("ਸਤਿ ਨਾਲੁ", "ਸਤਿ ਨਾਮੁ ਕਰਤਾ")
    feedback = derive_feedback(result)

    assert [f.type for f in feedback] == [FeedbackType.ERROR, FeedbackType.WARNING]
    assert feedback[0].title == 'Pronunciation error at word: "ਨਾਲੁ"'
    assert feedback[0].description == 'Correct pronunciation: "ਨਾਮੁ"'
    assert feedback[1].title == "Significant omission detected"


def test_feedback_for_missed_words() -> None:
    feedback = derive_feedback(align("ਨਾਮੁ ਕਰਤਾ ਪੁਰਖੁ", "ਸਤਿ ਨਾਮੁ ਕਰਤਾ ਪੁਰਖੁ"))
    assert feedback[0].title == 'Pronunciation error at word: "(missed)"'
    assert feedback[0].description == 'Correct pronunciation: "ਸਤਿ"'


def test_no_feedback_for_clean_recitation() -> None:
    assert derive_feedback(align("ਸਤਿ ਨਾਮੁ", "ਸਤਿ ਨਾਮੁ")) == []
