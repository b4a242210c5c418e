from __future__ import annotations

from recitation.models.reference import Position, ReferenceText, WordStatus


def test_from_text_splits_lines_and_drops_empty_tokens() -> None:
    reference = ReferenceText.from_text("ਸਤਿ  ਨਾਮੁ \r\n\nਕਰਤਾ")

    assert [[w.text for w in p.words] for p in reference.paragraphs] == [["ਸਤਿ", "ਨਾਮੁ"], [], ["ਕਰਤਾ"]]
    assert reference.total_words == 3
    assert all(w.status == WordStatus.PENDING for _pos, w in reference.iter_words())


def test_iter_words_reading_order() -> None:
    reference = ReferenceText.from_text("a b\nc")
    positions = [pos for pos, _w in reference.iter_words()]

    assert positions == [Position(0, 0), Position(0, 1), Position(1, 0)]
    assert reference.word_at(Position(1, 0)).text == "c"


def test_flatten_and_resolved_words() -> None:
    reference = ReferenceText.from_text("a b\n\nc")
    assert reference.flatten() == "a b c"
    assert reference.to_text() == "a b\n\nc"

    reference.word_at(Position(0, 0)).status = WordStatus.CORRECT
    reference.word_at(Position(2, 0)).status = WordStatus.ERROR
    reference.word_at(Position(0, 1)).status = WordStatus.CURRENT
    assert reference.resolved_words == 2


def test_empty_text() -> None:
    reference = ReferenceText.from_text("")
    assert reference.total_words == 0
    assert reference.flatten() == ""
    assert list(reference.iter_words()) == []


def test_from_text_keep_filters_tokens() -> None:
    reference = ReferenceText.from_text("ਆਦਿ ਸਚੁ ॥\n॥\tਜਪੁ ॥", keep=lambda token: token != "॥")

    assert [[w.text for w in p.words] for p in reference.paragraphs] == [["ਆਦਿ", "ਸਚੁ"], ["ਜਪੁ"]]
    assert reference.flatten() == "ਆਦਿ ਸਚੁ ਜਪੁ"
