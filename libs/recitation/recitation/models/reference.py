"""Reference text models (paragraphs of words with per-word status)."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import Enum


class WordStatus(str, Enum):
    PENDING = "pending"
    CURRENT = "current"
    CORRECT = "correct"
    ERROR = "error"

    @property
    def is_resolved(self) -> bool:
        return self in (WordStatus.CORRECT, WordStatus.ERROR)


@dataclass
class Word:
    text: str
    status: WordStatus = WordStatus.PENDING


@dataclass
class Paragraph:
    words: list[Word] = field(default_factory=list)


@dataclass(frozen=True)
class Position:
    """Back-reference into a ReferenceText (paragraph index, word index)."""

    para_index: int
    word_index: int


@dataclass
class ReferenceText:
    """Reference recitation split into paragraphs (lines) and words.

    Word texts are fixed once built; only `Word.status` changes afterwards.
    """

    paragraphs: list[Paragraph] = field(default_factory=list)

    @classmethod
    def from_text(
        cls, text: str | None, *, keep: Callable[[str], bool] | None = None
    ) -> "ReferenceText":
        """Split `text` into paragraphs (lines) of whitespace-separated words.

        Tokens rejected by `keep` (e.g. standalone danda marks) are not words.
        """
        paragraphs: list[Paragraph] = []
        for line in str(text or "").split("\n"):
            words = [Word(text=token) for token in line.split() if keep is None or keep(token)]
            paragraphs.append(Paragraph(words=words))
        return cls(paragraphs=paragraphs)

    def iter_words(self) -> Iterator[tuple[Position, Word]]:
        """Yield words in reading order (paragraph, then word)."""
        for para_index, para in enumerate(self.paragraphs):
            for word_index, word in enumerate(para.words):
                yield Position(para_index=para_index, word_index=word_index), word

    def word_at(self, position: Position) -> Word:
        return self.paragraphs[position.para_index].words[position.word_index]

    @property
    def total_words(self) -> int:
        return sum(len(p.words) for p in self.paragraphs)

    @property
    def resolved_words(self) -> int:
        return sum(1 for _pos, w in self.iter_words() if w.status.is_resolved)

    def flatten(self) -> str:
        return " ".join(w.text for _pos, w in self.iter_words())

    def to_text(self) -> str:
        return "\n".join(" ".join(w.text for w in p.words) for p in self.paragraphs)
