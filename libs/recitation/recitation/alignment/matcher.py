"""Word-level match test with Gurmukhi pronunciation folding and fuzzy fallback."""

from __future__ import annotations

import unicodedata

from rapidfuzz.distance import Levenshtein

# Similar-sounding vowel carriers fold onto one representative.
_FOLD_MAP = {
    "ੳ": "ਓ",
    "ਉ": "ਓ",
    "ਊ": "ਓ",
    "ਅ": "ਆ",
    "ਇ": "ਈ",
    "ੲ": "ਏ",
}

# Bindi, tippi, adhak and the dependent vowel signs ਾ ਿ ੀ ੁ ੂ ੇ ੈ ੋ ੌ.
_DROPPED_MARKS = "ਂੰੱਾਿੀੁੂੇੈੋੌ"

_PRONUNCIATION_TABLE = str.maketrans({**_FOLD_MAP, **{ch: None for ch in _DROPPED_MARKS}})

DEFAULT_FUZZY_MIN_LENGTH = 4


def normalize_pronunciation(word: str) -> str:
    return word.translate(_PRONUNCIATION_TABLE)


def spoken_letters(word: str) -> str:
    """Drop combining marks (vowel signs, virama, nukta); what remains is spoken letters."""
    return "".join(ch for ch in word if not unicodedata.category(ch).startswith("M"))


def letter_count(word: str) -> int:
    return len(spoken_letters(word))


def fuzzy_threshold(a: str, b: str) -> int:
    return max(1, max(letter_count(a), letter_count(b)) // 4)


def is_word_match(a: str, b: str, *, fuzzy_min_length: int = DEFAULT_FUZZY_MIN_LENGTH) -> bool:
    """Return True when `a` is an acceptable rendition of `b`.

    Exact equality, equality after pronunciation folding, or (for words of at
    least `fuzzy_min_length` letters) a Levenshtein distance within a quarter of
    the longer word. Distance and length are both measured in spoken letters
    of the folded words.
    """
    if a == b:
        return True
    if normalize_pronunciation(a) == normalize_pronunciation(b):
        return True
    # Short words only match exactly.
    if letter_count(a) < fuzzy_min_length or letter_count(b) < fuzzy_min_length:
        return False
    threshold = fuzzy_threshold(a, b)
    distance = Levenshtein.distance(
        spoken_letters(normalize_pronunciation(a)),
        spoken_letters(normalize_pronunciation(b)),
        score_cutoff=threshold,
    )
    return distance <= threshold
