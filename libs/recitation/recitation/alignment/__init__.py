"""Alignment of recited text against a reference text."""

from recitation.alignment.aligner import AlignerConfig, align
from recitation.alignment.feedback import derive_feedback
from recitation.alignment.matcher import is_word_match, normalize_pronunciation
from recitation.alignment.normalizer import normalize_text, tokenize_words

__all__ = [
    "AlignerConfig",
    "align",
    "derive_feedback",
    "is_word_match",
    "normalize_pronunciation",
    "normalize_text",
    "tokenize_words",
]
