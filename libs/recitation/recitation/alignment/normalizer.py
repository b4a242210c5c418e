"""Text normalization and tokenization for alignment."""

from __future__ import annotations

import re
from collections.abc import Iterable
from functools import lru_cache

# Unicode blocks kept during normalization, keyed by script name.
SCRIPT_RANGES: dict[str, str] = {
    "gurmukhi": "\u0a00-\u0a7f",
    "devanagari": "\u0900-\u097f",
}

DEFAULT_SCRIPTS: tuple[str, ...] = ("gurmukhi",)

# Sentence stops: danda and double danda.
_STOP_MARKS_RE = re.compile("[\u0964\u0965]")
_WHITESPACE_RE = re.compile(r"\s+")


@lru_cache(maxsize=16)
def _disallowed_chars_re(scripts: tuple[str, ...]) -> re.Pattern[str]:
    ranges = "".join(SCRIPT_RANGES[name] for name in scripts)
    return re.compile(f"[^A-Za-z0-9{ranges}\\s]")


def validate_scripts(scripts: Iterable[str]) -> tuple[str, ...]:
    out = tuple(str(s).strip().lower() for s in scripts if str(s).strip())
    unknown = [s for s in out if s not in SCRIPT_RANGES]
    if unknown:
        raise ValueError(f"Unknown script(s): {unknown!r} (expected: {sorted(SCRIPT_RANGES)})")
    return out


def normalize_text(text: str | None, scripts: tuple[str, ...] = DEFAULT_SCRIPTS) -> str:
    """Normalize recited/reference text for comparison.

    Removes danda marks, drops every character that is not an ASCII letter or
    digit, a character of one of `scripts`, or whitespace, then collapses
    whitespace. Word order is preserved and the function is idempotent.
    """
    raw = str(text or "")
    if not raw:
        return ""
    raw = _STOP_MARKS_RE.sub("", raw)
    raw = _disallowed_chars_re(scripts).sub("", raw)
    return _WHITESPACE_RE.sub(" ", raw).strip()


def tokenize_words(normalized: str) -> list[str]:
    return [tok for tok in normalized.split() if tok]
