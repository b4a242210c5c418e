"""Reference text source with a built-in fallback."""

from __future__ import annotations

import logging
from pathlib import Path

from recitation.exceptions import ReferenceTextError

logger = logging.getLogger(__name__)

# Opening of Japji Sahib; used when no reference text is configured.
FALLBACK_TEXT = (
    "ੴ ਸਤਿ ਨਾਮੁ ਕਰਤਾ ਪੁਰਖੁ ਨਿਰਭਉ ਨਿਰਵੈਰੁ ਅਕਾਲ ਮੂਰਤਿ ਅਜੂਨੀ ਸੈਭੰ ਗੁਰ ਪ੍ਰਸਾਦਿ ॥\n"
    "॥ ਜਪੁ ॥\n"
    "ਆਦਿ ਸਚੁ ਜੁਗਾਦਿ ਸਚੁ ॥\n"
    "ਹੈ ਭੀ ਸਚੁ ਨਾਨਕ ਹੋਸੀ ਭੀ ਸਚੁ ॥੧॥"
)


def read_reference_text(path: str | Path) -> str:
    """Read a newline-delimited reference text (one paragraph per line)."""
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ReferenceTextError(str(file_path), str(exc)) from exc
    text = text.replace("\r\n", "\n").strip("\n")
    if not text.strip():
        raise ReferenceTextError(str(file_path), "reference text is empty")
    return text


def load_reference_text(path: str | Path | None = None) -> str:
    """Return the configured reference text, or FALLBACK_TEXT when unavailable."""
    if not path:
        return FALLBACK_TEXT
    try:
        return read_reference_text(path)
    except ReferenceTextError as exc:
        logger.warning("reference text unavailable, using fallback (%s)", exc)
        return FALLBACK_TEXT
