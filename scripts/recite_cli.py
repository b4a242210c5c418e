from __future__ import annotations

import argparse
import asyncio
import sys

from recitation.config import Settings
from recitation.models.reference import WordStatus
from recitation.providers import get_comparison_provider
from recitation.services import RecitationService, load_reference_text
from recitation.session import RecitationSession
from recitation.utils.logging_setup import setup_logging

_STATUS_MARKS = {
    WordStatus.PENDING: "{}",
    WordStatus.CURRENT: ">{}<",
    WordStatus.CORRECT: "+{}",
    WordStatus.ERROR: "!{}",
}


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Recite against a reference text from the terminal. Each stdin line is appended "
            "to the transcript; ':restart' starts over, ':quit' exits."
        )
    )
    parser.add_argument("--reference", default=None, help="Path to a reference text file")
    parser.add_argument(
        "--provider", choices=["local", "remote"], default=None, help="Comparison provider"
    )
    parser.add_argument("--base-url", default=None, help="Remote comparison service URL")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL, e.g. DEBUG")
    return parser.parse_args()


def _render(session: RecitationSession) -> str:
    lines = []
    for para in session.reference_state.paragraphs:
        lines.append(" ".join(_STATUS_MARKS[w.status].format(w.text) for w in para.words))
    lines.append(f"progress={session.progress_percentage}%")
    for item in session.feedback:
        lines.append(f"  [{item.type.value}] {item.title} - {item.description}")
    return "\n".join(lines)


async def _run() -> int:
    args = _parse_args()
    settings = Settings()
    if args.provider is not None:
        settings.comparison.provider = str(args.provider)
    if args.base_url is not None:
        settings.comparison.base_url = str(args.base_url)
    setup_logging(settings, level=args.log_level)

    reference_text = load_reference_text(args.reference or settings.reference.text_path)
    session = RecitationSession(reference_text, aligner_config=settings.aligner_config)
    service = RecitationService(session, get_comparison_provider(settings.comparison_config()))

    print(_render(session))
    transcript = ""
    try:
        for raw in sys.stdin:
            line = raw.strip()
            if line == ":quit":
                break
            if line == ":restart":
                transcript = ""
                service.restart()
            else:
                transcript = f"{transcript} {line}".strip()
                await service.process_transcript(transcript)
            print(_render(session))
            if session.is_complete:
                print("recitation complete")
    finally:
        await service.close()
    return 0


def main() -> None:
    raise SystemExit(asyncio.run(_run()))


if __name__ == "__main__":
    main()
