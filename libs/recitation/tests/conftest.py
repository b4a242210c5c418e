from __future__ import annotations

import pytest

from recitation.config import Settings
from recitation.session import RecitationSession


@pytest.fixture()
def settings(tmp_path) -> Settings:
    return Settings(log_dir=str(tmp_path / "logs"))


@pytest.fixture()
def reference_text() -> str:
    return "ਸਤਿ ਨਾਮੁ ਕਰਤਾ\nਪੁਰਖੁ ਨਿਰਭਉ"


@pytest.fixture()
def session(reference_text: str) -> RecitationSession:
    return RecitationSession(reference_text)
