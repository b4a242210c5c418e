from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from recitation.config import Settings
from recitation.providers.comparison import LocalComparisonProvider
from recitation.services import RecitationService
from recitation.session import RecitationSession

_API_ROOT = Path(__file__).resolve().parents[1]
if str(_API_ROOT) not in sys.path:
    sys.path.insert(0, str(_API_ROOT))


@pytest.fixture()
def settings(tmp_path) -> Settings:
    return Settings(log_dir=str(tmp_path / "logs"))


@pytest.fixture()
def reference_text() -> str:
    return "ਸਤਿ ਨਾਮੁ ਕਰਤਾ\nਪੁਰਖੁ ਨਿਰਭਉ"


@pytest.fixture()
def recitation(settings: Settings, reference_text: str) -> RecitationService:
    session = RecitationSession(reference_text, aligner_config=settings.aligner_config)
    provider = LocalComparisonProvider(aligner_config=settings.aligner_config)
    return RecitationService(session=session, provider=provider)


@pytest.fixture()
def app(settings: Settings, reference_text: str, recitation: RecitationService) -> FastAPI:
    from routes.comparison import router as comparison_router
    from routes.health import router as health_router
    from routes.session import router as session_router

    test_app = FastAPI()
    test_app.state.settings = settings
    test_app.state.reference_text = reference_text
    test_app.state.recitation = recitation
    test_app.include_router(comparison_router)
    test_app.include_router(session_router)
    test_app.include_router(health_router)
    return test_app


@pytest.fixture()
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
