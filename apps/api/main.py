"""Recitation API"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from recitation.config import Settings
from recitation.providers import get_comparison_provider
from recitation.services import RecitationService, load_reference_text
from recitation.session import RecitationSession
from recitation.utils.logging_setup import setup_logging
from routes.comparison import router as comparison_router
from routes.health import router as health_router
from routes.session import router as session_router

settings = Settings()
setup_logging(settings)
logger = logging.getLogger("recitation.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    reference_text = load_reference_text(settings.reference.text_path)
    session = RecitationSession(reference_text, aligner_config=settings.aligner_config)
    provider = get_comparison_provider(settings.comparison_config())
    app.state.settings = settings
    app.state.reference_text = reference_text
    app.state.recitation = RecitationService(session=session, provider=provider)
    logger.info(
        "API starting (provider=%s, reference_words=%d)", provider.name, session.total_words
    )
    try:
        yield
    finally:
        await app.state.recitation.close()


app = FastAPI(
    title="Recitation API",
    description="Live word-level recitation feedback",
    version="0.1.0",
    lifespan=lifespan,
)


app.include_router(comparison_router)
app.include_router(session_router)
app.include_router(health_router)
