"""
Video Assistant API Server

FastAPI application providing endpoints for:
- Rendered document snapshots from the host page
- Latest extraction result (pull query)
- Settings and translations
- Handing videos and mirror links to the download service
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from . import __version__
from .config import config, state
from .database import DatabaseConnection, SettingsRepository
from .document import Document
from .engine import ExtractionEngine
from .i18n import Translator
from .publisher import ResultPublisher, WebhookNotifier
from .routes import download_router, misc_router, video_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize and cleanup application resources."""
    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Startup - skip if already initialized (e.g., by tests)
    if state.engine is None:
        state.settings = SettingsRepository(DatabaseConnection(config.DB_PATH))
        state.translator = Translator(state.settings.get("language") or config.DEFAULT_LANGUAGE)
        state.publisher = ResultPublisher()
        state.document = Document()
        state.engine = ExtractionEngine(
            state.document,
            state.publisher,
            placeholder=state.translator.link_placeholder,
            settle_delay=config.settle_delay_seconds(),
            title_max_length=config.TITLE_MAX_LENGTH,
        )
        logger.info(f"Extraction engine ready (settle delay: {config.SETTLE_DELAY_MS}ms)")

        if config.PUSH_URL:
            state.notifier = WebhookNotifier(config.PUSH_URL)
            state.publisher.subscribe(state.notifier)
            logger.info(f"Pushing results to {config.PUSH_URL}")

    yield

    # Shutdown
    if state.engine:
        state.engine.stop()
    if state.notifier:
        try:
            await state.notifier.close()
        except Exception as e:
            logger.warning(f"Error closing push notifier: {e}")


app = FastAPI(
    title="Video Assistant API",
    version=__version__,
    lifespan=lifespan
)

# Include routers
app.include_router(misc_router)
app.include_router(video_router)
app.include_router(download_router)
