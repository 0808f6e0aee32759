"""FastAPI application entrypoint."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from tierboard.api.board import router as board_router
from tierboard.api.health import router as health_router
from tierboard.config import settings
from tierboard.core.board import BoardState
from tierboard.core.catalog.loader import load_catalog
from tierboard.core.event_bus import EventBus
from tierboard.core.logging import get_logger, setup_logging
from tierboard.services.board_service import BoardService

setup_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info("Loading catalog from %s...", settings.CATALOG_PATH)
    catalog = load_catalog(settings.CATALOG_PATH)

    event_bus = EventBus()
    board = BoardState(settings.TIER_NAMES)
    board_service = BoardService(catalog=catalog, board=board, event_bus=event_bus)
    app.state.event_bus = event_bus
    app.state.board_service = board_service
    logger.info(
        "BoardService initialized (%d item sets).",
        len(board_service.list_item_sets()),
    )

    yield

    logger.info("Shutting down...")
    app.state.board_service = None


app = FastAPI(title="Tierboard", debug=settings.DEBUG, lifespan=lifespan)

app.include_router(health_router)
app.include_router(board_router)
