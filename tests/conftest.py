"""Shared test fixtures."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from tierboard.api.board import router as board_router
from tierboard.api.health import router as health_router
from tierboard.core.board import BoardState
from tierboard.core.catalog.loader import catalog_from_dict
from tierboard.core.catalog.models import Catalog
from tierboard.core.event_bus import EventBus
from tierboard.services.board_service import BoardService

TIER_NAMES = ["S", "A", "B", "C", "D", "F"]

ANIMALS_DOC = {
    "packages": {
        "animals": {
            "displayName": "Animals",
            "images": [
                {"filename": "cat.png", "label": "Cat", "tags": ["mammal"]},
                {"filename": "fish.png", "label": "Fish", "tags": []},
            ],
            "tags": {
                "mammal": {
                    "title": "Mammals",
                    "description": "Warm-blooded",
                    "category": "class",
                },
            },
        },
    },
}


@pytest.fixture()
def catalog() -> Catalog:
    """Single package: animals = [cat.png (mammal), fish.png]."""
    return catalog_from_dict(ANIMALS_DOC)


@pytest.fixture()
def board() -> BoardState:
    return BoardState(TIER_NAMES)


@pytest.fixture()
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture()
def board_service(catalog: Catalog, board: BoardState, event_bus: EventBus) -> BoardService:
    return BoardService(catalog=catalog, board=board, event_bus=event_bus)


@pytest.fixture()
def client(board_service: BoardService) -> TestClient:
    """TestClient wired to an in-memory board over the animals catalog."""
    app = FastAPI()
    app.include_router(health_router)
    app.include_router(board_router)
    app.state.board_service = board_service
    return TestClient(app)
