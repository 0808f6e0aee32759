"""Board Service: catalog, materializer and undoable mutations behind one facade

This is the boundary the presentation layer talks to: it lists selectable
ItemSets, turns selections and uploads into Create mutations, and forwards
reset / delete-all / undo / dismiss to the MutationProtocol.
"""

from __future__ import annotations

import uuid
from typing import Optional, Sequence

from tierboard.core.board import BoardState
from tierboard.core.catalog.derivation import derive_item_sets, group_by_package
from tierboard.core.catalog.materializer import materialize
from tierboard.core.catalog.models import Catalog, Item, ItemSet
from tierboard.core.event_bus import BoardEvent, EventBus
from tierboard.core.event_types import EventTypes
from tierboard.core.logging import get_logger
from tierboard.core.mutation import MutationProtocol, Notification

logger = get_logger(__name__)


class BoardService:
    """Single-board facade. Not thread safe; calls are expected one at a time."""

    def __init__(
        self,
        catalog: Catalog,
        board: BoardState,
        event_bus: EventBus,
    ):
        self._catalog = catalog
        self._board = board
        self._bus = event_bus
        self._protocol = MutationProtocol(board, event_bus)
        self._item_sets: Optional[list[ItemSet]] = None

    @property
    def board(self) -> BoardState:
        return self._board

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def protocol(self) -> MutationProtocol:
        return self._protocol

    # === Catalog ===

    def list_item_sets(self) -> list[ItemSet]:
        """Derived once per catalog, then served from cache."""
        if self._item_sets is None:
            self._item_sets = derive_item_sets(self._catalog)
            logger.debug("Derived %d item sets", len(self._item_sets))
        return list(self._item_sets)

    def list_item_sets_by_package(self) -> dict[str, list[ItemSet]]:
        return group_by_package(self.list_item_sets())

    def reload_catalog(self, catalog: Catalog) -> None:
        """Swap the catalog and drop the cached derivation. Board items are kept."""
        self._catalog = catalog
        self._item_sets = None
        logger.info("Catalog reloaded (%d packages)", len(catalog))
        self._bus.emit(
            BoardEvent(
                event_type=EventTypes.CATALOG_RELOADED,
                data={"packages": list(catalog.packages)},
                source="board_service",
            )
        )

    # === Create ===

    def select_item_set(
        self, package_name: str, tag_name: str, images: Sequence[str]
    ) -> Notification:
        """Materialize a selection from the catalog and add it to the board."""
        items = materialize(self._catalog, package_name, tag_name, images)
        return self._protocol.create(items)

    def trigger_upload(self, items: Sequence[Item]) -> Notification:
        """Add pre-built items; the materializer is bypassed."""
        return self._protocol.create(items)

    def build_upload_item(
        self,
        content: str,
        image_url: str,
        tags: Sequence[str] = (),
        item_id: Optional[str] = None,
    ) -> Item:
        """Item from an upload. A missing id gets a fresh UUID."""
        return Item(
            id=item_id or str(uuid.uuid4()),
            content=content,
            image_url=image_url,
            tags=list(tags),
        )

    # === Reset / delete ===

    def trigger_reset(self) -> Notification:
        return self._protocol.reset()

    def trigger_delete_all(self, confirmed: bool) -> Optional[Notification]:
        """None when the confirmation was declined."""
        return self._protocol.delete_all(confirmed)

    # === Undo ===

    def undo(self, action_id: str) -> bool:
        return self._protocol.undo(action_id)

    def dismiss(self, action_id: str) -> bool:
        return self._protocol.dismiss(action_id)

    def pending_notifications(self) -> list[Notification]:
        return self._protocol.notifications()
