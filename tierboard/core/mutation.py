"""Undoable mutations: do, notify, keep one reversing command per action

Each bulk board mutation (create, reset, delete-all) becomes a
PendingMutation command carrying the payload it applied and the payload
needed to reverse it. Commands stay on the pending list until undone or
dismissed; several may be pending at once and each reverses only its own
batch.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional, Sequence

from tierboard.core.board import BoardState
from tierboard.core.catalog.models import Item
from tierboard.core.event_bus import BoardEvent, EventBus
from tierboard.core.event_types import EventTypes
from tierboard.core.logging import get_logger

logger = get_logger(__name__)

EVENT_SOURCE = "mutation_protocol"


class MutationKind(str, Enum):
    CREATE = "create"
    RESET = "reset"
    DELETE_ALL = "delete_all"


class MutationState(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    UNDONE = "undone"


@dataclass
class PendingMutation:
    """Command object for one triggered mutation.

    undo_payload by kind:
        CREATE     -> tuple of item ids added
        RESET      -> RankingSnapshot taken before the reset
        DELETE_ALL -> BoardSnapshot taken before the delete
    """

    action_id: str
    kind: MutationKind
    payload: Any
    undo_payload: Any
    state: MutationState = MutationState.PENDING
    title: str = ""
    description: str = ""


@dataclass(frozen=True)
class Notification:
    """What the notification renderer shows. `undo` is meant to be called at most once."""

    action_id: str
    title: str
    description: str
    undo: Callable[[], bool] = field(compare=False, repr=False)


_EVENT_TYPES = {
    MutationKind.CREATE: EventTypes.ITEMS_ADDED,
    MutationKind.RESET: EventTypes.ITEMS_RESET,
    MutationKind.DELETE_ALL: EventTypes.ITEMS_DELETED,
}


class MutationProtocol:
    """Runs bulk mutations against a BoardState and tracks their undo commands."""

    def __init__(self, board: BoardState, event_bus: EventBus) -> None:
        self._board = board
        self._bus = event_bus
        self._pending: dict[str, PendingMutation] = {}

    # === Triggers ===

    def create(self, items: Sequence[Item]) -> Notification:
        """Add items. Empty input still notifies with a zero count."""
        items = list(items)
        item_ids = tuple(item.id for item in items)
        self._board.add_items(items)
        command = self._register(
            MutationKind.CREATE, payload=item_ids, undo_payload=item_ids
        )
        logger.info("Created %d items (action=%s)", len(items), command.action_id)
        return self._notify(
            command,
            title="Items Added",
            description=f"{len(items)} item(s) have been added.",
        )

    def reset(self) -> Notification:
        snapshot = self._board.reset_rankings()
        command = self._register(MutationKind.RESET, payload=None, undo_payload=snapshot)
        logger.info("Reset rankings (action=%s)", command.action_id)
        return self._notify(
            command,
            title="Items Reset",
            description="All item rankings have been reset.",
        )

    def delete_all(self, confirmed: bool) -> Optional[Notification]:
        """Remove every item. Without confirmation nothing happens."""
        if not confirmed:
            logger.debug("Delete all declined")
            return None

        snapshot = self._board.delete_all()
        command = self._register(
            MutationKind.DELETE_ALL, payload=None, undo_payload=snapshot
        )
        logger.info(
            "Deleted %d items (action=%s)", len(snapshot.items), command.action_id
        )
        return self._notify(
            command,
            title="All Items Deleted",
            description="All items have been removed.",
        )

    # === Undo lifecycle ===

    def undo(self, action_id: str) -> bool:
        """Reverse one pending command. Unknown or finished actions are a no-op."""
        command = self._pending.pop(action_id, None)
        if command is None:
            logger.debug("Undo ignored, no pending action %s", action_id)
            return False

        if command.kind is MutationKind.CREATE:
            self._board.remove_items(command.undo_payload)
        elif command.kind is MutationKind.RESET:
            self._board.restore_rankings(command.undo_payload)
        elif command.kind is MutationKind.DELETE_ALL:
            self._board.restore_items(command.undo_payload)
        command.state = MutationState.UNDONE

        logger.info("Undid %s (action=%s)", command.kind.value, action_id)
        self._publish(
            EventTypes.MUTATION_UNDONE,
            {"action_id": action_id, "kind": command.kind.value},
        )
        return True

    def dismiss(self, action_id: str) -> bool:
        """Drop the undo for an action; the mutation stands."""
        command = self._pending.pop(action_id, None)
        if command is None:
            return False
        command.state = MutationState.CONFIRMED
        logger.info("Dismissed %s (action=%s)", command.kind.value, action_id)
        self._publish(
            EventTypes.MUTATION_DISMISSED,
            {"action_id": action_id, "kind": command.kind.value},
        )
        return True

    def get(self, action_id: str) -> Optional[PendingMutation]:
        return self._pending.get(action_id)

    def pending(self) -> list[PendingMutation]:
        """Pending commands, oldest first."""
        return list(self._pending.values())

    def notifications(self) -> list[Notification]:
        """Notifications whose undo is still available, oldest first."""
        return [self._to_notification(command) for command in self._pending.values()]

    # === Internals ===

    def _register(
        self, kind: MutationKind, payload: Any, undo_payload: Any
    ) -> PendingMutation:
        command = PendingMutation(
            action_id=str(uuid.uuid4()),
            kind=kind,
            payload=payload,
            undo_payload=undo_payload,
        )
        self._pending[command.action_id] = command
        return command

    def _notify(
        self, command: PendingMutation, title: str, description: str
    ) -> Notification:
        command.title = title
        command.description = description
        self._publish(
            _EVENT_TYPES[command.kind],
            {
                "action_id": command.action_id,
                "kind": command.kind.value,
                "title": title,
                "description": description,
            },
        )
        return self._to_notification(command)

    def _to_notification(self, command: PendingMutation) -> Notification:
        action_id = command.action_id
        return Notification(
            action_id=action_id,
            title=command.title,
            description=command.description,
            undo=lambda: self.undo(action_id),
        )

    def _publish(self, event_type: str, data: dict[str, Any]) -> None:
        self._bus.emit(
            BoardEvent(event_type=event_type, data=data, source=EVENT_SOURCE)
        )
