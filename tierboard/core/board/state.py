"""In-memory board state.

Every item lives in exactly one place: the unranked pool or one tier.
Item ids are not required to be unique; operations by id act on every
item carrying it.
"""

from __future__ import annotations

import copy
from typing import Iterable, Optional

from tierboard.core.catalog.models import Item
from tierboard.core.logging import get_logger

from .models import BoardError, BoardSnapshot, RankingSnapshot

logger = get_logger(__name__)


class BoardState:
    def __init__(self, tier_names: Iterable[str]) -> None:
        self._tier_names: list[str] = list(tier_names)
        self._items: list[Item] = []
        self._tiers: dict[str, list[str]] = {name: [] for name in self._tier_names}
        self._unranked: list[str] = []

    # === Queries ===

    @property
    def items(self) -> list[Item]:
        return list(self._items)

    @property
    def tier_names(self) -> list[str]:
        return list(self._tier_names)

    @property
    def unranked(self) -> list[str]:
        return list(self._unranked)

    def tier(self, tier_name: str) -> list[str]:
        if tier_name not in self._tiers:
            raise BoardError(f"Unknown tier: {tier_name}")
        return list(self._tiers[tier_name])

    def get_item(self, item_id: str) -> Optional[Item]:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def placement_of(self, item_id: str) -> Optional[str]:
        """Tier name, or None when unranked or absent."""
        for name, ids in self._tiers.items():
            if item_id in ids:
                return name
        return None

    def count(self) -> int:
        return len(self._items)

    # === Create / undo create ===

    def add_items(self, items: Iterable[Item]) -> None:
        """Append to the board; new items start unranked."""
        for item in items:
            self._items.append(item)
            self._unranked.append(item.id)

    def remove_items(self, item_ids: Iterable[str]) -> int:
        """Remove every item whose id is in the set. Returns the number removed."""
        ids = set(item_ids)
        before = len(self._items)
        self._items = [item for item in self._items if item.id not in ids]
        self._unranked = [i for i in self._unranked if i not in ids]
        for name in self._tiers:
            self._tiers[name] = [i for i in self._tiers[name] if i not in ids]
        removed = before - len(self._items)
        logger.debug("Removed %d items", removed)
        return removed

    # === Ranking ===

    def move_item(
        self, item_id: str, tier_name: Optional[str], position: Optional[int] = None
    ) -> None:
        """Place an item in a tier (or back in the pool when tier_name is None)."""
        if self.get_item(item_id) is None:
            raise BoardError(f"Unknown item: {item_id}")
        if tier_name is not None and tier_name not in self._tiers:
            raise BoardError(f"Unknown tier: {tier_name}")

        self._detach(item_id)
        target = self._unranked if tier_name is None else self._tiers[tier_name]
        if position is None or position >= len(target):
            target.append(item_id)
        else:
            target.insert(max(position, 0), item_id)

    def rename_item(self, item_id: str, content: str) -> None:
        item = self.get_item(item_id)
        if item is None:
            raise BoardError(f"Unknown item: {item_id}")
        item.content = content

    def _detach(self, item_id: str) -> None:
        if item_id in self._unranked:
            self._unranked.remove(item_id)
            return
        for ids in self._tiers.values():
            if item_id in ids:
                ids.remove(item_id)
                return

    # === Reset / undo reset ===

    def snapshot_rankings(self) -> RankingSnapshot:
        return RankingSnapshot(
            tiers=tuple((name, tuple(self._tiers[name])) for name in self._tier_names),
            unranked=tuple(self._unranked),
        )

    def reset_rankings(self) -> RankingSnapshot:
        """Move every item back to the pool, in board order. Returns the prior rankings."""
        snapshot = self.snapshot_rankings()
        for name in self._tiers:
            self._tiers[name] = []
        self._unranked = [item.id for item in self._items]
        return snapshot

    def restore_rankings(self, snapshot: RankingSnapshot) -> None:
        """Re-apply a ranking snapshot.

        Ids no longer on the board are ignored; items added after the
        snapshot stay in the pool after the restored ones.
        """
        present = [item.id for item in self._items]
        remaining = list(present)

        def take(ids: Iterable[str]) -> list[str]:
            taken = []
            for i in ids:
                if i in remaining:
                    remaining.remove(i)
                    taken.append(i)
            return taken

        tiers = {name: take(ids) for name, ids in snapshot.tiers if name in self._tiers}
        unranked = take(snapshot.unranked)
        for name in self._tier_names:
            self._tiers[name] = tiers.get(name, [])
        self._unranked = unranked + remaining

    # === Delete all / undo delete ===

    def delete_all(self) -> BoardSnapshot:
        """Remove every item. Returns what was there, rankings included."""
        snapshot = BoardSnapshot(
            items=tuple(copy.deepcopy(self._items)),
            rankings=self.snapshot_rankings(),
        )
        self._items = []
        self._unranked = []
        for name in self._tiers:
            self._tiers[name] = []
        return snapshot

    def restore_items(self, snapshot: BoardSnapshot) -> None:
        """Put deleted items back ahead of anything added since, with their rankings."""
        added_since = self._items
        self._items = [copy.deepcopy(item) for item in snapshot.items] + added_since
        self.restore_rankings(snapshot.rankings)
