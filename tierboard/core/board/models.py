"""Board snapshots and errors"""

from __future__ import annotations

from dataclasses import dataclass

from tierboard.core.catalog.models import Item


class BoardError(ValueError):
    """Board operation on an unknown item or tier."""


@dataclass(frozen=True)
class RankingSnapshot:
    """Placements at one point in time.

    tiers: (tier_name, ordered item ids) per tier
    unranked: ordered ids in the unranked pool
    """

    tiers: tuple[tuple[str, tuple[str, ...]], ...]
    unranked: tuple[str, ...]


@dataclass(frozen=True)
class BoardSnapshot:
    """Items plus their placements, captured before delete-all."""

    items: tuple[Item, ...]
    rankings: RankingSnapshot
