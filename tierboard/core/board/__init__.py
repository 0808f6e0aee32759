"""Ranking board: the single mutable owner of items and placements"""

from .models import BoardError, BoardSnapshot, RankingSnapshot
from .state import BoardState

__all__ = [
    "BoardError",
    "BoardSnapshot",
    "BoardState",
    "RankingSnapshot",
]
