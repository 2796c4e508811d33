from __future__ import annotations

from typing import Iterable, List

from .game import GameDescription


def issue_totals(coalition: Iterable[int], game: GameDescription) -> List[float]:
    members = list(coalition)
    return [sum(vector[p] for p in members) for vector in game.weight_vectors]


def is_winning(coalition: Iterable[int], game: GameDescription) -> bool:
    """True when the coalition meets the quota of every issue."""
    members = list(coalition)
    for quota, vector in zip(game.quotas, game.weight_vectors):
        if sum(vector[p] for p in members) < quota:
            return False
    return True
