from __future__ import annotations

from typing import Iterator, List

from ..model.coalitions import enumerate_coalitions
from ..model.game import Coalition, GameDescription
from ..model.winning import is_winning


def iter_swings(game: GameDescription, player: int) -> Iterator[Coalition]:
    """Yield every coalition S without ``player`` that loses while S + player wins."""
    for coalition in enumerate_coalitions(game.player_count):
        if player in coalition:
            continue
        wins_without = is_winning(coalition, game)
        wins_with = is_winning(coalition + (player,), game)
        if wins_with and not wins_without:
            yield coalition


def count_swings(game: GameDescription) -> List[int]:
    return [sum(1 for _ in iter_swings(game, p)) for p in game.players]
