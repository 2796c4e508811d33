from __future__ import annotations

from typing import List

from ..model.game import GameDescription
from ..utils.combinatorics import factorial_table, shapley_weight
from ..utils.logging_utils import get_logger
from .swings import iter_swings

logger = get_logger(__name__)


def compute_shapley(game: GameDescription) -> List[float]:
    """Shapley-Shubik index of every player.

    Each swing coalition S of player i contributes
    ``|S|! (n - |S| - 1)! / n!``. The result is not renormalized.
    """
    n = game.player_count
    factorials = factorial_table(n)

    indices: list[float] = [0.0] * n
    for i in game.players:
        for coalition in iter_swings(game, i):
            indices[i] += shapley_weight(len(coalition), n, factorials)

    logger.debug("Shapley-Shubik for %d players sums to %.12g", n, sum(indices))
    return indices
