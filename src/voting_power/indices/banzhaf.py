from __future__ import annotations

from typing import List

from ..model.game import GameDescription
from ..utils.logging_utils import get_logger
from .swings import count_swings

logger = get_logger(__name__)


def compute_banzhaf(game: GameDescription, normalize: bool = True) -> List[float]:
    raw = [float(x) for x in count_swings(game)]
    if not normalize:
        return raw

    total = sum(raw)
    if total == 0:
        logger.debug("No player is ever a swing; returning raw Banzhaf counts.")
        return raw
    return [x / total for x in raw]
