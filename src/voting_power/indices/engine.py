from __future__ import annotations

from typing import Dict, Iterable, List, Union

from ..model.game import GameDescription
from ..model.methods import IndexMethod
from .banzhaf import compute_banzhaf
from .shapley import compute_shapley

MethodLike = Union[IndexMethod, str]


def compute_indices(game: GameDescription, method: MethodLike) -> List[float]:
    """Return one power index value per player of ``game``."""
    selected = IndexMethod.parse(method)
    if selected is IndexMethod.SHAPLEY:
        return compute_shapley(game)
    return compute_banzhaf(game)


def compute_all(
    game: GameDescription,
    methods: Iterable[MethodLike] = (IndexMethod.SHAPLEY, IndexMethod.BANZHAF),
) -> Dict[IndexMethod, List[float]]:
    selected = [IndexMethod.parse(m) for m in methods]
    return {m: compute_indices(game, m) for m in selected}
