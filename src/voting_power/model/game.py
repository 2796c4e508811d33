from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from ..errors import InvalidInputError


Coalition = Tuple[int, ...]


@dataclass(frozen=True)
class GameDescription:
    """Vector weighted voting game.

    ``weight_vectors[i][p]`` is the weight of player ``p`` on issue ``i`` and
    ``quotas[i]`` the threshold a coalition has to reach on that issue.
    """

    issue_count: int
    player_count: int
    quotas: Tuple[float, ...]
    weight_vectors: Tuple[Tuple[float, ...], ...]

    def __post_init__(self) -> None:
        if self.issue_count <= 0:
            msg = f"issue_count must be positive, got {self.issue_count}."
            raise InvalidInputError(msg)
        if self.player_count <= 0:
            msg = f"player_count must be positive, got {self.player_count}."
            raise InvalidInputError(msg)

        quotas = tuple(self.quotas)
        vectors = tuple(tuple(v) for v in self.weight_vectors)
        if len(quotas) != self.issue_count:
            msg = f"Expected {self.issue_count} quotas, got {len(quotas)}."
            raise InvalidInputError(msg)
        if len(vectors) != self.issue_count:
            msg = f"Expected {self.issue_count} weight vectors, got {len(vectors)}."
            raise InvalidInputError(msg)
        for i, vector in enumerate(vectors):
            if len(vector) != self.player_count:
                msg = (
                    f"Weight vector for issue {i} has {len(vector)} entries, "
                    f"expected {self.player_count}."
                )
                raise InvalidInputError(msg)

        object.__setattr__(self, "quotas", quotas)
        object.__setattr__(self, "weight_vectors", vectors)

    @property
    def players(self) -> range:
        return range(self.player_count)

    def weights_of(self, player: int) -> Tuple[float, ...]:
        return tuple(vector[player] for vector in self.weight_vectors)

    @classmethod
    def from_weights(
        cls,
        quotas: Iterable[float],
        weight_vectors: Iterable[Sequence[float]],
    ) -> "GameDescription":
        quota_list = list(quotas)
        vectors = [list(v) for v in weight_vectors]
        player_count = len(vectors[0]) if vectors else 0
        return cls(
            issue_count=len(quota_list),
            player_count=player_count,
            quotas=tuple(quota_list),
            weight_vectors=tuple(tuple(v) for v in vectors),
        )
