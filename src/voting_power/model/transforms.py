from __future__ import annotations

from typing import Any, List, Mapping, Tuple

import pandas as pd

from ..errors import InvalidInputError
from ..io.validators import (
    GAME_COLUMN,
    ISSUE_COLUMN,
    QUOTA_COLUMN,
    coerce_numeric,
    player_columns,
    validate_game_table,
)
from .game import GameDescription


def build_games_from_table(df: pd.DataFrame) -> List[Tuple[Any, GameDescription]]:
    """Group a game table by ``game_id`` and build one game per group.

    Rows are issues; inside a game they are ordered by the ``issue`` column
    when present, otherwise by file order.
    """
    validate_game_table(df)
    work = coerce_numeric(df)
    players = player_columns(work)

    if GAME_COLUMN not in work.columns:
        work[GAME_COLUMN] = 0

    games: list[tuple[Any, GameDescription]] = []
    for game_id, g in work.groupby(GAME_COLUMN, sort=True):
        if ISSUE_COLUMN in g.columns:
            g = g.sort_values(ISSUE_COLUMN, kind="mergesort")
        quotas = [_as_number(q) for q in g[QUOTA_COLUMN]]
        vectors = [
            [_as_number(w) for w in row]
            for row in g[players].itertuples(index=False, name=None)
        ]
        games.append((game_id, GameDescription.from_weights(quotas, vectors)))

    return games


def game_from_mapping(data: Mapping[str, Any]) -> GameDescription:
    """Build a game from an inline ``{quotas: [...], weights: [[...], ...]}`` block."""
    if not isinstance(data, Mapping) or "quotas" not in data or "weights" not in data:
        msg = "Inline game must define 'quotas' and 'weights'."
        raise InvalidInputError(msg)
    if not isinstance(data["quotas"], list):
        msg = "'quotas' must be a list with one quota per issue."
        raise InvalidInputError(msg)
    weights = data["weights"]
    if not isinstance(weights, list) or not all(isinstance(v, list) for v in weights):
        msg = "'weights' must be a list of per-issue weight lists."
        raise InvalidInputError(msg)

    quotas = [_as_number(q) for q in data["quotas"]]
    vectors = [[_as_number(w) for w in vector] for vector in weights]
    game = GameDescription.from_weights(quotas, vectors)

    expected_players = data.get("players")
    if expected_players is None:
        return game
    if isinstance(expected_players, bool) or not isinstance(expected_players, int):
        msg = f"'players' must be an integer, got {expected_players!r}."
        raise InvalidInputError(msg)
    if expected_players != game.player_count:
        msg = (
            f"Inline game declares {expected_players} players "
            f"but weight vectors have {game.player_count}."
        )
        raise InvalidInputError(msg)
    return game


def _as_number(value: Any) -> float | int:
    if value is None or (isinstance(value, str) and not value.strip()):
        return 0
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        msg = f"Not a number: {value!r}"
        raise InvalidInputError(msg) from exc
    return int(number) if number.is_integer() else number
