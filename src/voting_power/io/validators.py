from __future__ import annotations

from typing import List

import pandas as pd

from ..errors import InvalidInputError
from ..utils.logging_utils import get_logger

logger = get_logger(__name__)

QUOTA_COLUMN = "quota"
GAME_COLUMN = "game_id"
ISSUE_COLUMN = "issue"
RESERVED_COLUMNS = {QUOTA_COLUMN, GAME_COLUMN, ISSUE_COLUMN}


def player_columns(df: pd.DataFrame) -> List[str]:
    return [c for c in df.columns if c not in RESERVED_COLUMNS]


def coerce_numeric(df: pd.DataFrame) -> pd.DataFrame:
    """Turn blank or non-numeric quota/weight cells into 0."""
    work = df.copy()
    columns = [QUOTA_COLUMN, *player_columns(df)]
    coerced = 0
    for col in columns:
        values = pd.to_numeric(work[col], errors="coerce")
        coerced += int(values.isna().sum())
        work[col] = values.fillna(0)
    if coerced:
        logger.warning("Coerced %d blank or non-numeric cells to 0", coerced)
    return work


def validate_game_table(df: pd.DataFrame) -> None:
    if QUOTA_COLUMN not in df.columns:
        msg = f"Game table must contain a '{QUOTA_COLUMN}' column."
        raise InvalidInputError(msg)
    players = player_columns(df)
    if not players:
        msg = "Game table must contain at least one player column."
        raise InvalidInputError(msg)
    if df.empty:
        msg = "Game table must contain at least one issue row."
        raise InvalidInputError(msg)
    if GAME_COLUMN in df.columns and df[GAME_COLUMN].isna().any():
        rows = [int(i) for i in df.index[df[GAME_COLUMN].isna()]]
        msg = f"Blank '{GAME_COLUMN}' in rows {rows}; every issue row must name its game."
        raise InvalidInputError(msg)

    numeric = df[[QUOTA_COLUMN, *players]].apply(pd.to_numeric, errors="coerce")
    negative = (numeric < 0).any()
    if negative.any():
        bad = sorted(str(c) for c in negative[negative].index)
        msg = f"Negative quotas or weights in columns: {bad}"
        raise InvalidInputError(msg)
