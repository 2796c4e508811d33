from __future__ import annotations

from pathlib import Path

import pandas as pd


def read_game_table(path: str | Path, fmt: str | None = None) -> pd.DataFrame:
    """Read a game table with one row per issue.

    Columns: ``quota``, one column per player, and optionally ``game_id``
    and ``issue``.
    """
    p = Path(path)
    if fmt is None:
        fmt = p.suffix.lstrip(".").lower()

    if fmt == "csv":
        df = pd.read_csv(p, skipinitialspace=True)
    elif fmt in {"parquet", "pq"}:
        df = pd.read_parquet(p)
    else:
        msg = f"Unsupported format: {fmt}"
        raise ValueError(msg)

    df.columns = [str(c).strip() for c in df.columns]
    return df
