from __future__ import annotations

from pathlib import Path
from typing import Iterable

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pandas as pd  # noqa: E402

LABELS = {
    "shapley": "Shapley-Shubik index",
    "banzhaf": "Banzhaf index",
}


def plot_individuals(
    df: pd.DataFrame,
    out_dir: Path,
    methods: Iterable[str] = ("shapley", "banzhaf"),
    title_prefix: str = "",
) -> None:
    out_dir.mkdir(parents=True, exist_ok=True)
    if "player" not in df.columns:
        return

    methods = list(methods)
    if "game_id" not in df.columns or df["game_id"].nunique() <= 1:
        _plot_game(df, out_dir, methods, title_prefix, suffix="")
        return

    for game_id, g in df.groupby("game_id", sort=True):
        _plot_game(g, out_dir, methods, f"{title_prefix}game {game_id}: ", suffix=f"_game{game_id}")


def _plot_game(
    df: pd.DataFrame,
    out_dir: Path,
    methods: list[str],
    title_prefix: str,
    suffix: str,
) -> None:
    # players are shown 1-based
    players = (df["player"] + 1).astype(str)

    for column in methods:
        if column not in df.columns:
            continue
        plt.figure(figsize=(8, 4))
        plt.bar(players, df[column])
        plt.xlabel("player")
        plt.ylabel(LABELS.get(column, column))
        plt.title(f"{title_prefix}{column}")
        plt.tight_layout()
        plt.savefig(out_dir / f"individuals_{column}{suffix}.png")
        plt.close()
