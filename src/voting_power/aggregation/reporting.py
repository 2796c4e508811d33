from __future__ import annotations

from typing import TextIO

import pandas as pd


def print_summary(df: pd.DataFrame, file: TextIO, digits: int = 4) -> None:
    """Write the player results as a markdown table, players numbered from 1."""
    table = df.copy()
    if "player" in table.columns:
        table["player"] = table["player"] + 1
    table.to_markdown(file, index=False, floatfmt=f".{digits}f")
    file.write("\n")
