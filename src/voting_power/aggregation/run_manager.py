from __future__ import annotations

from pathlib import Path
from typing import Any, List, Mapping, Tuple

import pandas as pd

from ..config_loader import load_config, selected_methods
from ..errors import InvalidInputError
from ..indices.banzhaf import compute_banzhaf
from ..indices.engine import compute_all
from ..indices.swings import count_swings
from ..io.readers import read_game_table
from ..io.writers import write_table
from ..model.coalitions import coalition_to_str, enumerate_coalitions
from ..model.game import GameDescription
from ..model.methods import IndexMethod
from ..model.transforms import build_games_from_table, game_from_mapping
from ..model.winning import is_winning, issue_totals
from ..utils.logging_utils import get_logger
from .visualization import plot_individuals

logger = get_logger(__name__)


def load_games(cfg: Mapping[str, Any]) -> List[Tuple[Any, GameDescription]]:
    if cfg.get("game") is not None:
        return [(0, game_from_mapping(cfg["game"]))]

    input_cfg: Mapping[str, Any] = cfg.get("input") or {}
    if "path" not in input_cfg:
        msg = "Configuration must define either 'game' or 'input.path'."
        raise InvalidInputError(msg)
    df = read_game_table(input_cfg["path"], fmt=input_cfg.get("format"))
    return build_games_from_table(df)


def _rank_values(values: list[float]) -> list[int]:
    # dense ranking, larger value is better
    unique_vals = sorted(set(values), reverse=True)
    val_to_rank = {v: idx + 1 for idx, v in enumerate(unique_vals)}
    return [val_to_rank[v] for v in values]


def individuals_rows(
    game_id: Any,
    game: GameDescription,
    methods: List[IndexMethod],
    normalize_banzhaf: bool = True,
) -> list[dict[str, Any]]:
    results = compute_all(game, methods)
    if IndexMethod.BANZHAF in results and not normalize_banzhaf:
        results[IndexMethod.BANZHAF] = compute_banzhaf(game, normalize=False)
    ranks = {m: _rank_values(v) for m, v in results.items()}
    swings = count_swings(game)

    rows: list[dict[str, Any]] = []
    for pid in game.players:
        row: dict[str, Any] = {"game_id": game_id, "player": pid}
        for issue, weight in enumerate(game.weights_of(pid)):
            row[f"weight_{issue}"] = weight
        for method in methods:
            row[method.value] = results[method][pid]
            row[f"{method.value}_rank"] = ranks[method][pid]
        row["banzhaf_swings"] = swings[pid]
        rows.append(row)
    return rows


def coalition_rows(game_id: Any, game: GameDescription) -> list[dict[str, Any]]:
    rows: list[dict[str, Any]] = []
    for coalition in enumerate_coalitions(game.player_count):
        row: dict[str, Any] = {
            "game_id": game_id,
            "coalition": coalition_to_str(coalition),
            "size": len(coalition),
        }
        for issue, total in enumerate(issue_totals(coalition, game)):
            row[f"total_{issue}"] = total
        row["winning"] = is_winning(coalition, game)
        rows.append(row)
    return rows


def output_dir(cfg: Mapping[str, Any]) -> Path:
    output_cfg: Mapping[str, Any] = cfg.get("output") or {}
    raw_out_path = output_cfg.get("path")
    if raw_out_path is not None:
        return Path(str(raw_out_path))

    input_cfg: Mapping[str, Any] = cfg.get("input") or {}
    if "path" in input_cfg:
        src_path = Path(input_cfg["path"])
        return Path("outputs") / src_path.stem
    return Path("outputs") / "game"


def run_from_config(
    config_path: Path, cfg: Mapping[str, Any] | None = None
) -> pd.DataFrame:
    """Run a computation described by a YAML file, or by an already loaded ``cfg``."""
    if cfg is None:
        cfg = load_config(config_path)
    output_cfg: Mapping[str, Any] = cfg.get("output") or {}
    banzhaf_cfg: Mapping[str, Any] = cfg.get("banzhaf") or {}
    methods = selected_methods(cfg)
    games = load_games(cfg)

    rows: list[dict[str, Any]] = []
    coalition_table: list[dict[str, Any]] = []
    write_coalitions = bool(output_cfg.get("coalitions", False))

    for game_id, game in games:
        rows.extend(
            individuals_rows(
                game_id,
                game,
                methods,
                normalize_banzhaf=banzhaf_cfg.get("normalize", True),
            )
        )
        if write_coalitions:
            coalition_table.extend(coalition_rows(game_id, game))
        logger.info(
            "Processed game %s with %d players and %d issues",
            game_id,
            game.player_count,
            game.issue_count,
        )

    result_df = pd.DataFrame(rows)

    fmt = str(output_cfg.get("format", "csv"))
    base_dir = output_dir(cfg)
    base_dir.mkdir(parents=True, exist_ok=True)

    metrics_path = base_dir / f"individuals.{fmt}"
    write_table(result_df, metrics_path, fmt=fmt)
    logger.info("Wrote metrics table to %s", metrics_path)

    if coalition_table:
        coalitions_path = base_dir / f"coalitions.{fmt}"
        write_table(pd.DataFrame(coalition_table), coalitions_path, fmt=fmt)
        logger.info("Wrote coalition table to %s", coalitions_path)

    viz_cfg: Mapping[str, Any] = cfg.get("visualization") or {}
    if viz_cfg.get("enabled", True):
        try:
            plot_individuals(result_df, base_dir, methods=[m.value for m in methods])
        except Exception as exc:  # noqa: BLE001
            logger.warning("Visualization failed: %s", exc)

    return result_df
