from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd
import pytest

from voting_power.errors import InvalidInputError
from voting_power.io.readers import read_game_table
from voting_power.io.writers import write_table
from voting_power.model.transforms import build_games_from_table, game_from_mapping


def test_read_game_table_csv(tmp_path: Path) -> None:
    path = tmp_path / "game.csv"
    path.write_text("quota, alice, bob, carol\n2,1,1,1\n", encoding="utf-8")

    df = read_game_table(path)
    assert list(df.columns) == ["quota", "alice", "bob", "carol"]

    [(game_id, game)] = build_games_from_table(df)
    assert game_id == 0
    assert game.quotas == (2,)
    assert game.weight_vectors == ((1, 1, 1),)


def test_blank_cells_become_zero(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "game.csv"
    path.write_text("quota,a,b\n1,1,\n1,,1\n", encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        [(_, game)] = build_games_from_table(read_game_table(path))

    assert game.weight_vectors == ((1, 0), (0, 1))
    assert "Coerced 2" in caplog.text


def test_games_are_grouped_and_issues_ordered(tmp_path: Path) -> None:
    path = tmp_path / "games.csv"
    path.write_text(
        "game_id,issue,quota,p1,p2\n"
        "2,1,1,0,1\n"
        "2,0,1,1,0\n"
        "1,0,2,1,1\n",
        encoding="utf-8",
    )

    games = build_games_from_table(read_game_table(path))
    assert [gid for gid, _ in games] == [1, 2]
    assert games[0][1].quotas == (2,)
    assert games[1][1].weight_vectors == ((1, 0), (0, 1))


def test_invalid_tables_are_rejected() -> None:
    with pytest.raises(InvalidInputError):
        build_games_from_table(pd.DataFrame({"a": [1], "b": [1]}))
    with pytest.raises(InvalidInputError):
        build_games_from_table(pd.DataFrame({"quota": [1]}))
    with pytest.raises(InvalidInputError):
        build_games_from_table(pd.DataFrame({"quota": [-1], "a": [1]}))


def test_unsupported_formats(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        read_game_table(tmp_path / "game.xlsx")
    with pytest.raises(ValueError):
        write_table(pd.DataFrame({"a": [1]}), tmp_path / "out.xlsx")


def test_inline_game_mapping() -> None:
    game = game_from_mapping({"quotas": [1, 1], "weights": [[1, 0], [0, 1]], "players": 2})
    assert game.issue_count == 2
    assert game.player_count == 2

    with pytest.raises(InvalidInputError):
        game_from_mapping({"quotas": [1]})
    with pytest.raises(InvalidInputError):
        game_from_mapping({"quotas": [1], "weights": [1, 1]})
    with pytest.raises(InvalidInputError):
        game_from_mapping({"quotas": [1], "weights": [[1, "x"]]})
    with pytest.raises(InvalidInputError):
        game_from_mapping({"quotas": [1], "weights": [[1, 1]], "players": 3})


def test_blank_game_id_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "games.csv"
    path.write_text("game_id,quota,a,b\n1,1,1,0\n,1,0,1\n", encoding="utf-8")

    with pytest.raises(InvalidInputError, match="game_id"):
        build_games_from_table(read_game_table(path))


@pytest.mark.parametrize(
    "data",
    [
        None,
        {"quotas": 2, "weights": [[1, 1]]},
        {"quotas": [1], "weights": [[1, 1]], "players": "two"},
        {"quotas": [1], "weights": [[1, 1]], "players": 2.5},
    ],
)
def test_malformed_inline_game_is_rejected(data) -> None:  # type: ignore[no-untyped-def]
    with pytest.raises(InvalidInputError):
        game_from_mapping(data)
