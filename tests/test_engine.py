from __future__ import annotations

import pytest

from voting_power.errors import InvalidInputError
from voting_power.indices.engine import compute_all, compute_indices
from voting_power.model.game import GameDescription
from voting_power.model.methods import IndexMethod


@pytest.mark.parametrize("method", ["shapley", "banzhaf", IndexMethod.SHAPLEY])
def test_result_has_one_value_per_player(method) -> None:  # type: ignore[no-untyped-def]
    game = GameDescription.from_weights([5, 2], [[3, 3, 2, 1], [1, 1, 1, 1]])
    result = compute_indices(game, method)
    assert len(result) == 4
    assert sum(result) == pytest.approx(1.0)


@pytest.mark.parametrize("method", ["shapley", "banzhaf"])
def test_identical_players_get_equal_power(method: str) -> None:
    game = GameDescription.from_weights([5, 2], [[3, 3, 2, 1], [1, 1, 1, 1]])
    result = compute_indices(game, method)
    assert result[0] == pytest.approx(result[1])


@pytest.mark.parametrize("method", ["shapley", "banzhaf"])
def test_dummy_player_gets_nothing(method: str) -> None:
    game = GameDescription.from_weights([3, 1], [[2, 2, 0], [1, 1, 0]])
    assert compute_indices(game, method) == pytest.approx([0.5, 0.5, 0.0])


def test_unknown_method_is_rejected() -> None:
    game = GameDescription.from_weights([1], [[1]])
    with pytest.raises(InvalidInputError):
        compute_indices(game, "owen")


def test_compute_all_returns_both_indices() -> None:
    game = GameDescription.from_weights([3], [[2, 1, 1]])
    results = compute_all(game)
    assert set(results) == {IndexMethod.SHAPLEY, IndexMethod.BANZHAF}
    assert results[IndexMethod.SHAPLEY] == pytest.approx([2 / 3, 1 / 6, 1 / 6])
    assert results[IndexMethod.BANZHAF] == pytest.approx([0.6, 0.2, 0.2])
