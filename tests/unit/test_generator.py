import pytest

from grid_quest.components import Position
from grid_quest.config import DEFAULT_CONFIG, GameConfig
from grid_quest.levels.generator import generate
from grid_quest.rng import PythonRandomSource
from grid_quest.state import Outcome
from tests.test_utils import ScriptedRandomSource


def test_generate_scripted_layout() -> None:
    config = GameConfig(rows=4, cols=4, num_stars=2, num_enemies=1)
    rng = ScriptedRandomSource(
        [
            2, 2,  # goal on player start -> rejected
            0, 0,  # goal
            0, 0,  # star on goal -> rejected
            0, 1,  # star
            0, 1,  # duplicate star -> rejected
            3, 3,  # star
            0, 1,  # enemy on star -> rejected
            1, 0,  # enemy
        ]
    )
    state = generate(config, rng)
    assert state.player == Position(2, 2)
    assert state.goal == Position(0, 0)
    assert list(state.stars) == [Position(0, 1), Position(3, 3)]
    assert list(state.enemies) == [Position(1, 0)]
    assert state.score == 0
    assert state.turn == 0
    assert state.outcome == Outcome.RUNNING
    assert rng.values == []


@pytest.mark.parametrize("seed", range(20))
def test_generate_positions_are_distinct(seed: int) -> None:
    state = generate(DEFAULT_CONFIG, PythonRandomSource(seed))
    everything = [state.player, state.goal, *state.stars, *state.enemies]
    assert len(everything) == 2 + DEFAULT_CONFIG.num_stars + DEFAULT_CONFIG.num_enemies
    assert len(set(everything)) == len(everything)
    for pos in everything:
        assert 0 <= pos.row < DEFAULT_CONFIG.rows
        assert 0 <= pos.col < DEFAULT_CONFIG.cols


def test_generate_on_full_grid_terminates() -> None:
    config = GameConfig(rows=2, cols=3, num_stars=2, num_enemies=2)
    state = generate(config, PythonRandomSource(3))
    everything = {state.player, state.goal, *state.stars, *state.enemies}
    assert len(everything) == 6


def test_generate_without_rng_uses_default_source() -> None:
    state = generate()
    assert state.player == DEFAULT_CONFIG.player_start
    assert len(state.stars) == DEFAULT_CONFIG.num_stars
