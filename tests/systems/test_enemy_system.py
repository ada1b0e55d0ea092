import pytest
from typing import Tuple

from grid_quest.components import Position
from grid_quest.rng import PythonRandomSource
from grid_quest.systems.enemy import enemy_move_system
from grid_quest.state import State
from tests.test_utils import ScriptedRandomSource, make_state


@pytest.mark.parametrize(
    "roll, expected",
    [
        (0, (4, 5)),  # up
        (1, (6, 5)),  # down
        (2, (5, 4)),  # left
        (3, (5, 6)),  # right
        (4, (5, 5)),  # stay
    ],
)
def test_enemy_action_choices(roll: int, expected: Tuple[int, int]) -> None:
    state = make_state(enemies=[(5, 5)])
    rng = ScriptedRandomSource([roll])
    next_state = enemy_move_system(state, rng)
    assert list(next_state.enemies) == [Position(*expected)]
    assert rng.calls == [(0, 4)]


def test_enemy_out_of_bounds_move_rejected() -> None:
    state = make_state(enemies=[(0, 0)], goal=(11, 29))
    next_state = enemy_move_system(state, ScriptedRandomSource([0]))
    assert list(next_state.enemies) == [Position(0, 0)]


def test_enemy_cannot_enter_goal() -> None:
    state = make_state(enemies=[(1, 0)], goal=(0, 0))
    next_state = enemy_move_system(state, ScriptedRandomSource([0]))
    assert list(next_state.enemies) == [Position(1, 0)]


def test_each_enemy_draws_independently() -> None:
    state = make_state(enemies=[(3, 3), (7, 7), (9, 9)])
    next_state = enemy_move_system(state, ScriptedRandomSource([3, 4, 1]))
    assert list(next_state.enemies) == [Position(3, 4), Position(7, 7), Position(10, 9)]


def test_enemies_may_share_a_cell() -> None:
    state = make_state(enemies=[(3, 3), (3, 5)])
    next_state = enemy_move_system(state, ScriptedRandomSource([3, 2]))
    assert list(next_state.enemies) == [Position(3, 4), Position(3, 4)]


def test_enemies_never_reach_goal_over_many_turns() -> None:
    state: State = make_state(
        rows=3, cols=3, num_stars=1, num_enemies=3,
        goal=(1, 1), player=(0, 0), enemies=[(0, 1), (1, 0), (2, 1)],
    )
    rng = PythonRandomSource(seed=11)
    for _ in range(500):
        state = enemy_move_system(state, rng)
        assert state.goal not in state.enemies
        for enemy in state.enemies:
            assert 0 <= enemy.row < 3 and 0 <= enemy.col < 3
