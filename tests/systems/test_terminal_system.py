from grid_quest.state import Outcome
from grid_quest.systems.terminal import (
    CAUGHT_MESSAGE,
    OVERLAP_MESSAGE,
    WIN_MESSAGE,
    lose_system,
    start_of_turn_system,
    win_system,
)
from tests.test_utils import make_state


def test_win_when_player_on_goal() -> None:
    state = win_system(make_state(player=(0, 0), goal=(0, 0)))
    assert state.outcome == Outcome.WON
    assert state.win and not state.lose
    assert state.message == WIN_MESSAGE


def test_no_win_elsewhere() -> None:
    state = make_state(player=(0, 1), goal=(0, 0))
    assert win_system(state) is state


def test_lose_when_enemy_on_player() -> None:
    state = lose_system(make_state(player=(4, 4), enemies=[(1, 1), (4, 4)]))
    assert state.outcome == Outcome.LOST_ENEMY_COLLISION
    assert state.lose and not state.win
    assert state.message == CAUGHT_MESSAGE


def test_no_lose_without_contact() -> None:
    state = make_state(player=(4, 4), enemies=[(4, 5)])
    assert lose_system(state) is state


def test_start_of_turn_overlap_is_initial_overlap_loss() -> None:
    state = start_of_turn_system(make_state(player=(4, 4), enemies=[(4, 4)]))
    assert state.outcome == Outcome.LOST_INITIAL_OVERLAP
    assert state.lose
    assert state.message == OVERLAP_MESSAGE


def test_start_of_turn_goal_checked_before_enemies() -> None:
    state = start_of_turn_system(
        make_state(player=(0, 0), goal=(0, 0), enemies=[(0, 0)])
    )
    assert state.outcome == Outcome.WON


def test_start_of_turn_running() -> None:
    state = make_state(player=(4, 4), enemies=[(5, 5)])
    assert start_of_turn_system(state) is state


def test_terminal_state_is_sticky() -> None:
    won = win_system(make_state(player=(0, 0), goal=(0, 0), enemies=[(0, 0)]))
    assert lose_system(won) is won
    assert start_of_turn_system(won) is won
