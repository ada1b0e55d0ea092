"""Terminal condition systems.

Set ``state.outcome`` (and the matching ``message``) exactly once when the
player reaches the goal or shares a cell with an enemy. All systems are
no-ops on a state that is already terminal.
"""

import logging
from dataclasses import replace

from grid_quest.state import Outcome, State
from grid_quest.utils.grid import player_touches_enemy
from grid_quest.utils.terminal import is_terminal_state

logger = logging.getLogger(__name__)

WIN_MESSAGE = "You reached the goal. You win!"
OVERLAP_MESSAGE = "You bumped into an enemy. Game over."
CAUGHT_MESSAGE = "An enemy caught you. Game over."


def _finish(state: State, outcome: Outcome, message: str) -> State:
    logger.debug("Turn %d ended with %s", state.turn, outcome)
    return replace(state, outcome=outcome, message=message)


def win_system(state: State) -> State:
    """Set ``WON`` if the player stands on the goal."""
    if is_terminal_state(state) or state.player != state.goal:
        return state
    return _finish(state, Outcome.WON, WIN_MESSAGE)


def lose_system(state: State) -> State:
    """Set ``LOST_ENEMY_COLLISION`` if any enemy shares the player's cell."""
    if is_terminal_state(state) or not player_touches_enemy(state):
        return state
    return _finish(state, Outcome.LOST_ENEMY_COLLISION, CAUGHT_MESSAGE)


def start_of_turn_system(state: State) -> State:
    """Re-validate the board before reading input.

    Goal first, then enemy overlap. Placement already keeps the player off
    every other entity at spawn, so the overlap branch only fires for states
    built by hand.
    """
    state = win_system(state)
    if is_terminal_state(state) or not player_touches_enemy(state):
        return state
    return _finish(state, Outcome.LOST_INITIAL_OVERLAP, OVERLAP_MESSAGE)
