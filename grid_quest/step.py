"""State reducer for one turn.

Wires the systems together in the order a turn resolves once a direction has
been read. The exported :func:`step` is the only gameplay progression entry
point; apart from drawing from ``rng`` it is pure and returns a new
:class:`grid_quest.state.State`.

Ordering:

1. Player movement (out-of-bounds candidates are dropped).
2. Star collection and scoring.
3. Goal check; a win ends the turn before enemies act.
4. Enemy movement, then the enemy collision check.
5. Periodic star respawn, then the all-collected hint.
6. Turn counter increment.

The start-of-turn checks (goal / overlap before input) live in
:func:`grid_quest.systems.terminal.start_of_turn_system`.
"""

from dataclasses import replace

from grid_quest.actions import Action
from grid_quest.rng import RandomSource
from grid_quest.state import State
from grid_quest.systems.collectible import all_collected_system, collectible_system
from grid_quest.systems.enemy import enemy_move_system
from grid_quest.systems.movement import movement_system
from grid_quest.systems.spawn import star_respawn_system
from grid_quest.systems.terminal import lose_system, win_system
from grid_quest.utils.terminal import is_terminal_state


def step(state: State, action: Action, rng: RandomSource) -> State:
    """Resolve one turn for a directional ``action``.

    Args:
        state (State): Previous state.
        action (Action): One of ``MOVE_ACTIONS``.
        rng (RandomSource): Source for enemy moves and star respawn.

    Returns:
        State: Next state. A terminal input state is returned unchanged. The
            turn counter only advances when the turn ends with the game still
            running.

    Raises:
        ValueError: If ``action`` is not a movement action.
    """
    if is_terminal_state(state):
        return state

    state = replace(state, message=None)

    state = movement_system(state, action)
    state = collectible_system(state)
    state = win_system(state)
    if is_terminal_state(state):
        return state

    state = enemy_move_system(state, rng)
    state = lose_system(state)
    if is_terminal_state(state):
        return state

    state = star_respawn_system(state, rng)
    state = all_collected_system(state)
    return replace(state, turn=state.turn + 1)
