"""Player movement system.

Applies a directional action to the player. Candidates outside the grid are
discarded and the player stays put; that is a no-op, not an error.
"""

from dataclasses import replace

from grid_quest.actions import Action, MOVE_ACTIONS
from grid_quest.moves import default_move_fn
from grid_quest.state import State
from grid_quest.utils.grid import is_in_state_bounds


def movement_system(state: State, action: Action) -> State:
    """Move the player one cell in the direction of ``action`` if in bounds.

    Raises:
        ValueError: If ``action`` is not a movement action.
    """
    if action not in MOVE_ACTIONS:
        raise ValueError(f"Action is not valid for the player: {action}")
    next_pos = default_move_fn(state.player, action)
    if not is_in_state_bounds(state, next_pos):
        return state
    return replace(state, player=next_pos)
