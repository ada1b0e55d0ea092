"""Movement candidate function.

Maps a position and a directional action to the neighbouring cell. Bounds are
not checked here; the movement systems decide whether a candidate is kept.
"""

from typing import Dict, Tuple

from grid_quest.actions import Action
from grid_quest.components import Position

DIRECTION_DELTAS: Dict[Action, Tuple[int, int]] = {
    Action.UP: (-1, 0),
    Action.DOWN: (1, 0),
    Action.LEFT: (0, -1),
    Action.RIGHT: (0, 1),
    Action.STAY: (0, 0),
}


def default_move_fn(pos: Position, action: Action) -> Position:
    """Single-cell cardinal step (no wrapping)."""
    dr, dc = DIRECTION_DELTAS[action]
    return Position(pos.row + dr, pos.col + dc)
