"""Grid predicates.

Pure helpers used by the movement, collection and placement code.
"""

from typing import Iterable

from grid_quest.components import Position
from grid_quest.state import State


def is_in_bounds(rows: int, cols: int, pos: Position) -> bool:
    """Return True if ``pos`` lies within a ``rows`` x ``cols`` rectangle."""
    return 0 <= pos.row < rows and 0 <= pos.col < cols


def is_in_state_bounds(state: State, pos: Position) -> bool:
    return is_in_bounds(state.rows, state.cols, pos)


def occupies_any(pos: Position, positions: Iterable[Position]) -> bool:
    """Return True if ``pos`` equals any of ``positions``."""
    return any(pos == other for other in positions)


def player_touches_enemy(state: State) -> bool:
    return occupies_any(state.player, state.enemies)
