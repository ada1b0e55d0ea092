"""Random enemy movement system.

Each enemy independently draws one of ``ENEMY_ACTIONS`` (four directions or
stay) with equal probability. A move is applied only if the destination is in
bounds and is not the goal; otherwise that enemy stays for this turn. Enemies
may share cells with each other and with the player.
"""

import logging
from dataclasses import replace
from typing import List

from pyrsistent import pvector

from grid_quest.actions import ENEMY_ACTIONS
from grid_quest.components import Position
from grid_quest.moves import default_move_fn
from grid_quest.rng import RandomSource
from grid_quest.state import State
from grid_quest.utils.grid import is_in_state_bounds

logger = logging.getLogger(__name__)


def enemy_move_system(state: State, rng: RandomSource) -> State:
    """Advance every enemy by one random action."""
    moved: List[Position] = []
    for pos in state.enemies:
        action = ENEMY_ACTIONS[rng.next_int(0, len(ENEMY_ACTIONS) - 1)]
        next_pos = default_move_fn(pos, action)
        if is_in_state_bounds(state, next_pos) and next_pos != state.goal:
            moved.append(next_pos)
        else:
            moved.append(pos)
        logger.debug("Enemy at %s chose %s -> %s", pos, action, moved[-1])
    return replace(state, enemies=pvector(moved))
