"""Periodic star respawn system.

On turns divisible by ``respawn_interval``, if fewer than the configured
number of stars remain, one new star is placed with a bounded number of
draws. A star never lands on the player, the goal or another star; it may
land under an enemy. When every draw collides nothing is spawned.
"""

import logging
from dataclasses import replace

from grid_quest.levels.placement import try_place
from grid_quest.rng import RandomSource
from grid_quest.state import State

logger = logging.getLogger(__name__)


def star_respawn_system(state: State, rng: RandomSource) -> State:
    config = state.config
    if state.turn % config.respawn_interval != 0:
        return state
    if len(state.stars) >= config.num_stars:
        return state
    pos = try_place(
        rng,
        state.rows,
        state.cols,
        reserved=[state.player, state.goal, *state.stars],
        attempts=config.respawn_attempts,
    )
    if pos is None:
        logger.debug("Star respawn skipped on turn %d", state.turn)
        return state
    logger.debug("Star respawned at %s on turn %d", pos, state.turn)
    return replace(state, stars=state.stars.append(pos))
