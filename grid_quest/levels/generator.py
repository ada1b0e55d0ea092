"""Initial level generation.

Builds the starting :class:`grid_quest.state.State`: the player at the centre
of the grid, then the goal, the stars and the enemies placed by rejection
sampling so that no two of them share a cell.

Usage:

``state = generate(DEFAULT_CONFIG, PythonRandomSource())``
"""

import logging
from typing import Optional

from pyrsistent import pvector

from grid_quest.config import DEFAULT_CONFIG, GameConfig
from grid_quest.levels.placement import sample_unique_positions
from grid_quest.rng import PythonRandomSource, RandomSource
from grid_quest.state import State

logger = logging.getLogger(__name__)


def generate(
    config: GameConfig = DEFAULT_CONFIG, rng: Optional[RandomSource] = None
) -> State:
    """Create a fresh game.

    Arguments:
        config: Board size and entity counts.
        rng: Random source; an unseeded :class:`PythonRandomSource` if omitted.

    Returns:
        State: Running state at turn 0 with score 0.
    """
    if rng is None:
        rng = PythonRandomSource()
    rows, cols = config.rows, config.cols
    player = config.player_start

    (goal,) = sample_unique_positions(rng, rows, cols, 1, reserved=[player])
    stars = sample_unique_positions(
        rng, rows, cols, config.num_stars, reserved=[player, goal]
    )
    enemies = sample_unique_positions(
        rng, rows, cols, config.num_enemies, reserved=[player, goal, *stars]
    )
    logger.debug(
        "Generated %dx%d level: player=%s goal=%s stars=%s enemies=%s",
        rows,
        cols,
        player,
        goal,
        stars,
        enemies,
    )
    return State(
        config=config,
        player=player,
        goal=goal,
        stars=pvector(stars),
        enemies=pvector(enemies),
    )
