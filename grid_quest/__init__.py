"""Grid Quest: a turn-based terminal grid game.

Move the player (``@``) with W/A/S/D, collect stars (``*``), avoid the
randomly wandering enemies (``E``) and reach the goal (``G``).

The engine follows an immutable-state design: :class:`grid_quest.state.State`
is a frozen snapshot and :func:`grid_quest.step.step` returns a new one per
turn. Randomness, display and input are injected so the whole game can be
driven by scripts.
"""

from grid_quest.config import DEFAULT_CONFIG, GameConfig
from grid_quest.game import run_game
from grid_quest.levels.generator import generate
from grid_quest.state import Outcome, State
from grid_quest.step import step

__all__ = [
    "DEFAULT_CONFIG",
    "GameConfig",
    "Outcome",
    "State",
    "generate",
    "run_game",
    "step",
]
