"""Core immutable game ``State``.

The frozen :class:`State` is the entire game snapshot at a single turn. Every
system is a function that takes a ``State`` and returns a new one; nothing is
mutated in place. The entity collections, not any rendered grid, are the
source of truth for occupancy.

Design notes:

* ``stars`` and ``enemies`` are persistent vectors (``pyrsistent.PVector``).
  Star order only matters for deterministic removal; positions within each
  vector are unique at spawn.
* ``outcome`` is the turn-resolution state machine. ``RUNNING`` is the only
  non-terminal value; the reducer short-circuits on anything else.
* ``message`` carries the one user-facing notice produced by the latest
  transition (victory, defeat, or the all-collected hint).
"""

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Optional

from pyrsistent import PVector, pvector

from grid_quest.components import Position
from grid_quest.config import GameConfig


class Outcome(StrEnum):
    """Turn-resolution states."""

    RUNNING = auto()
    WON = auto()
    LOST_INITIAL_OVERLAP = auto()
    LOST_ENEMY_COLLISION = auto()


LOSING_OUTCOMES = frozenset({Outcome.LOST_INITIAL_OVERLAP, Outcome.LOST_ENEMY_COLLISION})


@dataclass(frozen=True)
class State:
    """Immutable game state.

    Attributes:
        config (GameConfig): Board dimensions, counts and pacing.
        player (Position): Current player cell.
        goal (Position): Fixed goal cell.
        stars (PVector[Position]): Remaining collectibles, in spawn order.
        enemies (PVector[Position]): Hostile entities, in spawn order.
        score (int): Stars collected so far.
        turn (int): Completed turns (0-based).
        outcome (Outcome): Current resolution state.
        message (str | None): Notice produced by the latest transition.
    """

    config: GameConfig
    player: Position
    goal: Position
    stars: PVector[Position] = pvector()
    enemies: PVector[Position] = pvector()

    score: int = 0
    turn: int = 0
    outcome: Outcome = Outcome.RUNNING
    message: Optional[str] = None

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def cols(self) -> int:
        return self.config.cols

    @property
    def win(self) -> bool:
        return self.outcome == Outcome.WON

    @property
    def lose(self) -> bool:
        return self.outcome in LOSING_OUTCOMES
