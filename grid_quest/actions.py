"""Action enumerations and command parsing.

:class:`Action` is the internal vocabulary for both the player and enemies.
The player only ever issues one of ``MOVE_ACTIONS``; enemies pick uniformly
from ``ENEMY_ACTIONS`` which adds ``STAY``. :class:`GymAction` is the stable
integer mapping used by :mod:`grid_quest.gym_env`.
"""

from enum import IntEnum, StrEnum, auto
from typing import Dict, Optional


class Action(StrEnum):
    """String enum of actions.

    Members:
        UP, DOWN, LEFT, RIGHT: Single-cell movement.
        STAY: Remain in place (enemies only).
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    STAY = auto()


MOVE_ACTIONS = [Action.UP, Action.DOWN, Action.LEFT, Action.RIGHT]

# Order matters: random draws index into this list.
ENEMY_ACTIONS = [Action.UP, Action.DOWN, Action.LEFT, Action.RIGHT, Action.STAY]


class GymAction(IntEnum):
    """Stable integer mapping for Gymnasium ``Discrete`` spaces."""

    UP = 0
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


KEY_TO_ACTION: Dict[str, Action] = {
    "w": Action.UP,
    "s": Action.DOWN,
    "a": Action.LEFT,
    "d": Action.RIGHT,
}


class InvalidCommandError(ValueError):
    """Raised when an input line does not start with a direction key."""


def parse_command(line: str) -> Optional[Action]:
    """Translate one input line into a movement action.

    Only the first non-whitespace character is considered, case-insensitively.

    Returns:
        Optional[Action]: The movement action, or ``None`` for a blank line.

    Raises:
        InvalidCommandError: If the first character is not one of W/A/S/D.
    """
    text = line.strip()
    if not text:
        return None
    key = text[0].lower()
    if key not in KEY_TO_ACTION:
        raise InvalidCommandError(f"Invalid key: {text[0]!r}")
    return KEY_TO_ACTION[key]
