"""Position component.

Immutable integer grid coordinates. Every entity on the board (player, goal,
stars, enemies) is represented by one of these; equality is an exact
coordinate match.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        row: Row index (0 at top).
        col: Column index (0 at left).
    """

    row: int
    col: int
