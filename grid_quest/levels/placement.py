"""Rejection-sampling placement.

Draw a uniformly random cell; discard it if it collides with a reserved cell
or one already chosen; repeat. Initial placement retries without bound (the
configuration guarantees enough free cells); single mid-game placements are
capped by the caller.
"""

import logging
from typing import Iterable, List, Optional, Set

from grid_quest.components import Position
from grid_quest.rng import RandomSource

logger = logging.getLogger(__name__)


def random_position(rng: RandomSource, rows: int, cols: int) -> Position:
    """Draw one cell uniformly: row first, then column."""
    row = rng.next_int(0, rows - 1)
    col = rng.next_int(0, cols - 1)
    return Position(row, col)


def sample_unique_positions(
    rng: RandomSource,
    rows: int,
    cols: int,
    count: int,
    reserved: Iterable[Position] = (),
) -> List[Position]:
    """Return ``count`` distinct positions avoiding ``reserved``.

    Arguments:
        rng: Random source.
        rows: Grid height.
        cols: Grid width.
        count: Number of positions to produce.
        reserved: Cells that must not be chosen.

    Returns:
        List[Position]: Positions in the order they were accepted.

    Raises:
        ValueError: If fewer than ``count`` free cells exist; sampling would
            otherwise never finish.
    """
    taken: Set[Position] = set(reserved)
    if count > rows * cols - len(taken):
        raise ValueError(
            f"Cannot place {count} entities: only {rows * cols - len(taken)} free cells"
        )
    chosen: List[Position] = []
    rejected = 0
    while len(chosen) < count:
        pos = random_position(rng, rows, cols)
        if pos in taken:
            rejected += 1
            continue
        taken.add(pos)
        chosen.append(pos)
    if rejected:
        logger.debug("Placed %d entities after %d rejected draws", count, rejected)
    return chosen


def try_place(
    rng: RandomSource,
    rows: int,
    cols: int,
    reserved: Iterable[Position],
    attempts: int,
) -> Optional[Position]:
    """Bounded single placement.

    Returns:
        Optional[Position]: The first draw not in ``reserved``, or ``None`` if
        all ``attempts`` draws collided.
    """
    taken = set(reserved)
    for _ in range(attempts):
        pos = random_position(rng, rows, cols)
        if pos not in taken:
            return pos
    return None
