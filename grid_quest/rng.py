"""Random source abstraction.

Placement and enemy movement only ever need "an integer in a range", so that
is the whole interface. Interactive play uses :class:`PythonRandomSource`
without a seed; tests substitute a scripted source to pin exact sequences.
"""

import random
from typing import Optional, Protocol


class RandomSource(Protocol):
    def next_int(self, low: int, high: int) -> int:
        """Return an integer N such that ``low <= N <= high``."""
        ...


class PythonRandomSource:
    """``RandomSource`` backed by :class:`random.Random`.

    Arguments:
        seed: Optional seed. ``None`` seeds from the system (time / entropy).
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def next_int(self, low: int, high: int) -> int:
        return self._rng.randint(low, high)
