"""Terminal condition helper predicates."""

from grid_quest.state import Outcome, State


def is_terminal_state(state: State) -> bool:
    """Return True once the game has been won or lost."""
    return state.outcome != Outcome.RUNNING
