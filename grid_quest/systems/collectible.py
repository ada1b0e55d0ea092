"""Star collection systems.

``collectible_system`` consumes the star under the player (at most one, since
star positions are unique) and scores it. ``all_collected_system`` posts the
hint to head for the goal whenever no stars remain; it fires on every such
turn, not just the first.
"""

from dataclasses import replace

from grid_quest.state import State

ALL_COLLECTED_MESSAGE = "All stars collected. Now go to G for a bonus!"


def collectible_system(state: State) -> State:
    """Remove the star at the player's position and add 1 to the score."""
    if state.player not in state.stars:
        return state
    return replace(
        state,
        stars=state.stars.remove(state.player),
        score=state.score + 1,
    )


def all_collected_system(state: State) -> State:
    if len(state.stars) > 0:
        return state
    return replace(state, message=ALL_COLLECTED_MESSAGE)
