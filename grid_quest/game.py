"""Interactive game loop.

Each iteration draws the board, re-checks goal / enemy overlap, reads one
command and hands it to :func:`grid_quest.step.step`. Invalid keys and blank
lines are handled here without consuming a turn. The loop ends on a win, a
loss or end of input, after which the final summary is written.
"""

import logging
import time
from typing import Callable, List, Optional

from grid_quest.actions import InvalidCommandError, parse_command
from grid_quest.config import DEFAULT_CONFIG, GameConfig
from grid_quest.console import DisplaySink, InputSource
from grid_quest.levels.generator import generate
from grid_quest.renderer.text import draw_state
from grid_quest.rng import PythonRandomSource, RandomSource
from grid_quest.state import State
from grid_quest.step import step
from grid_quest.systems.terminal import start_of_turn_system
from grid_quest.utils.terminal import is_terminal_state

logger = logging.getLogger(__name__)

PROMPT = "Move (W/A/S/D): "
INVALID_KEY_MESSAGE = "Invalid key. Use W/A/S/D."
CLOSING_MESSAGE = "Thanks for playing."

PauseFn = Callable[[float], None]


def summary_lines(state: State) -> List[str]:
    return [
        "",
        f"Final score: {state.score}   Turns: {state.turn}",
        CLOSING_MESSAGE,
    ]


def play(
    state: State,
    rng: RandomSource,
    display: DisplaySink,
    commands: InputSource,
    pause: PauseFn = time.sleep,
) -> State:
    """Run turns on ``state`` until it is terminal or input runs out.

    Arguments:
        state: Starting state (normally fresh from ``generate``).
        rng: Random source for enemy moves and respawns.
        display: Where the board, prompts and notices are written.
        commands: Where command lines are read from.
        pause: Called with a duration in seconds for pacing pauses.

    Returns:
        State: The last state reached.
    """
    config = state.config
    try:
        while True:
            draw_state(display, state)
            state = start_of_turn_system(state)
            if is_terminal_state(state):
                display.write_lines(["", state.message or ""])
                break

            display.write(PROMPT)
            line = commands.read_line()
            if line is None:
                logger.debug("End of input on turn %d", state.turn)
                break
            try:
                action = parse_command(line)
            except InvalidCommandError:
                display.write_lines([INVALID_KEY_MESSAGE])
                pause(config.invalid_key_pause)
                continue
            if action is None:
                continue

            state = step(state, action, rng)
            if is_terminal_state(state):
                draw_state(display, state)
                display.write_lines(["", state.message or ""])
                break
            if state.message:
                display.write_lines(["", state.message])
                pause(config.all_collected_pause)
    except KeyboardInterrupt:
        # Ctrl+C ends the session like end of input.
        logger.debug("Interrupted on turn %d", state.turn)
    return state


def run_game(
    display: DisplaySink,
    commands: InputSource,
    config: GameConfig = DEFAULT_CONFIG,
    rng: Optional[RandomSource] = None,
    pause: PauseFn = time.sleep,
) -> State:
    """Generate a level, play it to the end and write the summary."""
    if rng is None:
        rng = PythonRandomSource()
    state = generate(config, rng)
    state = play(state, rng, display, commands, pause)
    display.write_lines(summary_lines(state))
    logger.info(
        "Game over: outcome=%s score=%d turns=%d", state.outcome, state.score, state.turn
    )
    return state
