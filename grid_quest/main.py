"""Process entry point.

No flags, no environment variables: the game always runs with
``DEFAULT_CONFIG`` on the real terminal and exits with status 0 whatever the
outcome.
"""

import logging

from grid_quest.console import StreamInput, TerminalDisplay
from grid_quest.game import run_game


def main() -> int:
    logging.basicConfig(
        level=logging.WARNING, format="%(asctime)s - %(levelname)s - %(message)s"
    )
    run_game(TerminalDisplay(), StreamInput())
    return 0
