"""Text renderer.

The board is rebuilt from the entity collections on every draw: an empty
grid, then the goal, the stars, the enemies and finally the player, so later
glyphs win ties visually. The grid is a throwaway view; occupancy is always
decided from :class:`grid_quest.state.State`.
"""

from typing import List

from grid_quest.components import Position
from grid_quest.console import DisplaySink
from grid_quest.state import State

Board = List[List[str]]

EMPTY = " "
GOAL = "G"
STAR = "*"
ENEMY = "E"
PLAYER = "@"
BORDER = "|"

CONTROLS = "Controls: W A S D + Enter. Reach 'G' to win. Collect '*' for +1. Avoid 'E'."


def make_empty_board(rows: int, cols: int) -> Board:
    return [[EMPTY] * cols for _ in range(rows)]


def _stamp(board: Board, pos: Position, glyph: str) -> None:
    board[pos.row][pos.col] = glyph


def build_board(state: State) -> Board:
    """Stamp every entity of ``state`` onto a fresh grid in render order."""
    board = make_empty_board(state.rows, state.cols)
    _stamp(board, state.goal, GOAL)
    for star in state.stars:
        _stamp(board, star, STAR)
    for enemy in state.enemies:
        _stamp(board, enemy, ENEMY)
    _stamp(board, state.player, PLAYER)
    return board


def format_board(board: Board, score: int, turns: int) -> List[str]:
    """Bordered rows, a blank line, the status line and the controls legend."""
    lines = [BORDER + "".join(row) + BORDER for row in board]
    lines.append("")
    lines.append(f"Score: {score}    Turns: {turns}")
    lines.append(CONTROLS)
    return lines


def draw_board(display: DisplaySink, board: Board, score: int, turns: int) -> None:
    """Clear ``display`` and write the formatted board to it."""
    display.clear()
    display.write_lines(format_board(board, score, turns))


def draw_state(display: DisplaySink, state: State) -> None:
    draw_board(display, build_board(state), state.score, state.turn)
