"""Rendering helpers.

Only a text renderer exists; see :mod:`grid_quest.renderer.text`.
"""

from .text import build_board, draw_board, draw_state, format_board, make_empty_board

__all__ = [
    "build_board",
    "draw_board",
    "draw_state",
    "format_board",
    "make_empty_board",
]
