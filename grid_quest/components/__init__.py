"""grid_quest.components
=======================

Value types shared by the state, the systems and the renderer.
"""

from .position import Position

__all__ = ["Position"]
