"""Gymnasium environment wrapper for Grid Quest.

Exposes the game as a ``gymnasium.Env`` for agents and automated play.
The observation is the rendered grid as an integer array (cell codes below,
stamped in the same order as the text renderer); the ``info`` dict carries
score, phase and turn. Reward is the delta of ``state.score`` per step.
``terminated`` is ``True`` on win, ``truncated`` on lose.

Cell codes: 0 empty, 1 goal, 2 star, 3 enemy, 4 player.

Usage:

``env = GridQuestEnv(config=GameConfig(rows=8, cols=8))``
"""

import sys
from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from grid_quest.actions import Action, GymAction
from grid_quest.config import DEFAULT_CONFIG, GameConfig
from grid_quest.levels.generator import generate
from grid_quest.renderer.text import build_board, format_board
from grid_quest.rng import PythonRandomSource
from grid_quest.state import State
from grid_quest.step import step
from grid_quest.systems.terminal import start_of_turn_system

ObsType = Dict[str, Any]

EMPTY_CODE = 0
GOAL_CODE = 1
STAR_CODE = 2
ENEMY_CODE = 3
PLAYER_CODE = 4

GYM_TO_ACTION: Dict[GymAction, Action] = {
    GymAction.UP: Action.UP,
    GymAction.DOWN: Action.DOWN,
    GymAction.LEFT: Action.LEFT,
    GymAction.RIGHT: Action.RIGHT,
}


def grid_observation(state: State) -> np.ndarray:
    """Encode ``state`` as a ``(rows, cols)`` ``uint8`` array of cell codes."""
    grid = np.full((state.rows, state.cols), EMPTY_CODE, dtype=np.uint8)
    grid[state.goal.row, state.goal.col] = GOAL_CODE
    for star in state.stars:
        grid[star.row, star.col] = STAR_CODE
    for enemy in state.enemies:
        grid[enemy.row, enemy.col] = ENEMY_CODE
    grid[state.player.row, state.player.col] = PLAYER_CODE
    return grid


def status_info_dict(state: State) -> Dict[str, Any]:
    """Score, phase and turn."""
    phase = "ongoing"
    if state.win:
        phase = "win"
    elif state.lose:
        phase = "lose"
    return {
        "score": int(state.score),
        "phase": phase,
        "turn": int(state.turn),
    }


class GridQuestEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` implementation for Grid Quest.

    The action space is ``Discrete(len(GymAction))``; see
    :mod:`grid_quest.actions`.
    """

    metadata = {"render_modes": ["ansi", "human"]}

    def __init__(
        self, config: GameConfig = DEFAULT_CONFIG, render_mode: str = "ansi"
    ) -> None:
        """Create a new environment instance.

        Arguments:
            config: Board size and entity counts for every episode.
            render_mode: "ansi" to return the board text, "human" to print it.
        """
        if render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Render mode '{render_mode}' not supported.")
        self.config = config
        self.render_mode = render_mode
        self.state: Optional[State] = None
        self._rng = PythonRandomSource()

        self.observation_space = spaces.Dict(
            {
                "grid": spaces.Box(
                    low=EMPTY_CODE,
                    high=PLAYER_CODE,
                    shape=(config.rows, config.cols),
                    dtype=np.uint8,
                ),
            }
        )
        self.action_space = spaces.Discrete(len(GymAction))

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, Any]]:
        """Start a new episode.

        Arguments:
            seed: Seed for placement and enemy movement. ``None`` draws one
                from the system.
            options: Gymnasium options (unused).
        """
        super().reset(seed=seed)
        self._rng = PythonRandomSource(seed)
        self.state = start_of_turn_system(generate(self.config, self._rng))
        return self._get_obs(), self._get_info()

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, Any]]:
        """Apply one environment step.

        Arguments:
            action: Integer index into ``GymAction``.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        if self.state is None:
            raise RuntimeError("Call reset() before step()")
        if not 0 <= int(action) < len(GymAction):
            raise ValueError(f"Invalid action: {action}")
        game_action = GYM_TO_ACTION[GymAction(int(action))]

        prev_score = self.state.score
        self.state = step(self.state, game_action, self._rng)
        reward = float(self.state.score - prev_score)
        return (
            self._get_obs(),
            reward,
            self.state.win,
            self.state.lose,
            self._get_info(),
        )

    def render(self) -> Optional[str]:  # type: ignore[override]
        if self.state is None:
            raise RuntimeError("Call reset() before render()")
        text = "\n".join(
            format_board(build_board(self.state), self.state.score, self.state.turn)
        )
        if self.render_mode == "human":
            sys.stdout.write(text + "\n")
            return None
        return text

    def _get_obs(self) -> ObsType:
        assert self.state is not None
        return {"grid": grid_observation(self.state)}

    def _get_info(self) -> Dict[str, Any]:
        assert self.state is not None
        return status_info_dict(self.state)
