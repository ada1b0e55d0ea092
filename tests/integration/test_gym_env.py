import numpy as np
import pytest

from grid_quest.actions import GymAction
from grid_quest.config import GameConfig
from grid_quest.gym_env import (
    ENEMY_CODE,
    GOAL_CODE,
    PLAYER_CODE,
    STAR_CODE,
    GridQuestEnv,
    grid_observation,
)
from tests.test_utils import make_state


def test_grid_observation_codes() -> None:
    state = make_state(
        rows=2, cols=3, num_stars=1, num_enemies=1,
        player=(1, 1), goal=(0, 0), stars=[(0, 2)], enemies=[(1, 0)],
    )
    grid = grid_observation(state)
    assert grid.dtype == np.uint8
    assert grid.tolist() == [
        [GOAL_CODE, 0, STAR_CODE],
        [ENEMY_CODE, PLAYER_CODE, 0],
    ]


def test_reset_observation_matches_space() -> None:
    env = GridQuestEnv()
    obs, info = env.reset(seed=123)
    assert env.observation_space.contains(obs)
    assert info == {"score": 0, "phase": "ongoing", "turn": 0}
    assert int((obs["grid"] == PLAYER_CODE).sum()) == 1


def test_seeded_reset_is_reproducible() -> None:
    env = GridQuestEnv()
    first, _ = env.reset(seed=5)
    second, _ = env.reset(seed=5)
    assert np.array_equal(first["grid"], second["grid"])


def test_step_until_done() -> None:
    env = GridQuestEnv(config=GameConfig(rows=5, cols=5, num_stars=2, num_enemies=1))
    env.reset(seed=0)
    total_reward = 0.0
    for i in range(200):
        obs, reward, terminated, truncated, info = env.step(
            np.int64(i % len(GymAction))
        )
        total_reward += reward
        assert env.observation_space.contains(obs)
        if terminated or truncated:
            assert info["phase"] in ("win", "lose")
            break
    assert total_reward == float(env.state.score)


def test_invalid_action_rejected() -> None:
    env = GridQuestEnv()
    env.reset(seed=1)
    with pytest.raises(ValueError):
        env.step(np.int64(len(GymAction)))


def test_render_ansi_returns_board_text() -> None:
    env = GridQuestEnv()
    env.reset(seed=2)
    text = env.render()
    assert text is not None
    lines = text.split("\n")
    assert len(lines) == env.config.rows + 3
    assert all(line.startswith("|") for line in lines[: env.config.rows])
    assert "@" in text


def test_unknown_render_mode() -> None:
    with pytest.raises(ValueError):
        GridQuestEnv(render_mode="rgb_array")


def test_render_human_writes_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    env = GridQuestEnv(render_mode="human")
    env.reset(seed=2)
    assert env.render() is None
    out = capsys.readouterr().out
    lines = out.rstrip("\n").split("\n")
    assert len(lines) == env.config.rows + 3
    assert "@" in out
    assert lines[-1].startswith("Controls:")
