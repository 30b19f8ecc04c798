from __future__ import annotations

import gymnasium as gym
import numpy as np

import tetro.env  # noqa: F401
from tetro.env.tetro_env import Action, TetroEnv
from tetro.game import ACTIVE_CELL, GameConfig, GameState


def test_reset_starts_running_game():
    env = TetroEnv(GameConfig(random_seed=0))
    obs, info = env.reset(seed=1)
    assert obs.shape == (12, 10)
    assert obs.dtype == np.int8
    assert (obs == ACTIVE_CELL).any()
    assert env.game.state is GameState.RUNNING
    assert info["outcome"] is None
    assert env.observation_space.contains(obs)


def test_idle_policy_stacks_until_loss():
    env = TetroEnv(GameConfig(random_seed=0))
    env.reset(seed=2)
    for _ in range(500):
        obs, reward, terminated, truncated, info = env.step(Action.NONE)
        if terminated:
            break
    assert terminated
    assert not truncated
    assert info["outcome"] == "loss"
    assert reward == env.loss_penalty
    assert info["reward_components"]["terminal"] == env.loss_penalty


def test_truncates_at_step_limit():
    env = TetroEnv(GameConfig(random_seed=0), max_episode_steps=3)
    env.reset()
    results = [env.step(Action.RIGHT) for _ in range(3)]
    assert [r[3] for r in results] == [False, False, True]
    assert not any(r[2] for r in results)


def test_rgb_render():
    env = TetroEnv(GameConfig(random_seed=0), render_mode="rgb_array")
    env.reset()
    img = env.render()
    assert img.shape == (12 * 12, 10 * 12, 3)
    assert TetroEnv(GameConfig(random_seed=0)).render() is None


def test_registered_env():
    env = gym.make("Tetro-10x12-v0")
    obs, info = env.reset(seed=0)
    assert obs.shape == (12, 10)
    obs, reward, terminated, truncated, info = env.step(0)
    assert "cleared_rows" in info
    env.close()
