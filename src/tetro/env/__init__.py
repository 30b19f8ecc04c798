"""Gymnasium environments for Tetro."""

from __future__ import annotations

from gymnasium.envs.registration import register

register(
    id="Tetro-10x12-v0",
    entry_point="tetro.env.tetro_env:TetroEnv",
)

__all__ = ["Tetro-10x12-v0"]
