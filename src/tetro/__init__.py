"""Tetro: a small falling-block stacking game."""

from .game import GameConfig, GameState, Outcome, TetroGame

__version__ = "0.1.0"

__all__ = ["GameConfig", "GameState", "Outcome", "TetroGame", "__version__"]
