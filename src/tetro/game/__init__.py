"""Game module for the Tetro stacking game.

Exports the core game engine and supporting classes:
- GameGrid: Settled board cells and row clearing
- PieceTemplate / ActivePiece: Piece catalog and the falling piece
- WinLossRules: Safe zone and win threshold
- TetroGame: Lifecycle, movement, locking and win/loss evaluation
- GravityClock / InputDispatcher: External drivers feeding the engine
"""

from .grid import CellState, GameGrid
from .pieces import ActivePiece, PIECE_CATALOG, PieceKind, PieceTemplate, random_template
from .rules import WinLossRules
from .core import (
    ACTIVE_CELL,
    GameConfig,
    GameSnapshot,
    GameState,
    MoveResult,
    Outcome,
    TetroGame,
)
from .clock import GravityClock, InputDispatcher

__all__ = [
    "CellState",
    "GameGrid",
    "ActivePiece",
    "PIECE_CATALOG",
    "PieceKind",
    "PieceTemplate",
    "random_template",
    "WinLossRules",
    "ACTIVE_CELL",
    "GameConfig",
    "GameSnapshot",
    "GameState",
    "MoveResult",
    "Outcome",
    "TetroGame",
    "GravityClock",
    "InputDispatcher",
]
