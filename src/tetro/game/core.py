from __future__ import annotations

import logging
import random
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Deque, List, Optional, Tuple

import numpy as np

from .grid import CellState, Coordinate, GameGrid
from .pieces import ActivePiece, PieceTemplate, random_template
from .rules import WinLossRules


logger = logging.getLogger(__name__)

# Render-state value for cells covered by the falling piece.
ACTIVE_CELL = -1


class GameState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    ENDED = "ended"


class Outcome(Enum):
    WIN = "win"
    LOSS = "loss"


class MoveResult(Enum):
    MOVED = "moved"
    BLOCKED = "blocked"
    MUST_LOCK = "must_lock"


@dataclass
class GameConfig:
    columns: int = 10
    rows: int = 12
    safe_zone_start_row: int = 4
    win_row_count: int = 5
    gravity_ms: int = 1000
    random_seed: Optional[int] = None
    spawn_column: int = 0
    spawn_row: int = 0

    def __post_init__(self) -> None:
        if self.columns <= 0 or self.rows <= 0:
            raise ValueError(f"board must be at least 1x1, got {self.columns}x{self.rows}")
        if not 0 <= self.safe_zone_start_row <= self.rows:
            raise ValueError(
                f"safe_zone_start_row must lie in [0, {self.rows}], got {self.safe_zone_start_row}"
            )
        if self.win_row_count <= 0:
            raise ValueError(f"win_row_count must be positive, got {self.win_row_count}")
        if self.gravity_ms <= 0:
            raise ValueError(f"gravity_ms must be positive, got {self.gravity_ms}")


@dataclass(frozen=True)
class GameSnapshot:
    grid: np.ndarray
    piece_cells: Tuple[Coordinate, ...]
    piece_name: Optional[str]
    state: GameState
    outcome: Optional[Outcome]
    cleared_rows: int


OutcomeListener = Callable[[Outcome], None]
TemplatePicker = Callable[[], PieceTemplate]


class TetroGame:
    """Falling-block stacking game driven by discrete commands.

    The engine never looks at a clock. A driver calls ``tick()`` for gravity
    and ``move_left()`` / ``move_right()`` for input; commands issued while
    another one is being processed (for instance from an outcome listener)
    run afterwards, in order.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[WinLossRules] = None,
        template_picker: Optional[TemplatePicker] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rules = rules or WinLossRules(
            safe_zone_start_row=self.config.safe_zone_start_row,
            win_row_count=self.config.win_row_count,
        )
        self.rng = random.Random(self.config.random_seed)
        self._pick_template: TemplatePicker = template_picker or (lambda: random_template(self.rng))
        self.grid = GameGrid(self.config.columns, self.config.rows)
        self.state = GameState.IDLE
        self.outcome: Optional[Outcome] = None
        self.current_piece: Optional[ActivePiece] = None
        self.cleared_rows = 0
        self._listeners: List[OutcomeListener] = []
        self._pending: Deque[Callable[[], None]] = deque()
        self._notifications: List[Outcome] = []
        self._processing = False

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def activate(self) -> None:
        self._dispatch(self._activate)

    def move_left(self) -> None:
        self._dispatch(lambda: self._shift(-1))

    def move_right(self) -> None:
        self._dispatch(lambda: self._shift(1))

    def tick(self) -> None:
        self._dispatch(self._gravity)

    def reset(self) -> None:
        self._dispatch(self._reset)

    def seed(self, seed: Optional[int]) -> None:
        self.rng.seed(seed)

    def add_outcome_listener(self, listener: OutcomeListener) -> None:
        self._listeners.append(listener)

    def remove_outcome_listener(self, listener: OutcomeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # ------------------------------------------------------------------
    # Movement and collision
    # ------------------------------------------------------------------
    def collides(self, cells: List[Coordinate]) -> bool:
        for col, row in cells:
            if col < 0 or col >= self.grid.columns or row >= self.grid.rows:
                return True
            # Cells above the top edge are allowed while a piece drops into view.
            if row >= 0 and self.grid.is_occupied(col, row):
                return True
        return False

    def try_move(self, dx: int, dy: int) -> MoveResult:
        """Move the active piece by (dx, dy) if the target is free.

        A blocked lateral move leaves the piece where it was. A blocked
        downward move (any ``dx``) reports ``MUST_LOCK``; locking is left to
        the caller.
        """
        if dy < 0:
            raise ValueError(f"pieces cannot move up ({dx}, {dy})")
        piece = self.current_piece
        if piece is None or self.state is not GameState.RUNNING:
            return MoveResult.BLOCKED
        if not self.collides(piece.candidate(dx, dy)):
            piece.col += dx
            piece.row += dy
            return MoveResult.MOVED
        if dy > 0:
            return MoveResult.MUST_LOCK
        return MoveResult.BLOCKED

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def is_running(self) -> bool:
        return self.state is GameState.RUNNING

    def piece_cells(self) -> List[Coordinate]:
        if self.current_piece is None:
            return []
        return self.current_piece.cells()

    def render_state(self) -> np.ndarray:
        # Overlay the falling piece on a copy of the grid
        state = self.grid.clone_state()
        for col, row in self.piece_cells():
            if self.grid.is_inside(col, row):
                state[row, col] = ACTIVE_CELL
        return state

    def snapshot(self) -> GameSnapshot:
        piece = self.current_piece
        return GameSnapshot(
            grid=self.grid.clone_state(),
            piece_cells=tuple(self.piece_cells()),
            piece_name=piece.template.name if piece is not None else None,
            state=self.state,
            outcome=self.outcome,
            cleared_rows=self.cleared_rows,
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _dispatch(self, command: Callable[[], None]) -> None:
        self._pending.append(command)
        if self._processing:
            return
        self._processing = True
        try:
            while self._pending:
                self._pending.popleft()()
                self._notify()
        except BaseException:
            self._pending.clear()
            self._notifications.clear()
            raise
        finally:
            self._processing = False

    def _notify(self) -> None:
        while self._notifications:
            outcome = self._notifications.pop(0)
            for listener in list(self._listeners):
                listener(outcome)

    def _activate(self) -> None:
        if self.state is not GameState.IDLE:
            return
        logger.info("game activated")
        self.state = GameState.RUNNING
        self._spawn()

    def _shift(self, dx: int) -> None:
        if self.state is GameState.RUNNING:
            self.try_move(dx, 0)

    def _gravity(self) -> None:
        if self.state is not GameState.RUNNING:
            return
        if self.try_move(0, 1) is MoveResult.MUST_LOCK:
            self._lock_piece()

    def _reset(self) -> None:
        self.grid = GameGrid(self.config.columns, self.config.rows)
        self.current_piece = None
        self.state = GameState.IDLE
        self.outcome = None
        self.cleared_rows = 0
        logger.info("game reset")

    def _spawn(self) -> None:
        template = self._pick_template()
        piece = ActivePiece(template, self.config.spawn_column, self.config.spawn_row)
        if self.collides(piece.cells()):
            logger.debug("spawn of %s blocked at %s", template.name, piece.origin)
            self.current_piece = None
            self._end(Outcome.LOSS)
            return
        logger.debug("spawned %s at %s", template.name, piece.origin)
        self.current_piece = piece

    def _lock_piece(self) -> None:
        piece = self.current_piece
        assert piece is not None
        self.current_piece = None

        cells = piece.cells()
        on_board = [(c, r) for c, r in cells if 0 <= r < self.grid.rows]
        locked = self.grid.lock_cells(on_board)
        logger.debug(
            "locked %s: %d cells committed, %d dropped above the board",
            piece.template.name, locked, len(cells) - len(on_board),
        )

        if any(self.rules.is_losing_row(r) for _, r in on_board):
            self._end(Outcome.LOSS)
            return

        self.cleared_rows = self.grid.clear_full_rows()
        logger.debug("cleared rows: %d", self.cleared_rows)
        if self.rules.is_win(self.cleared_rows):
            self._end(Outcome.WIN)
            return

        self._spawn()

    def _end(self, outcome: Outcome) -> None:
        self.state = GameState.ENDED
        self.outcome = outcome
        logger.info("game ended: %s (cleared rows %d)", outcome.value, self.cleared_rows)
        self._notifications.append(outcome)
