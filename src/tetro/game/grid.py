from __future__ import annotations

from enum import IntEnum
from typing import Iterable, Tuple

import numpy as np


Coordinate = Tuple[int, int]


class CellState(IntEnum):
    EMPTY = 0
    LOCKED = 1
    CLEARED = 2


class GameGrid:
    """Settled board content, row 0 at the top.

    Cells hold ``CellState`` values. ``LOCKED`` and ``CLEARED`` both count as
    occupied; a row is either entirely ``CLEARED`` or holds no cleared cells.
    """

    def __init__(self, columns: int, rows: int) -> None:
        self.columns = int(columns)
        self.rows = int(rows)
        self.grid = np.full((self.rows, self.columns), CellState.EMPTY, dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(CellState.EMPTY)

    def is_inside(self, col: int, row: int) -> bool:
        return 0 <= col < self.columns and 0 <= row < self.rows

    def is_occupied(self, col: int, row: int) -> bool:
        # Bounds are the collision check's business; off-board is simply not occupied.
        if not self.is_inside(col, row):
            return False
        return self.grid[row, col] != CellState.EMPTY

    def lock_cells(self, cells: Iterable[Coordinate]) -> int:
        """Mark in-bounds cells as locked and return how many were empty before."""
        newly_locked = 0
        for col, row in cells:
            if not self.is_inside(col, row):
                continue
            if self.grid[row, col] == CellState.EMPTY:
                newly_locked += 1
            self.grid[row, col] = CellState.LOCKED
        return newly_locked

    def clear_full_rows(self) -> int:
        """Turn every fully occupied row into a cleared row.

        Returns the total number of cleared rows on the board, not only the
        ones converted by this call.
        """
        full_rows = np.where(np.all(self.grid != CellState.EMPTY, axis=1))[0]
        if full_rows.size:
            self.grid[full_rows, :] = CellState.CLEARED
        return self.cleared_row_count()

    def cleared_row_count(self) -> int:
        return int(np.count_nonzero(np.all(self.grid == CellState.CLEARED, axis=1)))

    def count(self, state: CellState) -> int:
        return int(np.count_nonzero(self.grid == state))

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
