from __future__ import annotations

from tetro.game import CellState, GameGrid


def fill_row(grid: GameGrid, row: int, skip: int | None = None) -> None:
    grid.lock_cells([(c, row) for c in range(grid.columns) if c != skip])


def test_new_grid_is_empty():
    grid = GameGrid(10, 12)
    assert grid.grid.shape == (12, 10)
    assert grid.count(CellState.EMPTY) == 120


def test_is_occupied_ignores_out_of_bounds():
    grid = GameGrid(3, 3)
    grid.lock_cells([(0, 0)])
    assert grid.is_occupied(0, 0)
    assert not grid.is_occupied(1, 0)
    assert not grid.is_occupied(-1, 0)
    assert not grid.is_occupied(0, 3)
    assert not grid.is_occupied(0, -1)


def test_lock_cells_skips_off_board_and_counts_new_cells():
    grid = GameGrid(4, 4)
    assert grid.lock_cells([(0, 3), (1, 3), (0, -1), (5, 0)]) == 2
    assert grid.count(CellState.LOCKED) == 2
    # Overwriting an already locked cell is tolerated but not counted.
    assert grid.lock_cells([(0, 3)]) == 0
    assert grid.count(CellState.LOCKED) == 2


def test_clear_full_rows_converts_whole_rows():
    grid = GameGrid(4, 5)
    fill_row(grid, 4)
    fill_row(grid, 3, skip=2)
    assert grid.clear_full_rows() == 1
    assert all(grid.grid[4] == CellState.CLEARED)
    assert grid.count(CellState.LOCKED) == 3


def test_clear_full_rows_returns_cumulative_total():
    grid = GameGrid(3, 6)
    fill_row(grid, 5)
    assert grid.clear_full_rows() == 1
    fill_row(grid, 4)
    assert grid.clear_full_rows() == 2


def test_clear_full_rows_is_idempotent():
    grid = GameGrid(3, 6)
    fill_row(grid, 5)
    fill_row(grid, 2)
    fill_row(grid, 1, skip=0)
    first = grid.clear_full_rows()
    snapshot = grid.clone_state()
    assert grid.clear_full_rows() == first == 2
    assert (grid.grid == snapshot).all()


def test_row_mixing_locked_and_cleared_is_full():
    grid = GameGrid(2, 3)
    grid.grid[2, 0] = CellState.CLEARED
    grid.lock_cells([(1, 2)])
    assert grid.clear_full_rows() == 1
    assert all(grid.grid[2] == CellState.CLEARED)


def test_reset_empties_grid():
    grid = GameGrid(3, 3)
    fill_row(grid, 0)
    grid.clear_full_rows()
    grid.reset()
    assert grid.count(CellState.EMPTY) == 9
    assert grid.cleared_row_count() == 0
