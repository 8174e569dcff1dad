"""Brute-force fallback: row-major depth-first search with undo, checking placed values directly."""

# backtracking.py
# Once the singles stall, search takes over for good. It never reads or
# writes candidate masks; valid_insertion is the only legality guard.

from __future__ import annotations

from .events import BACKTRACKING, Placement, Removal, SolveObserver
from .solver_core import Grid


def valid_insertion(grid: Grid, value: int, row: int, col: int) -> bool:
    """Would value at (row, col) leave its row, column, and block free of duplicates?"""
    cells = grid.cells
    for r in range(grid.edge):
        if cells[r][col].value == value:
            return False
    for c in range(grid.edge):
        if cells[row][c].value == value:
            return False
    for r, c in grid.block_cells(row, col):
        if cells[r][c].value == value:
            return False
    return True


def backtrack(grid: Grid, row: int = 0, col: int = 0, observer: SolveObserver | None = None) -> bool:
    """Fill every empty cell from (row, col) onward. Returns True with the grid completed, False with it restored."""
    n = grid.edge
    # snake across, then down
    if col == n:
        col = 0
        row += 1
    if row == n:
        return True

    cell = grid.cells[row][col]
    if cell.value != 0:
        return backtrack(grid, row, col + 1, observer)

    for value in range(1, n + 1):
        if not valid_insertion(grid, value, row, col):
            continue
        cell.value = value
        grid.filled_count += 1
        if observer is not None:
            observer.on_placement(
                Placement(value=value, row=row, col=col, technique=BACKTRACKING, filled=grid.filled_count),
                grid,
            )
        if backtrack(grid, row, col + 1, observer):
            return True
        # failed downstream, undo
        cell.value = 0
        grid.filled_count -= 1
        if observer is not None:
            observer.on_removal(Removal(value=value, row=row, col=col, filled=grid.filled_count), grid)

    return False
