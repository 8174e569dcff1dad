"""Human-style solving entry points: the deduction loop with a backtracking fallback, plus tool-friendly helpers (candidate listing, one-step hints) for the CLI and API."""

# sudoku_tools.py
# solve(): singles until they stall, then brute force.
# next_move(): one deduction step on a copy, for hints.

from __future__ import annotations

from typing import Sequence

from types_sudoku import Candidates, Move, Rows

from .backtracking import backtrack
from .events import Placement, SolveObserver, SolveResult, rc_to_key
from .observers import RecordingObserver
from .solver_core import (
    Grid,
    GridGeometry,
    init_candidates,
    mask_values,
    try_hidden_singles,
    try_naked_singles,
)


def as_grid(current: Grid | Sequence[Sequence[int]], geometry: GridGeometry | None = None) -> Grid:
    if isinstance(current, Grid):
        return current
    return Grid.from_rows(current, geometry)


def run_deductions(grid: Grid, observer: SolveObserver | None = None) -> int:
    """Alternate naked and hidden singles until neither applies or the grid is full. Returns placements made."""
    placed = 0
    while True:
        if try_naked_singles(grid, observer):
            placed += 1
            continue
        if grid.is_full():
            break
        if try_hidden_singles(grid, observer):
            placed += 1
            continue
        break
    return placed


def solve(grid: Grid, observer: SolveObserver | None = None) -> SolveResult:
    """Solve grid in place.

    Candidates are computed once, then naked and hidden singles are applied one
    placement at a time. If they stall before the grid is full, backtracking
    search takes over from r1c1 and never returns to deduction. Only the first
    solution found is reported; a failed search leaves the grid as deduction
    left it.
    """
    if grid.is_full():
        result = SolveResult(solved=True, searched=False, rows=grid.to_rows())
        if observer is not None:
            observer.on_finish(result, grid)
        return result

    init_candidates(grid)
    run_deductions(grid, observer)

    if grid.is_full():
        result = SolveResult(solved=True, searched=False, rows=grid.to_rows())
    else:
        solved = backtrack(grid, 0, 0, observer)
        result = SolveResult(solved=solved, searched=True, rows=grid.to_rows())

    if observer is not None:
        observer.on_finish(result, grid)
    return result


def solve_rows(current: Rows, geometry: GridGeometry | None = None) -> dict:
    """Solve a copy of current and return a JSON-friendly report with the deduction moves."""
    grid = as_grid(current, geometry).copy()
    rec = RecordingObserver(keep_search=False)
    result = solve(grid, rec)
    return {
        "solved": result.solved,
        "status": result.status,
        "searched": result.searched,
        "grid": result.rows,
        "moves": rec.moves(),
    }


def compute_candidates(grid: Grid) -> Candidates:
    """Candidate digits for each empty cell, keyed 'r1c1'. Works on a copy."""
    work = grid.copy()
    init_candidates(work)
    cand = {}
    for r in range(work.edge):
        for c in range(work.edge):
            cell = work.cells[r][c]
            if cell.value == 0:
                cand[rc_to_key(r, c)] = mask_values(cell.candidates)
    return cand


def compute_candidates_tool(current: Grid | Rows, geometry: GridGeometry | None = None) -> dict:
    """Compute candidate digits for each empty cell in the current grid. Returns a dict like {'candidates': {'r1c2': [1, 2, 5], ...}}."""
    return {"candidates": compute_candidates(as_grid(current, geometry))}


class _FirstPlacement(SolveObserver):
    def __init__(self) -> None:
        self.event: Placement | None = None

    def on_placement(self, event: Placement, grid: Grid) -> None:
        if self.event is None:
            self.event = event


def next_move(current: Grid | Rows, geometry: GridGeometry | None = None) -> Move | None:
    """The single next deduction (naked single first, then hidden single) or None if singles are stuck.

    The caller's grid is not modified.
    """
    grid = as_grid(current, geometry).copy()
    if grid.is_full():
        return None
    init_candidates(grid)
    first = _FirstPlacement()
    if try_naked_singles(grid, first) or try_hidden_singles(grid, first):
        return first.event.to_move(1)
    return None
