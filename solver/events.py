"""Solving events and the observer interface the engine reports to."""

# events.py
# The engine never prints or renders. Every placement, search undo, and the
# final outcome is handed to a SolveObserver; display and logging subscribe.

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from types_sudoku import Move

if TYPE_CHECKING:
    from .solver_core import Grid

BACKTRACKING = "backtracking"


def rc_to_key(r: int, c: int) -> str:
    """0-based coordinates to the 1-based 'r1c1' key used in moves."""
    return f"r{r + 1}c{c + 1}"


@dataclass(frozen=True)
class Placement:
    value: int
    row: int
    col: int
    technique: str
    filled: int
    house: str | None = None

    @property
    def cell(self) -> str:
        return rc_to_key(self.row, self.col)

    def explain(self) -> str:
        r, c = self.row + 1, self.col + 1
        if self.technique == "naked_single":
            return f"Only one candidate fits r{r}c{c}."
        if self.technique == "hidden_single" and self.house:
            where = {"row": f"row {r}", "column": f"column {c}", "block": "its box"}[self.house]
            return f"Digit {self.value} fits in only one cell in {where}."
        return f"Trial value {self.value} at r{r}c{c} during search."

    def to_move(self, index: int | None = None) -> Move:
        move: Move = {
            "technique": self.technique,
            "type": "placement",
            "cell": self.cell,
            "digit": self.value,
            "highlights": {"cells": [self.cell]},
            "caption": self.explain(),
        }
        if self.house:
            move["highlights"]["house"] = self.house
        if index is not None:
            move["index"] = index
        return move


@dataclass(frozen=True)
class Removal:
    """A search trial being undone; the cell is empty again."""

    value: int
    row: int
    col: int
    filled: int
    technique: str = BACKTRACKING

    @property
    def cell(self) -> str:
        return rc_to_key(self.row, self.col)


@dataclass(frozen=True)
class SolveResult:
    solved: bool
    searched: bool
    rows: list[list[int]]

    @property
    def status(self) -> str:
        if not self.solved:
            return "unsolvable"
        return "solved_by_search" if self.searched else "solved_by_deduction"


class SolveObserver:
    """No-op base; subclasses override the hooks they care about."""

    def on_placement(self, event: Placement, grid: Grid) -> None:
        pass

    def on_removal(self, event: Removal, grid: Grid) -> None:
        pass

    def on_finish(self, result: SolveResult, grid: Grid) -> None:
        pass
