"""Stock observers: record the trace, announce placements as status lines, hand the grid to a renderer, or fan out to several of these."""

from __future__ import annotations

from typing import Callable

from types_sudoku import Move

from .events import BACKTRACKING, Placement, Removal, SolveObserver, SolveResult
from .solver_core import Grid

_TECHNIQUE_LABELS = {
    "naked_single": "Naked single",
    "hidden_single": "Hidden single",
    BACKTRACKING: "Trial",
}


class RecordingObserver(SolveObserver):
    """Keeps events in order plus the result.

    With keep_search=False, search trials and undos are counted but not stored.
    """

    def __init__(self, keep_search: bool = True) -> None:
        self.keep_search = keep_search
        self.events: list[Placement | Removal] = []
        self.search_trials = 0
        self.undos = 0
        self.result: SolveResult | None = None

    def on_placement(self, event: Placement, grid: Grid) -> None:
        if event.technique == BACKTRACKING:
            self.search_trials += 1
            if not self.keep_search:
                return
        self.events.append(event)

    def on_removal(self, event: Removal, grid: Grid) -> None:
        self.undos += 1
        if self.keep_search:
            self.events.append(event)

    def on_finish(self, result: SolveResult, grid: Grid) -> None:
        self.result = result

    @property
    def placements(self) -> list[Placement]:
        return [e for e in self.events if isinstance(e, Placement)]

    @property
    def deductions(self) -> list[Placement]:
        return [e for e in self.placements if e.technique != BACKTRACKING]

    def moves(self) -> list[Move]:
        """Deduction placements as toolkit Move dicts, numbered from 1."""
        return [p.to_move(i) for i, p in enumerate(self.deductions, 1)]


class LineObserver(SolveObserver):
    """Status-line sink: which technique placed which value where, and how the run ended."""

    def __init__(self, emit: Callable[[str], None] = print, trace_search: bool = False) -> None:
        self.emit = emit
        self.trace_search = trace_search

    def on_placement(self, event: Placement, grid: Grid) -> None:
        if event.technique == BACKTRACKING and not self.trace_search:
            return
        label = _TECHNIQUE_LABELS.get(event.technique, event.technique)
        self.emit(f"Solved # {event.filled}: {label} {event.value} placed at ({event.row},{event.col})")

    def on_removal(self, event: Removal, grid: Grid) -> None:
        if self.trace_search:
            self.emit(f"Undo {event.value} at ({event.row},{event.col})")

    def on_finish(self, result: SolveResult, grid: Grid) -> None:
        if not result.solved:
            self.emit("ATTEMPT FAILED!")
        elif result.searched:
            self.emit("Solution:")
        else:
            self.emit("Solution (obtained without backtracking):")


class RenderObserver(SolveObserver):
    """Calls render(grid) after each deduction placement and once when solving ends."""

    def __init__(self, render: Callable[[Grid], None], include_search: bool = False) -> None:
        self.render = render
        self.include_search = include_search

    def on_placement(self, event: Placement, grid: Grid) -> None:
        if event.technique != BACKTRACKING or self.include_search:
            self.render(grid)

    def on_finish(self, result: SolveResult, grid: Grid) -> None:
        self.render(grid)


class MultiObserver(SolveObserver):
    def __init__(self, *observers: SolveObserver) -> None:
        self.observers = list(observers)

    def on_placement(self, event: Placement, grid: Grid) -> None:
        for o in self.observers:
            o.on_placement(event, grid)

    def on_removal(self, event: Removal, grid: Grid) -> None:
        for o in self.observers:
            o.on_removal(event, grid)

    def on_finish(self, result: SolveResult, grid: Grid) -> None:
        for o in self.observers:
            o.on_finish(result, grid)
