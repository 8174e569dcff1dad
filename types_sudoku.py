# types_sudoku.py
from __future__ import annotations

from typing import Any, TypedDict

Rows = list[list[int]]
"""An N x N Sudoku grid as rows of integers (0 = empty)."""

Candidates = dict[str, list[int]]
"""Map from cell key (e.g., 'r1c1') to a list of candidate digits, ascending."""


class Move(TypedDict, total=False):
    """A single solving placement as reported to the CLI, API and renderers."""

    index: int  # 1-based order in the sequence
    technique: str  # 'naked_single', 'hidden_single' or 'backtracking'
    type: str  # always 'placement'
    digit: int  # the digit being placed
    cell: str  # target cell (e.g., 'r4c7')
    highlights: dict[str, Any]  # UI hints (row/col/box/cells) for overlay rendering
    overlay: str  # path to rendered frame (filled later by CLI)
    caption: str  # human-friendly explanation
