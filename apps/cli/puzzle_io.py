"""Reading puzzle givens (81-char strings or whitespace grids) and the plain-text board view."""

# puzzle_io.py
# Input:
#   "530070000600195000..."        one string, 0 or . for blanks
#   5 3 0 0 7 0 0 0 0              or one row per line
#   6 0 0 1 9 5 0 0 0
#   53..7....                      or one unspaced string per row
# Output (text view):
#   |***|***|***|
#   |53.|.7.|...|
#   ...

from __future__ import annotations

import io
from math import isqrt
from pathlib import Path

import numpy as np

from types_sudoku import Rows

BLANKS = ".0"


def parse_puzzle_string(text: str) -> np.ndarray:
    """Turn a one-line puzzle into an N x N int array. Length must be N*N with N a perfect square."""
    s = "".join(text.split())
    n = isqrt(len(s))
    if n == 0 or n * n != len(s):
        raise ValueError(f"puzzle string has {len(s)} characters; expected a square count like 81")
    digits = []
    for ch in s:
        if ch in BLANKS:
            digits.append(0)
        elif ch.isdigit():
            digits.append(int(ch))
        else:
            raise ValueError(f"unexpected character {ch!r} in puzzle string")
    return np.array(digits, dtype=int).reshape(n, n)


def load_puzzle(path: str | Path) -> np.ndarray:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Puzzle file not found: {path}")
    text = path.read_text(encoding="utf-8")
    tokens = text.split()
    # one string, or one unspaced string per row
    if len(tokens) == 1 or all(len(t) == len(tokens) for t in tokens):
        return parse_puzzle_string(text)
    return np.loadtxt(io.StringIO(text.replace(".", "0")), dtype=int, ndmin=2)


def format_board(rows: Rows, block: int | None = None) -> str:
    n = len(rows)
    if block is None:
        block = isqrt(n)
    width = len(str(n))
    rowsep = "|" + "|".join("*" * (width * block) for _ in range(block)) + "|"
    lines = []
    for r, row in enumerate(rows):
        if r % block == 0:
            lines.append(rowsep)
        parts = []
        for c, v in enumerate(row):
            if c % block == 0:
                parts.append("|")
            parts.append(str(v).rjust(width) if v else ".".rjust(width))
        parts.append("|")
        lines.append("".join(parts))
    lines.append(rowsep)
    return "\n".join(lines)
