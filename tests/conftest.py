# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "apps", "solver" and "types_sudoku" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


# Classic puzzle and its unique solution
CLASSIC = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]
CLASSIC_SOLUTION = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]

# 17-clue puzzle that singles alone finish, with hidden singles along the way
SEVENTEEN_CLUES = "000000010400000000020000000000050407008000300001090000300400200050100000000806000"

# Cells cleared from the pattern solution; each is the last blank of its row.
FEW_BLANKS = [(0, 0), (1, 4), (4, 4), (5, 2), (8, 8)]


def pattern_rows(block=3):
    """A valid solved grid built by shifting each row."""
    n = block * block
    return [[(r * block + r // block + c) % n + 1 for c in range(n)] for r in range(n)]


def with_blanks(rows, cells):
    out = [row[:] for row in rows]
    for r, c in cells:
        out[r][c] = 0
    return out


def to_string(rows):
    return "".join(str(v) for row in rows for v in row)


def assert_valid_solution(rows, block=3):
    n = block * block
    digits = set(range(1, n + 1))
    for r in range(n):
        assert set(rows[r]) == digits, f"row {r + 1}"
    for c in range(n):
        assert {rows[r][c] for r in range(n)} == digits, f"column {c + 1}"
    for br in range(0, n, block):
        for bc in range(0, n, block):
            vals = {rows[br + i][bc + j] for i in range(block) for j in range(block)}
            assert vals == digits, f"block at r{br + 1}c{bc + 1}"


@pytest.fixture
def classic():
    return [row[:] for row in CLASSIC]


@pytest.fixture
def few_blanks():
    return with_blanks(pattern_rows(3), FEW_BLANKS)


@pytest.fixture
def stalled():
    # Top band cleared: every blank keeps three candidates and no digit is confined to one cell.
    return with_blanks(pattern_rows(3), [(r, c) for r in range(3) for c in range(9)])


@pytest.fixture
def duplicate_in_row():
    # r1c2 repeats the 5 at r1c1, and r4c2 (the solution's 5 in that column) is left blank
    rows = [row[:] for row in CLASSIC_SOLUTION]
    rows[0][1] = 5
    rows[3][1] = 0
    return rows


@pytest.fixture
def seventeen_clues():
    return [[int(ch) for ch in SEVENTEEN_CLUES[r * 9:(r + 1) * 9]] for r in range(9)]
