"""Core Sudoku utilities used by the solving techniques: geometry, candidate bitmasks, house iterators, and grid mutation helpers."""

# solver_core.py
# Human-style Sudoku engine pieces:
# - grid model (cells with a value or a candidate bitmask)
# - one-shot candidate computation
# - placement with elimination to peers
# - naked singles & hidden singles (one placement per call)
# Rows and columns are 0-based internally; cell keys ("r1c1") are 1-based.

from __future__ import annotations

from dataclasses import dataclass, field
from math import isqrt
from typing import Iterator, Sequence

from .events import Placement, SolveObserver, rc_to_key

NAKED_SINGLE = "naked_single"
HIDDEN_SINGLE = "hidden_single"

HOUSES = ("row", "column", "block")


class PlacementError(RuntimeError):
    """Raised when a value is placed on a cell that already holds one."""


@dataclass(frozen=True)
class GridGeometry:
    edge: int = 9
    block: int | None = None

    def __post_init__(self) -> None:
        if self.edge < 1:
            raise ValueError(f"edge length must be positive, got {self.edge}")
        block = self.block if self.block is not None else isqrt(self.edge)
        if block * block != self.edge:
            raise ValueError(
                f"edge length {self.edge} does not tile into {block}x{block} blocks"
            )
        object.__setattr__(self, "block", block)

    @property
    def cell_count(self) -> int:
        return self.edge * self.edge


def bit(v: int) -> int:
    return 1 << v


def full_mask(n: int) -> int:
    # bits 1..n set, bit 0 unused
    return ((1 << n) - 1) << 1


def mask_values(mask: int) -> list[int]:
    """Digits present in a candidate mask, ascending."""
    out = []
    v = 1
    mask >>= 1
    while mask:
        if mask & 1:
            out.append(v)
        mask >>= 1
        v += 1
    return out


def mask_count(mask: int) -> int:
    return bin(mask).count("1")


@dataclass
class Cell:
    value: int = 0
    candidates: int = 0

    def has_candidate(self, v: int) -> bool:
        return bool(self.candidates & bit(v))

    def remove_candidate(self, v: int) -> None:
        self.candidates &= ~bit(v)

    def is_naked_single(self) -> int | None:
        if self.value == 0 and mask_count(self.candidates) == 1:
            return self.candidates.bit_length() - 1
        return None


@dataclass
class Grid:
    geometry: GridGeometry = field(default_factory=GridGeometry)
    cells: list[list[Cell]] = field(default_factory=list)
    filled_count: int = 0

    def __post_init__(self) -> None:
        n = self.geometry.edge
        if not self.cells:
            self.cells = [[Cell() for _ in range(n)] for _ in range(n)]
        if len(self.cells) != n or any(len(row) != n for row in self.cells):
            raise ValueError(f"grid must be {n}x{n}")
        self.filled_count = sum(1 for row in self.cells for c in row if c.value != 0)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]], geometry: GridGeometry | None = None) -> Grid:
        """Build a grid from rows of ints (0 = empty). Accepts lists or a 2-D numpy array."""
        if geometry is None:
            geometry = GridGeometry(len(rows))
        n = geometry.edge
        if len(rows) != n:
            raise ValueError(f"expected {n} rows, got {len(rows)}")
        cells = []
        for r, row in enumerate(rows):
            if len(row) != n:
                raise ValueError(f"row {r + 1} has {len(row)} values, expected {n}")
            out_row = []
            for c, v in enumerate(row):
                v = int(v)
                if not 0 <= v <= n:
                    raise ValueError(f"value {v} at r{r + 1}c{c + 1} is outside 0..{n}")
                out_row.append(Cell(value=v))
            cells.append(out_row)
        return cls(geometry=geometry, cells=cells)

    def to_rows(self) -> list[list[int]]:
        return [[c.value for c in row] for row in self.cells]

    def copy(self) -> Grid:
        cells = [[Cell(c.value, c.candidates) for c in row] for row in self.cells]
        return Grid(geometry=self.geometry, cells=cells)

    @property
    def edge(self) -> int:
        return self.geometry.edge

    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def is_full(self) -> bool:
        return self.filled_count == self.geometry.cell_count

    def block_origin(self, row: int, col: int) -> tuple[int, int]:
        b = self.geometry.block
        return (row // b) * b, (col // b) * b

    def row_cells(self, row: int) -> Iterator[tuple[int, int]]:
        for c in range(self.edge):
            yield row, c

    def col_cells(self, col: int) -> Iterator[tuple[int, int]]:
        for r in range(self.edge):
            yield r, col

    def block_cells(self, row: int, col: int) -> Iterator[tuple[int, int]]:
        b = self.geometry.block
        r0, c0 = self.block_origin(row, col)
        for r in range(r0, r0 + b):
            for c in range(c0, c0 + b):
                yield r, c

    def house_cells(self, house: str, row: int, col: int) -> Iterator[tuple[int, int]]:
        if house == "row":
            return self.row_cells(row)
        if house == "column":
            return self.col_cells(col)
        if house == "block":
            return self.block_cells(row, col)
        raise ValueError(f"unknown house {house!r}")

    def peers(self, row: int, col: int) -> set[tuple[int, int]]:
        """Return the coordinates sharing a row, column, or block with (row, col), excluding itself."""
        ps = set(self.row_cells(row)) | set(self.col_cells(col)) | set(self.block_cells(row, col))
        ps.discard((row, col))
        return ps

    def placed_in_houses(self, row: int, col: int) -> set[int]:
        vals = {self.cells[r][c].value for r, c in self.row_cells(row)}
        vals |= {self.cells[r][c].value for r, c in self.col_cells(col)}
        vals |= {self.cells[r][c].value for r, c in self.block_cells(row, col)}
        vals.discard(0)
        return vals


def init_candidates(grid: Grid) -> None:
    """Compute every empty cell's candidate mask from scratch. Placed cells get an empty mask."""
    everything = full_mask(grid.edge)
    for r in range(grid.edge):
        for c in range(grid.edge):
            cell = grid.cells[r][c]
            if cell.value != 0:
                cell.candidates = 0
                continue
            used = 0
            for v in grid.placed_in_houses(r, c):
                used |= bit(v)
            cell.candidates = everything & ~used


def place_value(
    grid: Grid,
    value: int,
    row: int,
    col: int,
    technique: str,
    observer: SolveObserver | None = None,
    house: str | None = None,
) -> Placement:
    """Commit value at (row, col) and eliminate it from every empty peer."""
    cell = grid.cells[row][col]
    if cell.value != 0:
        raise PlacementError(
            f"cannot place {value} at {rc_to_key(row, col)}: cell already holds {cell.value}"
        )
    cell.value = value
    # Solved cells keep no candidates; recompute if a cell is ever unsolved.
    cell.candidates = 0
    grid.filled_count += 1

    for r, c in grid.peers(row, col):
        peer = grid.cells[r][c]
        if peer.value == 0:
            peer.remove_candidate(value)

    event = Placement(
        value=value,
        row=row,
        col=col,
        technique=technique,
        filled=grid.filled_count,
        house=house,
    )
    if observer is not None:
        observer.on_placement(event, grid)
    return event


def try_naked_singles(grid: Grid, observer: SolveObserver | None = None) -> bool:
    # Fixed row-major order keeps traces reproducible.
    for r in range(grid.edge):
        for c in range(grid.edge):
            v = grid.cells[r][c].is_naked_single()
            if v is not None:
                place_value(grid, v, r, c, NAKED_SINGLE, observer)
                return True
    return False


def value_absent_from(grid: Grid, house: str, value: int, row: int, col: int) -> bool:
    """True if no other empty cell of the given house still lists value as a candidate."""
    for r, c in grid.house_cells(house, row, col):
        if (r, c) == (row, col):
            continue
        other = grid.cells[r][c]
        if other.value == 0 and other.has_candidate(value):
            return False
    return True


def hidden_single_house(grid: Grid, value: int, row: int, col: int) -> str | None:
    """Name of the first house (row, column, block) in which (row, col) is the only spot for value."""
    for house in HOUSES:
        if value_absent_from(grid, house, value, row, col):
            return house
    return None


def try_hidden_singles(grid: Grid, observer: SolveObserver | None = None) -> bool:
    """Place one hidden single, if any: a candidate confined to this cell within some house."""
    for r in range(grid.edge):
        for c in range(grid.edge):
            cell = grid.cells[r][c]
            if cell.value != 0:
                continue
            for v in mask_values(cell.candidates):
                house = hidden_single_house(grid, v, r, c)
                if house is not None:
                    place_value(grid, v, r, c, HIDDEN_SINGLE, observer, house=house)
                    return True
    return False
