from __future__ import annotations

from types_sudoku import Move

"""Rendering utilities that draw the board with the latest move highlighted (house band, placed cell, technique caption). Produces frame_XXX.png artifacts used by the GIF builder."""


# overlay_renderer.py
# Render one board frame per placement on a square canvas (900x900 by default).
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from solver.events import BACKTRACKING, Placement, SolveObserver, SolveResult
from solver.solver_core import Grid

W = H = 900
TITLE_BAND = 60

GIVEN_INK = (0, 0, 0)
DEDUCED_INK = (30, 60, 200)
PLACED_INK = (0, 128, 0)


def load_font(size):
    try:
        return ImageFont.truetype("/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf", size)
    except OSError:
        return ImageFont.load_default(size=size)


def cell_rect(r, c, cell, pad=2, top=TITLE_BAND):
    # r, c are 0-based
    x0 = c * cell + pad
    y0 = top + r * cell + pad
    return (x0, y0, x0 + cell - 2 * pad, y0 + cell - 2 * pad)


def parse_cell(key):
    r, c = key[1:].split("c")
    return int(r) - 1, int(c) - 1


def house_rect(house, r, c, cell, block, n, top=TITLE_BAND):
    if house == "row":
        return (0, top + r * cell, n * cell, top + (r + 1) * cell)
    if house == "column":
        return (c * cell, top, (c + 1) * cell, top + n * cell)
    r0 = (r // block) * block
    c0 = (c // block) * block
    return (c0 * cell, top + r0 * cell, (c0 + block) * cell, top + (r0 + block) * cell)


def caption_for_move(move: Move | None) -> str:
    if move is None:
        return ""
    tech = move.get("technique", "?")
    title = f"{tech}: {move.get('cell', '')} = {move.get('digit', '')}"
    if "index" in move:
        title = f"#{move['index']}  " + title
    return title


def render_board(grid: Grid, givens=None, move: Move | None = None, title: str | None = None, size: int = W) -> Image.Image:
    """Draw grid values; givens in black, later placements in blue, the move's cell in green over its house band."""
    n = grid.edge
    block = grid.geometry.block
    cell = size // n
    board = cell * n
    im = Image.new("RGBA", (board, board + TITLE_BAND), "white")
    overlay = Image.new("RGBA", im.size, (0, 0, 0, 0))
    d = ImageDraw.Draw(overlay)

    target = None
    if move is not None:
        target = parse_cell(move["cell"])
        house = move.get("highlights", {}).get("house")
        if house:
            d.rectangle(house_rect(house, *target, cell, block, n), fill=(255, 255, 0, 64))
        d.rectangle(cell_rect(*target, cell), fill=(144, 238, 144, 128), outline=(0, 128, 0, 255), width=3)

    im = Image.alpha_composite(im, overlay)
    d = ImageDraw.Draw(im)

    # grid lines, heavier on block borders
    for i in range(n + 1):
        w = 4 if i % block == 0 else 1
        d.line((i * cell, TITLE_BAND, i * cell, TITLE_BAND + board), fill=(0, 0, 0), width=w)
        d.line((0, TITLE_BAND + i * cell, board, TITLE_BAND + i * cell), fill=(0, 0, 0), width=w)

    f = load_font(int(cell * 0.6))
    for r in range(n):
        for c in range(n):
            v = grid.cells[r][c].value
            if not v:
                continue
            if (r, c) == target:
                ink = PLACED_INK
            elif givens is not None and givens[r][c]:
                ink = GIVEN_INK
            else:
                ink = DEDUCED_INK
            x0, y0, x1, y1 = cell_rect(r, c, cell)
            d.text(((x0 + x1) // 2, (y0 + y1) // 2), str(v), fill=ink, font=f, anchor="mm")

    text = title if title is not None else caption_for_move(move)
    if text:
        d.text((10, TITLE_BAND // 2), text, fill=(0, 0, 0), font=load_font(28), anchor="lm")
    return im.convert("RGB")


class FrameObserver(SolveObserver):
    """Saves frame_000.png (the givens), one frame per deduction placement, and a final frame."""

    def __init__(self, out_dir, givens, size: int = W, include_search: bool = False) -> None:
        self.out_dir = Path(out_dir)
        self.out_dir.mkdir(parents=True, exist_ok=True)
        self.givens = givens
        self.size = size
        self.include_search = include_search
        self.frames: list[str] = []
        self.moves: list[Move] = []

    def _save(self, im: Image.Image) -> str:
        out = self.out_dir / f"frame_{len(self.frames):03d}.png"
        im.save(out)
        self.frames.append(str(out))
        return str(out)

    def start(self, grid: Grid) -> None:
        self._save(render_board(grid, self.givens, title="Puzzle", size=self.size))

    def on_placement(self, event: Placement, grid: Grid) -> None:
        if event.technique == BACKTRACKING and not self.include_search:
            return
        move = event.to_move(len(self.moves) + 1)
        move["overlay"] = self._save(render_board(grid, self.givens, move, size=self.size))
        self.moves.append(move)

    def on_finish(self, result: SolveResult, grid: Grid) -> None:
        if not result.solved:
            title = "No solution found"
        elif result.searched:
            title = "Solution"
        else:
            title = "Solution (obtained without backtracking)"
        self._save(render_board(grid, self.givens, title=title, size=self.size))
