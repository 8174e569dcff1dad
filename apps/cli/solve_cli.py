"""CLI orchestrator: loads a puzzle, solves it with singles and a backtracking fallback, narrates each placement, optionally renders PNG frames and a GIF, and writes a JSON report."""

# solve_cli.py
# Usage:
#   python -m apps.cli.solve_cli --puzzle 530070000600195000098000060800060003400803001700020006060000280000419005000080079
#   python -m apps.cli.solve_cli --file puzzle.txt --quiet --json out/report.json
#   python -m apps.cli.solve_cli --file puzzle.txt --frames out/frames --gif out/solve.gif

from __future__ import annotations

import argparse
import json
import sys
import time
from pathlib import Path

from solver.observers import LineObserver, MultiObserver, RecordingObserver, RenderObserver
from solver.solver_core import Grid, GridGeometry
from solver.sudoku_tools import solve

from .animate_gif import animate
from .overlay_renderer import FrameObserver
from .puzzle_io import format_board, load_puzzle, parse_puzzle_string


def ts() -> str:
    return time.strftime("%Y-%m-%d %H:%M:%S")


def log(msg: str, *, quiet: bool = False) -> None:
    if not quiet:
        print(f"[{ts()}] {msg}", flush=True)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Solve a Sudoku with naked/hidden singles, falling back to backtracking.")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--puzzle", type=str, help="puzzle as one string, 0 or . for blanks")
    src.add_argument("--file", type=str, help="puzzle file (one string, or one row per line)")
    ap.add_argument("--block", type=int, default=None, help="block size; defaults to the square root of the edge")
    ap.add_argument("--render", type=str, default="text", choices=["text", "none"],
                    help="print the board after every deduction placement")
    ap.add_argument("--trace-search", action="store_true", help="also announce search trials and undos")
    ap.add_argument("--quiet", action="store_true", help="only print the final board and outcome")
    ap.add_argument("--json", type=str, default=None, help="write a JSON report here")
    ap.add_argument("--frames", type=str, default=None, help="directory for frame_XXX.png images")
    ap.add_argument("--gif", type=str, default=None, help="animated GIF of the frames (needs --frames)")
    ap.add_argument("--step_ms", type=int, default=700)
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.gif and not args.frames:
        raise SystemExit("--gif needs --frames")

    try:
        givens = load_puzzle(args.file) if args.file else parse_puzzle_string(args.puzzle)
        geometry = GridGeometry(len(givens), args.block)
        grid = Grid.from_rows(givens, geometry)
    except (FileNotFoundError, ValueError) as e:
        raise SystemExit(f"[error] {e}")

    givens = grid.to_rows()
    block = geometry.block

    def show(g: Grid) -> None:
        print(format_board(g.to_rows(), block))

    log(f"Puzzle {geometry.edge}x{geometry.edge}, {grid.filled_count} givens", quiet=args.quiet)
    if not args.quiet:
        show(grid)

    rec = RecordingObserver(keep_search=False)
    observers = [rec]
    if not args.quiet:
        observers.append(LineObserver(print, trace_search=args.trace_search))
        if args.render == "text":
            observers.append(RenderObserver(show))
    frames = None
    if args.frames:
        frames = FrameObserver(args.frames, givens)
        frames.start(grid)
        observers.append(frames)

    t0 = time.time()
    result = solve(grid, MultiObserver(*observers))
    elapsed = time.time() - t0

    if args.quiet:
        print(format_board(result.rows, block))
    log(
        f"{result.status}: {len(rec.deductions)} deductions, "
        f"{rec.search_trials} search trials, {elapsed:.3f}s",
        quiet=False,
    )

    gif = None
    if args.gif:
        n = animate(frames.frames, args.gif, step_ms=args.step_ms)
        gif = args.gif
        log(f"Wrote {gif} with {n} frames.", quiet=args.quiet)

    if args.json:
        payload = {
            "puzzle": givens,
            "solved": result.solved,
            "status": result.status,
            "searched": result.searched,
            "grid": result.rows,
            "moves": frames.moves if frames else rec.moves(),
            "frames": frames.frames if frames else [],
            "gif": gif,
        }
        out = Path(args.json)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        log(f"Report written to {out}", quiet=args.quiet)

    return 0 if result.solved else 1


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
