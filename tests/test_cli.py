# tests/test_cli.py
import json

import numpy as np
import pytest
from PIL import Image

from conftest import pattern_rows, to_string
from apps.cli.animate_gif import animate, gather_frames
from apps.cli.overlay_renderer import render_board
from apps.cli.puzzle_io import format_board, load_puzzle, parse_puzzle_string
from apps.cli.solve_cli import main
from solver.solver_core import Grid


def test_parse_puzzle_string_accepts_dots_and_zeros():
    board = parse_puzzle_string("53..7...." + "6" + "0" * 71)
    assert board.shape == (9, 9)
    assert board[0, 0] == 5 and board[0, 2] == 0 and board[1, 0] == 6


@pytest.mark.parametrize("text", ["123", "12x4" * 4])
def test_parse_puzzle_string_rejects_bad_input(text):
    with pytest.raises(ValueError):
        parse_puzzle_string(text)


def test_load_puzzle_formats(tmp_path):
    rows = pattern_rows(2)
    spaced = tmp_path / "spaced.txt"
    spaced.write_text("\n".join(" ".join(str(v) for v in row) for row in rows), encoding="utf-8")
    unspaced = tmp_path / "unspaced.txt"
    unspaced.write_text("\n".join("".join(str(v) for v in row) for row in rows), encoding="utf-8")
    single = tmp_path / "single.txt"
    single.write_text(to_string(rows) + "\n", encoding="utf-8")

    for path in (spaced, unspaced, single):
        assert np.array_equal(load_puzzle(path), np.array(rows))

    with pytest.raises(FileNotFoundError):
        load_puzzle(tmp_path / "missing.txt")


def test_format_board_text_view():
    rows = pattern_rows(2)
    rows[0][1] = 0
    lines = format_board(rows).splitlines()
    assert lines[0] == "|**|**|"
    assert lines[1] == "|1.|34|"
    assert len(lines) == 7


def test_render_board_image():
    grid = Grid.from_rows(pattern_rows(3))
    move = {"technique": "hidden_single", "cell": "r2c3", "digit": 6, "highlights": {"house": "block"}}
    im = render_board(grid, givens=pattern_rows(3), move=move, size=450)
    assert isinstance(im, Image.Image)
    assert im.size[0] == 450


def test_main_quiet_json_report(tmp_path, few_blanks, capsys):
    out = tmp_path / "report.json"
    code = main(["--puzzle", to_string(few_blanks), "--quiet", "--json", str(out)])
    assert code == 0

    payload = json.loads(out.read_text(encoding="utf-8"))
    assert set(payload.keys()) == {"puzzle", "solved", "status", "searched", "grid", "moves", "frames", "gif"}
    assert payload["solved"] is True
    assert payload["grid"] == pattern_rows(3)
    assert len(payload["moves"]) == 5
    assert "solved_by_deduction" in capsys.readouterr().out


def test_main_narrates_and_renders(few_blanks, capsys):
    assert main(["--puzzle", to_string(few_blanks)]) == 0
    out = capsys.readouterr().out
    assert "Solved # 77: Naked single 1 placed at (0,0)" in out
    assert "Solution (obtained without backtracking):" in out
    assert "|***|***|***|" in out


def test_main_reports_failure(duplicate_in_row, capsys):
    assert main(["--puzzle", to_string(duplicate_in_row), "--render", "none"]) == 1
    assert "ATTEMPT FAILED!" in capsys.readouterr().out


def test_main_rejects_bad_puzzle():
    with pytest.raises(SystemExit):
        main(["--puzzle", "1234567"])


def test_main_frames_and_gif(tmp_path, few_blanks):
    frames_dir = tmp_path / "frames"
    gif = tmp_path / "solve.gif"
    out = tmp_path / "report.json"
    code = main([
        "--puzzle", to_string(few_blanks), "--quiet",
        "--frames", str(frames_dir), "--gif", str(gif), "--json", str(out),
    ])
    assert code == 0
    # givens, five placements, final board
    assert len(gather_frames(frames_dir)) == 7
    assert gif.exists()

    payload = json.loads(out.read_text(encoding="utf-8"))
    assert all(m["overlay"].endswith(".png") for m in payload["moves"])
    assert payload["gif"] == str(gif)


def test_animate_needs_frames(tmp_path):
    with pytest.raises(ValueError):
        animate([], tmp_path / "empty.gif")


def test_main_counts_search_trials(stalled, capsys):
    assert main(["--puzzle", to_string(stalled), "--quiet"]) == 0
    out = capsys.readouterr().out
    assert "solved_by_search: 0 deductions, " in out
    assert " 0 search trials" not in out
