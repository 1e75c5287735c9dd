# tests/test_board_io.py
import pytest

from sudoku_search.board_io import (
    format_grid,
    format_value_summary,
    load_grid_file,
    parse_grid,
    rows_to_triples,
    triples_to_rows,
)
from sudoku_search.grid import Cell, Grid
from sudoku_search.puzzles import NYT_EASY


def test_format_grid_is_row_major_space_separated():
    grid = Grid.from_triples([(2, 1, 9), (9, 9, 4)])
    lines = format_grid(grid).splitlines()
    assert len(lines) == 9
    assert lines[0] == "0 9 0 0 0 0 0 0 0"
    assert lines[8] == "0 0 0 0 0 0 0 0 4"
    assert format_grid(grid, show_zeros=False).splitlines()[0] == ". 9 . . . . . . ."


def test_parse_accepts_formatted_dotted_and_single_line():
    grid = Grid.from_triples(NYT_EASY)
    rows = grid.to_rows()
    assert parse_grid(format_grid(grid)) == rows
    assert parse_grid(format_grid(grid, show_zeros=False)) == rows
    flat = "".join(str(v) for row in rows for v in row)
    assert parse_grid("# easy\n" + flat + "\n") == rows


@pytest.mark.parametrize("text", ["123", "x" * 81, "1" * 82])
def test_parse_rejects_bad_boards(text):
    with pytest.raises(ValueError):
        parse_grid(text)


def test_triples_round_trip():
    rows = triples_to_rows(NYT_EASY)
    assert sorted(rows_to_triples(rows)) == sorted(NYT_EASY)


def test_load_grid_file(tmp_path):
    path = tmp_path / "board.txt"
    path.write_text(format_grid(Grid.from_triples(NYT_EASY)), encoding="utf-8")
    assert Grid.from_rows(load_grid_file(path)).get(Cell(2, 1)) == 9


def test_value_summary():
    grid = Grid.from_triples([(1, 1, 3), (5, 5, 3)])
    lines = format_value_summary(grid).splitlines()
    assert len(lines) == 9
    assert lines[2] == "Value Total[3] = 2"
