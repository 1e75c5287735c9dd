# tests/test_ranking.py
import pytest

from sudoku_search.constraints import build_groups, groups_by_cell
from sudoku_search.grid import EMPTY_CELL, Cell, Grid
from sudoku_search.puzzles import NYT_HARD
from sudoku_search.ranking import (
    FullRanker,
    HeuristicEntry,
    IncrementalRanker,
    available_values_at,
    constraint_score,
    make_ranker,
    rank_key,
    tie_break,
    used_values_at,
)


@pytest.fixture
def index():
    return groups_by_cell(build_groups())


@pytest.mark.parametrize("cls", [FullRanker, IncrementalRanker])
def test_empty_board_order_is_tie_break_descending(cls, index):
    ranker = cls(Grid(), index)
    entries = ranker.entries()
    assert len(entries) == 81
    assert all(e.score == 0 for e in entries)
    assert [e.cell for e in entries[:3]] == [Cell(9, 9), Cell(8, 9), Cell(7, 9)]
    assert entries[9].cell == Cell(9, 8)
    assert entries[-1].cell == Cell(1, 1)


@pytest.mark.parametrize("cls", [FullRanker, IncrementalRanker])
def test_score_beats_tie_break(cls, index):
    grid = Grid()
    grid.set(Cell(1, 1), 5)
    ranker = cls(grid, index)
    top = ranker.peek()
    # highest-numbered peer of r1c1 is r9c1
    assert top == HeuristicEntry(Cell(1, 9), 1)
    assert Cell(1, 1) not in [e.cell for e in ranker.entries()]


def test_rank_key():
    assert tie_break(Cell(3, 7)) == 73
    assert rank_key(HeuristicEntry(Cell(1, 1), 4)) > rank_key(HeuristicEntry(Cell(9, 9), 3))


def test_scores_and_available_values(index):
    grid = Grid.from_triples(NYT_HARD)
    for cell in grid.empty_cells():
        used = used_values_at(grid, index, cell)
        avail = available_values_at(grid, index, cell)
        assert used <= set(range(1, 10))
        assert avail == sorted(avail)
        assert constraint_score(grid, index, cell) + len(avail) == 9
        assert not used & set(avail)


def test_incremental_matches_full_through_edits(index):
    grid = Grid.from_triples(NYT_HARD)
    full = FullRanker(grid, index)
    inc = IncrementalRanker(grid, index)
    assert full.entries() == inc.entries()
    edits = [(Cell(1, 1), 3), (Cell(5, 5), 9), (Cell(9, 9), 1), (Cell(5, 5), EMPTY_CELL), (Cell(1, 1), 6)]
    for cell, value in edits:
        grid.set(cell, value)
        full.cell_changed(cell)
        inc.cell_changed(cell)
        assert full.entries() == inc.entries()
        assert full.peek() == inc.peek()
        assert len(full) == len(inc) == len(grid.empty_cells())


@pytest.mark.parametrize("name", ["full", "incremental"])
def test_pop_removes_top(name, index):
    ranker = make_ranker(name, Grid(), index)
    first = ranker.pop()
    assert first.cell == Cell(9, 9)
    assert ranker.peek().cell == Cell(8, 9)
    assert len(ranker) == 80


def test_unknown_ranker(index):
    with pytest.raises(ValueError):
        make_ranker("fancy", Grid(), index)
