# tests/test_constraints.py
from collections import Counter

from sudoku_search.constraints import build_groups, groups_by_cell, peers
from sudoku_search.grid import Cell, Grid, all_cells


def test_27_groups_partition_the_board_three_ways():
    groups = build_groups()
    assert len(groups) == 27
    for kind in ("row", "col", "box"):
        family = [g for g in groups if g.kind == kind]
        assert len(family) == 9
        covered = Counter(c for g in family for c in g.member_cells())
        assert set(covered) == set(all_cells())
        assert set(covered.values()) == {1}


def test_every_cell_has_row_col_box():
    index = groups_by_cell(build_groups())
    assert len(index) == 81
    for cell, gs in index.items():
        assert [g.kind for g in gs] == ["row", "col", "box"]
        assert all(cell in g for g in gs)


def test_group_membership():
    groups = build_groups()
    row3 = next(g for g in groups if g.kind == "row" and g.index == 3)
    assert row3.member_cells() == {Cell(c, 3) for c in range(1, 10)}
    col8 = next(g for g in groups if g.kind == "col" and g.index == 8)
    assert col8.member_cells() == {Cell(8, r) for r in range(1, 10)}
    # box (h=1, k=2): columns 7..9, rows 4..6
    box6 = next(g for g in groups if g.kind == "box" and g.index == 6)
    assert box6.member_cells() == {Cell(c, r) for c in range(7, 10) for r in range(4, 7)}


def test_used_values_ignores_empties_and_collapses_duplicates():
    groups = build_groups()
    row1 = groups[0]
    grid = Grid()
    assert row1.used_values(grid) == set()
    grid.set(Cell(1, 1), 5)
    grid.set(Cell(2, 1), 5)
    grid.set(Cell(9, 1), 3)
    assert row1.used_values(grid) == {3, 5}


def test_peers_count():
    index = groups_by_cell(build_groups())
    for cell in (Cell(1, 1), Cell(5, 5), Cell(9, 4)):
        ps = peers(index, cell)
        assert len(ps) == 20
        assert cell not in ps
