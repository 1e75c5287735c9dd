"""Rows, columns and boxes as fixed 9-cell groups evaluated against a Grid."""

from __future__ import annotations

from .grid import EMPTY_CELL, GRID_LENGTH, Cell, Grid


class ConstraintGroup:
    """Nine cells that may hold each digit at most once.

    The group stores no values; `used_values` reads them from the grid on
    every call. Duplicates are collapsed, not reported.
    """

    __slots__ = ("kind", "index", "_cells")

    def __init__(self, kind: str, index: int, cells):
        self.kind = kind
        self.index = index
        self._cells = frozenset(Cell(*cell) for cell in cells)
        if len(self._cells) != GRID_LENGTH:
            raise ValueError(f"{kind} {index} needs 9 distinct cells, got {len(self._cells)}")

    def member_cells(self) -> frozenset[Cell]:
        return self._cells

    def used_values(self, grid: Grid) -> set[int]:
        used = set()
        for cell in self._cells:
            value = grid.get(cell)
            if value != EMPTY_CELL:
                used.add(value)
        return used

    def __contains__(self, cell) -> bool:
        return cell in self._cells

    def __repr__(self) -> str:
        return f"ConstraintGroup({self.kind}={self.index})"


def row_group(r: int) -> ConstraintGroup:
    return ConstraintGroup("row", r, [(c, r) for c in range(1, 10)])


def col_group(c: int) -> ConstraintGroup:
    return ConstraintGroup("col", c, [(c, r) for r in range(1, 10)])


def box_group(h: int, k: int) -> ConstraintGroup:
    # h picks the band of rows, k the stack of columns; boxes numbered 1..9 row-major
    cells = [(i, j) for i in range(1 + 3 * k, 4 + 3 * k) for j in range(1 + 3 * h, 4 + 3 * h)]
    return ConstraintGroup("box", 3 * h + k + 1, cells)


def build_groups() -> list[ConstraintGroup]:
    """The 27 groups: rows 1..9, then columns 1..9, then boxes 1..9."""
    groups = [row_group(r) for r in range(1, 10)]
    groups += [col_group(c) for c in range(1, 10)]
    groups += [box_group(h, k) for h in range(3) for k in range(3)]
    return groups


def groups_by_cell(groups: list[ConstraintGroup]) -> dict[Cell, list[ConstraintGroup]]:
    """Map each cell to the groups covering it, in construction order."""
    index: dict[Cell, list[ConstraintGroup]] = {}
    for group in groups:
        for cell in group.member_cells():
            index.setdefault(cell, []).append(group)
    return index


def peers(index: dict[Cell, list[ConstraintGroup]], cell: Cell) -> frozenset[Cell]:
    """Cells sharing a row, column or box with `cell` (20 on a 9x9 board)."""
    ps = set()
    for group in index[cell]:
        ps |= group.member_cells()
    ps.discard(cell)
    return frozenset(ps)
