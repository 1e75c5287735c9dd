"""Board storage: cell coordinates, the 81-cell value map, and per-value usage counts."""

from __future__ import annotations

from typing import Iterable, Iterator, NamedTuple

EMPTY_CELL = 0
GRID_LENGTH = 9
SOLUTION_SET = tuple(range(1, GRID_LENGTH + 1))


class InvariantViolation(ValueError):
    """A cell or value outside the 9x9 board was referenced."""


class Cell(NamedTuple):
    """Immutable board coordinate. Column 1 is leftmost, row 1 is topmost."""

    col: int
    row: int

    def __str__(self) -> str:
        return f"r{self.row}c{self.col}"


def all_cells() -> list[Cell]:
    """All 81 cells, row-major from the top-left corner."""
    return [Cell(c, r) for r in range(1, GRID_LENGTH + 1) for c in range(1, GRID_LENGTH + 1)]


class Grid:
    """Total mapping of every cell to a value in 0..9 (0 = empty).

    Values are written unconditionally; legality against rows, columns and
    boxes is the solver's concern. A usage count per value is kept alongside
    the cells so the least-used digit can be looked up without a board scan.
    """

    def __init__(self):
        self._values: dict[Cell, int] = {cell: EMPTY_CELL for cell in all_cells()}
        self._usage = [0] * (GRID_LENGTH + 1)

    @classmethod
    def from_triples(cls, triples: Iterable[Iterable[int]]) -> "Grid":
        """Seed a grid from (column, row, value) triples."""
        grid = cls()
        for col, row, value in triples:
            grid.set(Cell(col, row), value)
        return grid

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> "Grid":
        """Seed a grid from 9 rows of 9 ints, top row first."""
        if len(rows) != GRID_LENGTH or any(len(row) != GRID_LENGTH for row in rows):
            raise InvariantViolation("expected 9 rows of 9 values")
        grid = cls()
        for r, row in enumerate(rows, start=1):
            for c, value in enumerate(row, start=1):
                if value != EMPTY_CELL:
                    grid.set(Cell(c, r), value)
        return grid

    def get(self, cell) -> int:
        # plain (col, row) tuples hash like Cell, so lookups stay on the fast path
        try:
            return self._values[cell]
        except (KeyError, TypeError):
            raise InvariantViolation(f"cell {cell!r} is outside the 9x9 board") from None

    def set(self, cell, value: int) -> None:
        # every check runs before the write so a rejected call leaves the board untouched
        try:
            known = cell in self._values
        except TypeError:
            known = False
        if not known:
            raise InvariantViolation(f"cell {cell!r} is outside the 9x9 board")
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvariantViolation(f"value {value!r} for {cell!r} is not an int")
        if not 0 <= value <= GRID_LENGTH:
            raise InvariantViolation(f"value {value} for {cell!r} is outside 0..9")
        key = Cell(*cell)
        old = self._values[key]
        self._values[key] = value
        if old != EMPTY_CELL:
            self._usage[old] -= 1
        if value != EMPTY_CELL:
            self._usage[value] += 1

    def cells(self) -> Iterator[Cell]:
        return iter(self._values)

    def empty_cells(self) -> list[Cell]:
        return [cell for cell, value in self._values.items() if value == EMPTY_CELL]

    def filled_count(self) -> int:
        return sum(1 for value in self._values.values() if value != EMPTY_CELL)

    def is_full(self) -> bool:
        return self.filled_count() == GRID_LENGTH * GRID_LENGTH

    def value_count(self, value: int) -> int:
        if not 1 <= value <= GRID_LENGTH:
            raise InvariantViolation(f"value {value} is outside 1..9")
        return self._usage[value]

    def value_counts(self) -> dict[int, int]:
        return {v: self._usage[v] for v in SOLUTION_SET}

    def least_used_value(self, options: Iterable[int]) -> int:
        """Option placed on the fewest cells so far; earlier options win ties."""
        best = EMPTY_CELL
        best_count = GRID_LENGTH * GRID_LENGTH + 1
        for option in options:
            if self._usage[option] < best_count:
                best = option
                best_count = self._usage[option]
        return best

    def to_rows(self) -> list[list[int]]:
        return [
            [self._values[Cell(c, r)] for c in range(1, GRID_LENGTH + 1)]
            for r in range(1, GRID_LENGTH + 1)
        ]

    def to_triples(self) -> list[tuple[int, int, int]]:
        """Filled cells as (column, row, value), row-major."""
        return [(cell.col, cell.row, v) for cell, v in self._values.items() if v != EMPTY_CELL]

    def copy(self) -> "Grid":
        other = Grid()
        other._values = dict(self._values)
        other._usage = list(self._usage)
        return other

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"Grid(filled={self.filled_count()})"
