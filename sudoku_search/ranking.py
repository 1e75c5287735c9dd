"""Constraint-pressure ranking of empty cells.

Every empty cell is scored by how many distinct digits its row, column and
box already use (0..9). Cells are ranked by score descending, ties broken by
``row*10 + col`` descending, so the order is total and reproducible.

Two interchangeable strategies keep the ranking current:

- ``FullRanker`` throws the ranked set away and rebuilds it after every
  change to the board.
- ``IncrementalRanker`` caches group contents and scores, and only rescores
  the changed cell and its peers.

Both yield the same entries in the same order for the same board.
"""

from __future__ import annotations

from typing import Iterator, NamedTuple

from .constraints import ConstraintGroup, peers
from .grid import EMPTY_CELL, GRID_LENGTH, SOLUTION_SET, Cell, Grid

GroupIndex = dict[Cell, list[ConstraintGroup]]


class HeuristicEntry(NamedTuple):
    cell: Cell
    score: int


def tie_break(cell: Cell) -> int:
    return cell.row * 10 + cell.col


def rank_key(entry: HeuristicEntry) -> tuple[int, int]:
    return (entry.score, tie_break(entry.cell))


def used_values_at(grid: Grid, index: GroupIndex, cell: Cell) -> set[int]:
    used: set[int] = set()
    for group in index[cell]:
        used |= group.used_values(grid)
    return used


def available_values_at(grid: Grid, index: GroupIndex, cell: Cell) -> list[int]:
    """Digits no covering group uses yet, ascending."""
    used = used_values_at(grid, index, cell)
    return [v for v in SOLUTION_SET if v not in used]


def constraint_score(grid: Grid, index: GroupIndex, cell: Cell) -> int:
    return len(used_values_at(grid, index, cell))


class Ranker:
    """Ranked set of empty cells over one grid."""

    name = "base"

    def __init__(self, grid: Grid, index: GroupIndex):
        self.grid = grid
        self.index = index
        self.groups = list({id(g): g for gs in index.values() for g in gs}.values())

    def rebuild(self) -> None:
        raise NotImplementedError

    def cell_changed(self, cell: Cell) -> None:
        """Bring the ranking up to date after `cell` was written."""
        raise NotImplementedError

    def peek(self) -> HeuristicEntry | None:
        raise NotImplementedError

    def pop(self) -> HeuristicEntry | None:
        raise NotImplementedError

    def entries(self) -> list[HeuristicEntry]:
        """Current ranked set, most constrained first."""
        raise NotImplementedError

    def __len__(self) -> int:
        return len(self.entries())

    def __iter__(self) -> Iterator[HeuristicEntry]:
        return iter(self.entries())


class FullRanker(Ranker):
    name = "full"

    def __init__(self, grid: Grid, index: GroupIndex):
        super().__init__(grid, index)
        self._ranked: list[HeuristicEntry] = []  # ascending; top entry is last
        self.rebuild()

    def rebuild(self) -> None:
        used = {id(g): g.used_values(self.grid) for g in self.groups}
        ranked = []
        for cell in self.grid.empty_cells():
            seen: set[int] = set()
            for g in self.index[cell]:
                seen |= used[id(g)]
            ranked.append(HeuristicEntry(cell, len(seen)))
        ranked.sort(key=rank_key)
        self._ranked = ranked

    def cell_changed(self, cell: Cell) -> None:
        self.rebuild()

    def peek(self) -> HeuristicEntry | None:
        return self._ranked[-1] if self._ranked else None

    def pop(self) -> HeuristicEntry | None:
        return self._ranked.pop() if self._ranked else None

    def entries(self) -> list[HeuristicEntry]:
        return self._ranked[::-1]

    def __len__(self) -> int:
        return len(self._ranked)


class IncrementalRanker(Ranker):
    name = "incremental"

    def __init__(self, grid: Grid, index: GroupIndex):
        super().__init__(grid, index)
        self._peers = {cell: peers(index, cell) for cell in index}
        self._used: dict[int, set[int]] = {}
        self._scores: dict[Cell, int] = {}
        self.rebuild()

    def _score(self, cell: Cell) -> int:
        seen: set[int] = set()
        for g in self.index[cell]:
            seen |= self._used[id(g)]
        return len(seen)

    def rebuild(self) -> None:
        self._used = {id(g): g.used_values(self.grid) for g in self.groups}
        self._scores = {cell: self._score(cell) for cell in self.grid.empty_cells()}

    def cell_changed(self, cell: Cell) -> None:
        for g in self.index[cell]:
            self._used[id(g)] = g.used_values(self.grid)
        for c in self._peers[cell] | {cell}:
            if self.grid.get(c) == EMPTY_CELL:
                self._scores[c] = self._score(c)
            else:
                self._scores.pop(c, None)

    def peek(self) -> HeuristicEntry | None:
        if not self._scores:
            return None
        cell = max(self._scores, key=lambda c: (self._scores[c], tie_break(c)))
        return HeuristicEntry(cell, self._scores[cell])

    def pop(self) -> HeuristicEntry | None:
        top = self.peek()
        if top is not None:
            del self._scores[top.cell]
        return top

    def entries(self) -> list[HeuristicEntry]:
        ranked = [HeuristicEntry(c, s) for c, s in self._scores.items()]
        ranked.sort(key=rank_key, reverse=True)
        return ranked

    def __len__(self) -> int:
        return len(self._scores)


RANKERS = {cls.name: cls for cls in (FullRanker, IncrementalRanker)}


def make_ranker(name: str, grid: Grid, index: GroupIndex) -> Ranker:
    try:
        cls = RANKERS[name]
    except KeyError:
        raise ValueError(f"unknown ranker {name!r}; choose from {sorted(RANKERS)}") from None
    return cls(grid, index)


def is_dead(entry: HeuristicEntry | None) -> bool:
    """An empty cell whose groups already use every digit."""
    return entry is not None and entry.score >= GRID_LENGTH
