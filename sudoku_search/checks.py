"""Board checks outside the search loop: seed pre-check and solution verification."""

from __future__ import annotations

import numpy as np

from types_sudoku import RowsGrid, SanityIssue

from .constraints import build_groups
from .grid import EMPTY_CELL, Grid


def _duplicates(values) -> list[int]:
    seen = set()
    dups = set()
    for v in values:
        if v == EMPTY_CELL:
            continue
        if v in seen:
            dups.add(v)
        seen.add(v)
    return sorted(dups)


def seed_issues(grid: Grid) -> list[SanityIssue]:
    """Groups that already hold some digit twice, in row, column, box order."""
    issues: list[SanityIssue] = []
    for group in build_groups():
        cells = sorted(group.member_cells(), key=lambda c: (c.row, c.col))
        dups = _duplicates(grid.get(c) for c in cells)
        if dups:
            issues.append(
                {
                    "type": "duplicate",
                    "unit": f"{group.kind[0]}{group.index}",
                    "digits": dups,
                    "cells": [str(c) for c in cells if grid.get(c) in dups],
                }
            )
    return issues


def sanity_check(original: RowsGrid, current: RowsGrid) -> dict:
    """Compare a working board with its seed: overwritten givens and duplicates.

    Both boards must be 9 rows of 9 values in 0..9, otherwise InvariantViolation.
    """
    seed = Grid.from_rows(original)
    board = Grid.from_rows(current)
    issues: list[SanityIssue] = []
    for cell in seed.cells():
        given = seed.get(cell)
        found = board.get(cell)
        if given != EMPTY_CELL and found not in (EMPTY_CELL, given):
            issues.append({"type": "given_overwritten", "cell": str(cell), "given": given, "found": found})
    issues += seed_issues(board)
    return {"ok": len(issues) == 0, "issues": issues}


def is_valid_solution(rows: RowsGrid) -> bool:
    """Every row, column and box is a permutation of 1..9."""
    board = np.asarray(rows, dtype=np.int8)
    if board.shape != (9, 9):
        return False
    target = np.arange(1, 10)
    for i in range(9):
        if not np.array_equal(np.sort(board[i, :]), target):
            return False
        if not np.array_equal(np.sort(board[:, i]), target):
            return False
        r0, c0 = 3 * (i // 3), 3 * (i % 3)
        if not np.array_equal(np.sort(board[r0:r0 + 3, c0:c0 + 3].ravel()), target):
            return False
    return True


def respects_seed(seed: Grid, solved: Grid) -> bool:
    """All seeded values survive unchanged in `solved`."""
    return all(solved.get(cell) == seed.get(cell) for cell in seed.cells() if seed.get(cell) != EMPTY_CELL)
