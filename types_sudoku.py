from __future__ import annotations

from typing import TypedDict

RowsGrid = list[list[int]]
"""A 9x9 Sudoku grid as rows of integers (0 = empty), top row first."""

Triple = tuple[int, int, int]
"""A seeded cell as (column, row, value), 1-based; column 1 is leftmost, row 1 is topmost."""

Candidates = dict[str, list[int]]
"""Map from cell key (e.g., 'r1c1') to the candidate digits (1..9), ascending."""


class SanityIssue(TypedDict, total=False):
    """One problem found on a board before or after solving."""

    type: str  # 'duplicate' or 'given_overwritten'
    unit: str  # for duplicates, the group ('r3', 'c7', 'b5')
    digits: list[int]  # for duplicates, the repeated digits
    cells: list[str]  # for duplicates, every cell holding a repeated digit
    cell: str  # for overwritten givens, the cell key
    given: int  # for overwritten givens, the seeded digit
    found: int  # for overwritten givens, the digit now on the board


class SolveResult(TypedDict):
    """Outcome of one solve, as returned by the tool interface and the API."""

    status: str  # 'solved', 'unsolvable' or 'budget_exceeded'
    grid: RowsGrid  # board when the search stopped
    forward: int  # new assignments
    backward: int  # undone assignments
    lateral: int  # replaced assignments at the same cell
    issues: list[SanityIssue]  # seed conflicts when the pre-check rejected the seed
