"""Board snapshots as text, and loaders for text boards and triple lists."""

from __future__ import annotations

from pathlib import Path

from types_sudoku import RowsGrid, Triple

from .grid import EMPTY_CELL, GRID_LENGTH, Grid


def format_grid(grid: Grid | RowsGrid, show_zeros: bool = True) -> str:
    """Nine lines, top row first, cells separated by one space.

    Empty cells print as 0, or as '.' when `show_zeros` is False.
    """
    rows = grid.to_rows() if isinstance(grid, Grid) else grid
    lines = []
    for row in rows:
        if show_zeros:
            lines.append(" ".join(str(v) for v in row))
        else:
            lines.append(" ".join(str(v) if v != EMPTY_CELL else "." for v in row))
    return "\n".join(lines)


def format_value_summary(grid: Grid) -> str:
    """How many cells hold each digit, one digit per line."""
    return "\n".join(f"Value Total[{v}] = {n}" for v, n in grid.value_counts().items())


def parse_grid(text: str) -> RowsGrid:
    """Read a board from text.

    Accepts nine lines of nine cells (digits, optionally space separated) or
    one 81-character line. '0' and '.' mean empty; blank lines and lines
    starting with '#' are skipped.
    """
    symbols = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        for ch in line:
            if ch.isspace() or ch in "|+-":
                continue
            if ch == ".":
                symbols.append(EMPTY_CELL)
            elif ch.isdigit():
                symbols.append(int(ch))
            else:
                raise ValueError(f"unexpected character {ch!r} in board")
    if len(symbols) != GRID_LENGTH * GRID_LENGTH:
        raise ValueError(f"expected 81 cells, found {len(symbols)}")
    return [symbols[i:i + GRID_LENGTH] for i in range(0, len(symbols), GRID_LENGTH)]


def load_grid_file(path: str | Path) -> RowsGrid:
    return parse_grid(Path(path).read_text(encoding="utf-8"))


def rows_to_triples(rows: RowsGrid) -> list[Triple]:
    return [
        (c, r, v)
        for r, row in enumerate(rows, start=1)
        for c, v in enumerate(row, start=1)
        if v != EMPTY_CELL
    ]


def triples_to_rows(triples) -> RowsGrid:
    return Grid.from_triples(triples).to_rows()
