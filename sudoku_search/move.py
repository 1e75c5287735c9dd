"""One search decision and the candidates still untried at its cell."""

from __future__ import annotations

from dataclasses import dataclass, field

from .grid import EMPTY_CELL, Cell


@dataclass
class Move:
    cell: Cell
    remaining: list[int] = field(default_factory=list)

    def peek(self) -> int:
        """Next untried candidate, or EMPTY_CELL when exhausted."""
        return self.remaining[0] if self.remaining else EMPTY_CELL

    def pop_candidate(self) -> int:
        """Remove and return the next untried candidate (EMPTY_CELL when exhausted)."""
        if not self.remaining:
            return EMPTY_CELL
        return self.remaining.pop(0)

    def exhausted(self) -> bool:
        return not self.remaining

    def as_dict(self) -> dict:
        return {"cell": str(self.cell), "remaining": list(self.remaining)}
