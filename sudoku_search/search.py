"""Backtracking search with most-constrained-cell ordering.

The solver is a small state machine driven one transition at a time:

    Selecting -> Committing -> Selecting ...      (forward steps)
    Selecting -> Backtracking -> Selecting ...    (backward / lateral steps)

A health check guards every entry into Selecting: if the most constrained
empty cell has no legal digit left, the branch is dead and the solver
backtracks. Undo is an explicit stack of Moves, never recursion.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, Optional

from types_sudoku import SanityIssue, SolveResult

from .checks import seed_issues
from .config import SolverConfig
from .constraints import build_groups, groups_by_cell
from .grid import EMPTY_CELL, Cell, Grid
from .move import Move
from .ranking import (
    HeuristicEntry,
    available_values_at,
    constraint_score,
    is_dead,
    make_ranker,
    used_values_at,
)

log = logging.getLogger(__name__)


class SolveStatus(str, Enum):
    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"
    BUDGET_EXCEEDED = "budget_exceeded"


class SearchState(str, Enum):
    SELECTING = "selecting"
    COMMITTING = "committing"
    BACKTRACKING = "backtracking"
    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"


@dataclass
class SolveOutcome:
    status: SolveStatus
    grid: Grid
    forward_count: int = 0
    backward_count: int = 0
    lateral_count: int = 0
    issues: list[SanityIssue] = field(default_factory=list)

    @property
    def solved(self) -> bool:
        return self.status is SolveStatus.SOLVED

    @property
    def steps(self) -> int:
        return self.forward_count + self.backward_count + self.lateral_count

    def as_dict(self) -> SolveResult:
        return {
            "status": self.status.value,
            "grid": self.grid.to_rows(),
            "forward": self.forward_count,
            "backward": self.backward_count,
            "lateral": self.lateral_count,
            "issues": list(self.issues),
        }


class Solver:
    """Owns one grid for the duration of a solve.

    The grid passed in is mutated in place; seed cells are never cleared
    because only cells recorded in the move history are ever reset.
    """

    def __init__(self, grid: Grid, config: Optional[SolverConfig] = None):
        self.config = config or SolverConfig()
        self.grid = grid
        self.groups = build_groups()
        self.constraints = groups_by_cell(self.groups)
        self.ranker = make_ranker(self.config.ranker, grid, self.constraints)
        self.history: list[Move] = []
        self.forward_count = 0
        self.backward_count = 0
        self.lateral_count = 0
        self.state = SearchState.SELECTING
        self._selected: Optional[Cell] = None

    @classmethod
    def from_triples(cls, triples: Iterable[Iterable[int]], config: Optional[SolverConfig] = None):
        return cls(Grid.from_triples(triples), config)

    # ------------------------------------------------------------------
    # Heuristic queries
    # ------------------------------------------------------------------

    def used_values_at(self, cell: Cell) -> set[int]:
        return used_values_at(self.grid, self.constraints, Cell(*cell))

    def available_values_at(self, cell: Cell) -> list[int]:
        return available_values_at(self.grid, self.constraints, Cell(*cell))

    def constraint_score(self, cell: Cell) -> int:
        return constraint_score(self.grid, self.constraints, Cell(*cell))

    def ranked_entries(self) -> list[HeuristicEntry]:
        return self.ranker.entries()

    def is_healthy(self) -> bool:
        """No empty cell is fully constrained.

        The ranked set is ordered by score descending, so the first entry
        below 9 clears every entry after it.
        """
        return not is_dead(self.ranker.peek())

    @property
    def steps(self) -> int:
        return self.forward_count + self.backward_count + self.lateral_count

    @property
    def finished(self) -> bool:
        return self.state in (SearchState.SOLVED, SearchState.UNSOLVABLE)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def candidate_order(self, cell: Cell) -> list[int]:
        """Candidates for a new Move at `cell`, in the order they will be tried."""
        options = self.available_values_at(cell)
        if self.config.value_order != "least_used":
            return options
        ordered = []
        while options:
            value = self.grid.least_used_value(options)
            options.remove(value)
            ordered.append(value)
        return ordered

    def _select(self) -> SearchState:
        if not self.is_healthy():
            return SearchState.BACKTRACKING
        entry = self.ranker.pop()
        if entry is None:
            return SearchState.SOLVED
        self._selected = entry.cell
        return SearchState.COMMITTING

    def _commit(self) -> SearchState:
        cell = self._selected
        self._selected = None
        move = Move(cell, self.candidate_order(cell))
        value = move.pop_candidate()
        self.grid.set(cell, value)
        self.history.append(move)
        self.forward_count += 1
        self.ranker.cell_changed(cell)
        return SearchState.SELECTING

    def _backtrack(self) -> SearchState:
        cleared = []
        while self.history:
            move = self.history[-1]
            if not move.exhausted():
                value = move.pop_candidate()
                self.grid.set(move.cell, value)
                self.lateral_count += 1
                self.ranker.cell_changed(move.cell)
                log.debug("backtrack: cleared %s, %s -> %d", [str(c) for c in cleared], move.cell, value)
                return SearchState.SELECTING
            self.history.pop()
            self.grid.set(move.cell, EMPTY_CELL)
            self.backward_count += 1
            self.ranker.cell_changed(move.cell)
            cleared.append(move.cell)
        log.debug("backtrack: cleared %s, history exhausted", [str(c) for c in cleared])
        return SearchState.UNSOLVABLE

    def step(self) -> SearchState:
        """Run one transition and return the state entered."""
        if self.state is SearchState.SELECTING:
            self.state = self._select()
        elif self.state is SearchState.COMMITTING:
            self.state = self._commit()
        elif self.state is SearchState.BACKTRACKING:
            self.state = self._backtrack()
        return self.state

    # ------------------------------------------------------------------
    # Driver
    # ------------------------------------------------------------------

    def _outcome(self, status: SolveStatus, issues=None) -> SolveOutcome:
        return SolveOutcome(
            status=status,
            grid=self.grid,
            forward_count=self.forward_count,
            backward_count=self.backward_count,
            lateral_count=self.lateral_count,
            issues=list(issues or []),
        )

    def solve(self, should_stop: Optional[Callable[[], bool]] = None) -> SolveOutcome:
        """Run until solved, unsolvable, or the step budget / stop hook fires."""
        cfg = self.config
        log.info(
            "solve: %d seeded cells, ranker=%s, value_order=%s",
            self.grid.filled_count(), self.ranker.name, cfg.value_order,
        )
        if cfg.precheck and not self.history:
            issues = seed_issues(self.grid)
            if issues:
                log.warning("seed rejected by pre-check: %d conflicting group(s)", len(issues))
                self.state = SearchState.UNSOLVABLE
                return self._outcome(SolveStatus.UNSOLVABLE, issues)

        transitions = 0
        while not self.finished:
            # only committing and unwinding a held move add steps
            spends_step = self.state is SearchState.COMMITTING or (
                self.state is SearchState.BACKTRACKING and bool(self.history)
            )
            if spends_step and cfg.max_steps is not None and self.steps >= cfg.max_steps:
                log.warning("step budget of %d exhausted", cfg.max_steps)
                return self._outcome(SolveStatus.BUDGET_EXCEEDED)
            if should_stop is not None and should_stop():
                log.warning("solve cancelled after %d steps", self.steps)
                return self._outcome(SolveStatus.BUDGET_EXCEEDED)
            self.step()
            transitions += 1
            if cfg.progress_every and transitions % cfg.progress_every == 0:
                log.info(
                    "progress: depth=%d forward=%d backward=%d lateral=%d",
                    len(self.history), self.forward_count, self.backward_count, self.lateral_count,
                )

        if self.state is SearchState.SOLVED:
            log.info(
                "solved: forward=%d backward=%d lateral=%d",
                self.forward_count, self.backward_count, self.lateral_count,
            )
            return self._outcome(SolveStatus.SOLVED)
        log.warning(
            "unsolvable from this seed: forward=%d backward=%d lateral=%d",
            self.forward_count, self.backward_count, self.lateral_count,
        )
        return self._outcome(SolveStatus.UNSOLVABLE)


def solve_grid(grid: Grid, config: Optional[SolverConfig] = None, should_stop=None) -> SolveOutcome:
    return Solver(grid, config).solve(should_stop=should_stop)


def solve_triples(triples, config: Optional[SolverConfig] = None, should_stop=None) -> SolveOutcome:
    """Seed a fresh grid from (column, row, value) triples and solve it."""
    return solve_grid(Grid.from_triples(triples), config, should_stop)
