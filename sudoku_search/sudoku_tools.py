"""Tool-friendly interface over the engine: plain lists and dicts in, plain dicts out. Used by the API and the CLI."""

from __future__ import annotations

from typing import Dict, Iterable, Optional

from types_sudoku import Candidates, RowsGrid

from .checks import is_valid_solution, sanity_check
from .config import SolverConfig, config_from_dict
from .constraints import build_groups, groups_by_cell
from .grid import Grid
from .ranking import available_values_at
from .search import Solver

__all__ = ["compute_candidates", "compute_candidates_tool", "sanity_check", "solve_tool", "heuristics_tool"]


def compute_candidates(current: RowsGrid) -> Candidates:
    grid = Grid.from_rows(current)
    index = groups_by_cell(build_groups())
    return {str(cell): available_values_at(grid, index, cell) for cell in grid.empty_cells()}


def compute_candidates_tool(current: RowsGrid) -> Dict:
    """Candidate digits for each empty cell, e.g. {'candidates': {'r1c2': [1, 2, 5], ...}}."""
    return {"candidates": compute_candidates(current)}


def heuristics_tool(current: RowsGrid) -> Dict:
    """Ranked set for a board: empty cells with their constraint score, most constrained first."""
    solver = Solver(Grid.from_rows(current))
    return {"ranked": [{"cell": str(e.cell), "score": e.score} for e in solver.ranked_entries()]}


def _seed_grid(grid: Optional[RowsGrid], triples: Optional[Iterable[Iterable[int]]]) -> Grid:
    if grid is not None and triples is not None:
        raise ValueError("pass either a grid or a list of triples, not both")
    if grid is not None:
        return Grid.from_rows(grid)
    return Grid.from_triples(triples or [])


def solve_tool(
    grid: Optional[RowsGrid] = None,
    triples: Optional[Iterable[Iterable[int]]] = None,
    config: SolverConfig | Dict | None = None,
) -> Dict:
    """Solve a seed given as rows or as (column, row, value) triples.

    Adds 'valid' to the result: whether the final board is a completed Sudoku.
    """
    if isinstance(config, dict):
        config = config_from_dict(config)
    solver = Solver(_seed_grid(grid, triples), config)
    result = solver.solve().as_dict()
    result["valid"] = is_valid_solution(result["grid"])
    return result
