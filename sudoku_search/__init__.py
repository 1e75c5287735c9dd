"""Backtracking 9x9 Sudoku solver with most-constrained-cell ordering."""

from .board_io import format_grid, parse_grid
from .checks import is_valid_solution, sanity_check, seed_issues
from .config import SolverConfig, load_config
from .constraints import ConstraintGroup, build_groups, groups_by_cell
from .grid import EMPTY_CELL, Cell, Grid, InvariantViolation
from .move import Move
from .puzzles import PUZZLES, get_puzzle
from .ranking import FullRanker, HeuristicEntry, IncrementalRanker
from .search import SearchState, SolveOutcome, Solver, SolveStatus, solve_grid, solve_triples

__version__ = "0.1.0"
