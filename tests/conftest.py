# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "apps", "sudoku_search" and "types_sudoku" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sudoku_search.grid import Grid  # noqa: E402

# Row 9 holds 1..8 and column 9 already has a 9: r9c9 is dead before any search step.
DEAD_CELL_SEED = [(c, 9, c) for c in range(1, 9)] + [(9, 1, 9)]

# r1c1 and r1c2 can only take 2; filling one kills the other.
ONE_STEP_DEAD_END_SEED = [(c, 1, c) for c in range(3, 10)] + [(1, 5, 1), (2, 8, 1)]

# r9c9 is tried with 1 first, which forces r9c2 = 3 and leaves r9c1 dead;
# the search must undo r9c2 and switch r9c9 to 2.
LATERAL_SEED = [(1, 1, 2), (9, 1, 3), (2, 4, 2)] + [(c, 9, c + 1) for c in range(3, 9)]


@pytest.fixture
def empty_grid():
    return Grid()


@pytest.fixture
def repo_root():
    return ROOT


@pytest.fixture
def dead_cell_seed():
    return list(DEAD_CELL_SEED)


@pytest.fixture
def one_step_dead_end_seed():
    return list(ONE_STEP_DEAD_END_SEED)


@pytest.fixture
def lateral_seed():
    return list(LATERAL_SEED)
