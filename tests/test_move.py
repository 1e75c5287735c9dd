# tests/test_move.py
from sudoku_search.grid import EMPTY_CELL, Cell
from sudoku_search.move import Move


def test_candidates_come_off_the_front():
    move = Move(Cell(2, 3), [1, 4, 7])
    assert move.peek() == 1
    assert move.pop_candidate() == 1
    assert move.pop_candidate() == 4
    assert move.remaining == [7]
    assert not move.exhausted()
    assert move.pop_candidate() == 7
    assert move.exhausted()


def test_exhausted_move_yields_empty_cell():
    move = Move(Cell(1, 1))
    assert move.peek() == EMPTY_CELL
    assert move.pop_candidate() == EMPTY_CELL
    assert move.as_dict() == {"cell": "r1c1", "remaining": []}
