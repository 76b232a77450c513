import pytest

from minmax_gomoku.envs import Board, Player

STONES = {"X": Player.BLACK, "O": Player.WHITE}


@pytest.fixture
def make_board():
    """
    Build a board from rows like ``["XO_", "_X_", "___"]``; X is black, O is
    white and ``_`` is an empty cell.
    """
    def _make_board(rows, n_in_row=None):
        size = len(rows)
        board = Board(size, n_in_row if n_in_row is not None else min(size, 5))
        for row, line in enumerate(rows):
            assert len(line) == size
            for col, cell in enumerate(line):
                if cell in STONES:
                    board = board.update(STONES[cell], (row, col))
        return board
    return _make_board
