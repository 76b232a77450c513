import numpy as np
from enum import Enum, IntEnum
from functools import lru_cache
from typing import List, NamedTuple, Optional, Tuple

from ..errors import ConfigurationError, InvalidMoveError


class Location(NamedTuple):
    row: int
    col: int


class Player(IntEnum):
    """the cell codes of the board array, 0 stands for an empty cell"""
    BLACK = 1
    WHITE = 2

    def opponent(self) -> "Player":
        return Player(3 - self)


class State(Enum):
    NOT_OVER = 0
    HAS_WINNER = 1
    DRAW = 2


# Vertical, Horizontal, Diagonal, Anti-diagonal
DIRECTIONS = [(1, 0), (0, 1), (1, 1), (1, -1)]


@lru_cache(maxsize=None)
def all_locations(size: int) -> Tuple[Location, ...]:
    return tuple(Location(row, col) for row in range(size) for col in range(size))


class Board:
    """
    Immutable snapshot of a gomoku board.

    ``update`` never touches the receiver: it copies the cell array, places the
    stone on the copy and returns a new board, so boards derived from the same
    parent never see each other's stones. Win detection happens once per
    update and only looks at the lines through the new stone.
    """
    chess = {
        0: "_",
        1: "X",
        2: "O"
    }

    def __init__(self, size=15, n_in_row=5):
        if size < 1:
            raise ConfigurationError(f"board size must be positive, got {size}")
        if not 1 <= n_in_row <= size:
            raise ConfigurationError(
                f"win length must be between 1 and the board size {size}, got {n_in_row}")
        self.size = size
        self.n_in_row = n_in_row

        cells = np.zeros((size, size), dtype=np.int8)
        cells.setflags(write=False)
        self._cells = cells
        self._winner: Optional[Player] = None
        self._last_move: Optional[Location] = None
        self._move_count = 0

    @property
    def locations(self) -> Tuple[Location, ...]:
        """every location of the board in row-major order"""
        return all_locations(self.size)

    @property
    def winner(self) -> Optional[Player]:
        return self._winner

    @property
    def last_move(self) -> Optional[Location]:
        return self._last_move

    @property
    def move_count(self) -> int:
        return self._move_count

    def _check_location(self, location) -> Location:
        row, col = location
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise InvalidMoveError(f"{tuple(location)} is off a {self.size}x{self.size} board")
        return Location(int(row), int(col))

    def get(self, location) -> Optional[Player]:
        row, col = self._check_location(location)
        value = self._cells[row, col]
        if value == 0:
            return None
        return Player(int(value))

    def is_empty(self, location) -> bool:
        return self.get(location) is None

    def update(self, player: Player, location) -> "Board":
        row, col = self._check_location(location)
        try:
            player = Player(player)
        except ValueError:
            raise InvalidMoveError(f"{player!r} is not a player") from None
        if self._cells[row, col] != 0:
            raise InvalidMoveError(f"{(row, col)} is already occupied")

        cells = self._cells.copy()
        cells[row, col] = player
        cells.setflags(write=False)

        board = Board.__new__(Board)
        board.size = self.size
        board.n_in_row = self.n_in_row
        board._cells = cells
        board._last_move = Location(row, col)
        board._move_count = self._move_count + 1
        board._winner = self._winner
        if board._winner is None and board._check_winner(row, col):
            board._winner = player
        return board

    def _check_winner(self, row, col) -> bool:
        cells = self._cells
        player = cells[row, col]
        for dr, dc in DIRECTIONS:
            count = 1
            for sign in (1, -1):
                for i in range(1, self.n_in_row):
                    r, c = row + sign * dr * i, col + sign * dc * i
                    if not (0 <= r < self.size and 0 <= c < self.size and cells[r, c] == player):
                        break
                    count += 1
            if count >= self.n_in_row:
                return True
        return False

    def is_full(self) -> bool:
        return self._move_count == self.size * self.size

    def get_state(self) -> State:
        if self._winner is not None:
            return State.HAS_WINNER
        if self.is_full():
            return State.DRAW
        return State.NOT_OVER

    def is_terminal(self) -> bool:
        return self.get_state() != State.NOT_OVER

    def empty_locations(self) -> List[Location]:
        return [Location(int(r), int(c)) for r, c in np.argwhere(self._cells == 0)]

    def occupied_locations(self) -> List[Location]:
        return [Location(int(r), int(c)) for r, c in np.argwhere(self._cells != 0)]

    def as_array(self) -> np.ndarray:
        """read-only view of the cells"""
        return self._cells

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return (self.size == other.size and self.n_in_row == other.n_in_row
                and np.array_equal(self._cells, other._cells))

    def __hash__(self):
        return hash((self.size, self.n_in_row, self._cells.tobytes()))

    def __str__(self):
        return "\n".join("".join(self.chess[int(cell)] for cell in row) for row in self._cells)

    def __repr__(self):
        return f"Board(size={self.size}, n_in_row={self.n_in_row}, moves={self._move_count}, state={self.get_state().name})"
