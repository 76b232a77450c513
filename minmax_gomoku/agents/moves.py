from typing import List, Protocol, Set

from ..envs import Board, Location
from ..errors import ConfigurationError


class MoveGenerator(Protocol):
    def moves(self, board: Board) -> List[Location]:
        """
        Candidate locations the search is willing to consider. Every entry is
        empty on ``board`` and the order decides which of several equally
        scored moves is picked.
        """
        ...


class AllEmptyMoves:
    """every empty location, row-major"""

    def moves(self, board: Board) -> List[Location]:
        return board.empty_locations()


class NeighborhoodMoves:
    """
    Empty locations within ``radius`` (in both directions) of a stone already on
    the board, row-major. Far away cells are rarely worth a stone in gomoku and
    skipping them keeps the branching factor small. On an empty board the only
    candidate is the centre.
    """

    def __init__(self, radius=1):
        if radius < 1:
            raise ConfigurationError(f"neighborhood radius must be at least 1, got {radius}")
        self.radius = radius

    def neighbor(self, board: Board, position: Location) -> Set[Location]:
        bias = range(-self.radius, self.radius + 1)
        vacancies = set()
        for i in bias:
            row = position[0] + i
            if row < 0 or row >= board.size:
                continue
            for j in bias:
                col = position[1] + j
                if col < 0 or col >= board.size:
                    continue
                vacancies.add(Location(row, col))
        return vacancies

    def moves(self, board: Board) -> List[Location]:
        occupied = board.occupied_locations()
        if not occupied:
            middle_point = board.size // 2
            return [Location(middle_point, middle_point)]

        vacancies = set()
        for position in occupied:
            vacancies.update(self.neighbor(board, position))
        return sorted(location for location in vacancies if board.is_empty(location))

    def __repr__(self):
        return f"NeighborhoodMoves(radius={self.radius})"
