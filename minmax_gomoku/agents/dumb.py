from typing import Optional

from .base import Controller
from ..envs import Location


class DumbAgent(Controller):
    """Plays the first empty location in row-major order, no search at all."""

    def next_move(self, game) -> Optional[Location]:
        board = game.get_board()
        for location in board.locations:
            if board.get(location) is None:
                return location
        return None
