from abc import ABC, abstractmethod
from typing import Optional

from ..envs import Location, Player


class Controller(ABC):
    """An agent playing as one fixed player, asked for one move per turn."""

    def __init__(self, player: Player):
        self.player = Player(player)

    @abstractmethod
    def next_move(self, game) -> Optional[Location]:
        """
        Return the location to play on ``game.get_board()``, or None when no
        empty location is left. Must not mutate ``game``.
        """

    def __repr__(self):
        return f"{type(self).__name__}(player={self.player.name})"
