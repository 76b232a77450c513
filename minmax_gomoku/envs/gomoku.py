import logging
from typing import List, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, Location, Player
from ..errors import ConfigurationError, InvalidMoveError

logger = logging.getLogger(__name__)


class GomokuEnv(gym.Env):
    """
    The authoritative game state driven by the game loop.

    Agents only ever see the immutable ``Board`` returned by ``get_board``;
    the env replaces its own snapshot on every ``step``.
    """
    metadata = {"render_modes": ["ansi"]}

    def __init__(self, board_size=15, length_win=5):
        super().__init__()
        if board_size < length_win:
            raise ConfigurationError(
                f"board size can not be less than the win length {length_win}")
        self.length_win = length_win
        self.size = board_size
        self.action_space = spaces.MultiDiscrete([self.size, self.size])  # Actions are positions on the board
        self.observation_space = spaces.Box(low=0, high=2, shape=(self.size, self.size), dtype=np.int8)

        self._board = Board(self.size, self.length_win)
        self.current_player = Player.BLACK  # Black starts
        self.done = False
        self.winner: Optional[Player] = None
        self.last_move: Optional[Location] = None
        self.moves: List[Location] = []

    def reset(
            self,
            *,
            seed: int | None = None,
            options=None,
    ):
        super().reset(seed=seed)
        self._board = Board(self.size, self.length_win)
        self.current_player = Player.BLACK
        self.done = False
        self.winner = None
        self.last_move = None
        self.moves = []
        return self._observation(), {}

    def get_board(self) -> Board:
        return self._board

    def is_ended(self):
        return self.done

    def is_valid_move(self, row, col):
        return (not self.done and 0 <= row < self.size and 0 <= col < self.size
                and self._board.is_empty((row, col)))

    def step(self, action):
        row, col = int(action[0]), int(action[1])
        if not self.is_valid_move(row, col):
            raise InvalidMoveError(f"Invalid move {(row, col)} for player {self.current_player.name}")

        self._board = self._board.update(self.current_player, (row, col))
        self.last_move = Location(row, col)
        self.moves.append(self.last_move)

        reward = 0
        if self._board.winner is not None:
            self.done = True
            self.winner = self._board.winner
            reward = 1
        elif self._board.is_full():
            self.done = True
        else:
            self.current_player = self.current_player.opponent()  # Switch player
        return self._observation(), reward, self.done, False, self._info()

    def _observation(self) -> np.ndarray:
        return self._board.as_array().copy()

    def _info(self):
        return {"winner": self.winner, "move_count": self._board.move_count}

    def render(self):
        # Adjust the first line to ensure correct alignment
        first_line = "   " + " ".join([f"{i:<2}" for i in range(self.size)])
        lines = [first_line]

        for i, row in enumerate(self._board.as_array()):
            line_elements = []
            for j, cell in enumerate(row):
                if (i, j) == self.last_move:
                    # Highlight the last move in red
                    line_elements.append(f"\033[91m{Board.chess[int(cell)]}\033[0m")
                else:
                    line_elements.append(Board.chess[int(cell)])
            line = f"{i:<2} " + '  '.join(line_elements)
            lines.append(line)

        last_line = f"last position: {self.last_move}, player: {self.current_player.name}"
        lines.append(last_line)
        output = "\n".join(lines)
        logger.debug(output)
        return output

    def close(self):
        pass
