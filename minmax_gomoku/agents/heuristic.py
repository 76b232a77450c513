import math
from typing import Callable, Optional, Protocol, Sequence

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from ..envs import Board, Player
from ..errors import ConfigurationError


class Evaluator(Protocol):
    def estimate(self, board: Board, player: Player) -> float:
        """
        How good ``board`` is for ``player``, whoever is to move.
        inf means ``player`` has won, -inf that ``player`` has lost, a draw is 0.
        """
        ...


def terminal_score(board: Board, player: Player) -> Optional[float]:
    """the utility of a finished game, None while the game goes on"""
    if board.winner is not None:
        return math.inf if board.winner == player else -math.inf
    if board.is_full():
        return 0.
    return None


class TerminalEvaluator:
    """Only knows about finished games, every other board scores 0."""

    def estimate(self, board: Board, player: Player) -> float:
        score = terminal_score(board, player)
        return 0. if score is None else score


class CallableEvaluator:
    """Wraps ``fn(board, player) -> float`` for boards that are not over yet."""

    def __init__(self, fn: Callable[[Board, Player], float]):
        self.fn = fn

    def estimate(self, board: Board, player: Player) -> float:
        score = terminal_score(board, player)
        if score is not None:
            return score
        return float(self.fn(board, player))


def line_windows(cells: np.ndarray, length: int) -> np.ndarray:
    """
    Every run of ``length`` consecutive cells along rows, columns, diagonals
    and anti-diagonals, as an array of shape (n_windows, length).
    """
    size = cells.shape[0]
    windows = [
        sliding_window_view(cells, length, axis=1).reshape(-1, length),
        sliding_window_view(cells, length, axis=0).reshape(-1, length),
    ]
    flipped = np.fliplr(cells)
    for offset in range(-(size - length), size - length + 1):
        windows.append(sliding_window_view(np.diagonal(cells, offset), length))
        windows.append(sliding_window_view(np.diagonal(flipped, offset), length))
    return np.concatenate(windows)


class PatternEvaluator:
    """
    Scores every window of ``n_in_row`` cells: a window holding c stones of
    one player and none of the other can still become five in a row for that
    player and is worth ``weights[c]`` to them. The default weights grow
    tenfold per stone so that one open four outweighs any number of threes.
    """

    def __init__(self, weights: Optional[Sequence[float]] = None):
        self.weights = None if weights is None else np.asarray(weights, dtype=float)

    def _weights_for(self, n_in_row: int) -> np.ndarray:
        if self.weights is None:
            return np.array([0.] + [10. ** (c - 1) for c in range(1, n_in_row + 1)])
        if len(self.weights) < n_in_row + 1:
            raise ConfigurationError(
                f"need {n_in_row + 1} pattern weights for a win length of {n_in_row}, got {len(self.weights)}")
        return self.weights

    def estimate(self, board: Board, player: Player) -> float:
        score = terminal_score(board, player)
        if score is not None:
            return score

        weights = self._weights_for(board.n_in_row)
        windows = line_windows(board.as_array(), board.n_in_row)
        mine = (windows == player).sum(axis=1)
        theirs = (windows == player.opponent()).sum(axis=1)

        score = weights[mine[theirs == 0]].sum() - weights[theirs[mine == 0]].sum()
        return float(score)
