import logging
import math
from dataclasses import dataclass
from typing import Optional

from .base import Controller
from .heuristic import Evaluator, PatternEvaluator
from .moves import MoveGenerator, NeighborhoodMoves
from ..envs import Board, Location, Player
from ..errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchResult:
    move: Optional[Location]
    score: float


class MinimaxSearch:
    """
    Depth-limited minimax over immutable boards.

    Every score is measured from the point of view of ``original_player``,
    the player the search runs for: it maximizes on its own turns and the
    opponent minimizes on theirs. Which locations are tried and how unfinished
    boards are scored is left to the move generator and the evaluator.

    Among equally scored candidates the first one in the generator's order is
    kept; a later candidate only replaces it with a strictly better score.
    This holds at every depth, root included.
    """

    def __init__(self, move_generator: MoveGenerator, evaluator: Evaluator):
        self.move_generator = move_generator
        self.evaluator = evaluator
        self.nodes = 0

    def best_move(self, board: Board, player: Player, depth: int) -> SearchResult:
        self.nodes = 0
        return self.search(board, player, depth, player)

    def search(self, board: Board, player_to_move: Player, depth: int, original_player: Player) -> SearchResult:
        self.nodes += 1
        if depth == 0 or board.is_terminal():
            return SearchResult(None, self.evaluator.estimate(board, original_player))

        candidates = self.move_generator.moves(board)
        if not candidates:
            return SearchResult(None, self.evaluator.estimate(board, original_player))

        maximizing = player_to_move == original_player
        best_move = None
        best_score = -math.inf if maximizing else math.inf

        for move in candidates:
            child = board.update(player_to_move, move)
            score = self.search(child, player_to_move.opponent(), depth - 1, original_player).score
            if best_move is None:
                improved = True
            elif maximizing:
                improved = score > best_score
            else:
                improved = score < best_score
            if improved:
                best_move, best_score = move, score

        return SearchResult(best_move, best_score)


class MinimaxAgent(Controller):
    """
    Picks its moves with ``MinimaxSearch``, looking ``depth`` plies ahead.

    A deeper search plays better but the tree grows like b ** depth where b is
    the number of candidates per board, which is why the default move
    generator only looks around the stones already played.
    """

    def __init__(
            self,
            player: Player,
            depth: int = 3,
            move_generator: Optional[MoveGenerator] = None,
            evaluator: Optional[Evaluator] = None,
    ):
        super().__init__(player)
        if isinstance(depth, bool) or not isinstance(depth, int) or depth < 1:
            raise ConfigurationError(f"search depth must be a positive integer, got {depth!r}")
        self.depth = depth
        self.searcher = MinimaxSearch(
            move_generator if move_generator is not None else NeighborhoodMoves(radius=1),
            evaluator if evaluator is not None else PatternEvaluator(),
        )

    def next_move(self, game) -> Optional[Location]:
        board = game.get_board()
        if board.is_full():
            return None

        result = self.searcher.best_move(board, self.player, self.depth)
        logger.debug("%s plays %s, score: %s, nodes: %d",
                     self.player.name, result.move, result.score, self.searcher.nodes)
        return result.move

    def __repr__(self):
        return f"MinimaxAgent(player={self.player.name}, depth={self.depth})"
