import pytest

from minmax_gomoku.agents import (AllEmptyMoves, DumbAgent, MinimaxAgent, NeighborhoodMoves, PatternEvaluator,
                                  TerminalEvaluator)
from minmax_gomoku.envs import Board, GomokuEnv, Player
from minmax_gomoku.errors import ConfigurationError
from minmax_gomoku.script_utils import create_agent_from_args, default_args


class StaticGame:
    def __init__(self, board):
        self.board = board

    def get_board(self):
        return self.board


def threat_board():
    """white has four in a row on row 7 and only (7, 7) completes it"""
    board = Board(15, 5)
    for col in range(3, 7):
        board = board.update(Player.WHITE, (7, col))
    for location in [(7, 2), (6, 3), (8, 8)]:
        board = board.update(Player.BLACK, location)
    return board


class TestMinimaxAgent:
    @pytest.mark.parametrize("depth", [0, -1, 2.5, True, "3", None])
    def test_invalid_depth(self, depth):
        with pytest.raises(ConfigurationError):
            MinimaxAgent(Player.BLACK, depth=depth)

    def test_defaults(self):
        agent = MinimaxAgent(Player.WHITE)
        assert agent.depth == 3
        assert isinstance(agent.searcher.move_generator, NeighborhoodMoves)
        assert isinstance(agent.searcher.evaluator, PatternEvaluator)

    @pytest.mark.parametrize("depth", [1, 2])
    def test_completes_five(self, depth):
        board = threat_board()
        agent = MinimaxAgent(Player.WHITE, depth=depth)
        assert agent.next_move(StaticGame(board)) == (7, 7)

    def test_blocks_five(self):
        board = threat_board()
        agent = MinimaxAgent(Player.BLACK, depth=2)
        assert agent.next_move(StaticGame(board)) == (7, 7)

    def test_opening_move(self):
        env = GomokuEnv(board_size=15, length_win=5)
        env.reset()
        assert MinimaxAgent(Player.BLACK, depth=2).next_move(env) == (7, 7)

    def test_full_board(self, make_board):
        board = make_board(["XOX", "XOO", "OXX"])
        agent = MinimaxAgent(Player.BLACK, depth=2, move_generator=AllEmptyMoves())
        assert agent.next_move(StaticGame(board)) is None

    def test_leaves_the_game_alone(self):
        env = GomokuEnv(board_size=7, length_win=4)
        env.reset()
        env.step((3, 3))
        env.step((3, 4))
        board = env.get_board()

        move = MinimaxAgent(Player.BLACK, depth=2).next_move(env)
        assert env.get_board() is board
        assert env.moves == [(3, 3), (3, 4)]
        assert env.current_player == Player.BLACK
        assert board.is_empty(move)


class TestDumbAgent:
    def test_first_empty_location(self, make_board):
        board = make_board(["XO_", "___", "___"])
        assert DumbAgent(Player.BLACK).next_move(StaticGame(board)) == (0, 2)

    def test_full_board(self, make_board):
        board = make_board(["XOX", "XOO", "OXX"])
        assert DumbAgent(Player.WHITE).next_move(StaticGame(board)) is None

    def test_ignores_threats(self, make_board):
        board = make_board(["___", "_O_", "XX_"])
        # black threatens (2, 2), the dumb agent does not care
        assert DumbAgent(Player.WHITE).next_move(StaticGame(board)) == (0, 0)
        minimax = MinimaxAgent(Player.WHITE, depth=2, move_generator=AllEmptyMoves(), evaluator=TerminalEvaluator())
        assert minimax.next_move(StaticGame(board)) == (2, 2)


class TestScriptUtils:
    def test_default_agent(self):
        _, agent_args = default_args()
        agent = create_agent_from_args(agent_args, Player.BLACK)
        assert isinstance(agent, MinimaxAgent)
        assert agent.player == Player.BLACK
        assert agent.depth == agent_args["depth"]

    def test_dumb_agent(self):
        _, agent_args = default_args()
        agent_args.update({"kind": "dumb"})
        assert isinstance(create_agent_from_args(agent_args, Player.WHITE), DumbAgent)

    def test_exhaustive_terminal_agent(self):
        _, agent_args = default_args()
        agent_args.update({"move_generator": "all", "evaluator": "terminal"})
        agent = create_agent_from_args(agent_args, Player.WHITE)
        assert isinstance(agent.searcher.move_generator, AllEmptyMoves)
        assert isinstance(agent.searcher.evaluator, TerminalEvaluator)

    @pytest.mark.parametrize("key, value", [("kind", "random"), ("move_generator", "edges"),
                                            ("evaluator", "nn"), ("depth", 0), ("radius", 0)])
    def test_invalid_args(self, key, value):
        _, agent_args = default_args()
        agent_args[key] = value
        with pytest.raises(ConfigurationError):
            create_agent_from_args(agent_args, Player.BLACK)
