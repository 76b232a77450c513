import pytest

from minmax_gomoku.agents import AllEmptyMoves, NeighborhoodMoves
from minmax_gomoku.envs import Board, Player
from minmax_gomoku.errors import ConfigurationError


class TestAllEmptyMoves:
    def test_every_empty_location_in_order(self, make_board):
        board = make_board(["X_O", "___", "__X"])
        assert AllEmptyMoves().moves(board) == [(0, 1), (1, 0), (1, 1), (1, 2), (2, 0), (2, 1)]

    def test_full_board(self, make_board):
        board = make_board(["XOX", "XOO", "OXX"])
        assert AllEmptyMoves().moves(board) == []


class TestNeighborhoodMoves:
    def test_empty_board_plays_the_centre(self):
        assert NeighborhoodMoves().moves(Board(15, 5)) == [(7, 7)]
        assert NeighborhoodMoves().moves(Board(4, 4)) == [(2, 2)]

    def test_around_a_corner_stone(self):
        board = Board(15, 5).update(Player.BLACK, (0, 0))
        assert NeighborhoodMoves(radius=1).moves(board) == [(0, 1), (1, 0), (1, 1)]

    def test_around_a_centre_stone(self):
        board = Board(15, 5).update(Player.BLACK, (7, 7))
        moves = NeighborhoodMoves(radius=2).moves(board)
        assert len(moves) == 24
        assert (7, 7) not in moves
        assert moves == sorted(moves)

    def test_only_empty_locations(self, make_board):
        board = make_board(["X____", "_O___", "_____", "_____", "_____"])
        moves = NeighborhoodMoves(radius=1).moves(board)
        assert all(board.is_empty(move) for move in moves)
        assert moves == [(0, 1), (0, 2), (1, 0), (1, 2), (2, 0), (2, 1), (2, 2)]

    @pytest.mark.parametrize("radius", [0, -1])
    def test_radius_below_one(self, radius):
        with pytest.raises(ConfigurationError):
            NeighborhoodMoves(radius=radius)

    def test_candidates_until_the_board_is_full(self):
        board = Board(4, 4).update(Player.BLACK, (0, 0))
        generator = NeighborhoodMoves(radius=1)
        player = Player.WHITE
        while not board.is_full():
            moves = generator.moves(board)
            assert moves
            board = board.update(player, moves[-1])
            player = player.opponent()
        assert generator.moves(board) == []
