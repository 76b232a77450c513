from .board import Board, Location, Player, State
from .gomoku import GomokuEnv
