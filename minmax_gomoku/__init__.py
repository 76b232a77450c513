from .envs import Board, GomokuEnv, Location, Player, State
from .agents import DumbAgent, MinimaxAgent, MinimaxSearch, SearchResult
from .errors import ConfigurationError, GomokuError, InvalidMoveError
