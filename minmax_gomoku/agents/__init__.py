from .base import Controller
from .dumb import DumbAgent
from .heuristic import CallableEvaluator, Evaluator, PatternEvaluator, TerminalEvaluator
from .minmax import MinimaxAgent, MinimaxSearch, SearchResult
from .moves import AllEmptyMoves, MoveGenerator, NeighborhoodMoves
