class GomokuError(Exception):
    """base class of all errors raised by minmax_gomoku"""


class ConfigurationError(GomokuError, ValueError):
    """raised at construction time for an invalid agent, board or env setup"""


class InvalidMoveError(GomokuError, ValueError):
    """raised when a stone is placed on an occupied or off-board location"""
