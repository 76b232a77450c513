from typing import TypedDict

from .agents import (AllEmptyMoves, Controller, DumbAgent, MinimaxAgent, NeighborhoodMoves,
                     PatternEvaluator, TerminalEvaluator)
from .envs import Player
from .errors import ConfigurationError


class GameArgs(TypedDict):
    board_size: int
    length_win: int
    n_games: int
    render: bool


class AgentArgs(TypedDict):
    kind: str  # "minmax" or "dumb"
    depth: int
    move_generator: str  # "neighborhood" or "all"
    radius: int
    evaluator: str  # "pattern" or "terminal"


def default_args():
    game_args: GameArgs = {
        "board_size": 9,
        "length_win": 5,
        "n_games": 1,
        "render": False,
    }

    agent_args: AgentArgs = {
        "kind": "minmax",
        "depth": 2,
        "move_generator": "neighborhood",
        "radius": 1,
        "evaluator": "pattern",
    }
    return game_args, agent_args


def create_agent_from_args(args: AgentArgs, player: Player) -> Controller:
    if args["kind"] == "dumb":
        return DumbAgent(player)
    if args["kind"] != "minmax":
        raise ConfigurationError(f"unknown agent kind: {args['kind']!r}")

    if args["move_generator"] == "neighborhood":
        move_generator = NeighborhoodMoves(radius=args["radius"])
    elif args["move_generator"] == "all":
        move_generator = AllEmptyMoves()
    else:
        raise ConfigurationError(f"unknown move generator: {args['move_generator']!r}")

    if args["evaluator"] == "pattern":
        evaluator = PatternEvaluator()
    elif args["evaluator"] == "terminal":
        evaluator = TerminalEvaluator()
    else:
        raise ConfigurationError(f"unknown evaluator: {args['evaluator']!r}")

    return MinimaxAgent(player, depth=args["depth"], move_generator=move_generator, evaluator=evaluator)
