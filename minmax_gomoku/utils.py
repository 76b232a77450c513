import logging
from typing import Optional

import numpy as np
import tqdm

from .agents import Controller
from .envs import GomokuEnv, Player
from .errors import ConfigurationError

logger = logging.getLogger(__name__)


def start_play(
    env: GomokuEnv,
    player_1: Controller,
    player_2: Controller,
    render=False,
) -> Optional[Player]:
    """play one game, black moves first; returns the winner, None on a tie"""
    if player_1.player == player_2.player:
        raise ConfigurationError(f"both agents play as {player_1.player.name}")
    env.reset()
    agents = {player_1.player: player_1, player_2.player: player_2}

    while not env.is_ended():
        agent = agents[env.current_player]
        move = agent.next_move(env)
        if move is None:
            logger.info("%r has no move left", agent)
            break
        env.step(move)
        if render:
            print(env.render())

    if env.winner is not None:
        logger.info("Game end. Winner is player: %s", env.winner.name)
    else:
        logger.info("Game end. Tie")
    return env.winner


def collect_results(env: GomokuEnv, player_1: Controller, player_2: Controller, n_games=1, render=False):
    """play ``n_games`` and count them as [ties, black wins, white wins]"""
    winners = np.array([0, 0, 0])
    for _ in tqdm.tqdm(range(n_games), disable=n_games < 2):
        winner = start_play(env, player_1, player_2, render=render)
        if winner is None:
            winners[0] += 1
        else:
            winners[winner] += 1
    return winners
