import argparse
import logging

from minmax_gomoku.envs import GomokuEnv, Player
from minmax_gomoku.script_utils import create_agent_from_args, default_args
from minmax_gomoku.utils import collect_results


def create_args():
    game_args, agent_args = default_args()

    parser = argparse.ArgumentParser(description="Let two gomoku agents play against each other")
    parser.add_argument("--board-size", type=int, default=game_args["board_size"])
    parser.add_argument("--length-win", type=int, default=game_args["length_win"])
    parser.add_argument("--n-games", type=int, default=game_args["n_games"])
    parser.add_argument("--black", choices=["minmax", "dumb"], default="minmax")
    parser.add_argument("--white", choices=["minmax", "dumb"], default="dumb")
    parser.add_argument("--depth", type=int, default=agent_args["depth"])
    parser.add_argument("--moves", choices=["neighborhood", "all"], default=agent_args["move_generator"])
    parser.add_argument("--radius", type=int, default=agent_args["radius"])
    parser.add_argument("--evaluator", choices=["pattern", "terminal"], default=agent_args["evaluator"])
    parser.add_argument("--render", action="store_true")
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()

    game_args.update(
        {
            "board_size": args.board_size,
            "length_win": args.length_win,
            "n_games": args.n_games,
            "render": args.render,
        }
    )
    agent_args.update(
        {
            "depth": args.depth,
            "move_generator": args.moves,
            "radius": args.radius,
            "evaluator": args.evaluator,
        }
    )
    black_args = dict(agent_args, kind=args.black)
    white_args = dict(agent_args, kind=args.white)
    return args, game_args, black_args, white_args


def main():
    args, game_args, black_args, white_args = create_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    env = GomokuEnv(board_size=game_args["board_size"], length_win=game_args["length_win"])
    black = create_agent_from_args(black_args, Player.BLACK)
    white = create_agent_from_args(white_args, Player.WHITE)

    winners = collect_results(env, black, white, n_games=game_args["n_games"], render=game_args["render"])
    print(f"tie: {winners[0]}, black: {winners[1]}, white: {winners[2]}")


if __name__ == "__main__":
    main()
