"""
Script for running a match between two computer players.
"""
import os
import argparse
import sys
from dataclasses import replace
from datetime import datetime
from pathlib import Path

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute() / "src"))

from reversi.arena import Arena, RandomPlayer, SearchPlayer
from reversi.config import ALGORITHMS, EVALUATORS, Config, SearchConfig, get_default_config
from reversi.evaluation import build_evaluator
from reversi.logger import setup_logger
from reversi.search import MAX_DEPTH, build_searcher


def make_player(spec: str, base: Config, seed: int):
    """
    Build a player from a spec string: 'random' or '<algorithm>:<depth>[:<evaluator>]',
    e.g. 'alphabeta:4' or 'minimax:3:positional'.
    """
    if spec == 'random':
        return RandomPlayer(f"random_{seed}", seed=seed)

    parts = spec.split(':')
    if len(parts) not in (2, 3) or parts[0] not in ALGORITHMS:
        raise ValueError(f"Invalid player spec: {spec}")
    algorithm, depth = parts[0], int(parts[1])
    evaluator_name = parts[2] if len(parts) == 3 else base.evaluation.evaluator
    if evaluator_name not in EVALUATORS:
        raise ValueError(f"Invalid evaluator in player spec: {spec}")

    eval_config = replace(base.evaluation, evaluator=evaluator_name)
    searcher = build_searcher(SearchConfig(depth=depth, algorithm=algorithm),
                              build_evaluator(eval_config))
    return SearchPlayer(f"{algorithm}_d{depth}_{evaluator_name}", searcher, depth)


def main():
    parser = argparse.ArgumentParser(description='Run a match between two Reversi computer players')
    parser.add_argument('player_a', type=str,
                        help=f"'random' or '<algorithm>:<depth>[:<evaluator>]' (depth up to {MAX_DEPTH})")
    parser.add_argument('player_b', type=str, help='Second player, same format')
    parser.add_argument('--games', type=int, default=None,
                        help='Number of games (default: from config)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for random players (default: from config)')
    parser.add_argument('--config', type=str, default='configs/default_config.json',
                        help='Path to config file')
    parser.add_argument('--output-dir', type=str, default=None,
                        help='Directory to save match results')
    parser.add_argument('--verbose', action='store_true',
                        help='Log every move')
    args = parser.parse_args()

    if os.path.exists(args.config):
        config = Config.load(args.config)
    else:
        config = get_default_config()
    games = args.games if args.games is not None else config.arena.games
    seed = args.seed if args.seed is not None else config.arena.seed
    output_dir = args.output_dir or config.arena.output_dir

    log = setup_logger(config)
    try:
        player_a = make_player(args.player_a, config, seed)
        player_b = make_player(args.player_b, config, seed + 1)

        arena = Arena(verbose=args.verbose)
        match = arena.run_match(player_a, player_b, games=games,
                                show_progress=config.logging.verbose)

        log.log_metrics({
            'wins_a': match.wins_a,
            'wins_b': match.wins_b,
            'draws': match.draws,
            'score_a': match.score_a(),
        }, step=match.games_played, prefix='match/')

        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        results_file = os.path.join(output_dir, f"{player_a.player_id}_vs_{player_b.player_id}_{timestamp}.json")
        Arena.save_results(match, results_file)
        print(f"Results saved to {results_file}")
    finally:
        log.close()


if __name__ == "__main__":
    main()
