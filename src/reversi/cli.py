"""
Play Reversi against the computer in the console.
"""
import argparse
import logging
import os
import sys
from typing import Callable, List, Optional

from .config import ALGORITHMS, Config, get_default_config
from .evaluation import build_evaluator
from .game import (
    Color,
    IllegalMoveError,
    Move,
    ReversiGame,
    board_to_labelled_ascii,
    format_move,
    parse_move,
)
from .logger import setup_logger
from .search import MAX_DEPTH, MIN_DEPTH, build_searcher

logger = logging.getLogger(__name__)

QUIT_WORDS = {'q', 'quit', 'exit'}


def _depth(value: str) -> int:
    depth = int(value)
    if not MIN_DEPTH <= depth <= MAX_DEPTH:
        raise argparse.ArgumentTypeError(f"depth must be between {MIN_DEPTH} and {MAX_DEPTH}")
    return depth


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Play Reversi against the computer')
    parser.add_argument('--color', choices=['black', 'white'], default='black',
                        help='Color played by the human (Black moves first)')
    parser.add_argument('--depth', type=_depth, default=None,
                        help=f'Search depth of the computer, {MIN_DEPTH}-{MAX_DEPTH} '
                             '(default: from config)')
    parser.add_argument('--algorithm', choices=list(ALGORITHMS), default=None,
                        help='Search algorithm of the computer (default: from config)')
    parser.add_argument('--positional', action='store_true',
                        help='Use the positional evaluator instead of the disc count')
    parser.add_argument('--hints', action='store_true',
                        help='Mark legal moves on the board')
    parser.add_argument('--config', type=str, default='configs/default_config.json',
                        help='Path to config file')
    parser.add_argument('--log-level', type=str, default=None,
                        help='Logging level (default: from config)')
    return parser


def load_config(args: argparse.Namespace) -> Config:
    """Load the config file if present and apply command-line overrides."""
    if args.config and os.path.exists(args.config):
        config = Config.load(args.config)
    else:
        config = get_default_config()
    if args.depth is not None:
        config.search.depth = args.depth
    if args.algorithm is not None:
        config.search.algorithm = args.algorithm
    if args.positional:
        config.evaluation.evaluator = 'positional'
    if args.log_level is not None:
        config.logging.log_level = args.log_level
    return config


def prompt_human_move(game: ReversiGame, input_fn: Callable[[str], str] = input,
                      output: Callable[[str], None] = print) -> Optional[Move]:
    """
    Ask for a move until a legal one is typed.

    Returns:
        The legal move, or None if the player asked to quit
    """
    legal: List[Move] = game.get_valid_moves()
    while True:
        raw = input_fn(f"{game.current_player} to move (e.g. d3, q to quit): ").strip()
        if raw.lower() in QUIT_WORDS:
            return None
        try:
            move = parse_move(raw)
        except ValueError as e:
            output(str(e))
            continue
        if move in legal:
            return move
        output(f"{format_move(move)} is not a legal move. Legal moves: "
               + ", ".join(format_move(m) for m in legal))


def run_game(game: ReversiGame, human: Color, depth: int,
             input_fn: Callable[[str], str] = input,
             output: Callable[[str], None] = print,
             hints: bool = False) -> bool:
    """
    Play until the game ends or the human quits.

    Returns:
        True if the game reached its end, False if the human quit
    """
    while not game.is_game_over():
        state = game.state
        output(board_to_labelled_ascii(state.board, state.legal_moves() if hints else None))
        black, white = game.get_score()
        output(f"Black (X): {black}  White (O): {white}")

        if state.must_pass():
            output(f"{state.current_player} has no legal move and passes.")
            game.pass_turn()
            continue

        if state.current_player == human:
            move = prompt_human_move(game, input_fn, output)
            if move is None:
                output("Game abandoned.")
                return False
            try:
                game.apply_move(move)
            except IllegalMoveError as e:
                output(str(e))
        else:
            result = game.play_machine_move(depth)
            output(f"Computer plays {format_move(result.move)} "
                   f"(score {result.score}, {result.nodes_visited} positions)")

    output(board_to_labelled_ascii(game.board))
    black, white = game.get_score()
    output(f"Final score - Black: {black}, White: {white}")
    winner = game.get_winner()
    output("It's a draw!" if winner is None else f"{winner} wins!")
    return True


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = load_config(args)
    except (ValueError, TypeError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    log = setup_logger(config)
    try:
        evaluator = build_evaluator(config.evaluation)
        searcher = build_searcher(config.search, evaluator)
        human = Color.BLACK if args.color == 'black' else Color.WHITE
        logger.info("Human plays %s, computer searches %d plies with %s",
                    human, config.search.depth, searcher.name)
        game = ReversiGame(searcher=searcher)
        try:
            finished = run_game(game, human, config.search.depth, hints=args.hints)
        except (KeyboardInterrupt, EOFError):
            print("\nGame interrupted.")
            return 1
        return 0 if finished else 1
    finally:
        log.close()


if __name__ == '__main__':
    sys.exit(main())
