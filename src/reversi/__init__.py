"""
Reversi engine with a minimax / alpha-beta computer opponent.
"""
from .config import Config, get_default_config
from .game import (
    Board,
    Color,
    GameResult,
    GameState,
    GameStatus,
    IllegalMoveError,
    Move,
    NoLegalMoveError,
    OutOfBoundsError,
    ReversiGame,
    legal_moves,
)
from .evaluation import DiscDifferentialEvaluator, Evaluator, PositionalEvaluator, build_evaluator
from .search import AlphaBetaSearch, MinimaxSearch, SearchResult, Searcher, build_searcher

__version__ = "0.1"

__all__ = [
    'Config', 'get_default_config',
    'Board', 'Color', 'Move', 'legal_moves',
    'GameState', 'GameStatus', 'GameResult', 'ReversiGame',
    'IllegalMoveError', 'NoLegalMoveError', 'OutOfBoundsError',
    'Evaluator', 'DiscDifferentialEvaluator', 'PositionalEvaluator', 'build_evaluator',
    'Searcher', 'SearchResult', 'MinimaxSearch', 'AlphaBetaSearch', 'build_searcher',
]
