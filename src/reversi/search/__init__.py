"""
Depth-limited adversarial search: minimax and alpha-beta.
"""
from typing import Optional

from ..config import SearchConfig
from ..evaluation import Evaluator
from .alphabeta import AlphaBetaSearch
from .base import MAX_DEPTH, MIN_DEPTH, SearchResult, Searcher, validate_depth
from .minimax import MinimaxSearch


def build_searcher(config: Optional[SearchConfig] = None,
                   evaluator: Optional[Evaluator] = None) -> Searcher:
    """Alpha-beta unless the configuration asks for plain minimax."""
    config = config or SearchConfig()
    if config.algorithm == 'minimax':
        return MinimaxSearch(evaluator)
    return AlphaBetaSearch(evaluator)


__all__ = ['Searcher', 'SearchResult', 'MinimaxSearch', 'AlphaBetaSearch',
           'build_searcher', 'validate_depth', 'MIN_DEPTH', 'MAX_DEPTH']
