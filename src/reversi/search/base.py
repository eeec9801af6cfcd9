"""
Common pieces of the depth-limited adversarial searches.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Tuple

from ..config import MAX_DEPTH, MIN_DEPTH, validate_depth
from ..evaluation import DiscDifferentialEvaluator, Evaluator
from ..game.board import Color
from ..game.moves import Move, format_move
from ..game.state import GameState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchResult:
    """
    Outcome of a search.

    Attributes:
        move: Best move, or None when the player to move has to pass
              (or the game is already over)
        score: Value of the position for the searching color
        nodes_visited: Number of positions visited, root included
        depth: Depth the search was run at
    """
    move: Optional[Move]
    score: int
    nodes_visited: int
    depth: int

    @property
    def is_pass(self) -> bool:
        return self.move is None


class Searcher(ABC):
    """
    Fixed-depth tree search over game states.

    Scores are always expressed for the color to move at the root: that
    color's plies maximize, the opponent's plies minimize. Children are
    explored in row-major move order and the first move reaching the best
    score is kept, so different algorithms agree on ties.
    """

    name = "search"

    def __init__(self, evaluator: Optional[Evaluator] = None):
        self.evaluator = evaluator or DiscDifferentialEvaluator()
        self._nodes = 0

    def search(self, state: GameState, depth: int) -> SearchResult:
        """
        Find the best move for the player to move in ``state``.

        Args:
            state: Position to search from; it is not modified
            depth: Number of plies to look ahead, 1 to 10

        Returns:
            SearchResult with the chosen move, its score and the node count
        """
        validate_depth(depth)
        self._nodes = 0
        root = state.current_player

        if state.is_terminal() or state.must_pass():
            score = self._value_of(state, depth, root)
            result = SearchResult(None, score, self._nodes, depth)
        else:
            move, score = self._search_root(state, depth, root)
            result = SearchResult(move, score, self._nodes, depth)

        logger.debug("%s depth=%d move=%s score=%d nodes=%d", self.name, depth,
                     format_move(result.move), result.score, result.nodes_visited)
        return result

    def _evaluate(self, state: GameState, root: Color) -> int:
        return self.evaluator.evaluate(state.board, root)

    @abstractmethod
    def _search_root(self, state: GameState, depth: int, root: Color) -> Tuple[Move, int]:
        """Pick the best move at a root that has at least one legal move."""

    @abstractmethod
    def _value_of(self, state: GameState, depth: int, root: Color) -> int:
        """Value of ``state`` for ``root`` searched ``depth`` plies deep."""
