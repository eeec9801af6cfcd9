"""
Diagnostics that run minimax and alpha-beta side by side.

Both searches are started from the same positions; their moves and scores
must agree, and the node counts show how much alpha-beta prunes. This is
used by the tests and by ``compare_search.py``, never by the players.
"""
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

import numpy as np

from ..evaluation import Evaluator
from ..game.moves import format_move
from ..game.state import GameState
from .alphabeta import AlphaBetaSearch
from .base import SearchResult
from .minimax import MinimaxSearch


class SearchMismatchError(AssertionError):
    """Minimax and alpha-beta disagreed, or alpha-beta visited more nodes."""


@dataclass
class SearchComparison:
    depth: int
    minimax: SearchResult
    alphabeta: SearchResult

    @property
    def agrees(self) -> bool:
        return (self.minimax.move == self.alphabeta.move
                and self.minimax.score == self.alphabeta.score)

    @property
    def node_ratio(self) -> float:
        """Alpha-beta nodes as a fraction of minimax nodes."""
        return self.alphabeta.nodes_visited / max(1, self.minimax.nodes_visited)

    def describe(self) -> str:
        return (f"depth {self.depth}: minimax {format_move(self.minimax.move)} "
                f"({self.minimax.score}, {self.minimax.nodes_visited} nodes) / "
                f"alphabeta {format_move(self.alphabeta.move)} "
                f"({self.alphabeta.score}, {self.alphabeta.nodes_visited} nodes)")


def compare_searches(state: GameState, depths: Iterable[int],
                     evaluator: Optional[Evaluator] = None) -> List[SearchComparison]:
    """
    Run both searches on ``state`` at every depth in ``depths``.

    Returns:
        One SearchComparison per depth, in the given order
    """
    minimax = MinimaxSearch(evaluator)
    alphabeta = AlphaBetaSearch(evaluator)
    comparisons = []
    for depth in depths:
        comparisons.append(SearchComparison(
            depth=depth,
            minimax=minimax.search(state, depth),
            alphabeta=alphabeta.search(state, depth),
        ))
    return comparisons


def assert_equivalent(comparisons: Iterable[SearchComparison]) -> None:
    """
    Check the comparison records.

    Raises:
        SearchMismatchError: on a move or score mismatch, or when alpha-beta
            visited more nodes than minimax
    """
    for comparison in comparisons:
        if not comparison.agrees:
            raise SearchMismatchError(f"Searches disagree at {comparison.describe()}")
        if comparison.alphabeta.nodes_visited > comparison.minimax.nodes_visited:
            raise SearchMismatchError(f"Alpha-beta visited more nodes at {comparison.describe()}")


def sample_positions(count: int, plies: int, seed: int = 0) -> List[GameState]:
    """
    Generate reachable positions by random play from the opening.

    Each position is reached after up to ``plies`` random moves (passes
    included); a game that ends earlier yields its last in-progress state.
    """
    rng = np.random.default_rng(seed)
    positions = []
    for _ in range(count):
        state = GameState.new_game()
        for _ in range(plies):
            moves = state.legal_moves()
            if moves:
                candidate = state.play(moves[int(rng.integers(len(moves)))])
            else:
                candidate = state.pass_turn()
            if candidate.is_terminal():
                break
            state = candidate
        positions.append(state)
    return positions


def summarize(comparisons: Iterable[SearchComparison]) -> Dict[int, Dict[str, float]]:
    """
    Aggregate node counts per depth.

    Returns:
        {depth: {'positions', 'minimax_nodes', 'alphabeta_nodes', 'ratio', 'agreements'}}
    """
    totals: Dict[int, Dict[str, float]] = defaultdict(
        lambda: {'positions': 0, 'minimax_nodes': 0, 'alphabeta_nodes': 0, 'agreements': 0})
    for comparison in comparisons:
        entry = totals[comparison.depth]
        entry['positions'] += 1
        entry['minimax_nodes'] += comparison.minimax.nodes_visited
        entry['alphabeta_nodes'] += comparison.alphabeta.nodes_visited
        entry['agreements'] += int(comparison.agrees)

    summary = {}
    for depth in sorted(totals):
        entry = dict(totals[depth])
        entry['ratio'] = entry['alphabeta_nodes'] / max(1, entry['minimax_nodes'])
        summary[depth] = entry
    return summary
