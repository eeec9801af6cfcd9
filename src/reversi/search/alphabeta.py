"""
Minimax with alpha-beta pruning.
"""
import math
from typing import Tuple

from ..game.board import Color
from ..game.moves import Move
from ..game.state import GameState
from .base import Searcher


class AlphaBetaSearch(Searcher):
    """
    Same decisions as ``MinimaxSearch`` while skipping subtrees that cannot
    change the result.

    The window [alpha, beta] holds the best score the maximizing side is
    already assured of and the best the minimizing side is assured of. A max
    node stops as soon as a child reaches beta, a min node as soon as a child
    falls to alpha. Move order is the plain row-major order, no reordering.
    """

    name = "alphabeta"

    def _search_root(self, state: GameState, depth: int, root: Color) -> Tuple[Move, int]:
        self._nodes += 1
        alpha = -math.inf
        best_move = None
        best_score = -math.inf
        for move in state.legal_moves():
            # A move that only ties alpha comes back as a bound <= alpha and
            # is never preferred, which keeps the first-best tie-break.
            score = self._alphabeta(state.play(move), depth - 1, root, alpha, math.inf)
            if score > best_score:
                best_move, best_score = move, score
            alpha = max(alpha, score)
        return best_move, best_score

    def _value_of(self, state: GameState, depth: int, root: Color) -> int:
        return self._alphabeta(state, depth, root, -math.inf, math.inf)

    def _alphabeta(self, state: GameState, depth: int, root: Color,
                   alpha: float, beta: float) -> int:
        self._nodes += 1
        if depth == 0 or state.is_terminal():
            return self._evaluate(state, root)

        moves = state.legal_moves()
        if not moves:
            return self._alphabeta(state.pass_turn(), depth - 1, root, alpha, beta)

        if state.current_player == root:
            value = -math.inf
            for move in moves:
                value = max(value, self._alphabeta(state.play(move), depth - 1, root, alpha, beta))
                if value >= beta:
                    break  # beta cutoff
                alpha = max(alpha, value)
        else:
            value = math.inf
            for move in moves:
                value = min(value, self._alphabeta(state.play(move), depth - 1, root, alpha, beta))
                if value <= alpha:
                    break  # alpha cutoff
                beta = min(beta, value)
        return value
