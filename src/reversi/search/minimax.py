"""
Plain minimax search.
"""
import math
from typing import Tuple

from ..game.board import Color
from ..game.moves import Move
from ..game.state import GameState
from .base import Searcher


class MinimaxSearch(Searcher):
    """Explores the whole tree down to the requested depth."""

    name = "minimax"

    def _search_root(self, state: GameState, depth: int, root: Color) -> Tuple[Move, int]:
        self._nodes += 1
        best_move = None
        best_score = -math.inf
        for move in state.legal_moves():
            score = self._minimax(state.play(move), depth - 1, root)
            if score > best_score:
                best_move, best_score = move, score
        return best_move, best_score

    def _value_of(self, state: GameState, depth: int, root: Color) -> int:
        return self._minimax(state, depth, root)

    def _minimax(self, state: GameState, depth: int, root: Color) -> int:
        self._nodes += 1
        if depth == 0 or state.is_terminal():
            return self._evaluate(state, root)

        moves = state.legal_moves()
        if not moves:
            # Pass: the turn changes hands without a disc and still costs a ply.
            return self._minimax(state.pass_turn(), depth - 1, root)

        if state.current_player == root:
            value = -math.inf
            for move in moves:
                value = max(value, self._minimax(state.play(move), depth - 1, root))
        else:
            value = math.inf
            for move in moves:
                value = min(value, self._minimax(state.play(move), depth - 1, root))
        return value
