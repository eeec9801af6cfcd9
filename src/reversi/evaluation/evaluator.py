"""
Board evaluation functions used as leaf values by the search.

Every evaluator scores a board from the point of view of one color: higher
is strictly better for that color, the score is a finite integer and it only
depends on the board content.
"""
from abc import ABC, abstractmethod
from typing import Optional

from ..config import EvaluationConfig
from ..game.board import SIZE, Board, Color
from ..game.moves import has_legal_move

# Finite score for a decided game, larger than any positional total.
WIN_SCORE = 10_000


class Evaluator(ABC):
    """Maps a board to a score for ``color``."""

    @abstractmethod
    def evaluate(self, board: Board, color: Color) -> int:
        ...

    def __call__(self, board: Board, color: Color) -> int:
        return self.evaluate(board, color)


class DiscDifferentialEvaluator(Evaluator):
    """Own discs minus opponent discs."""

    def evaluate(self, board: Board, color: Color) -> int:
        return board.count(color) - board.count(color.opponent)


class PositionalEvaluator(Evaluator):
    """
    Weights discs by where they stand: corners are worth more than borders,
    borders more than inside cells. A side whose opponent has no legal move
    gets a bonus. When neither side can move the game is decided and the
    score becomes +/-WIN_SCORE plus the disc differential.
    """

    def __init__(self, corner_weight: int = 8, border_weight: int = 4,
                 inside_weight: int = 1, blocked_bonus: int = 4):
        self.corner_weight = corner_weight
        self.border_weight = border_weight
        self.inside_weight = inside_weight
        self.blocked_bonus = blocked_bonus
        self._weights = [[self._weight(r, c) for c in range(SIZE)] for r in range(SIZE)]

    def _weight(self, row: int, col: int) -> int:
        on_row_edge = row in (0, SIZE - 1)
        on_col_edge = col in (0, SIZE - 1)
        if on_row_edge and on_col_edge:
            return self.corner_weight
        if on_row_edge or on_col_edge:
            return self.border_weight
        return self.inside_weight

    def evaluate(self, board: Board, color: Color) -> int:
        opponent = color.opponent
        me_can_move = not board.is_full() and has_legal_move(board, color)
        opp_can_move = not board.is_full() and has_legal_move(board, opponent)

        if not me_can_move and not opp_can_move:
            differential = board.count(color) - board.count(opponent)
            if differential > 0:
                return WIN_SCORE + differential
            if differential < 0:
                return -WIN_SCORE + differential
            return 0

        mine = int(color)
        theirs = int(opponent)
        score = 0
        for row_cells, row_weights in zip(board.rows(), self._weights):
            for cell, weight in zip(row_cells, row_weights):
                if cell == mine:
                    score += weight
                elif cell == theirs:
                    score -= weight

        if not opp_can_move:
            score += self.blocked_bonus
        if not me_can_move:
            score -= self.blocked_bonus
        return score


def build_evaluator(config: Optional[EvaluationConfig] = None) -> Evaluator:
    """Create the evaluator named in the configuration."""
    config = config or EvaluationConfig()
    if config.evaluator == 'positional':
        return PositionalEvaluator(
            corner_weight=config.corner_weight,
            border_weight=config.border_weight,
            inside_weight=config.inside_weight,
            blocked_bonus=config.blocked_bonus,
        )
    return DiscDifferentialEvaluator()
