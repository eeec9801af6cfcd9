"""
Board evaluation functions.
"""
from .evaluator import (
    WIN_SCORE,
    DiscDifferentialEvaluator,
    Evaluator,
    PositionalEvaluator,
    build_evaluator,
)

__all__ = ['Evaluator', 'DiscDifferentialEvaluator', 'PositionalEvaluator',
           'build_evaluator', 'WIN_SCORE']
