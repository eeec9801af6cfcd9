"""
Reversi game module.
This package contains the board model, the move generator and the game flow.
"""

from .errors import IllegalMoveError, NoLegalMoveError, OutOfBoundsError, ReversiError
from .board import DIRECTIONS, SIZE, Board, Color
from .moves import Move, apply_move, compute_flips, format_move, has_legal_move, legal_moves, parse_move
from .state import GameResult, GameState, GameStatus
from .render import board_to_ascii, board_to_labelled_ascii
from .game import ReversiGame

__all__ = [
    'Board', 'Color', 'DIRECTIONS', 'SIZE',
    'Move', 'legal_moves', 'has_legal_move', 'compute_flips', 'apply_move',
    'format_move', 'parse_move',
    'GameState', 'GameStatus', 'GameResult',
    'ReversiGame',
    'board_to_ascii', 'board_to_labelled_ascii',
    'ReversiError', 'OutOfBoundsError', 'IllegalMoveError', 'NoLegalMoveError',
]
