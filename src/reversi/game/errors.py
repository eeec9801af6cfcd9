"""
Exceptions raised by the Reversi engine.
"""


class ReversiError(Exception):
    """Base class for all engine errors."""


class OutOfBoundsError(ReversiError, IndexError):
    """A coordinate lies outside the 8x8 grid."""

    def __init__(self, row: int, col: int):
        super().__init__(f"Coordinates ({row}, {col}) are out of range")
        self.row = row
        self.col = col


class IllegalMoveError(ReversiError, ValueError):
    """The move is not legal for the current state and player."""


class NoLegalMoveError(ReversiError):
    """The player to move has no legal move and must pass."""
