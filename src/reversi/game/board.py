"""
Board module for Reversi.
Holds disc placement on the 8x8 grid and answers geometric queries.
"""
from enum import IntEnum
from functools import lru_cache
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .errors import OutOfBoundsError

SIZE = 8
EMPTY = 0

# The eight compass directions as (row delta, column delta).
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


class Color(IntEnum):
    """Disc colors. The values double as cell codes in the board array."""
    BLACK = 1
    WHITE = 2

    @property
    def opponent(self) -> 'Color':
        return Color.WHITE if self is Color.BLACK else Color.BLACK

    def __str__(self) -> str:
        return self.name.capitalize()


Cell = Optional[Color]


@lru_cache(maxsize=None)
def _ray(row: int, col: int, dr: int, dc: int) -> Tuple[Tuple[int, int], ...]:
    cells = []
    r, c = row + dr, col + dc
    while 0 <= r < SIZE and 0 <= c < SIZE:
        cells.append((r, c))
        r += dr
        c += dc
    return tuple(cells)


class Board:
    """
    Represents the Reversi board as an 8x8 numpy array of cell codes.

    A board is a value: search code copies it before changing anything,
    and discs are only placed through ``set_cell`` by the move generator.
    """

    SIZE = SIZE

    def __init__(self):
        """Initialize a board with the standard four-disc start position."""
        self._board = np.zeros((SIZE, SIZE), dtype=np.int8)
        mid = SIZE // 2
        self._board[mid - 1, mid - 1] = Color.WHITE
        self._board[mid, mid] = Color.WHITE
        self._board[mid - 1, mid] = Color.BLACK
        self._board[mid, mid - 1] = Color.BLACK

    @classmethod
    def empty(cls) -> 'Board':
        """Create a board with no discs."""
        board = cls()
        board._board[:, :] = EMPTY
        return board

    @classmethod
    def from_array(cls, array) -> 'Board':
        """
        Create a board from an 8x8 array of cell codes (0 empty, 1 black, 2 white).

        Raises:
            ValueError: if the shape or the cell codes are invalid
        """
        array = np.asarray(array)
        if array.shape != (SIZE, SIZE):
            raise ValueError(f"Board array must have shape ({SIZE}, {SIZE}), got {array.shape}")
        if not np.isin(array, (EMPTY, int(Color.BLACK), int(Color.WHITE))).all():
            raise ValueError("Board array may only contain 0, 1 or 2")
        board = cls.empty()
        board._board[:, :] = array
        return board

    @staticmethod
    def in_bounds(row: int, col: int) -> bool:
        return 0 <= row < SIZE and 0 <= col < SIZE

    def _check(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(row, col)

    def cell_at(self, row: int, col: int) -> Cell:
        """
        Get the content of a cell.

        Returns:
            The Color of the disc on the cell, or None if it is empty
        """
        self._check(row, col)
        value = int(self._board[row, col])
        return Color(value) if value != EMPTY else None

    def set_cell(self, row: int, col: int, color: Color) -> None:
        """Place a disc of the given color, overwriting the cell."""
        self._check(row, col)
        self._board[row, col] = color

    def count(self, color: Color) -> int:
        """Number of discs of the given color."""
        return int(np.count_nonzero(self._board == color))

    def is_full(self) -> bool:
        return not (self._board == EMPTY).any()

    @staticmethod
    def ray(row: int, col: int, dr: int, dc: int) -> Tuple[Tuple[int, int], ...]:
        """
        Coordinates met when walking from (row, col) in direction (dr, dc).

        The starting cell is not included; the walk stops at the board edge.
        ``scan`` and the move generator both walk the grid through it.
        """
        if not Board.in_bounds(row, col):
            raise OutOfBoundsError(row, col)
        if dr == 0 and dc == 0:
            raise ValueError("Direction must not be (0, 0)")
        return _ray(row, col, dr, dc)

    def scan(self, row: int, col: int, dr: int, dc: int) -> List[Tuple[int, int, Cell]]:
        """
        Collect the cells met when walking from (row, col) in direction (dr, dc).

        Returns:
            List of (row, col, cell) tuples in walking order
        """
        grid = self.rows()
        return [(r, c, Color(grid[r][c]) if grid[r][c] != EMPTY else None)
                for r, c in self.ray(row, col, dr, dc)]

    def empty_cells(self) -> Iterator[Tuple[int, int]]:
        """Yield the empty cells in row-major order."""
        for row, col in np.argwhere(self._board == EMPTY):
            yield int(row), int(col)

    def rows(self) -> List[List[int]]:
        """The grid as nested lists of cell codes, for fast pure-Python scanning."""
        return self._board.tolist()

    def get_board_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            Copy of the 8x8 array of cell codes
        """
        return self._board.copy()

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current disc count (black, white).
        """
        return self.count(Color.BLACK), self.count(Color.WHITE)

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        new_board = Board.empty()
        new_board._board[:, :] = self._board
        return new_board

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._board, other._board))

    def __hash__(self) -> int:
        return hash(self._board.tobytes())

    def __str__(self) -> str:
        symbols = {EMPTY: '.', Color.BLACK: 'B', Color.WHITE: 'W'}
        rows = []
        for i in range(SIZE):
            rows.append(' '.join(symbols[int(v)] for v in self._board[i]))
        black, white = self.get_score()
        rows.append(f"Score - Black: {black}, White: {white}")
        return "\n".join(rows)

    def __repr__(self) -> str:
        black, white = self.get_score()
        return f"Board(black={black}, white={white})"
