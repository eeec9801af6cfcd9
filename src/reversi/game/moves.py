"""
Move generation for Reversi.
Enforces the capture rule: a move must bracket at least one line of
opponent discs between the new disc and an existing disc of the mover.
"""
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Optional, Sequence, Tuple

from .board import DIRECTIONS, EMPTY, Board, Color
from .errors import IllegalMoveError, OutOfBoundsError

Coord = Tuple[int, int]

COLUMN_LETTERS = 'abcdefgh'


@dataclass(frozen=True)
class Move:
    """
    A disc placement at (row, col).

    ``flips`` is filled in by the generator and is ignored by equality,
    so ``Move(2, 3)`` matches the generated move at the same cell.
    """
    row: int
    col: int
    flips: FrozenSet[Coord] = field(default=frozenset(), compare=False, hash=False)

    def as_tuple(self) -> Coord:
        return (self.row, self.col)

    def __str__(self) -> str:
        return format_move(self)


def _bracketed(grid: List[List[int]], row: int, col: int, dr: int, dc: int,
               player: int, opponent: int) -> List[Coord]:
    line = []
    for r, c in Board.ray(row, col, dr, dc):
        cell = grid[r][c]
        if cell == opponent:
            line.append((r, c))
        elif cell == player:
            return line
        else:
            break
    return []


def _flips_on_grid(grid: List[List[int]], row: int, col: int, color: Color,
                   directions: Iterable[Tuple[int, int]]) -> FrozenSet[Coord]:
    if grid[row][col] != EMPTY:
        return frozenset()
    player = int(color)
    opponent = int(color.opponent)
    flips = set()
    for dr, dc in directions:
        flips.update(_bracketed(grid, row, col, dr, dc, player, opponent))
    return frozenset(flips)


def compute_flips(board: Board, row: int, col: int, color: Color,
                  directions: Sequence[Tuple[int, int]] = DIRECTIONS) -> FrozenSet[Coord]:
    """
    Get the opponent discs flipped by placing ``color`` at (row, col).

    The result is the union over all directions, so it does not depend on
    the order in which ``directions`` are scanned.

    Raises:
        OutOfBoundsError: if (row, col) lies outside the board

    Returns:
        Frozenset of (row, col) coordinates; empty if the move is not legal
    """
    if not board.in_bounds(row, col):
        raise OutOfBoundsError(row, col)
    return _flips_on_grid(board.rows(), row, col, color, directions)


def legal_moves(board: Board, color: Color) -> List[Move]:
    """
    Get all legal moves for ``color``.

    Returns:
        List of moves (with their flip sets) in row-major order
    """
    grid = board.rows()
    moves = []
    for row, col in board.empty_cells():
        flips = _flips_on_grid(grid, row, col, color, DIRECTIONS)
        if flips:
            moves.append(Move(row, col, flips))
    return moves


def has_legal_move(board: Board, color: Color) -> bool:
    """Check whether ``color`` has at least one legal move."""
    grid = board.rows()
    return any(_flips_on_grid(grid, row, col, color, DIRECTIONS)
               for row, col in board.empty_cells())


def apply_move(board: Board, move: Move, color: Color) -> Board:
    """
    Play ``move`` for ``color`` on a copy of ``board``.

    Raises:
        IllegalMoveError: if the move lies outside the board or flips nothing

    Returns:
        The new board; the given board is left unchanged
    """
    if not Board.in_bounds(move.row, move.col):
        raise IllegalMoveError(f"{format_move(move)} is outside the board")
    flips = compute_flips(board, move.row, move.col, color)
    if not flips:
        raise IllegalMoveError(f"{format_move(move)} is not a legal move for {color}")
    new_board = board.copy()
    new_board.set_cell(move.row, move.col, color)
    for r, c in flips:
        new_board.set_cell(r, c, color)
    return new_board


def format_move(move: Optional[Move]) -> str:
    """Algebraic name of a move, e.g. Move(2, 3) -> 'd3'. None is a pass."""
    if move is None:
        return 'pass'
    if not Board.in_bounds(move.row, move.col):
        return f"({move.row}, {move.col})"
    return f"{COLUMN_LETTERS[move.col]}{move.row + 1}"


def parse_move(text: str) -> Move:
    """
    Parse a move typed as 'd3' (column letter, row number) or '2 3' (row, col).

    Raises:
        ValueError: if the text is not a move on the board
    """
    text = text.strip().lower()
    parts = text.replace(',', ' ').split()
    if len(parts) == 2 and all(p.lstrip('-').isdigit() for p in parts):
        row, col = int(parts[0]), int(parts[1])
    elif len(text) == 2 and text[0] in COLUMN_LETTERS and text[1].isdigit():
        row, col = int(text[1]) - 1, COLUMN_LETTERS.index(text[0])
    else:
        raise ValueError(f"Cannot parse move: {text!r}")
    if not Board.in_bounds(row, col):
        raise ValueError(f"Move {text!r} is outside the board")
    return Move(row, col)
