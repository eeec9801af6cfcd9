"""
ASCII rendering of a board for the console.
"""
from typing import Iterable, Optional

from .board import SIZE, Board, Color
from .moves import COLUMN_LETTERS, Move

ROW_SEPARATOR = "+---+---+---+---+---+---+---+---+\n"

_SYMBOLS = {None: "   ", Color.BLACK: " X ", Color.WHITE: " O "}


def board_to_ascii(board: Board) -> str:
    """Build an ascii representation of a board, one framed cell per square."""
    ascii_board = ""
    for row in range(SIZE):
        ascii_board += ROW_SEPARATOR
        for col in range(SIZE):
            ascii_board += "|" + _SYMBOLS[board.cell_at(row, col)]
        ascii_board += "|\n"
    ascii_board += ROW_SEPARATOR
    return ascii_board


def board_to_labelled_ascii(board: Board, hints: Optional[Iterable[Move]] = None) -> str:
    """
    Like ``board_to_ascii`` with column letters and row numbers around the grid.
    Cells listed in ``hints`` are marked with a dot.
    """
    hinted = {(m.row, m.col) for m in hints} if hints else set()
    header = "    " + "   ".join(COLUMN_LETTERS) + "\n"
    lines = [header]
    for row in range(SIZE):
        lines.append("  " + ROW_SEPARATOR)
        cells = []
        for col in range(SIZE):
            cell = board.cell_at(row, col)
            symbol = _SYMBOLS[cell]
            if cell is None and (row, col) in hinted:
                symbol = " . "
            cells.append("|" + symbol)
        lines.append(f"{row + 1} " + "".join(cells) + "|\n")
    lines.append("  " + ROW_SEPARATOR)
    return "".join(lines)
