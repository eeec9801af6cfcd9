"""
Game state machine for Reversi.
Tracks the board, the player to move and consecutive passes.
"""
from enum import Enum
from typing import List, Optional

from .board import Board, Color
from .errors import IllegalMoveError
from .moves import Move, apply_move, has_legal_move, legal_moves


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    TERMINAL = "terminal"


class GameResult(Enum):
    ONGOING = "ongoing"
    BLACK_WIN = "black_win"
    WHITE_WIN = "white_win"
    DRAW = "draw"

    @property
    def winner(self) -> Optional[Color]:
        if self is GameResult.BLACK_WIN:
            return Color.BLACK
        if self is GameResult.WHITE_WIN:
            return Color.WHITE
        return None


class GameState:
    """
    A snapshot of a game: board, color to move and consecutive pass count.

    States are never changed in place. ``play`` and ``pass_turn`` validate
    against this state and return a new one, so a failed call leaves the
    caller's state untouched and search can branch freely.
    """

    __slots__ = ('_board', '_current_player', '_passes', '_last_move', '_moves_cache')

    def __init__(self, board: Optional[Board] = None,
                 current_player: Color = Color.BLACK,
                 passes: int = 0,
                 last_move: Optional[Move] = None):
        """
        Initialize a game state.

        Args:
            board: Board to own (default: standard start position). It is copied.
            current_player: Color to move next (default: Black)
            passes: Number of consecutive passes that led to this state
            last_move: Move that produced this state, None for a pass or a new game
        """
        if passes < 0:
            raise ValueError("passes must be >= 0")
        self._board = board.copy() if board is not None else Board()
        self._current_player = Color(current_player)
        self._passes = passes
        self._last_move = last_move
        self._moves_cache: Optional[List[Move]] = None

    @classmethod
    def new_game(cls) -> 'GameState':
        """The standard opening: four central discs, Black to move."""
        return cls()

    @property
    def board(self) -> Board:
        """A copy of the board, so callers cannot alter this state."""
        return self._board.copy()

    @property
    def current_player(self) -> Color:
        return self._current_player

    @property
    def passes(self) -> int:
        return self._passes

    @property
    def last_move(self) -> Optional[Move]:
        return self._last_move

    def cell_at(self, row: int, col: int):
        return self._board.cell_at(row, col)

    def count(self, color: Color) -> int:
        return self._board.count(color)

    def get_score(self):
        return self._board.get_score()

    def is_terminal(self) -> bool:
        """Two consecutive passes, or a full board."""
        return self._passes >= 2 or self._board.is_full()

    @property
    def status(self) -> GameStatus:
        return GameStatus.TERMINAL if self.is_terminal() else GameStatus.IN_PROGRESS

    @property
    def result(self) -> GameResult:
        if not self.is_terminal():
            return GameResult.ONGOING
        black, white = self._board.get_score()
        if black > white:
            return GameResult.BLACK_WIN
        if white > black:
            return GameResult.WHITE_WIN
        return GameResult.DRAW

    def legal_moves(self) -> List[Move]:
        """
        Legal moves for the player to move, in row-major order.
        A terminal state has none.
        """
        if self.is_terminal():
            return []
        if self._moves_cache is None:
            self._moves_cache = legal_moves(self._board, self._current_player)
        return list(self._moves_cache)

    def must_pass(self) -> bool:
        """True when the game is in progress but the mover has no legal move."""
        if self.is_terminal():
            return False
        if self._moves_cache is not None:
            return not self._moves_cache
        return not has_legal_move(self._board, self._current_player)

    def play(self, move: Move) -> 'GameState':
        """
        Apply ``move`` for the current player and hand the turn over.

        Raises:
            IllegalMoveError: if the game is over or the move is not legal

        Returns:
            The new state
        """
        if self.is_terminal():
            raise IllegalMoveError("Cannot play a move, the game is over")
        new_board = apply_move(self._board, move, self._current_player)
        state = GameState.__new__(GameState)
        state._board = new_board
        state._current_player = self._current_player.opponent
        state._passes = 0
        state._last_move = Move(move.row, move.col)
        state._moves_cache = None
        return state

    def pass_turn(self) -> 'GameState':
        """
        Record a pass and hand the turn over without placing a disc.

        Raises:
            IllegalMoveError: if the game is over or the mover has a legal move
        """
        if self.is_terminal():
            raise IllegalMoveError("Cannot pass, the game is over")
        if not self.must_pass():
            raise IllegalMoveError(f"{self._current_player} has a legal move and cannot pass")
        state = GameState.__new__(GameState)
        state._board = self._board
        state._current_player = self._current_player.opponent
        state._passes = self._passes + 1
        state._last_move = None
        state._moves_cache = None
        return state

    def copy(self) -> 'GameState':
        return GameState(self._board, self._current_player, self._passes, self._last_move)

    def __eq__(self, other) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return (self._board == other._board
                and self._current_player == other._current_player
                and self._passes == other._passes)

    def __hash__(self) -> int:
        return hash((self._board, self._current_player, self._passes))

    def __repr__(self) -> str:
        black, white = self.get_score()
        return (f"GameState(current={self._current_player.name}, status={self.status.value}, "
                f"black={black}, white={white}, passes={self._passes})")

    def __str__(self) -> str:
        lines = [str(self._board), f"Current player: {self._current_player}"]
        if self.is_terminal():
            result = self.result
            if result is GameResult.DRAW:
                lines.append("Game over! It's a draw!")
            else:
                lines.append(f"Game over! {result.winner} wins!")
        return "\n".join(lines)
