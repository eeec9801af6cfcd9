"""
Reversi game module.
Handles game flow for a console shell: human moves, machine moves, passes.
"""
import logging
from typing import Any, Dict, List, Optional, Tuple

from .board import Board, Color
from .errors import IllegalMoveError, NoLegalMoveError
from .moves import Move, format_move
from .state import GameResult, GameState

logger = logging.getLogger(__name__)


class ReversiGame:
    """
    Main game class for Reversi that holds the live game state and its history.

    Every change goes through ``GameState.play`` / ``GameState.pass_turn``,
    which return new states; the live state is only replaced once the new
    one has been built, so a rejected move leaves the game as it was.
    """

    def __init__(self, state: Optional[GameState] = None, searcher=None):
        """
        Initialize a new Reversi game.

        Args:
            state: Starting state (default: the standard opening)
            searcher: Search used for machine moves (default: alpha-beta with
                the disc-differential evaluator)
        """
        self.state = state or GameState.new_game()
        self.searcher = searcher
        self.move_history: List[Dict[str, Any]] = []

    def _get_searcher(self):
        if self.searcher is None:
            from ..search import AlphaBetaSearch
            self.searcher = AlphaBetaSearch()
        return self.searcher

    def reset(self) -> None:
        """Reset the game to its initial state."""
        self.state = GameState.new_game()
        self.move_history = []

    @property
    def current_player(self) -> Color:
        return self.state.current_player

    @property
    def board(self) -> Board:
        return self.state.board

    def get_valid_moves(self) -> List[Move]:
        """
        Get all valid moves for the current player.

        Returns:
            List of moves in row-major order
        """
        return self.state.legal_moves()

    def _commit(self, new_state: GameState, move: Optional[Move]) -> None:
        self.move_history.append({
            'player': self.state.current_player,
            'move': move,
            'state_before': self.state,
            'state_after': new_state,
        })
        self.state = new_state
        if new_state.is_terminal():
            logger.info("Game over: %s", new_state.result.value)

    def apply_move(self, move: Move) -> GameState:
        """
        Play ``move`` for the current player.

        Raises:
            IllegalMoveError: if the move is not legal or the game is over

        Returns:
            The new game state
        """
        new_state = self.state.play(move)
        logger.debug("%s plays %s", self.state.current_player, format_move(move))
        self._commit(new_state, Move(move.row, move.col))
        return new_state

    def make_move(self, row: int, col: int) -> GameState:
        """
        Make a move on the board.

        Args:
            row: Row of the move (0-based)
            col: Column of the move (0-based)
        """
        return self.apply_move(Move(row, col))

    def pass_turn(self) -> GameState:
        """
        Record a pass for a player without legal moves.

        Raises:
            IllegalMoveError: if the current player can move or the game is over
        """
        new_state = self.state.pass_turn()
        logger.debug("%s passes", self.state.current_player)
        self._commit(new_state, None)
        return new_state

    def request_machine_move(self, depth: int):
        """
        Ask the search for the current player's best move without playing it.

        Raises:
            IllegalMoveError: if the game is over
            NoLegalMoveError: if the current player has to pass
            ValueError: if depth is outside 1..10

        Returns:
            SearchResult for the current state
        """
        if self.state.is_terminal():
            raise IllegalMoveError("The game is over, there is no move to search for")
        if self.state.must_pass():
            raise NoLegalMoveError(f"{self.state.current_player} has no legal move and must pass")
        return self._get_searcher().search(self.state, depth)

    def play_machine_move(self, depth: int):
        """Search for the current player's move and play it."""
        result = self.request_machine_move(depth)
        self.apply_move(result.move)
        return result

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self.state.is_terminal()

    def get_result(self) -> GameResult:
        return self.state.result

    def get_winner(self) -> Optional[Color]:
        """
        Get the winner of the game.

        Returns:
            Color of the winner, None for a draw or a game still in progress
        """
        return self.state.result.winner

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current score (black, white).
        """
        return self.state.get_score()

    def get_move_history(self) -> List[Dict[str, Any]]:
        """
        Get the move history.

        Returns:
            List of dictionaries with player, move (None for a pass) and the
            states before and after
        """
        return self.move_history.copy()

    def __str__(self) -> str:
        return str(self.state)
