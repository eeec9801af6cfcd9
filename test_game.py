"""
Test script for the Reversi game state machine and session object.
"""
import numpy as np
import pytest

from reversi.game import (
    Board,
    Color,
    GameResult,
    GameState,
    GameStatus,
    IllegalMoveError,
    Move,
    NoLegalMoveError,
    ReversiGame,
)
from reversi.search import SearchResult


def board_with(black=(), white=()):
    board = Board.empty()
    for row, col in black:
        board.set_cell(row, col, Color.BLACK)
    for row, col in white:
        board.set_cell(row, col, Color.WHITE)
    return board


def black_must_pass_state():
    """Black to move with nothing to capture, White can play (0, 2)."""
    return GameState(board_with(black=[(0, 1)], white=[(0, 0)]), Color.BLACK)


def test_new_game():
    """A new game has the four central discs and Black to move."""
    state = GameState.new_game()
    assert state.current_player == Color.BLACK
    assert state.status == GameStatus.IN_PROGRESS
    assert state.result == GameResult.ONGOING
    assert state.result.winner is None
    assert state.passes == 0
    assert state.get_score() == (2, 2)
    assert len(state.legal_moves()) == 4


def test_play_switches_player():
    """Playing a move returns a new state with the other color to move."""
    state = GameState.new_game()
    after = state.play(Move(2, 3))

    assert after.current_player == Color.WHITE
    assert after.get_score() == (4, 1)
    assert after.last_move == Move(2, 3)
    assert state.get_score() == (2, 2), "The previous state must not change"
    assert state.current_player == Color.BLACK


def test_illegal_play_leaves_state_untouched():
    """An illegal move raises and the state stays as it was."""
    state = GameState.new_game()
    snapshot = state.copy()
    with pytest.raises(IllegalMoveError):
        state.play(Move(0, 0))
    assert state == snapshot


def test_board_property_is_a_copy():
    """Changing the board returned by a state does not change the state."""
    state = GameState.new_game()
    board = state.board
    board.set_cell(0, 0, Color.BLACK)
    assert state.cell_at(0, 0) is None


def test_pass_when_no_legal_move():
    """Black cannot move, White can: Black passes and the game goes on."""
    state = black_must_pass_state()
    assert state.legal_moves() == []
    assert state.must_pass()
    with pytest.raises(IllegalMoveError):
        state.play(Move(0, 2))

    after = state.pass_turn()
    assert after.current_player == Color.WHITE
    assert after.passes == 1
    assert after.status == GameStatus.IN_PROGRESS
    assert after.legal_moves() == [Move(0, 2)]

    # A move resets the pass counter.
    played = after.play(Move(0, 2))
    assert played.passes == 0
    assert played.get_score() == (0, 3)


def test_cannot_pass_with_a_legal_move():
    """Passing is only allowed when there is nothing to play."""
    with pytest.raises(IllegalMoveError):
        GameState.new_game().pass_turn()


def test_two_passes_end_the_game():
    """When neither player can move, two passes in a row make the state terminal."""
    state = GameState(board_with(black=[(0, 0), (3, 3)], white=[(7, 7)]), Color.BLACK)
    assert not state.is_terminal()

    once = state.pass_turn()
    assert once.status == GameStatus.IN_PROGRESS

    twice = once.pass_turn()
    assert twice.status == GameStatus.TERMINAL
    assert twice.result == GameResult.BLACK_WIN
    assert twice.result.winner == Color.BLACK
    assert twice.legal_moves() == []
    with pytest.raises(IllegalMoveError):
        twice.pass_turn()


def test_draw_is_a_distinct_outcome():
    """Equal disc counts at the end are a draw, not an error."""
    state = GameState(board_with(black=[(0, 0)], white=[(7, 7)]), Color.WHITE)
    final = state.pass_turn().pass_turn()
    assert final.result == GameResult.DRAW
    assert final.result.winner is None


def test_full_board_is_terminal():
    """A full board is over whatever the pass count."""
    full_black = Board.from_array(np.full((8, 8), int(Color.BLACK)))
    state = GameState(full_black, Color.WHITE, passes=0)
    assert state.status == GameStatus.TERMINAL
    assert state.result == GameResult.BLACK_WIN
    with pytest.raises(IllegalMoveError):
        state.play(Move(0, 0))

    halves = np.ones((8, 8), dtype=int)
    halves[:, 1::2] = int(Color.WHITE)
    state = GameState(Board.from_array(halves), Color.BLACK, passes=1)
    assert state.is_terminal()
    assert state.result == GameResult.DRAW


def test_game_over_by_filling_the_board():
    """The last empty square gets filled and the game ends with White on every cell."""
    array = np.full((8, 8), int(Color.WHITE))
    array[0, 0] = 0
    array[0, 1] = int(Color.BLACK)
    state = GameState(Board.from_array(array), Color.WHITE)

    assert state.legal_moves() == [Move(0, 0)]
    final = state.play(Move(0, 0))
    assert final.is_terminal()
    assert final.get_score() == (0, 64)
    assert final.result == GameResult.WHITE_WIN


def test_session_make_move():
    """ReversiGame applies moves and keeps a history."""
    game = ReversiGame()
    game.make_move(2, 3)

    assert game.get_score() == (4, 1)
    assert game.current_player == Color.WHITE
    history = game.get_move_history()
    assert len(history) == 1
    assert history[0]['player'] == Color.BLACK
    assert history[0]['move'] == Move(2, 3)
    assert history[0]['state_before'] == GameState.new_game()


def test_session_rejects_illegal_move():
    """An illegal move raises and nothing is recorded."""
    game = ReversiGame()
    with pytest.raises(IllegalMoveError):
        game.make_move(0, 0)
    assert game.state == GameState.new_game()
    assert game.get_move_history() == []


def test_session_machine_move():
    """The machine move is legal and is played for the current player."""
    game = ReversiGame()
    result = game.request_machine_move(2)
    assert isinstance(result, SearchResult)
    assert result.move in game.get_valid_moves()
    assert game.state == GameState.new_game(), "Requesting a move must not play it"

    played = game.play_machine_move(2)
    assert played.move == result.move
    assert game.current_player == Color.WHITE


def test_session_machine_move_errors():
    """No machine move when the player must pass, or when the game is over."""
    game = ReversiGame(black_must_pass_state())
    with pytest.raises(NoLegalMoveError):
        game.request_machine_move(3)
    game.pass_turn()
    assert game.get_move_history()[-1]['move'] is None
    assert game.request_machine_move(1).move == Move(0, 2)

    with pytest.raises(ValueError):
        ReversiGame().request_machine_move(0)

    over = ReversiGame(GameState(Board.from_array(np.full((8, 8), int(Color.BLACK)))))
    with pytest.raises(IllegalMoveError):
        over.request_machine_move(2)


def test_machine_plays_a_whole_game():
    """Two depth-1 machine players finish a game."""
    game = ReversiGame()
    while not game.is_game_over():
        if game.state.must_pass():
            game.pass_turn()
        else:
            game.play_machine_move(1)

    black, white = game.get_score()
    assert black + white <= 64
    if black > white:
        assert game.get_winner() == Color.BLACK
    elif white > black:
        assert game.get_winner() == Color.WHITE
    else:
        assert game.get_winner() is None
    assert "Game over!" in str(game)


def test_reset():
    game = ReversiGame()
    game.make_move(2, 3)
    game.reset()
    assert game.state == GameState.new_game()
    assert game.get_move_history() == []


@pytest.mark.parametrize("move", [Move(8, 3), Move(-1, 3), Move(3, 8), Move(0, -1)])
def test_off_board_move_is_illegal(move):
    """A move outside the grid is rejected like any other illegal move."""
    state = GameState.new_game()
    with pytest.raises(IllegalMoveError):
        state.play(move)
    assert state == GameState.new_game()


def test_session_rejects_off_board_move():
    game = ReversiGame()
    with pytest.raises(IllegalMoveError):
        game.make_move(-1, 3)
    with pytest.raises(IllegalMoveError):
        game.make_move(8, 3)
    assert game.get_move_history() == []
