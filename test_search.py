"""
Tests for minimax and alpha-beta search.
"""
import numpy as np
import pytest

from reversi.config import SearchConfig
from reversi.evaluation import PositionalEvaluator
from reversi.game import Board, Color, GameState, Move
from reversi.search import (
    AlphaBetaSearch,
    MinimaxSearch,
    SearchResult,
    build_searcher,
)

SEARCHERS = [MinimaxSearch, AlphaBetaSearch]


def board_with(black=(), white=()):
    board = Board.empty()
    for row, col in black:
        board.set_cell(row, col, Color.BLACK)
    for row, col in white:
        board.set_cell(row, col, Color.WHITE)
    return board


def dominant_capture_state():
    """
    Black can play (2, 7) flipping one disc, or (7, 6) flipping
    the five white discs on the bottom row.
    """
    board = board_with(black=[(0, 7), (7, 0)],
                       white=[(1, 7), (7, 1), (7, 2), (7, 3), (7, 4), (7, 5)])
    return GameState(board, Color.BLACK)


@pytest.mark.parametrize("searcher_cls", SEARCHERS)
@pytest.mark.parametrize("depth", [0, 11, -1, 2.5, True])
def test_depth_validation(searcher_cls, depth):
    """Depth must be an integer between 1 and 10."""
    with pytest.raises(ValueError):
        searcher_cls().search(GameState.new_game(), depth)


@pytest.mark.parametrize("searcher_cls", SEARCHERS)
def test_depth_one_takes_the_dominant_capture(searcher_cls):
    """At depth 1 the score is the disc differential right after the move."""
    state = dominant_capture_state()
    assert [m.as_tuple() for m in state.legal_moves()] == [(2, 7), (7, 6)]

    result = searcher_cls().search(state, 1)
    assert result.move == Move(7, 6)
    # Black: 2 + 1 placed + 5 flipped, White: 1 left.
    assert result.score == 7
    assert result.depth == 1
    assert result.nodes_visited == 3


@pytest.mark.parametrize("searcher_cls", SEARCHERS)
def test_opening_tie_break_picks_first_move(searcher_cls):
    """All four openings score the same; the first in row-major order wins."""
    result = searcher_cls().search(GameState.new_game(), 1)
    assert result.move == Move(2, 3)
    assert result.score == 3


def test_node_counts_from_the_opening():
    """Minimax visits the root, 4 openings and 3 replies to each."""
    state = GameState.new_game()
    assert MinimaxSearch().search(state, 1).nodes_visited == 5
    assert MinimaxSearch().search(state, 2).nodes_visited == 1 + 4 + 4 * 3
    assert AlphaBetaSearch().search(state, 1).nodes_visited == 5
    assert AlphaBetaSearch().search(state, 2).nodes_visited <= 17


@pytest.mark.parametrize("searcher_cls", SEARCHERS)
def test_search_does_not_touch_the_state(searcher_cls):
    """The searched state stays exactly as it was."""
    state = GameState.new_game().play(Move(2, 3))
    snapshot = state.copy()
    result = searcher_cls().search(state, 3)
    assert state == snapshot
    assert result.move in state.legal_moves()


@pytest.mark.parametrize("searcher_cls", SEARCHERS)
def test_search_when_the_mover_must_pass(searcher_cls):
    """A mover without legal moves gets no move but a searched score."""
    state = GameState(board_with(black=[(0, 1)], white=[(0, 0)]), Color.BLACK)
    result = searcher_cls().search(state, 2)
    assert isinstance(result, SearchResult)
    assert result.is_pass
    # Black passes, White plays (0, 2) and wins all three discs.
    assert result.score == -3
    assert result.nodes_visited == 3


@pytest.mark.parametrize("searcher_cls", SEARCHERS)
def test_search_on_a_terminal_state(searcher_cls):
    """A finished game is just evaluated."""
    full = Board.from_array(np.full((8, 8), int(Color.WHITE)))
    result = searcher_cls().search(GameState(full, Color.BLACK), 4)
    assert result.move is None
    assert result.score == -64
    assert result.nodes_visited == 1


@pytest.mark.parametrize("searcher_cls", SEARCHERS)
def test_search_sees_through_a_pass(searcher_cls):
    """A pass inside the tree costs one ply and keeps the game going."""
    # After White plays (0, 2) neither side can move: two passes end the game.
    board = board_with(black=[(0, 1), (1, 7)], white=[(0, 0), (3, 7)])
    state = GameState(board, Color.WHITE)
    result = searcher_cls().search(state, 3)
    assert result.move == Move(0, 2)
    assert result.score == 4 - 1
    # root, the move, Black's pass, White's pass
    assert result.nodes_visited == 4


def test_positional_evaluator_search():
    """Both searches run with the positional evaluator and pick a legal move."""
    state = GameState.new_game().play(Move(2, 3)).play(Move(2, 2))
    evaluator = PositionalEvaluator()
    minimax = MinimaxSearch(evaluator).search(state, 3)
    alphabeta = AlphaBetaSearch(evaluator).search(state, 3)
    assert minimax.move in state.legal_moves()
    assert (minimax.move, minimax.score) == (alphabeta.move, alphabeta.score)


def test_alphabeta_prunes_from_the_opening():
    """From the opening at depth 4 alpha-beta skips part of the tree."""
    state = GameState.new_game()
    minimax = MinimaxSearch().search(state, 4)
    alphabeta = AlphaBetaSearch().search(state, 4)
    assert alphabeta.move == minimax.move
    assert alphabeta.score == minimax.score
    assert alphabeta.nodes_visited < minimax.nodes_visited


def test_build_searcher():
    assert isinstance(build_searcher(), AlphaBetaSearch)
    assert isinstance(build_searcher(SearchConfig(algorithm='alphabeta')), AlphaBetaSearch)
    assert isinstance(build_searcher(SearchConfig(algorithm='minimax')), MinimaxSearch)

    evaluator = PositionalEvaluator()
    assert build_searcher(evaluator=evaluator).evaluator is evaluator
