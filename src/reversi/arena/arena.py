"""
Arena for running matches between machine players.
"""
import logging
import json
import os
import time
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass, field
from typing import Dict, List, Optional

import numpy as np
from tqdm import tqdm

from ..game import Color, GameResult, GameState, Move, format_move
from ..search import Searcher, validate_depth

logger = logging.getLogger(__name__)


class Player(ABC):
    """A participant in the arena."""

    def __init__(self, player_id: str):
        self.player_id = player_id
        self.nodes_visited = 0

    @abstractmethod
    def get_move(self, state: GameState) -> Move:
        """Choose a move for a state that has at least one legal move."""

    def reset(self):
        """Reset per-game counters."""
        self.nodes_visited = 0


class SearchPlayer(Player):
    """Plays the move found by a fixed-depth search."""

    def __init__(self, player_id: str, searcher: Searcher, depth: int):
        super().__init__(player_id)
        validate_depth(depth)
        self.searcher = searcher
        self.depth = depth

    def get_move(self, state: GameState) -> Move:
        result = self.searcher.search(state, self.depth)
        self.nodes_visited += result.nodes_visited
        return result.move


class RandomPlayer(Player):
    """Plays a uniformly random legal move."""

    def __init__(self, player_id: str, seed: Optional[int] = None):
        super().__init__(player_id)
        self.rng = np.random.default_rng(seed)

    def get_move(self, state: GameState) -> Move:
        moves = state.legal_moves()
        return moves[int(self.rng.integers(len(moves)))]


@dataclass
class GameRecord:
    black: str
    white: str
    result: str
    black_discs: int
    white_discs: int
    plies: int
    passes: int
    nodes: Dict[str, int] = field(default_factory=dict)

    @property
    def winner(self) -> Optional[str]:
        if self.result == GameResult.BLACK_WIN.value:
            return self.black
        if self.result == GameResult.WHITE_WIN.value:
            return self.white
        return None


@dataclass
class MatchResult:
    player_a: str
    player_b: str
    wins_a: int = 0
    wins_b: int = 0
    draws: int = 0
    games: List[GameRecord] = field(default_factory=list)

    @property
    def games_played(self) -> int:
        return len(self.games)

    def score_a(self) -> float:
        """Share of points for player A: 1 per win, 0.5 per draw."""
        return (self.wins_a + 0.5 * self.draws) / max(1, self.games_played)

    def to_dict(self) -> Dict:
        data = asdict(self)
        data['score_a'] = self.score_a()
        return data


class Arena:
    """Arena for running games between two players."""

    def __init__(self, verbose: bool = False):
        """
        Initialize the arena.

        Args:
            verbose: Whether to log every move
        """
        self.verbose = verbose

    def play_game(self, black: Player, white: Player) -> GameRecord:
        """
        Play a single game.

        Args:
            black: Player moving first
            white: Player moving second

        Returns:
            GameRecord describing the finished game
        """
        black.reset()
        white.reset()
        players = {Color.BLACK: black, Color.WHITE: white}
        state = GameState.new_game()
        plies = 0
        passes = 0

        while not state.is_terminal():
            current = players[state.current_player]
            if state.must_pass():
                state = state.pass_turn()
                passes += 1
                if self.verbose:
                    logger.info("%s passes", current.player_id)
                continue

            move = current.get_move(state)
            state = state.play(move)
            plies += 1
            if self.verbose:
                logger.info("%s plays %s", current.player_id, format_move(move))

        black_discs, white_discs = state.get_score()
        record = GameRecord(
            black=black.player_id,
            white=white.player_id,
            result=state.result.value,
            black_discs=black_discs,
            white_discs=white_discs,
            plies=plies,
            passes=passes,
            nodes={black.player_id: black.nodes_visited, white.player_id: white.nodes_visited},
        )
        logger.debug("Game finished: %s", record)
        return record

    def run_match(self, player_a: Player, player_b: Player, games: int = 10,
                  show_progress: bool = True) -> MatchResult:
        """
        Play ``games`` games, alternating colors (player A is Black first).

        Returns:
            MatchResult with the tally and every game record
        """
        if games < 1:
            raise ValueError("A match needs at least one game")
        if player_a.player_id == player_b.player_id:
            raise ValueError("Players need distinct ids")

        match = MatchResult(player_a=player_a.player_id, player_b=player_b.player_id)
        start_time = time.time()
        for game_num in tqdm(range(games), desc=f"{player_a.player_id} vs {player_b.player_id}",
                             disable=not show_progress):
            if game_num % 2 == 0:
                record = self.play_game(player_a, player_b)
            else:
                record = self.play_game(player_b, player_a)

            winner = record.winner
            if winner == player_a.player_id:
                match.wins_a += 1
            elif winner == player_b.player_id:
                match.wins_b += 1
            else:
                match.draws += 1
            match.games.append(record)

        logger.info("Match %s vs %s: %d-%d-%d in %.1fs", player_a.player_id, player_b.player_id,
                    match.wins_a, match.wins_b, match.draws, time.time() - start_time)
        return match

    @staticmethod
    def save_results(match: MatchResult, filepath: str):
        """Save match results to a JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(match.to_dict(), f, indent=2)
