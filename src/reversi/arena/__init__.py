"""
Arena module for running matches between machine players.
"""
from .arena import Arena, GameRecord, MatchResult, Player, RandomPlayer, SearchPlayer

__all__ = ['Arena', 'GameRecord', 'MatchResult', 'Player', 'RandomPlayer', 'SearchPlayer']
