"""
Agent module - players and their move strategies.
"""

from grid_games.agent.player import Player, Strategy
from grid_games.agent.strategies import first_free_cell, minimax_move, random_candidate

__all__ = [
    "Player",
    "Strategy",
    "first_free_cell",
    "minimax_move",
    "random_candidate",
]
