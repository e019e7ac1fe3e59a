"""
Obstacles Tic-Tac-Toe: four in a row on 6x6 while the free space shrinks.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from grid_games.agent.player import Player
from grid_games.core.types import Place
from grid_games.games.board_base import BoardBase
from grid_games.games.game_rules import has_line
from grid_games.ui.ui_base import UIBase

CONNECT = 4
# An obstacle appears after this many moves (one round of both players)
MOVES_PER_OBSTACLE = 2
OBSTACLES_PER_ROUND = 1


class ObstaclesBoard(BoardBase):
    """
    After every round of two moves a random empty cell turns into an
    obstacle. Obstacles never count towards move_count.
    """

    GAME_ID = "obstacles"
    ROWS = 6
    COLUMNS = 6
    OBSTACLE = "#"

    def __init__(self, rng: Optional[np.random.Generator] = None):
        super().__init__()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.moves_this_round = 0

    @classmethod
    def create(cls, *, rng=None, dictionary_path=None) -> "ObstaclesBoard":
        return cls(rng=rng)

    def add_random_obstacles(self, n: int) -> None:
        empties = self.empty_cells()
        if not empties:
            return
        picks = self.rng.permutation(len(empties))[:n]
        for i in picks:
            r, c = empties[int(i)]
            self.grid[r, c] = self.OBSTACLE

    def place(self, move: Place) -> bool:
        if not super().place(move):
            return False
        self.moves_this_round += 1
        if self.moves_this_round == MOVES_PER_OBSTACLE:
            self.add_random_obstacles(OBSTACLES_PER_ROUND)
            self.moves_this_round = 0
        return True

    def is_win(self, player: Player) -> bool:
        return has_line(self.grid, player.symbol, CONNECT)

    def is_lose(self, player: Player) -> bool:
        return has_line(self.grid, self.opponent_symbol(player.symbol), CONNECT)

    def is_draw(self, player: Player) -> bool:
        return self.is_full() and not self.is_win(player) and not self.is_lose(player)


class ObstaclesUI(UIBase):
    TITLE = "Welcome to Obstacles Tic-Tac-Toe!"
    RULES = (
        "Four in a row on a 6x6 grid wins",
        "After every two moves a random empty cell is blocked (#)",
    )
    MOVE_PROMPT = "enter row and column (0 to 5)"
