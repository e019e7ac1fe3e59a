"""
Diamond Tic-Tac-Toe: four in a row on a 25-cell diamond cut out of a 7x7 grid.
"""

from __future__ import annotations

from typing import Dict, Optional

from grid_games.agent.player import Player, Strategy
from grid_games.agent.strategies import first_free_cell
from grid_games.games.board_base import BoardBase
from grid_games.games.game_rules import has_line
from grid_games.ui.ui_base import UIBase

CONNECT = 4
CENTER = 3


def inside_diamond(r: int, c: int) -> bool:
    return abs(r - CENTER) + abs(c - CENTER) <= CENTER


class DiamondBoard(BoardBase):
    """Cells outside the diamond are permanent obstacles."""

    GAME_ID = "diamond"
    ROWS = 7
    COLUMNS = 7
    OBSTACLE = "#"

    def __init__(self):
        super().__init__()
        for r in range(self.rows):
            for c in range(self.columns):
                if not inside_diamond(r, c):
                    self.grid[r, c] = self.OBSTACLE
        self.playable = int((self.grid == self.BLANK).sum())

    def is_win(self, player: Player) -> bool:
        return has_line(self.grid, player.symbol, CONNECT)

    def is_lose(self, player: Player) -> bool:
        return has_line(self.grid, self.opponent_symbol(player.symbol), CONNECT)

    def is_draw(self, player: Player) -> bool:
        return (
            self.move_count >= self.playable
            and not self.is_win(player)
            and not self.is_lose(player)
        )

    def cell_strings(self) -> Dict:
        return {self.BLANK: ".", self.OBSTACLE: " "}


class DiamondUI(UIBase):
    TITLE = "Welcome to Diamond Tic-Tac-Toe!"
    RULES = (
        "Only the cells of the diamond are playable",
        "Four in a row inside the diamond wins",
    )
    MOVE_PROMPT = "enter row and column (0-6)"

    def computer_strategy(self) -> Optional[Strategy]:
        return first_free_cell

    def ai_strategy(self) -> Optional[Strategy]:
        return first_free_cell
