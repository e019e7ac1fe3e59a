"""
Pyramid Tic-Tac-Toe on a 1-3-5 triangle of cells.
"""

from __future__ import annotations

from typing import Dict, Optional

from grid_games.agent.player import Player, Strategy
from grid_games.agent.strategies import minimax_move
from grid_games.games.board_base import BoardBase
from grid_games.ui.ui_base import UIBase

# Playable cells per row of the 3x5 grid
PYRAMID_ROWS = ((2,), (1, 2, 3), (0, 1, 2, 3, 4))

WIN_LINES = (
    ((0, 2), (1, 2), (2, 2)),  # vertical middle
    ((2, 0), (2, 1), (2, 2)),  # bottom left
    ((2, 1), (2, 2), (2, 3)),  # bottom middle
    ((2, 2), (2, 3), (2, 4)),  # bottom right
    ((1, 1), (1, 2), (1, 3)),  # middle row
    ((0, 2), (1, 1), (2, 0)),  # left edge
    ((0, 2), (1, 3), (2, 4)),  # right edge
)


class PyramidBoard(BoardBase):
    """Cells outside the pyramid are obstacles; 9 playable cells, 7 lines."""

    GAME_ID = "pyramid"
    ROWS = 3
    COLUMNS = 5
    OBSTACLE = "#"
    SUPPORTS_UNDO = True

    def __init__(self):
        super().__init__()
        for r, playable in enumerate(PYRAMID_ROWS):
            for c in range(self.columns):
                if c not in playable:
                    self.grid[r, c] = self.OBSTACLE
        self.playable = sum(len(row) for row in PYRAMID_ROWS)

    def _has_line(self, symbol) -> bool:
        return any(all(self.grid[r, c] == symbol for r, c in line) for line in WIN_LINES)

    def is_win(self, player: Player) -> bool:
        return self._has_line(player.symbol)

    def is_lose(self, player: Player) -> bool:
        return self._has_line(self.opponent_symbol(player.symbol))

    def is_draw(self, player: Player) -> bool:
        return (
            self.move_count >= self.playable
            and not self.is_win(player)
            and not self.is_lose(player)
        )

    def cell_strings(self) -> Dict:
        return {self.BLANK: ".", self.OBSTACLE: " "}


class PyramidUI(UIBase):
    TITLE = "Welcome to Pyramid Tic-Tac-Toe!"
    RULES = (
        "The board is a pyramid: 1 cell on top, 3 in the middle, 5 at the bottom",
        "Three in a row (horizontal, vertical or diagonal) wins",
    )
    MOVE_PROMPT = "enter row (0-2) and column (0-4)"

    def ai_strategy(self) -> Optional[Strategy]:
        return minimax_move
