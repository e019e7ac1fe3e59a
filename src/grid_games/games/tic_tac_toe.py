"""
Classic 3x3 Tic-Tac-Toe.

Also provides the 3x3 line table reused by the other 3x3 variants.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from grid_games.agent.player import Player, Strategy
from grid_games.agent.strategies import minimax_move
from grid_games.games.board_base import BoardBase
from grid_games.ui.ui_base import UIBase

# Pre-computed winning lines (indices into flattened 3x3 board)
WIN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # cols
    (0, 4, 8), (2, 4, 6),             # diagonals
)


def has_three(grid: np.ndarray, symbol) -> bool:
    """True if ``symbol`` fills a row, column or diagonal of a 3x3 grid."""
    flat = grid.ravel()
    for a, b, c in WIN_LINES:
        if flat[a] == symbol and flat[b] == symbol and flat[c] == symbol:
            return True
    return False


class TicTacToeBoard(BoardBase):
    """Three in a row wins; a full board without a line is a draw."""

    GAME_ID = "tic_tac_toe"
    SUPPORTS_UNDO = True

    def is_win(self, player: Player) -> bool:
        return has_three(self.grid, player.symbol)

    def is_lose(self, player: Player) -> bool:
        return has_three(self.grid, self.opponent_symbol(player.symbol))

    def is_draw(self, player: Player) -> bool:
        return (
            self.move_count == self.rows * self.columns
            and not self.is_win(player)
            and not self.is_lose(player)
        )


class TicTacToeUI(UIBase):
    TITLE = "Welcome to Tic-Tac-Toe!"
    MOVE_PROMPT = "enter row and column (0 to 2)"

    def ai_strategy(self) -> Optional[Strategy]:
        return minimax_move
