"""
Misère Tic-Tac-Toe: the player who completes three in a row loses.
"""

from __future__ import annotations

from typing import Optional

from grid_games.agent.player import Player, Strategy
from grid_games.agent.strategies import minimax_move
from grid_games.games.board_base import BoardBase
from grid_games.games.tic_tac_toe import has_three
from grid_games.ui.ui_base import UIBase


class MisereBoard(BoardBase):
    """
    3x3 board with the objective reversed.

    Completing a line loses (so the opponent wins); filling the board with
    no line on it is a draw.
    """

    GAME_ID = "misere"
    SUPPORTS_UNDO = True

    def is_lose(self, player: Player) -> bool:
        return has_three(self.grid, player.symbol)

    def is_win(self, player: Player) -> bool:
        return has_three(self.grid, self.opponent_symbol(player.symbol))

    def is_draw(self, player: Player) -> bool:
        return self.is_full() and not self.is_win(player) and not self.is_lose(player)


class MisereUI(UIBase):
    TITLE = "Welcome to Misère Tic-Tac-Toe!"
    RULES = (
        "Three in a row LOSES",
        "Force your opponent to complete a line",
    )
    MOVE_PROMPT = "enter row and column (0 to 2)"

    def ai_strategy(self) -> Optional[Strategy]:
        return minimax_move
