"""
Memory Tic-Tac-Toe: standard rules, but placed marks are hidden.
"""

from __future__ import annotations

import numpy as np

from grid_games.agent.player import Player
from grid_games.core.types import Move
from grid_games.games.tic_tac_toe import TicTacToeBoard, TicTacToeUI
from grid_games.ui.ui_base import KIND_LABELS

HIDDEN = "?"


class MemoryBoard(TicTacToeBoard):
    """The real marks decide the game; players only ever see ``?``."""

    GAME_ID = "memory"

    def hidden_matrix(self) -> np.ndarray:
        """Grid as shown to players: every placed mark replaced by '?'."""
        return np.where(self.grid == self.BLANK, self.BLANK, HIDDEN).astype(object)


class MemoryUI(TicTacToeUI):
    TITLE = "Welcome to Memory Tic-Tac-Toe!"
    RULES = ("Marks are hidden after placement. Remember where you played!",)

    def show_board(self) -> None:
        self.display_board_matrix(self.board.hidden_matrix())

    def announce_move(self, player: Player, move: Move) -> None:
        if not player.is_human:
            self.output(f"{KIND_LABELS[player.kind]} {player.name} has played.")
