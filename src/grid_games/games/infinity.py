"""
Infinity Tic-Tac-Toe: each player keeps at most three pieces on the board.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Dict, Tuple

from grid_games.agent.player import Player
from grid_games.core.types import Place
from grid_games.games.board_base import BoardBase
from grid_games.games.tic_tac_toe import has_three
from grid_games.ui.ui_base import UIBase

MAX_PIECES = 3


class InfinityBoard(BoardBase):
    """
    Placing a fourth piece clears that player's oldest one.

    move_count is the net number of pieces on the board. There is no draw:
    the game runs until someone completes a line.
    """

    GAME_ID = "infinity"

    def __init__(self):
        super().__init__()
        self.history: Dict[object, Deque[Tuple[int, int]]] = {s: deque() for s in self.SYMBOLS}

    def place(self, move: Place) -> bool:
        if move.mark not in self.history:
            return False
        if not super().place(move):
            return False

        pieces = self.history[move.mark]
        pieces.append((move.row, move.column))
        if len(pieces) > MAX_PIECES:
            r, c = pieces.popleft()
            self.grid[r, c] = self.BLANK
            self.move_count -= 1
        return True

    def oldest_piece(self, symbol) -> Tuple[int, int]:
        """Cell that will vanish on ``symbol``'s next placement, if full."""
        return self.history[symbol][0]

    def is_win(self, player: Player) -> bool:
        return has_three(self.grid, player.symbol)

    def is_lose(self, player: Player) -> bool:
        return has_three(self.grid, self.opponent_symbol(player.symbol))

    def is_draw(self, player: Player) -> bool:
        return False


class InfinityUI(UIBase):
    TITLE = "Welcome to Infinity Tic-Tac-Toe!"
    RULES = (
        f"Each player keeps at most {MAX_PIECES} marks; placing another removes your oldest",
        "Align three marks before they vanish",
        "The game continues until someone wins",
    )
    MOVE_PROMPT = "enter your move (row and column, 0-2)"

    def get_move(self, player: Player):
        pieces = self.board.history[player.symbol]
        if player.is_human and len(pieces) == MAX_PIECES:
            r, c = self.board.oldest_piece(player.symbol)
            self.output(f"Your mark at ({r}, {c}) will vanish after this move.")
        return super().get_move(player)
