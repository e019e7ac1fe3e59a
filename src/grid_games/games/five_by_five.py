"""
5x5 Tic-Tac-Toe scored by counting three-in-a-row runs.
"""

from __future__ import annotations

from typing import Tuple

from grid_games.agent.player import Player
from grid_games.games.board_base import BoardBase
from grid_games.games.game_rules import count_lines
from grid_games.ui.ui_base import UIBase

RUN = 3
# The game stops with one cell left so both players made 12 moves
FINAL_MOVE_COUNT = 24


class FiveByFiveBoard(BoardBase):
    """After 24 moves, whoever owns more (overlapping) runs of three wins."""

    GAME_ID = "five_by_five"
    ROWS = 5
    COLUMNS = 5

    def score(self, symbol) -> int:
        return count_lines(self.grid, symbol, RUN)

    def _scores(self, player: Player) -> Tuple[int, int]:
        return self.score(player.symbol), self.score(self.opponent_symbol(player.symbol))

    def game_is_over(self, player: Player) -> bool:
        return self.move_count >= FINAL_MOVE_COUNT

    def is_win(self, player: Player) -> bool:
        if not self.game_is_over(player):
            return False
        mine, theirs = self._scores(player)
        return mine > theirs

    def is_lose(self, player: Player) -> bool:
        if not self.game_is_over(player):
            return False
        mine, theirs = self._scores(player)
        return mine < theirs

    def is_draw(self, player: Player) -> bool:
        if not self.game_is_over(player):
            return False
        mine, theirs = self._scores(player)
        return mine == theirs


class FiveByFiveUI(UIBase):
    TITLE = "Welcome to 5x5 Tic-Tac-Toe!"
    RULES = (
        "The game stops after 24 moves",
        "Every three-in-a-row you own counts one point",
        "Most points wins",
    )
    MOVE_PROMPT = "enter row and column (0-4)"

    def show_board(self) -> None:
        super().show_board()
        x, o = self.board.SYMBOLS
        self.output(f"Runs of three -> {x}: {self.board.score(x)} | {o}: {self.board.score(o)}")
