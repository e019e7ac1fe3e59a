"""
SUS: one player places S, the other U; every S-U-S formed scores.
"""

from __future__ import annotations

from grid_games.agent.player import Player
from grid_games.core.types import Move, Place
from grid_games.games.board_base import BoardBase
from grid_games.ui.ui_base import UIBase

# All eight neighbour directions (an S can be either end of a sequence)
NEIGHBOURS = ((0, 1), (0, -1), (1, 0), (-1, 0), (1, 1), (-1, -1), (1, -1), (-1, 1))
# Four axes through a U (it is always the middle letter)
AXES = ((0, 1), (1, 0), (1, 1), (1, -1))


class SUSBoard(BoardBase):
    """
    Scores are credited to the letter that completed the sequence.

    The game ends after 9 placements; the higher score wins.
    """

    GAME_ID = "sus"
    SYMBOLS = ("S", "U")

    def __init__(self):
        super().__init__()
        self.scores = {"S": 0, "U": 0}

    def _letter_at(self, r: int, c: int):
        return self.grid[r, c] if self.in_bounds(r, c) else None

    def sequences_at(self, r: int, c: int) -> int:
        """S-U-S sequences passing through (r, c) given its current letter."""
        letter = self.grid[r, c]
        count = 0
        if letter == "S":
            for dr, dc in NEIGHBOURS:
                if (self._letter_at(r + dr, c + dc) == "U"
                        and self._letter_at(r + 2 * dr, c + 2 * dc) == "S"):
                    count += 1
        elif letter == "U":
            for dr, dc in AXES:
                if (self._letter_at(r - dr, c - dc) == "S"
                        and self._letter_at(r + dr, c + dc) == "S"):
                    count += 1
        return count

    def place(self, move: Place) -> bool:
        if move.mark not in self.SYMBOLS:
            return False
        if not super().place(move):
            return False
        self.scores[move.mark] += self.sequences_at(move.row, move.column)
        return True

    def _scores(self, player: Player):
        mine = self.scores[player.symbol]
        theirs = self.scores[self.opponent_symbol(player.symbol)]
        return mine, theirs

    def game_is_over(self, player: Player) -> bool:
        return self.move_count >= self.rows * self.columns

    def is_win(self, player: Player) -> bool:
        mine, theirs = self._scores(player)
        return self.game_is_over(player) and mine > theirs

    def is_lose(self, player: Player) -> bool:
        mine, theirs = self._scores(player)
        return self.game_is_over(player) and mine < theirs

    def is_draw(self, player: Player) -> bool:
        mine, theirs = self._scores(player)
        return self.game_is_over(player) and mine == theirs


class SUSUI(UIBase):
    TITLE = "Welcome to the SUS Game!"
    RULES = (
        "Player 1 places 'S', player 2 places 'U'",
        "Every S-U-S line you complete scores a point",
        "Highest score after 9 moves wins",
    )
    MOVE_PROMPT = "enter row and column (0-2)"

    def player_label(self, index: int, symbol) -> str:
        return f"Player {index + 1} (plays '{symbol}')"

    def get_move(self, player: Player) -> Move:
        scores = self.board.scores
        self.output(f"Current score -> S: {scores['S']} | U: {scores['U']}")
        return super().get_move(player)
