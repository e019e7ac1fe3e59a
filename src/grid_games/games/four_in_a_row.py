"""
Four-in-a-Row (Connect Four) on a 6x7 grid with gravity.
"""

from __future__ import annotations

from typing import List, Optional

from grid_games.agent.player import Player
from grid_games.core.types import Move, Place, Symbol
from grid_games.games.board_base import BoardBase
from grid_games.games.game_rules import has_line
from grid_games.ui.ui_base import UIBase

CONNECT = 4


class FourInARowBoard(BoardBase):
    """
    Pieces drop to the lowest empty row of the chosen column.

    The row of a Place is ignored; only its column matters.
    """

    GAME_ID = "four_in_a_row"
    ROWS = 6
    COLUMNS = 7

    def lowest_empty_row(self, column: int) -> Optional[int]:
        """Landing row for ``column``, or None if it is full or off the board."""
        if not 0 <= column < self.columns:
            return None
        for row in range(self.rows - 1, -1, -1):
            if self.is_empty(row, column):
                return row
        return None

    def place(self, move: Place) -> bool:
        row = self.lowest_empty_row(move.column)
        if row is None:
            return False
        self.grid[row, move.column] = move.mark
        self.move_count += 1
        return True

    def candidate_moves(self, mark: Symbol) -> List[Move]:
        moves: List[Move] = []
        for column in range(self.columns):
            row = self.lowest_empty_row(column)
            if row is not None:
                moves.append(Place(row, column, mark))
        return moves

    def is_win(self, player: Player) -> bool:
        return has_line(self.grid, player.symbol, CONNECT)

    def is_lose(self, player: Player) -> bool:
        return has_line(self.grid, self.opponent_symbol(player.symbol), CONNECT)

    def is_draw(self, player: Player) -> bool:
        return (
            self.move_count >= self.rows * self.columns
            and not self.is_win(player)
            and not self.is_lose(player)
        )


class FourInARowUI(UIBase):
    TITLE = "Welcome to Four-in-a-Row (Connect Four)!"
    RULES = (
        "6x7 grid; choose a column (0-6)",
        "Your piece falls to the lowest free cell of that column",
        "Four in a row (horizontal, vertical or diagonal) wins",
        "A full board with no winner is a draw",
    )

    def get_human_move(self, player: Player) -> Move:
        (column,) = self.read_ints(
            f"{player.name} ({player.symbol}), enter column number (0-{self.board.columns - 1}): ",
            [(0, self.board.columns - 1)],
        )
        return Place(0, column, player.symbol)

    def random_move(self, player: Player) -> Optional[Move]:
        """Random column whose top cell is free; scan left to right after 50 misses."""
        board = self.board
        for _ in range(self.MAX_RANDOM_SAMPLES):
            column = int(self.rng.integers(board.columns))
            if board.is_empty(0, column):
                return Place(0, column, player.symbol)

        for column in range(board.columns):
            if board.is_empty(0, column):
                return Place(0, column, player.symbol)
        return None

    def report_invalid_move(self, player: Player) -> None:
        if player.is_human:
            self.output("That column is full! Try another column.")
