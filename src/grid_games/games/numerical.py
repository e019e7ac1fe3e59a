"""
Numerical Tic-Tac-Toe: odd against even numbers, lines summing to 15 win.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import numpy as np

from grid_games.agent.player import Player
from grid_games.core.types import Move, Place, Symbol
from grid_games.games.board_base import BoardBase
from grid_games.ui.ui_base import UIBase

TARGET_SUM = 15

# Player symbol -> numbers that player may place
NUMBERS: Dict[int, Tuple[int, ...]] = {
    1: (1, 3, 5, 7, 9),
    2: (2, 4, 6, 8),
}

_LINES = (
    ((0, 0), (0, 1), (0, 2)), ((1, 0), (1, 1), (1, 2)), ((2, 0), (2, 1), (2, 2)),
    ((0, 0), (1, 0), (2, 0)), ((0, 1), (1, 1), (2, 1)), ((0, 2), (1, 2), (2, 2)),
    ((0, 0), (1, 1), (2, 2)), ((0, 2), (1, 1), (2, 0)),
)


class NumericalBoard(BoardBase):
    """
    Integer grid: 0 is blank, placed cells hold the number played.

    Each number 1-9 can be used once in the whole game. The set of used
    numbers is read off the grid, so an undo (Remove) frees its number.
    The board does not check parity; the UI only offers a player its own
    numbers.
    """

    GAME_ID = "numerical"
    BLANK = 0
    DTYPE = np.int8
    SYMBOLS = (1, 2)
    SUPPORTS_UNDO = True

    def used_numbers(self) -> set:
        return set(int(v) for v in self.grid[self.grid != self.BLANK])

    def available_numbers(self, symbol: Symbol) -> List[int]:
        used = self.used_numbers()
        return [n for n in NUMBERS[symbol] if n not in used]

    def place(self, move: Place) -> bool:
        number = move.mark
        if not isinstance(number, (int, np.integer)) or not 1 <= number <= 9:
            return False
        if number in self.used_numbers():
            return False
        return super().place(move)

    def candidate_moves(self, mark: Symbol) -> List[Move]:
        numbers = self.available_numbers(mark)
        return [Place(r, c, n) for r, c in self.empty_cells() for n in numbers]

    def has_fifteen(self) -> bool:
        for line in _LINES:
            values = [int(self.grid[r, c]) for r, c in line]
            if self.BLANK not in values and sum(values) == TARGET_SUM:
                return True
        return False

    def is_win(self, player: Player) -> bool:
        return self.has_fifteen()

    def is_lose(self, player: Player) -> bool:
        return False

    def is_draw(self, player: Player) -> bool:
        return self.is_full() and not self.has_fifteen()

    def cell_strings(self) -> Dict:
        return {self.BLANK: " "}


class NumericalUI(UIBase):
    TITLE = "Welcome to Numerical Tic-Tac-Toe!"
    RULES = (
        "Player 1 uses ODD numbers: 1, 3, 5, 7, 9",
        "Player 2 uses EVEN numbers: 2, 4, 6, 8",
        "Each number can only be used once",
        "Win by completing a row, column or diagonal that sums to 15",
    )

    def player_label(self, index: int, symbol) -> str:
        parity = "Odd" if symbol == 1 else "Even"
        return f"Player {index + 1} ({parity} numbers)"

    def get_human_move(self, player: Player) -> Move:
        available = self.board.available_numbers(player.symbol)
        self.output(f"{player.name}'s turn. Available numbers: {' '.join(map(str, available))}")
        while True:
            (number,) = self.read_ints("Enter the number you want to place: ", [(1, 9)])
            if number in available:
                break
            self.output("Invalid number! Choose from the available numbers.")
        r, c = self.read_ints("Enter position (row and column, 0-2): ", [(0, 2), (0, 2)])
        return Place(r, c, number)

    def random_move(self, player: Player) -> Optional[Move]:
        available = self.board.available_numbers(player.symbol)
        cell = super().random_move(player)
        if not available or cell is None:
            return None
        number = available[int(self.rng.integers(len(available)))]
        return Place(cell.row, cell.column, number)
