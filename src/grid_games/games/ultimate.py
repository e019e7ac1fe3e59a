"""
Ultimate Tic-Tac-Toe: nine mini-boards inside one main board.

The 9x9 grid is addressed with global (row, column) coordinates; cell
(r, c) belongs to mini-board (r // 3, c // 3).
"""

from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np

from grid_games.agent.player import Player, Strategy
from grid_games.agent.strategies import random_candidate
from grid_games.core.types import Move, Place, Symbol
from grid_games.games.board_base import BoardBase
from grid_games.games.tic_tac_toe import has_three
from grid_games.ui.rendering import render_blocks, render_grid
from grid_games.ui.ui_base import UIBase

MINI = 3
DRAWN = "D"


class UltimateBoard(BoardBase):
    """
    Winning a mini-board claims its cell on the main board; a full
    mini-board with no line is marked drawn. The cell played inside a
    mini-board sends the opponent to the matching mini-board, unless that
    one is already closed, in which case any open mini-board is allowed.
    """

    GAME_ID = "ultimate"
    ROWS = 9
    COLUMNS = 9

    def __init__(self):
        super().__init__()
        self.main = np.full((MINI, MINI), self.BLANK, dtype=object)
        self.active: Optional[Tuple[int, int]] = None

    def mini_board(self, br: int, bc: int) -> np.ndarray:
        return self.grid[br * MINI:(br + 1) * MINI, bc * MINI:(bc + 1) * MINI]

    def is_mini_open(self, br: int, bc: int) -> bool:
        return bool(self.main[br, bc] == self.BLANK)

    def open_minis(self) -> List[Tuple[int, int]]:
        return [(br, bc) for br in range(MINI) for bc in range(MINI) if self.is_mini_open(br, bc)]

    def allows(self, r: int, c: int) -> bool:
        """True if (r, c) is a legal target right now."""
        if not self.is_open(r, c):
            return False
        mini = (r // MINI, c // MINI)
        if not self.is_mini_open(*mini):
            return False
        return self.active is None or mini == self.active

    def place(self, move: Place) -> bool:
        r, c = move.row, move.column
        if not self.allows(r, c):
            return False

        self.grid[r, c] = move.mark
        self.move_count += 1

        br, bc = r // MINI, c // MINI
        mini = self.mini_board(br, bc)
        if has_three(mini, move.mark):
            self.main[br, bc] = move.mark
        elif not np.any(mini == self.BLANK):
            self.main[br, bc] = DRAWN

        target = (r % MINI, c % MINI)
        self.active = target if self.is_mini_open(*target) else None
        return True

    def candidate_moves(self, mark: Symbol) -> List[Move]:
        return [Place(r, c, mark) for r, c in self.empty_cells() if self.allows(r, c)]

    def is_win(self, player: Player) -> bool:
        return has_three(self.main, player.symbol)

    def is_lose(self, player: Player) -> bool:
        return has_three(self.main, self.opponent_symbol(player.symbol))

    def is_draw(self, player: Player) -> bool:
        return (
            not self.open_minis()
            and not self.is_win(player)
            and not self.is_lose(player)
        )


class UltimateUI(UIBase):
    TITLE = "Welcome to Ultimate Tic-Tac-Toe!"
    RULES = (
        "Nine 3x3 boards are arranged in a 3x3 main board",
        "Win a small board to claim its cell on the main board",
        "The cell you play decides which small board your opponent plays next",
        "Three claimed cells in a row on the main board wins",
    )

    def computer_strategy(self) -> Optional[Strategy]:
        return random_candidate(self.rng)

    def get_human_move(self, player: Player) -> Move:
        active = self.board.active
        if active is None:
            self.output("You may play in any open board.")
        else:
            self.output(f"You must play in board ({active[0]}, {active[1]}).")
        return super().get_human_move(player)

    def random_move(self, player: Player) -> Optional[Move]:
        return random_candidate(self.rng)(player)

    def render(self, matrix) -> str:
        main = render_grid(self.board.main, {self.board.BLANK: " ", DRAWN: "-"})
        cells = render_blocks(matrix, MINI, {self.board.BLANK: "."})
        return f"Main board:\n{main}\n\n{cells}"
