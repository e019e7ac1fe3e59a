"""
4x4 sliding Tic-Tac-Toe: pieces start on the edges and move one step at a time.
"""

from __future__ import annotations

from typing import List, Optional

from grid_games.agent.player import Player, Strategy
from grid_games.agent.strategies import random_candidate
from grid_games.core.types import Move, MoveSequence, Place, Remove, Symbol, slide
from grid_games.games.board_base import BoardBase
from grid_games.games.game_rules import has_line
from grid_games.ui.ui_base import UIBase

RUN = 3
STEPS = ((0, 1), (0, -1), (1, 0), (-1, 0))


class FourByFourBoard(BoardBase):
    """
    Rows 0 and 3 start filled with alternating O/X pieces.

    The only legal move is a relocation: MoveSequence(Remove(src),
    Place(dst, mark)) where src holds the mover's piece and dst is an
    orthogonally adjacent empty cell. move_count counts relocations.
    """

    GAME_ID = "four_by_four"
    ROWS = 4
    COLUMNS = 4

    def __init__(self):
        super().__init__()
        for r in (0, self.rows - 1):
            for c in range(self.columns):
                self.grid[r, c] = "O" if (r + c) % 2 == 0 else "X"

    def place(self, move: Place) -> bool:
        return False

    def apply_sequence(self, move: MoveSequence) -> bool:
        if len(move.steps) != 2:
            return False
        src, dst = move.steps
        if not isinstance(src, Remove) or not isinstance(dst, Place):
            return False
        if not self.in_bounds(src.row, src.column) or not self.is_open(dst.row, dst.column):
            return False
        if self.grid[src.row, src.column] != dst.mark:
            return False
        if abs(src.row - dst.row) + abs(src.column - dst.column) != 1:
            return False

        self.grid[src.row, src.column] = self.BLANK
        self.grid[dst.row, dst.column] = dst.mark
        self.move_count += 1
        return True

    def candidate_moves(self, mark: Symbol) -> List[Move]:
        moves: List[Move] = []
        for r in range(self.rows):
            for c in range(self.columns):
                if self.grid[r, c] != mark:
                    continue
                for dr, dc in STEPS:
                    if self.is_open(r + dr, c + dc):
                        moves.append(slide((r, c), (r + dr, c + dc), mark))
        return moves

    def is_win(self, player: Player) -> bool:
        return has_line(self.grid, player.symbol, RUN)

    def is_lose(self, player: Player) -> bool:
        return has_line(self.grid, self.opponent_symbol(player.symbol), RUN)

    def is_draw(self, player: Player) -> bool:
        return False


class FourByFourUI(UIBase):
    TITLE = "Welcome to 4x4 Tic-Tac-Toe!"
    RULES = (
        "Move one of your pieces to an adjacent empty cell (no diagonals)",
        "Three in a row wins",
    )

    def computer_strategy(self) -> Optional[Strategy]:
        return random_candidate(self.rng)

    def get_human_move(self, player: Player) -> Move:
        limits = [(0, self.board.rows - 1), (0, self.board.columns - 1)]
        src = self.read_ints(
            f"{player.name} ({player.symbol}), enter the piece to move (row column): ", limits
        )
        dst = self.read_ints("Enter the destination (row column): ", limits)
        return slide(tuple(src), tuple(dst), player.symbol)

    def random_move(self, player: Player) -> Optional[Move]:
        return random_candidate(self.rng)(player)
