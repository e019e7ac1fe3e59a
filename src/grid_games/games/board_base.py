"""
BoardBase - abstract base class for every grid game variant.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional, Tuple, TYPE_CHECKING

import numpy as np

from grid_games.core.types import Move, MoveSequence, Place, Remove, Symbol
from grid_games.games import game_rules

if TYPE_CHECKING:
    from grid_games.agent.player import Player


class BoardBase(ABC):
    """
    Abstract base class for all boards.

    IMPORTANT ARCHITECTURE NOTE:
    -----------------------------
    - update_board() is the ONLY mutation entry point. It returns False for
      any illegal move and must leave the board untouched when it does.
    - is_win / is_lose / is_draw are pure queries.
    - game_is_over() must stay equivalent to win OR lose OR draw.
    - An update may change more than the target cell (expiring pieces,
      obstacles, claimed sub-boards); the grid must reflect all of it.

    Variants override place() / remove() / apply_sequence() rather than
    update_board(), which only dispatches on the move type.
    """

    GAME_ID: str = ""
    ROWS: int = 3
    COLUMNS: int = 3
    BLANK: Symbol = "."
    OBSTACLE: Optional[Symbol] = None
    DTYPE = object
    SYMBOLS: Tuple[Symbol, Symbol] = ("X", "O")
    # True if Remove undoes a placement exactly (required by minimax search)
    SUPPORTS_UNDO: bool = False

    def __init__(self):
        self.rows = self.ROWS
        self.columns = self.COLUMNS
        self.grid = np.full((self.rows, self.columns), self.BLANK, dtype=self.DTYPE)
        self.move_count = 0

    @classmethod
    def create(
        cls,
        *,
        rng: Optional[np.random.Generator] = None,
        dictionary_path: Optional[Path] = None,
    ) -> "BoardBase":
        """Build a fresh board; variants needing resources pick them out."""
        return cls()

    def game_id(self) -> str:
        return self.GAME_ID

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def update_board(self, move: Move) -> bool:
        """
        Apply a move. Returns True on success, False (with no state change)
        if the move is illegal for the current position.
        """
        if isinstance(move, MoveSequence):
            if not move.steps:
                return False
            return self.apply_sequence(move)
        if isinstance(move, Remove):
            return self.remove(move)
        if isinstance(move, Place):
            return self.place(move)
        return False

    def place(self, move: Place) -> bool:
        """Default placement: target must be an in-bounds blank cell."""
        if not self.is_open(move.row, move.column):
            return False
        self.grid[move.row, move.column] = move.mark
        self.move_count += 1
        return True

    def remove(self, move: Remove) -> bool:
        """Default undo: clear a placed mark when the variant allows it."""
        if not self.SUPPORTS_UNDO or not self.in_bounds(move.row, move.column):
            return False
        cell = self.grid[move.row, move.column]
        if cell == self.BLANK or self.is_obstacle(move.row, move.column):
            return False
        self.grid[move.row, move.column] = self.BLANK
        self.move_count -= 1
        return True

    def apply_sequence(self, move: MoveSequence) -> bool:
        """Composite moves are rejected unless a variant defines them."""
        return False

    # ------------------------------------------------------------------
    # Rule queries
    # ------------------------------------------------------------------

    @abstractmethod
    def is_win(self, player: "Player") -> bool:
        pass

    @abstractmethod
    def is_lose(self, player: "Player") -> bool:
        pass

    @abstractmethod
    def is_draw(self, player: "Player") -> bool:
        pass

    def game_is_over(self, player: "Player") -> bool:
        return self.is_win(player) or self.is_lose(player) or self.is_draw(player)

    # ------------------------------------------------------------------
    # State queries
    # ------------------------------------------------------------------

    def in_bounds(self, r: int, c: int) -> bool:
        return game_rules.in_bounds(self.grid, r, c)

    def is_empty(self, r: int, c: int) -> bool:
        return bool(self.grid[r, c] == self.BLANK)

    def is_obstacle(self, r: int, c: int) -> bool:
        return self.OBSTACLE is not None and bool(self.grid[r, c] == self.OBSTACLE)

    def is_open(self, r: int, c: int) -> bool:
        """In bounds and blank."""
        return self.in_bounds(r, c) and self.is_empty(r, c)

    def is_full(self) -> bool:
        return game_rules.board_full(self.grid, self.BLANK)

    def empty_cells(self) -> List[Tuple[int, int]]:
        """Blank cells in row-major order."""
        return [(int(r), int(c)) for r, c in np.argwhere(self.grid == self.BLANK)]

    def candidate_moves(self, mark: Symbol) -> List[Move]:
        """Legal moves for ``mark`` in deterministic row-major order."""
        return [Place(r, c, mark) for r, c in self.empty_cells()]

    def opponent_symbol(self, symbol: Symbol) -> Symbol:
        first, second = self.SYMBOLS
        if symbol == first:
            return second
        if symbol == second:
            return first
        raise ValueError(f"Unknown symbol for {self.GAME_ID}: {symbol!r}")

    def get_board_matrix(self) -> np.ndarray:
        """Copy of the grid; callers may not mutate the board through it."""
        return self.grid.copy()

    def cell_strings(self) -> Dict[Symbol, str]:
        """Display string for each sentinel value (marks display as themselves)."""
        strings: Dict[Symbol, str] = {self.BLANK: " "}
        if self.OBSTACLE is not None:
            strings[self.OBSTACLE] = "#"
        return strings
