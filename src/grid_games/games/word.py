"""
Word Tic-Tac-Toe: players place letters; a line spelling a word wins.
"""

from __future__ import annotations

import logging
import string
from pathlib import Path
from typing import FrozenSet, Iterable, Optional

import numpy as np

from grid_games.agent.player import Player
from grid_games.core.types import Move, Place
from grid_games.games.board_base import BoardBase
from grid_games.games.game_rules import get_lines
from grid_games.ui.ui_base import UIBase

logger = logging.getLogger(__name__)


def load_dictionary(path: Path) -> Optional[FrozenSet[str]]:
    """
    Read one word per line into an uppercase set.

    Returns None if the file cannot be opened or is not UTF-8 text; the
    caller decides how to degrade.
    """
    try:
        with open(path, encoding="utf-8") as f:
            return frozenset(word.strip().upper() for word in f if word.strip())
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read dictionary file %s: %s", path, exc)
        return None


class WordBoard(BoardBase):
    """
    Any letter may go on any empty cell.

    A complete row, column or diagonal that reads as a dictionary word ends
    the game in favour of the player who completed it.
    """

    GAME_ID = "word"

    def __init__(
        self,
        dictionary_path: Optional[Path] = None,
        words: Optional[Iterable[str]] = None,
    ):
        super().__init__()
        self.dictionary_path = dictionary_path
        self.dictionary_missing = False
        if words is not None:
            self.words = frozenset(w.upper() for w in words)
        elif dictionary_path is not None:
            loaded = load_dictionary(dictionary_path)
            self.dictionary_missing = loaded is None
            self.words = loaded or frozenset()
        else:
            self.words = frozenset()
        logger.debug("Word board ready with %d words", len(self.words))

    @classmethod
    def create(cls, *, rng=None, dictionary_path=None) -> "WordBoard":
        return cls(dictionary_path=dictionary_path)

    def place(self, move: Place) -> bool:
        mark = move.mark
        if not (isinstance(mark, str) and len(mark) == 1 and mark.isalpha()):
            return False
        return super().place(Place(move.row, move.column, mark.upper()))

    def formed_words(self) -> list:
        """Dictionary words currently spelled by complete lines."""
        found = []
        for line in get_lines(self.grid):
            if np.any(line == self.BLANK):
                continue
            word = "".join(line)
            if word in self.words:
                found.append(word)
        return found

    def is_win(self, player: Player) -> bool:
        return self.move_count >= 3 and bool(self.formed_words())

    def is_lose(self, player: Player) -> bool:
        return False

    def is_draw(self, player: Player) -> bool:
        return self.is_full() and not self.is_win(player)


class WordUI(UIBase):
    TITLE = "Welcome to Word Tic-Tac-Toe!"
    RULES = (
        "Place any letter on an empty cell",
        "Complete a row, column or diagonal that spells a 3-letter word to win",
    )

    def __init__(self, board: WordBoard, *args, **kwargs):
        super().__init__(board, *args, **kwargs)
        if board.dictionary_missing:
            self.output(
                f"Warning: dictionary '{board.dictionary_path}' could not be read; "
                "no word will be recognised."
            )

    def get_human_move(self, player: Player) -> Move:
        letter = self.read_letter(f"{player.name} ({player.symbol}), enter a letter: ")
        r, c = self.read_ints(
            "Enter position (row col 0-2): ",
            [(0, self.board.rows - 1), (0, self.board.columns - 1)],
        )
        return Place(r, c, letter)

    def random_move(self, player: Player) -> Optional[Move]:
        cell = super().random_move(player)
        if cell is None:
            return None
        letter = string.ascii_uppercase[int(self.rng.integers(26))]
        return Place(cell.row, cell.column, letter)
