"""
Configuration and game registry.
"""

from pathlib import Path
from typing import Dict, NamedTuple, Optional, Type

from grid_games.games import (
    BoardBase,
    DiamondBoard, DiamondUI,
    FiveByFiveBoard, FiveByFiveUI,
    FourByFourBoard, FourByFourUI,
    FourInARowBoard, FourInARowUI,
    InfinityBoard, InfinityUI,
    MemoryBoard, MemoryUI,
    MisereBoard, MisereUI,
    NumericalBoard, NumericalUI,
    ObstaclesBoard, ObstaclesUI,
    PyramidBoard, PyramidUI,
    SUSBoard, SUSUI,
    TicTacToeBoard, TicTacToeUI,
    UltimateBoard, UltimateUI,
    WordBoard, WordUI,
)
from grid_games.manager import DEFAULT_MAX_REJECTIONS
from grid_games.ui.ui_base import UIBase


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------

PACKAGE_DIR = Path(__file__).parent.parent  # src/grid_games/
DATA_DIR = PACKAGE_DIR / "data"
DEFAULT_DICTIONARY = DATA_DIR / "dic.txt"


# ---------------------------------------------------------------------------
# Game Registry
# ---------------------------------------------------------------------------

class GameEntry(NamedTuple):
    title: str
    board: Type[BoardBase]
    ui: Type[UIBase]


# Menu order
GAMES: Dict[str, GameEntry] = {
    "tic_tac_toe": GameEntry("Tic-Tac-Toe", TicTacToeBoard, TicTacToeUI),
    "four_in_a_row": GameEntry("Four-in-a-Row (Connect Four)", FourInARowBoard, FourInARowUI),
    "sus": GameEntry("SUS", SUSBoard, SUSUI),
    "five_by_five": GameEntry("5x5 Tic-Tac-Toe", FiveByFiveBoard, FiveByFiveUI),
    "word": GameEntry("Word Tic-Tac-Toe", WordBoard, WordUI),
    "misere": GameEntry("Misère Tic-Tac-Toe", MisereBoard, MisereUI),
    "diamond": GameEntry("Diamond Tic-Tac-Toe", DiamondBoard, DiamondUI),
    "four_by_four": GameEntry("4x4 Tic-Tac-Toe", FourByFourBoard, FourByFourUI),
    "pyramid": GameEntry("Pyramid Tic-Tac-Toe", PyramidBoard, PyramidUI),
    "numerical": GameEntry("Numerical Tic-Tac-Toe", NumericalBoard, NumericalUI),
    "obstacles": GameEntry("Obstacles Tic-Tac-Toe", ObstaclesBoard, ObstaclesUI),
    "infinity": GameEntry("Infinity Tic-Tac-Toe", InfinityBoard, InfinityUI),
    "ultimate": GameEntry("Ultimate Tic-Tac-Toe", UltimateBoard, UltimateUI),
    "memory": GameEntry("Memory Tic-Tac-Toe", MemoryBoard, MemoryUI),
}


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

class Config:
    """Session configuration with sensible defaults."""

    def __init__(
        self,
        game_name: str = "tic_tac_toe",
        seed: Optional[int] = None,
        dictionary_path: Path = DEFAULT_DICTIONARY,
        max_turns: Optional[int] = None,
        max_rejections: int = DEFAULT_MAX_REJECTIONS,
    ):
        if game_name not in GAMES:
            available = ", ".join(GAMES.keys())
            raise ValueError(f"Unknown game: {game_name}. Available: {available}")
        if max_turns is not None and max_turns <= 0:
            raise ValueError(f"max_turns must be positive, got {max_turns}")

        self.game_name = game_name
        self.seed = seed
        self.dictionary_path = Path(dictionary_path)
        self.max_turns = max_turns
        self.max_rejections = max_rejections


# Default configuration
DEFAULT_CONFIG = Config()
