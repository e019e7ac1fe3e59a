"""
Games module - board and UI implementations for every variant.
"""

from grid_games.games.board_base import BoardBase
from grid_games.games.game_rules import (
    in_bounds,
    board_full,
    get_rows,
    get_cols,
    get_diagonals,
    count_lines,
    has_line,
)
from grid_games.games.tic_tac_toe import TicTacToeBoard, TicTacToeUI
from grid_games.games.misere import MisereBoard, MisereUI
from grid_games.games.four_in_a_row import FourInARowBoard, FourInARowUI
from grid_games.games.sus import SUSBoard, SUSUI
from grid_games.games.five_by_five import FiveByFiveBoard, FiveByFiveUI
from grid_games.games.word import WordBoard, WordUI, load_dictionary
from grid_games.games.diamond import DiamondBoard, DiamondUI
from grid_games.games.numerical import NumericalBoard, NumericalUI
from grid_games.games.obstacles import ObstaclesBoard, ObstaclesUI
from grid_games.games.infinity import InfinityBoard, InfinityUI
from grid_games.games.ultimate import UltimateBoard, UltimateUI
from grid_games.games.pyramid import PyramidBoard, PyramidUI
from grid_games.games.memory import MemoryBoard, MemoryUI
from grid_games.games.four_by_four import FourByFourBoard, FourByFourUI

__all__ = [
    "BoardBase",
    "TicTacToeBoard", "TicTacToeUI",
    "MisereBoard", "MisereUI",
    "FourInARowBoard", "FourInARowUI",
    "SUSBoard", "SUSUI",
    "FiveByFiveBoard", "FiveByFiveUI",
    "WordBoard", "WordUI",
    "DiamondBoard", "DiamondUI",
    "NumericalBoard", "NumericalUI",
    "ObstaclesBoard", "ObstaclesUI",
    "InfinityBoard", "InfinityUI",
    "UltimateBoard", "UltimateUI",
    "PyramidBoard", "PyramidUI",
    "MemoryBoard", "MemoryUI",
    "FourByFourBoard", "FourByFourUI",
    "load_dictionary",
    "in_bounds",
    "board_full",
    "get_rows",
    "get_cols",
    "get_diagonals",
    "count_lines",
    "has_line",
]
