"""
Core module - move types, enums and the error taxonomy.
"""

from grid_games.core.types import (
    Symbol,
    PlayerKind,
    Outcome,
    Place,
    Remove,
    MoveSequence,
    Move,
    slide,
    format_move,
)
from grid_games.core.errors import GameContractError, UnsupportedPlayerKind

__all__ = [
    # Types
    "Symbol",
    "PlayerKind",
    "Outcome",
    "Place",
    "Remove",
    "MoveSequence",
    "Move",
    # Functions
    "slide",
    "format_move",
    # Errors
    "GameContractError",
    "UnsupportedPlayerKind",
]
