"""
Grid Games - two-player board games on small grids, played in the terminal.

This package provides a shared turn loop, board contract and console UI,
plus fourteen Tic-Tac-Toe and Connect-Four style variants built on them.

Quick Start:
    from grid_games import Config, PlayerKind, PlayerSpec, play_game

    config = Config(game_name="four_in_a_row", seed=3)
    specs = [PlayerSpec("Ann", PlayerKind.HUMAN), PlayerSpec("Bot", PlayerKind.COMPUTER)]
    result = play_game(config, specs)

Modules:
    core    - Move types (Place / Remove / MoveSequence), enums, errors
    agent   - Player and move strategies (minimax, first-free, random)
    games   - BoardBase contract and the variant boards and UIs
    ui      - UIBase console I/O and pure grid rendering
    utils   - Game registry, configuration and factory
"""

from grid_games.api import (
    play_game,
    Config,
    GameManager,
    GameResult,
    PlayerSpec,
)
from grid_games.core import (
    GameContractError,
    MoveSequence,
    Outcome,
    Place,
    PlayerKind,
    Remove,
    UnsupportedPlayerKind,
)
from grid_games.utils.config import GAMES
from grid_games.utils.factory import create_game, create_rng

__version__ = "1.0.0"

__all__ = [
    # Main API
    "play_game",
    "create_game",
    "create_rng",
    "Config",
    "GAMES",
    "GameManager",
    "GameResult",
    "PlayerSpec",
    # Types
    "Place",
    "Remove",
    "MoveSequence",
    "PlayerKind",
    "Outcome",
    # Errors
    "GameContractError",
    "UnsupportedPlayerKind",
]
