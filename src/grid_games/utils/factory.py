"""
Factory functions for creating boards and UIs from the registry.
"""

from typing import Optional, Tuple

import numpy as np

from grid_games.games.board_base import BoardBase
from grid_games.ui.ui_base import InputFn, OutputFn, UIBase
from grid_games.utils.config import GAMES, Config


def create_rng(seed: Optional[int] = None) -> np.random.Generator:
    """The single random source of a session; seeded once, passed everywhere."""
    return np.random.default_rng(seed)


def create_game(
    config: Config,
    rng: Optional[np.random.Generator] = None,
    input_fn: InputFn = input,
    output: OutputFn = print,
) -> Tuple[BoardBase, UIBase]:
    """
    Create the board and UI of a game.

    Args:
        config: Session configuration (game id, seed, dictionary path)
        rng: Random source shared by board and UI; built from config.seed if None
        input_fn / output: Console callables handed to the UI

    Returns:
        (board, ui) wired to the same board instance
    """
    if config.game_name not in GAMES:
        available = ", ".join(GAMES.keys())
        raise ValueError(f"Unknown game: {config.game_name}. Available: {available}")

    if rng is None:
        rng = create_rng(config.seed)

    entry = GAMES[config.game_name]
    board = entry.board.create(rng=rng, dictionary_path=config.dictionary_path)
    ui = entry.ui(board, rng=rng, input_fn=input_fn, output=output)
    return board, ui
