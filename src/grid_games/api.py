"""
Public API for setting up and playing one game.

Usage:
    from grid_games import Config, PlayerSpec, PlayerKind, play_game

    config = Config(game_name="misere", seed=7)
    specs = [PlayerSpec("Ann", PlayerKind.HUMAN), PlayerSpec("Bot", PlayerKind.AI)]
    result = play_game(config, specs)
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from grid_games.core.errors import GameContractError
from grid_games.core.types import Outcome
from grid_games.manager import GameManager, GameResult
from grid_games.ui.ui_base import InputFn, OutputFn, PlayerSpec
from grid_games.utils.config import Config
from grid_games.utils.factory import create_game, create_rng

logger = logging.getLogger(__name__)


def play_game(
    config: Config,
    player_specs: Optional[Sequence[PlayerSpec]] = None,
    input_fn: InputFn = input,
    output: OutputFn = print,
) -> GameResult:
    """
    Main entry point: build the game, set up both players and run it.

    Parameters
    ----------
    config : Config
        Game id, seed and limits for this session.
    player_specs : Sequence[PlayerSpec], optional
        Names and kinds for both players. Prompted for when omitted.
    input_fn, output : callables
        Console input and output (``input`` / ``print`` by default).

    Returns
    -------
    GameResult
        UNFINISHED (with a reason) if a player could not be set up.
    """
    rng = create_rng(config.seed)
    board, ui = create_game(config, rng=rng, input_fn=input_fn, output=output)
    ui.greet()

    try:
        players = ui.setup_players(player_specs)
    except GameContractError as exc:
        logger.warning("Could not set up %s: %s", config.game_name, exc)
        result = GameResult(Outcome.UNFINISHED, reason=str(exc))
        ui.announce_result(result)
        return result

    manager = GameManager(
        board,
        players,
        ui,
        max_turns=config.max_turns,
        max_rejections=config.max_rejections,
    )
    return manager.run()


__all__ = [
    "play_game",
    "Config",
    "GameManager",
    "GameResult",
    "PlayerSpec",
]
