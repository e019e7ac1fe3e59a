"""
GameManager - the turn loop shared by every variant.

State machine:
    AWAITING_MOVE(i) -> APPLYING_MOVE -> CHECKING_TERMINAL -> AWAITING_MOVE(1-i)
                              |                   |
                              +-> AWAITING_MOVE(i) +-> GAME_OVER
    (rejected move, same player)   (terminal position)

Player 0 always moves first. Rule rejections are ordinary control flow
(update_board returns False); only contract violations end a game early.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, TYPE_CHECKING

from grid_games.core.errors import GameContractError
from grid_games.core.types import Outcome, format_move

if TYPE_CHECKING:
    from grid_games.agent.player import Player
    from grid_games.games.board_base import BoardBase
    from grid_games.ui.ui_base import UIBase

logger = logging.getLogger(__name__)

# Consecutive rejected moves tolerated from a non-human player
DEFAULT_MAX_REJECTIONS = 1000


@dataclass
class GameResult:
    """How one session ended."""
    outcome: Outcome
    winner: Optional["Player"] = None
    loser: Optional["Player"] = None
    turns: int = 0
    history: List[int] = field(default_factory=list)  # player index per applied move
    reason: str = ""

    @property
    def is_finished(self) -> bool:
        return self.outcome is not Outcome.UNFINISHED


class GameManager:
    """
    Drives one game from the first move to the result.

    The manager owns nothing but the turn index: the board enforces the
    rules, the UI produces moves and reports, and the players only carry
    identity and (optionally) their own move strategy.
    """

    def __init__(
        self,
        board: "BoardBase",
        players: Sequence["Player"],
        ui: "UIBase",
        max_turns: Optional[int] = None,
        max_rejections: int = DEFAULT_MAX_REJECTIONS,
    ):
        if len(players) != 2:
            raise ValueError(f"GameManager needs exactly 2 players, got {len(players)}")
        self.board = board
        self.players = tuple(players)
        self.ui = ui
        self.max_turns = max_turns
        self.max_rejections = max_rejections
        self.current = 0
        self.history: List[int] = []

    def run(self) -> GameResult:
        """Play until the board reports a terminal position (or the game aborts)."""
        logger.info(
            "Starting %s: %s vs %s",
            self.board.game_id(), self.players[0], self.players[1],
        )
        self.ui.show_board()
        rejections = 0

        while True:
            if self.max_turns is not None and len(self.history) >= self.max_turns:
                return self._finish(self._unfinished("turn limit reached"))

            player = self.players[self.current]

            # AWAITING_MOVE
            try:
                move = self.ui.get_move(player)
            except GameContractError as exc:
                return self._abort(str(exc))
            if move is None:
                return self._abort(f"no move available for {player.name}")

            # APPLYING_MOVE
            if not self.board.update_board(move):
                rejections += 1
                logger.debug("Rejected %s from %s", format_move(move), player.name)
                if not player.is_human and rejections >= self.max_rejections:
                    return self._abort(
                        f"{player.name} produced {rejections} illegal moves in a row"
                    )
                self.ui.report_invalid_move(player)
                continue

            rejections = 0
            self.history.append(self.current)
            logger.debug("Turn %d: %s played %s", len(self.history), player.name, format_move(move))
            self.ui.announce_move(player, move)
            self.ui.show_board()

            # CHECKING_TERMINAL
            try:
                result = self._check_terminal(player)
            except GameContractError as exc:
                return self._abort(str(exc))
            if result is not None:
                return self._finish(result)

            self.current = 1 - self.current

    def _check_terminal(self, mover: "Player") -> Optional[GameResult]:
        board = self.board
        opponent = self.players[1 - self.current]

        if not board.game_is_over(mover):
            if board.is_win(mover) or board.is_lose(mover) or board.is_draw(mover):
                raise GameContractError(
                    f"{board.game_id()}: game_is_over is False but the position is terminal"
                )
            return None

        if board.is_win(mover):
            return self._decided(winner=mover, loser=opponent)
        if board.is_win(opponent):
            return self._decided(winner=opponent, loser=mover)
        if board.is_lose(mover):
            return self._decided(winner=opponent, loser=mover)
        if board.is_lose(opponent):
            return self._decided(winner=mover, loser=opponent)
        if board.is_draw(mover):
            return GameResult(Outcome.DRAW, turns=len(self.history), history=list(self.history))

        raise GameContractError(
            f"{board.game_id()}: game_is_over is True but nobody won, lost or drew"
        )

    def _decided(self, winner: "Player", loser: "Player") -> GameResult:
        return GameResult(
            Outcome.WIN,
            winner=winner,
            loser=loser,
            turns=len(self.history),
            history=list(self.history),
        )

    def _unfinished(self, reason: str) -> GameResult:
        return GameResult(
            Outcome.UNFINISHED,
            turns=len(self.history),
            history=list(self.history),
            reason=reason,
        )

    def _abort(self, reason: str) -> GameResult:
        logger.warning("Aborting %s: %s", self.board.game_id(), reason)
        return self._finish(self._unfinished(reason))

    def _finish(self, result: GameResult) -> GameResult:
        if result.outcome is Outcome.WIN:
            logger.info("%s won after %d turns", result.winner.name, result.turns)
        else:
            logger.info("Game ended (%s) after %d turns", result.outcome.name, result.turns)
        self.ui.announce_result(result)
        return result
