"""
A player taking part in one game session.
"""

from __future__ import annotations

from typing import Callable, Optional, TYPE_CHECKING

from grid_games.core.errors import GameContractError
from grid_games.core.types import Move, PlayerKind, Symbol

if TYPE_CHECKING:
    from grid_games.games.board_base import BoardBase

# A strategy computes the next move for the player it is attached to.
Strategy = Callable[["Player"], Optional[Move]]


class Player:
    """
    Identity, mark and kind of one of the two players.

    The board reference is fixed at construction so that UI and AI code can
    query the current position without the manager passing it around.
    Non-human players may carry a strategy: the "compute move" capability.
    """

    __slots__ = ('_name', '_symbol', '_kind', '_board', '_strategy')

    def __init__(
        self,
        name: str,
        symbol: Symbol,
        kind: PlayerKind,
        board: "BoardBase",
        strategy: Optional[Strategy] = None,
    ):
        self._name = name
        self._symbol = symbol
        self._kind = kind
        self._board = board
        self._strategy = strategy

    @property
    def name(self) -> str:
        """Returns the display name."""
        return self._name

    @property
    def symbol(self) -> Symbol:
        """Returns the mark this player owns (e.g. 'X', 'S' or 1)."""
        return self._symbol

    @property
    def kind(self) -> PlayerKind:
        return self._kind

    @property
    def board(self) -> "BoardBase":
        """Returns the board this player plays on."""
        return self._board

    @property
    def is_human(self) -> bool:
        return self._kind is PlayerKind.HUMAN

    @property
    def can_compute_move(self) -> bool:
        """True when the player carries its own move strategy."""
        return self._strategy is not None

    def compute_move(self) -> Optional[Move]:
        if self._strategy is None:
            raise GameContractError(f"Player {self._name!r} cannot compute moves")
        return self._strategy(self)

    def __repr__(self) -> str:
        return f"Player(name={self._name!r}, symbol={self._symbol!r}, kind={self._kind.name})"
