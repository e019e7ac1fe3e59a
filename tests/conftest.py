"""
Shared test fixtures for grid_games tests.

Design principles:
- Game-agnostic fixtures where possible
- Console I/O is scripted, never real
- Seeded random sources only
"""

from typing import Callable, Iterable, List, Sequence, Tuple

import numpy as np
import pytest

from grid_games.agent.player import Player
from grid_games.core.types import Place, PlayerKind
from grid_games.games.board_base import BoardBase
from grid_games.games.tic_tac_toe import TicTacToeBoard


class ScriptedInput:
    """Stand-in for ``input``: returns scripted lines, records prompts."""

    def __init__(self, lines: Iterable[str] = ()):
        self.lines = list(lines)
        self.prompts: List[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError("input script exhausted")
        return self.lines.pop(0)

    @property
    def remaining(self) -> int:
        return len(self.lines)


# =============================================================================
# I/O Fixtures
# =============================================================================

@pytest.fixture
def output_lines() -> List[str]:
    """Collected output; pass ``output_lines.append`` as the output callable."""
    return []


@pytest.fixture
def scripted_input() -> Callable[..., ScriptedInput]:
    """Factory: scripted_input("0 0", "1 1") -> input callable."""
    def make(*lines: str) -> ScriptedInput:
        return ScriptedInput(lines)
    return make


# =============================================================================
# Random Fixtures
# =============================================================================

@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


# =============================================================================
# Board and Player Fixtures
# =============================================================================

@pytest.fixture
def ttt_board() -> TicTacToeBoard:
    """Fresh 3x3 Tic-Tac-Toe board."""
    return TicTacToeBoard()


@pytest.fixture
def make_players() -> Callable[..., Tuple[Player, Player]]:
    """Factory: both players of a board, human unless kinds say otherwise."""
    def make(
        board: BoardBase,
        kinds: Sequence[PlayerKind] = (PlayerKind.HUMAN, PlayerKind.HUMAN),
        strategies: Sequence = (None, None),
    ) -> Tuple[Player, Player]:
        first, second = board.SYMBOLS
        return (
            Player("P1", first, kinds[0], board, strategies[0]),
            Player("P2", second, kinds[1], board, strategies[1]),
        )
    return make


@pytest.fixture
def play() -> Callable[..., None]:
    """Factory: apply (row, column, mark) placements, asserting each is accepted."""
    def apply(board: BoardBase, placements: Iterable[Tuple[int, int, object]]) -> None:
        for r, c, mark in placements:
            assert board.update_board(Place(r, c, mark)), f"rejected {mark} at ({r},{c})"
    return apply
