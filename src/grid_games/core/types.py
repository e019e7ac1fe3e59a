"""
Core types shared by every game variant.

This module contains the data carriers that flow between the board, the
players, the UI and the game manager:
- Place / Remove / MoveSequence: the move tagged union
- PlayerKind: who (or what) chooses a player's moves
- Outcome: how a finished session ended
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple, Union

# A mark is a one-character string for most variants, a small int for
# the numerical variant.
Symbol = Union[str, int]


class PlayerKind(Enum):
    HUMAN = auto()
    COMPUTER = auto()
    AI = auto()


class Outcome(Enum):
    WIN = auto()
    DRAW = auto()
    UNFINISHED = auto()


# ─── Moves ────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Place:
    """Put ``mark`` on (row, column)."""
    row: int
    column: int
    mark: Symbol


@dataclass(frozen=True)
class Remove:
    """Clear (row, column). Used by lookahead search to undo a placement."""
    row: int
    column: int

    @property
    def mark(self) -> None:
        return None


@dataclass(frozen=True)
class MoveSequence:
    """
    Composite action made of ordered primitive steps.

    A relocation is ``MoveSequence((Remove(src), Place(dst, mark)))``: the
    first step names the source, the last step the destination and the
    acting player's mark. Position accessors report the destination.
    """
    steps: Tuple[Union[Place, Remove], ...]

    @property
    def source(self) -> Union[Place, Remove]:
        return self.steps[0]

    @property
    def destination(self) -> Union[Place, Remove]:
        return self.steps[-1]

    @property
    def row(self) -> int:
        return self.destination.row

    @property
    def column(self) -> int:
        return self.destination.column

    @property
    def mark(self) -> Optional[Symbol]:
        return self.destination.mark


Move = Union[Place, Remove, MoveSequence]


def slide(src: Tuple[int, int], dst: Tuple[int, int], mark: Symbol) -> MoveSequence:
    """Build a relocation of ``mark`` from ``src`` to ``dst``."""
    return MoveSequence((Remove(*src), Place(dst[0], dst[1], mark)))


def format_move(move: Move) -> str:
    """Short human-readable description of a move."""
    if isinstance(move, MoveSequence):
        return " -> ".join(f"({s.row},{s.column})" for s in move.steps) + f" [{move.mark}]"
    if isinstance(move, Remove):
        return f"clear ({move.row},{move.column})"
    return f"{move.mark} at ({move.row},{move.column})"
