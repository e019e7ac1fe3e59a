"""
UIBase - console input/output and player construction for one game.

Input and output go through injectable callables (``input`` and ``print``
by default) so that a whole session can be driven by a script.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple, TYPE_CHECKING

import numpy as np

from grid_games.agent.player import Player, Strategy
from grid_games.core.errors import UnsupportedPlayerKind
from grid_games.core.types import Move, Outcome, Place, PlayerKind, Symbol, format_move
from grid_games.ui.rendering import render_grid

if TYPE_CHECKING:
    from grid_games.games.board_base import BoardBase
    from grid_games.manager import GameResult

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

KIND_LABELS = {
    PlayerKind.HUMAN: "Human",
    PlayerKind.COMPUTER: "Computer",
    PlayerKind.AI: "AI",
}


@dataclass(frozen=True)
class PlayerSpec:
    """Pre-selected name and kind for one player (skips the prompts)."""
    name: str
    kind: PlayerKind


class UIBase:
    """
    Default console UI shared by every variant.

    Variants override:
        - TITLE / RULES / MOVE_PROMPT for their texts
        - player_label() or setup_players() to force symbol roles
        - computer_strategy() / ai_strategy() to attach move capabilities
        - get_human_move() / random_move() for non-standard move shapes
        - render() for custom board drawings
    """

    TITLE = "Welcome to Tic-Tac-Toe!"
    RULES: Tuple[str, ...] = ()
    MOVE_PROMPT = "enter row and column"
    MAX_RANDOM_SAMPLES = 50

    def __init__(
        self,
        board: "BoardBase",
        rng: Optional[np.random.Generator] = None,
        input_fn: InputFn = input,
        output: OutputFn = print,
    ):
        self.board = board
        self.rng = rng if rng is not None else np.random.default_rng()
        self.input_fn = input_fn
        self.output = output

    # ------------------------------------------------------------------
    # Capabilities
    # ------------------------------------------------------------------

    def computer_strategy(self) -> Optional[Strategy]:
        """Strategy for COMPUTER players; None means the random fallback."""
        return None

    def ai_strategy(self) -> Optional[Strategy]:
        """Strategy for AI players; None means this UI cannot build one."""
        return None

    def kind_options(self) -> List[PlayerKind]:
        kinds = [PlayerKind.HUMAN, PlayerKind.COMPUTER]
        if self.ai_strategy() is not None:
            kinds.append(PlayerKind.AI)
        return kinds

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------

    def greet(self) -> None:
        self.output(self.TITLE)
        if self.RULES:
            self.output("\n".join(f"- {line}" for line in self.RULES))

    def player_label(self, index: int, symbol: Symbol) -> str:
        return f"Player {index + 1} ({symbol})"

    def setup_players(self, specs: Optional[Sequence[PlayerSpec]] = None) -> List[Player]:
        """Collect name and kind for both players and build them."""
        if specs is not None and len(specs) != 2:
            raise ValueError(f"Expected 2 player specs, got {len(specs)}")

        players = []
        for index, symbol in enumerate(self.board.SYMBOLS):
            label = self.player_label(index, symbol)
            if specs is not None:
                name, kind = specs[index].name, specs[index].kind
            else:
                name = self.get_player_name(label)
                kind = self.get_player_kind(label)
            players.append(self.create_player(name, symbol, kind))
        return players

    def create_player(self, name: str, symbol: Symbol, kind: PlayerKind) -> Player:
        if kind is PlayerKind.HUMAN:
            strategy = None
        elif kind is PlayerKind.COMPUTER:
            strategy = self.computer_strategy()
        else:
            strategy = self.ai_strategy()
            if strategy is None:
                raise UnsupportedPlayerKind(f"{self.board.game_id()} has no AI player")

        self.output(f"Creating {KIND_LABELS[kind].lower()} player: {name} ({symbol})")
        return Player(name, symbol, kind, self.board, strategy)

    def get_player_name(self, label: str) -> str:
        raw = self.input_fn(f"Enter {label} name: ").strip()
        return raw or label.split(" (")[0]

    def get_player_kind(self, label: str) -> PlayerKind:
        options = self.kind_options()
        menu = "  ".join(f"{i}. {KIND_LABELS[k]}" for i, k in enumerate(options, start=1))
        self.output(f"Choose {label} type: {menu}")
        (choice,) = self.read_ints("Choice: ", [(1, len(options))])
        return options[choice - 1]

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def get_move(self, player: Player) -> Optional[Move]:
        """
        Next move for ``player``: prompted for humans, computed by the
        player's own strategy when it has one, random otherwise.
        """
        if player.is_human:
            return self.get_human_move(player)
        if player.can_compute_move:
            return player.compute_move()
        return self.random_move(player)

    def get_human_move(self, player: Player) -> Move:
        r, c = self.read_ints(
            f"{player.name} ({player.symbol}), {self.MOVE_PROMPT}: ",
            [(0, self.board.rows - 1), (0, self.board.columns - 1)],
        )
        return Place(r, c, player.symbol)

    def random_move(self, player: Player) -> Optional[Move]:
        """
        Resample random cells until one is empty; after MAX_RANDOM_SAMPLES
        misses take the first empty cell so that the search always ends.
        """
        board = self.board
        for _ in range(self.MAX_RANDOM_SAMPLES):
            r = int(self.rng.integers(board.rows))
            c = int(self.rng.integers(board.columns))
            if board.is_empty(r, c):
                return Place(r, c, player.symbol)

        cells = board.empty_cells()
        if not cells:
            return None
        r, c = cells[0]
        return Place(r, c, player.symbol)

    # ------------------------------------------------------------------
    # Input helpers
    # ------------------------------------------------------------------

    def read_ints(self, prompt: str, limits: Sequence[Tuple[int, int]]) -> List[int]:
        """
        Read len(limits) whitespace-separated integers, each within its
        inclusive (low, high) range. Re-prompts until the line is well formed.
        """
        while True:
            tokens = self.input_fn(prompt).split()
            if len(tokens) != len(limits):
                self.output(f"Invalid input: expected {len(limits)} number(s).")
                continue
            try:
                values = [int(token) for token in tokens]
            except ValueError:
                self.output("Invalid input: numbers only.")
                continue
            if all(low <= v <= high for v, (low, high) in zip(values, limits)):
                return values
            ranges = ", ".join(f"{low}-{high}" for low, high in limits)
            self.output(f"Invalid input: out of range ({ranges}).")

    def read_letter(self, prompt: str) -> str:
        """Read a single alphabetic character, uppercased."""
        while True:
            raw = self.input_fn(prompt).strip()
            if len(raw) == 1 and raw.isalpha():
                return raw.upper()
            self.output("Invalid input: enter a single letter.")

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def render(self, matrix) -> str:
        return render_grid(matrix, self.board.cell_strings())

    def display_board_matrix(self, matrix) -> None:
        self.output(self.render(matrix))

    def show_board(self) -> None:
        self.display_board_matrix(self.board.get_board_matrix())

    def announce_move(self, player: Player, move: Move) -> None:
        if not player.is_human:
            self.output(f"{KIND_LABELS[player.kind]} {player.name} plays {format_move(move)}")

    def report_invalid_move(self, player: Player) -> None:
        if player.is_human:
            self.output("Invalid move, try again.")

    def announce_result(self, result: "GameResult") -> None:
        if result.outcome is Outcome.WIN:
            self.output(f"{result.winner.name} ({result.winner.symbol}) wins!")
        elif result.outcome is Outcome.DRAW:
            self.output("It's a draw!")
        else:
            self.output(f"Game ended without a result: {result.reason}")
