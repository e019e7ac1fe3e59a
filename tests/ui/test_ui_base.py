"""
Tests for grid_games.ui.ui_base

Tests prompting, player construction and the random fallback.
"""

import pytest

from grid_games.agent.strategies import minimax_move
from grid_games.core.errors import UnsupportedPlayerKind
from grid_games.core.types import Outcome, Place, PlayerKind
from grid_games.games.four_in_a_row import FourInARowBoard, FourInARowUI
from grid_games.games.tic_tac_toe import TicTacToeUI
from grid_games.manager import GameResult
from grid_games.ui.ui_base import PlayerSpec, UIBase


@pytest.fixture
def make_ui(ttt_board, scripted_input, output_lines, rng):
    """Factory: Tic-Tac-Toe UI reading the given lines."""
    def make(*lines):
        return TicTacToeUI(
            ttt_board, rng=rng, input_fn=scripted_input(*lines), output=output_lines.append
        )
    return make


class TestReadInts:
    """Re-prompting on malformed input."""

    def test_well_formed(self, make_ui):
        assert make_ui("1 2").read_ints("> ", [(0, 2), (0, 2)]) == [1, 2]

    def test_reprompts_until_valid(self, make_ui, output_lines):
        ui = make_ui("a b", "1", "5 5", "  2   0 ")
        assert ui.read_ints("> ", [(0, 2), (0, 2)]) == [2, 0]
        assert output_lines == [
            "Invalid input: numbers only.",
            "Invalid input: expected 2 number(s).",
            "Invalid input: out of range (0-2, 0-2).",
        ]

    def test_exhausted_input_propagates(self, make_ui):
        """End of input is not swallowed."""
        with pytest.raises(EOFError):
            make_ui("x").read_ints("> ", [(0, 2)])


class TestPlayerSetup:

    def test_prompted_setup(self, make_ui, ttt_board):
        ui = make_ui("Ann", "1", "", "3")
        first, second = ui.setup_players()
        assert (first.name, first.symbol, first.kind) == ("Ann", "X", PlayerKind.HUMAN)
        assert (second.name, second.symbol, second.kind) == ("Player 2", "O", PlayerKind.AI)
        assert second.board is ttt_board

    def test_specs_skip_prompts(self, make_ui, output_lines):
        ui = make_ui()
        players = ui.setup_players([
            PlayerSpec("Ann", PlayerKind.HUMAN),
            PlayerSpec("Bot", PlayerKind.COMPUTER),
        ])
        assert [p.kind for p in players] == [PlayerKind.HUMAN, PlayerKind.COMPUTER]
        assert output_lines[-1] == "Creating computer player: Bot (O)"

    def test_wrong_number_of_specs(self, make_ui):
        with pytest.raises(ValueError):
            make_ui().setup_players([PlayerSpec("Solo", PlayerKind.HUMAN)])

    def test_ai_player_gets_strategy(self, make_ui):
        player = make_ui().create_player("Bot", "X", PlayerKind.AI)
        assert player.can_compute_move

    def test_unsupported_ai(self, output_lines):
        """A UI without an AI strategy refuses AI players."""
        ui = FourInARowUI(FourInARowBoard(), output=output_lines.append)
        assert ui.kind_options() == [PlayerKind.HUMAN, PlayerKind.COMPUTER]
        with pytest.raises(UnsupportedPlayerKind):
            ui.create_player("Bot", "X", PlayerKind.AI)

    def test_kind_menu_limited_to_options(self, scripted_input, output_lines):
        ui = FourInARowUI(
            FourInARowBoard(), input_fn=scripted_input("3", "2"), output=output_lines.append
        )
        assert ui.get_player_kind("Player 1 (X)") is PlayerKind.COMPUTER
        assert output_lines[0] == "Choose Player 1 (X) type: 1. Human  2. Computer"


class TestMoves:

    def test_human_move(self, make_ui, make_players, ttt_board):
        x, _ = make_players(ttt_board)
        assert make_ui("2 1").get_move(x) == Place(2, 1, "X")

    def test_strategy_used_when_present(self, make_ui, ttt_board, make_players):
        _, o = make_players(
            ttt_board, kinds=(PlayerKind.HUMAN, PlayerKind.AI), strategies=(None, minimax_move)
        )
        assert make_ui().get_move(o) == minimax_move(o)

    def test_random_fallback_picks_empty_cell(self, make_ui, make_players, ttt_board, play):
        play(ttt_board, [(0, 0, "X"), (1, 1, "O")])
        _, bot = make_players(ttt_board, kinds=(PlayerKind.HUMAN, PlayerKind.COMPUTER))
        move = make_ui().get_move(bot)
        assert ttt_board.is_empty(move.row, move.column)

    def test_random_fallback_terminates_with_one_cell(self, ttt_board, make_players, rng):
        """With a single free cell the scan finds it even if sampling misses."""
        ttt_board.grid[:, :] = "X"
        ttt_board.grid[2, 2] = ttt_board.BLANK
        ui = UIBase(ttt_board, rng=rng, output=lambda s: None)
        ui.MAX_RANDOM_SAMPLES = 0
        _, bot = make_players(ttt_board, kinds=(PlayerKind.HUMAN, PlayerKind.COMPUTER))
        assert ui.random_move(bot) == Place(2, 2, "O")

    def test_random_fallback_full_board(self, ttt_board, make_players, rng):
        ttt_board.grid[:, :] = "X"
        ui = UIBase(ttt_board, rng=rng, output=lambda s: None)
        _, bot = make_players(ttt_board, kinds=(PlayerKind.HUMAN, PlayerKind.COMPUTER))
        assert ui.random_move(bot) is None


class TestOutput:

    def test_greet(self, make_ui, output_lines):
        make_ui().greet()
        assert output_lines == ["Welcome to Tic-Tac-Toe!"]

    def test_announce_only_non_human_moves(self, make_ui, make_players, ttt_board, output_lines):
        human, bot = make_players(ttt_board, kinds=(PlayerKind.HUMAN, PlayerKind.COMPUTER))
        ui = make_ui()
        ui.announce_move(human, Place(0, 0, "X"))
        ui.announce_move(bot, Place(1, 1, "O"))
        assert output_lines == ["Computer P2 plays O at (1,1)"]

    def test_invalid_move_reported_to_humans(self, make_ui, make_players, ttt_board, output_lines):
        human, bot = make_players(ttt_board, kinds=(PlayerKind.HUMAN, PlayerKind.COMPUTER))
        ui = make_ui()
        ui.report_invalid_move(bot)
        ui.report_invalid_move(human)
        assert output_lines == ["Invalid move, try again."]

    @pytest.mark.parametrize("outcome, expected", [
        (Outcome.DRAW, "It's a draw!"),
        (Outcome.UNFINISHED, "Game ended without a result: stopped"),
    ])
    def test_announce_result(self, make_ui, outcome, expected, output_lines):
        make_ui().announce_result(GameResult(outcome, reason="stopped"))
        assert output_lines == [expected]

    def test_announce_winner(self, make_ui, make_players, ttt_board, output_lines):
        x, o = make_players(ttt_board)
        make_ui().announce_result(GameResult(Outcome.WIN, winner=x, loser=o))
        assert output_lines == ["P1 (X) wins!"]

    def test_show_board_renders_matrix(self, make_ui, ttt_board, play, output_lines):
        play(ttt_board, [(1, 1, "X")])
        make_ui().show_board()
        assert len(output_lines) == 1
        assert "X" in output_lines[0]
