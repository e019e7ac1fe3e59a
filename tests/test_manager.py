"""
Tests for grid_games.manager

Tests the turn loop: alternation, rejection handling and terminal checks.
"""

import logging

import numpy as np
import pytest

from grid_games.agent.player import Player
from grid_games.agent.strategies import minimax_move
from grid_games.core.types import Outcome, Place, PlayerKind
from grid_games.games.four_in_a_row import FourInARowBoard, FourInARowUI
from grid_games.games.misere import MisereBoard, MisereUI
from grid_games.games.tic_tac_toe import TicTacToeBoard, TicTacToeUI
from grid_games.manager import GameManager, GameResult


@pytest.fixture
def human_game(ttt_board, make_players, scripted_input, output_lines):
    """Factory: two scripted humans on Tic-Tac-Toe."""
    def make(*lines, **kwargs):
        ui = TicTacToeUI(ttt_board, input_fn=scripted_input(*lines), output=output_lines.append)
        return GameManager(ttt_board, make_players(ttt_board), ui, **kwargs)
    return make


def scripted_strategy(*moves):
    """Strategy replaying fixed moves, then None."""
    queue = list(moves)

    def strategy(player):
        return queue.pop(0) if queue else None

    return strategy


class TestTurnOrder:

    def test_players_alternate_until_win(self, human_game):
        result = human_game("0 0", "1 0", "0 1", "1 1", "0 2").run()
        assert result.outcome is Outcome.WIN
        assert result.winner.symbol == "X"
        assert result.loser.symbol == "O"
        assert result.history == [0, 1, 0, 1, 0]
        assert result.turns == 5
        assert result.is_finished

    def test_second_player_can_win(self, human_game):
        result = human_game("0 0", "2 0", "0 1", "2 1", "1 1", "2 2").run()
        assert result.winner.symbol == "O"

    def test_draw(self, human_game, output_lines):
        result = human_game(
            "0 0", "0 1", "0 2", "1 1", "1 0", "1 2", "2 1", "2 0", "2 2",
        ).run()
        assert result.outcome is Outcome.DRAW
        assert result.winner is None
        assert output_lines[-1] == "It's a draw!"

    def test_rejected_move_keeps_turn(self, human_game, output_lines):
        result = human_game("0 0", "0 0", "1 1", max_turns=2).run()
        assert result.history == [0, 1]
        assert "Invalid move, try again." in output_lines

    def test_turn_limit(self, human_game):
        result = human_game("0 0", "1 1", "2 2", max_turns=2).run()
        assert result.outcome is Outcome.UNFINISHED
        assert result.reason == "turn limit reached"
        assert not result.is_finished


class TestTerminalResolution:

    def test_misere_mover_loses(self, make_players, scripted_input, output_lines):
        board = MisereBoard()
        ui = MisereUI(
            board,
            input_fn=scripted_input("0 0", "1 0", "0 1", "2 1", "0 2"),
            output=output_lines.append,
        )
        result = GameManager(board, make_players(board), ui).run()
        assert result.outcome is Outcome.WIN
        assert result.winner.symbol == "O"
        assert output_lines[-1] == "P2 (O) wins!"

    def test_inconsistent_board_aborts(self, make_players, scripted_input, caplog):
        class InconsistentBoard(TicTacToeBoard):
            def game_is_over(self, player):
                return False

            def is_win(self, player):
                return self.move_count > 0

        board = InconsistentBoard()
        ui = TicTacToeUI(board, input_fn=scripted_input("0 0"), output=lambda s: None)
        with caplog.at_level(logging.WARNING, logger="grid_games.manager"):
            result = GameManager(board, make_players(board), ui).run()
        assert result.outcome is Outcome.UNFINISHED
        assert "terminal" in result.reason
        assert any("Aborting" in r.message for r in caplog.records)

    def test_over_without_result_aborts(self, make_players, scripted_input):
        class NoResultBoard(TicTacToeBoard):
            def game_is_over(self, player):
                return True

        board = NoResultBoard()
        ui = TicTacToeUI(board, input_fn=scripted_input("0 0"), output=lambda s: None)
        result = GameManager(board, make_players(board), ui).run()
        assert result.outcome is Outcome.UNFINISHED
        assert result.history == [0]


class TestAborts:

    def test_no_move_aborts(self, ttt_board, make_players):
        ui = TicTacToeUI(ttt_board, output=lambda s: None)
        players = make_players(
            ttt_board,
            kinds=(PlayerKind.AI, PlayerKind.AI),
            strategies=(scripted_strategy(), scripted_strategy()),
        )
        result = GameManager(ttt_board, players, ui).run()
        assert result.outcome is Outcome.UNFINISHED
        assert result.reason == "no move available for P1"

    def test_strategy_contract_error_aborts(self, make_players):
        board = FourInARowBoard()
        ui = FourInARowUI(board, output=lambda s: None)
        players = make_players(
            board,
            kinds=(PlayerKind.AI, PlayerKind.AI),
            strategies=(minimax_move, minimax_move),
        )
        result = GameManager(board, players, ui).run()
        assert result.outcome is Outcome.UNFINISHED
        assert "lookahead" in result.reason
        assert board.move_count == 0

    def test_endless_illegal_moves_abort(self, ttt_board, make_players, play):
        play(ttt_board, [(0, 0, "O")])
        ui = TicTacToeUI(ttt_board, output=lambda s: None)
        stubborn = lambda player: Place(0, 0, player.symbol)  # noqa: E731
        players = make_players(
            ttt_board,
            kinds=(PlayerKind.COMPUTER, PlayerKind.COMPUTER),
            strategies=(stubborn, stubborn),
        )
        result = GameManager(ttt_board, players, ui, max_rejections=3).run()
        assert result.outcome is Outcome.UNFINISHED
        assert "3 illegal moves" in result.reason

    def test_requires_two_players(self, ttt_board):
        ui = TicTacToeUI(ttt_board, output=lambda s: None)
        solo = Player("Solo", "X", PlayerKind.HUMAN, ttt_board)
        with pytest.raises(ValueError):
            GameManager(ttt_board, [solo], ui)


class TestAutomatedGames:

    @pytest.mark.parametrize("seed", range(5))
    def test_computer_vs_computer_finishes(self, seed, make_players):
        board = TicTacToeBoard()
        ui = TicTacToeUI(board, rng=np.random.default_rng(seed), output=lambda s: None)
        players = make_players(board, kinds=(PlayerKind.COMPUTER, PlayerKind.COMPUTER))
        result = GameManager(board, players, ui).run()
        assert result.outcome in (Outcome.WIN, Outcome.DRAW)
        assert 5 <= result.turns <= 9
        assert result.history == [i % 2 for i in range(result.turns)]

    def test_minimax_never_loses_to_random(self, make_players, rng):
        board = TicTacToeBoard()
        ui = TicTacToeUI(board, rng=rng, output=lambda s: None)
        players = make_players(
            board,
            kinds=(PlayerKind.AI, PlayerKind.COMPUTER),
            strategies=(minimax_move, None),
        )
        result = GameManager(board, players, ui).run()
        assert result.outcome is not Outcome.UNFINISHED
        assert result.winner is None or result.winner.symbol == "X"
        assert result.history == [i % 2 for i in range(result.turns)]


class TestGameResult:

    def test_defaults(self):
        result = GameResult(Outcome.DRAW)
        assert result.history == []
        assert result.turns == 0
        assert result.is_finished
