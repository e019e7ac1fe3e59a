"""
Tests for grid_games.games.memory

Marks are hidden from view but still decide the game.
"""

import pytest

from grid_games.core.types import Place, PlayerKind
from grid_games.games.memory import HIDDEN, MemoryBoard, MemoryUI


@pytest.fixture
def board() -> MemoryBoard:
    return MemoryBoard()


class TestHiddenMarks:

    def test_hidden_matrix(self, board, play):
        play(board, [(0, 0, "X"), (1, 1, "O")])
        hidden = board.hidden_matrix()
        assert hidden[0, 0] == HIDDEN and hidden[1, 1] == HIDDEN
        assert hidden[2, 2] == board.BLANK

    def test_real_grid_kept(self, board, play):
        play(board, [(0, 0, "X")])
        assert board.grid[0, 0] == "X"

    def test_rules_unchanged(self, board, make_players, play):
        x, _ = make_players(board)
        play(board, [(0, 0, "X"), (1, 0, "O"), (0, 1, "X"), (1, 1, "O"), (0, 2, "X")])
        assert board.is_win(x)


class TestUI:

    def test_display_never_shows_marks(self, board, play, output_lines):
        play(board, [(0, 0, "X"), (1, 1, "O")])
        MemoryUI(board, output=output_lines.append).show_board()
        text = output_lines[0]
        assert "?" in text
        assert "X" not in text and "O" not in text

    def test_computer_move_announced_without_mark_or_cell(self, board, make_players, output_lines):
        _, bot = make_players(board, kinds=(PlayerKind.HUMAN, PlayerKind.COMPUTER))
        MemoryUI(board, output=output_lines.append).announce_move(bot, Place(1, 1, "O"))
        assert output_lines == ["Computer P2 has played."]

    def test_human_move_not_announced(self, board, make_players, output_lines):
        human, _ = make_players(board)
        MemoryUI(board, output=output_lines.append).announce_move(human, Place(0, 0, "X"))
        assert output_lines == []
