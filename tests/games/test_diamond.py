"""
Tests for grid_games.games.diamond

Tests the diamond mask and four-in-a-row inside it.
"""

import pytest

from grid_games.agent.strategies import first_free_cell
from grid_games.core.types import Place, PlayerKind
from grid_games.games.diamond import DiamondBoard, DiamondUI, inside_diamond


@pytest.fixture
def board() -> DiamondBoard:
    return DiamondBoard()


class TestShape:

    def test_playable_cells(self, board):
        assert board.playable == 25
        assert len(board.empty_cells()) == 25

    @pytest.mark.parametrize("r, c, inside", [
        (3, 3, True), (0, 3, True), (3, 0, True), (1, 2, True),
        (0, 0, False), (0, 2, False), (6, 6, False),
    ])
    def test_mask(self, board, r, c, inside):
        assert inside_diamond(r, c) is inside
        assert board.is_obstacle(r, c) is not inside

    def test_obstacle_rejected(self, board):
        assert not board.update_board(Place(0, 0, "X"))
        assert board.move_count == 0


class TestWinDetection:

    def test_middle_row(self, board, make_players, play):
        x, o = make_players(board)
        play(board, [(3, c, "X") for c in range(1, 5)])
        assert board.is_win(x) and board.is_lose(o)

    def test_three_is_not_enough(self, board, make_players, play):
        x, _ = make_players(board)
        play(board, [(3, c, "X") for c in range(3)])
        assert not board.game_is_over(x)

    def test_draw_after_all_playable_cells(self, board, make_players):
        x, o = make_players(board)
        # Rows alternate in pairs, columns alternate: no four anywhere
        for r, c in board.empty_cells():
            assert board.update_board(Place(r, c, "X" if (r // 2 + c) % 2 == 0 else "O"))
        assert board.move_count == 25
        assert board.is_draw(x) and board.is_draw(o)


class TestUI:

    def test_computer_and_ai_take_first_free_cell(self, board):
        ui = DiamondUI(board, output=lambda s: None)
        assert ui.computer_strategy() is first_free_cell
        assert PlayerKind.AI in ui.kind_options()
        player = ui.create_player("Bot", "X", PlayerKind.AI)
        assert player.compute_move() == Place(0, 3, "X")

    def test_render_hides_obstacles(self, board, output_lines):
        ui = DiamondUI(board, output=output_lines.append)
        ui.show_board()
        assert "#" not in output_lines[0]
