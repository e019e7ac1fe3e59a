"""
Move strategies for non-human players.

A strategy is a callable ``strategy(player) -> Move | None`` that reads the
player's board through ``player.board``. UIs attach strategies to players
at construction; the game loop never needs to know which one is in use.
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from grid_games.agent.player import Player, Strategy
from grid_games.core.errors import GameContractError
from grid_games.core.types import Move, PlayerKind, Remove

# Score for a win found at depth 0; deeper wins score less
WIN_SCORE = 10


def first_free_cell(player: Player) -> Optional[Move]:
    """First legal move in row-major order."""
    moves = player.board.candidate_moves(player.symbol)
    return moves[0] if moves else None


def random_candidate(rng: np.random.Generator) -> Strategy:
    """Strategy picking uniformly among the board's legal moves."""

    def strategy(player: Player) -> Optional[Move]:
        moves = player.board.candidate_moves(player.symbol)
        if not moves:
            return None
        return moves[int(rng.integers(len(moves)))]

    return strategy


# ─── Minimax ──────────────────────────────────────────────────────────────────


def _undo(board, move: Move) -> None:
    if not board.update_board(Remove(move.row, move.column)):
        raise GameContractError(f"{board.game_id()} could not undo {move}")


def _terminal_score(board, me: Player, opponent: Player, depth: int) -> Optional[int]:
    if board.is_win(me) or board.is_lose(opponent):
        return WIN_SCORE - depth
    if board.is_win(opponent) or board.is_lose(me):
        return depth - WIN_SCORE
    if board.is_draw(me):
        return 0
    return None


def _search(
    board,
    me: Player,
    opponent: Player,
    to_move: Player,
    depth: int,
    alpha: float,
    beta: float,
) -> float:
    score = _terminal_score(board, me, opponent, depth)
    if score is not None:
        return score

    maximizing = to_move is me
    following = opponent if maximizing else me
    best = -math.inf if maximizing else math.inf
    searched = False

    for move in board.candidate_moves(to_move.symbol):
        if not board.update_board(move):
            continue
        try:
            value = _search(board, me, opponent, following, depth + 1, alpha, beta)
        finally:
            _undo(board, move)
        searched = True

        if maximizing:
            best = max(best, value)
            alpha = max(alpha, value)
        else:
            best = min(best, value)
            beta = min(beta, value)
        if beta <= alpha:
            break

    return best if searched else 0


def minimax_move(player: Player) -> Optional[Move]:
    """
    Exhaustive alpha-beta search for small boards.

    Lookahead runs on the live board: each candidate is applied with
    update_board and taken back with a Remove, so the board is unchanged
    when this returns. Candidates are tried in row-major order and the
    first best move wins ties, which keeps the choice deterministic.
    """
    board = player.board
    if not board.SUPPORTS_UNDO:
        raise GameContractError(f"{board.game_id()} does not support lookahead search")

    opponent = Player("opponent", board.opponent_symbol(player.symbol), PlayerKind.AI, board)
    best_move: Optional[Move] = None
    best_score = -math.inf
    alpha = -math.inf

    for move in board.candidate_moves(player.symbol):
        if not board.update_board(move):
            continue
        try:
            score = _search(board, player, opponent, opponent, 1, alpha, math.inf)
        finally:
            _undo(board, move)

        if score > best_score:
            best_score, best_move = score, move
        alpha = max(alpha, score)

    return best_move
