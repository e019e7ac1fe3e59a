"""
NumPy utilities for grid games.

Line extraction and k-in-a-row detection shared by the variants.
All helpers take the board grid (a 2-D array) and never mutate it.
"""

from __future__ import annotations

from functools import lru_cache
from typing import List, Tuple

import numpy as np

# (dr, dc) for horizontal, vertical, main diagonal, anti-diagonal
DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))


def in_bounds(board: np.ndarray, r: int, c: int) -> bool:
    """Return True if (r, c) is inside the board."""
    rows, cols = board.shape
    return 0 <= r < rows and 0 <= c < cols


def get_rows(board: np.ndarray) -> List[np.ndarray]:
    """Row extraction; slices are copied to avoid shared memory issues."""
    return [row.copy() for row in board]


def get_cols(board: np.ndarray) -> List[np.ndarray]:
    """Column extraction using slicing on board.T."""
    return [col.copy() for col in board.T]


def get_diagonals(board: np.ndarray) -> List[np.ndarray]:
    """Both full-length diagonals of a square board, copied."""
    major = board.diagonal().copy()
    minor = np.fliplr(board).diagonal().copy()
    return [major, minor]


def get_lines(board: np.ndarray) -> List[np.ndarray]:
    """Rows, columns and diagonals of a square board."""
    return get_rows(board) + get_cols(board) + get_diagonals(board)


def board_full(board: np.ndarray, blank) -> bool:
    """Return True if no cell holds the blank sentinel."""
    return not bool(np.any(board == blank))


@lru_cache(maxsize=None)
def line_windows(rows: int, cols: int, length: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Every straight run of ``length`` cells on a rows x cols grid.

    Returns (row_index, col_index) arrays of shape (N, length), suitable for
    fancy indexing: ``board[row_index, col_index]`` gives one run per row.
    Cached per shape; the arrays are read-only.
    """
    runs = []
    for r in range(rows):
        for c in range(cols):
            for dr, dc in DIRECTIONS:
                end_r, end_c = r + dr * (length - 1), c + dc * (length - 1)
                if 0 <= end_r < rows and 0 <= end_c < cols:
                    runs.append([(r + dr * i, c + dc * i) for i in range(length)])

    coords = np.array(runs, dtype=np.intp).reshape(-1, length, 2)
    row_index = coords[..., 0]
    col_index = coords[..., 1]
    row_index.setflags(write=False)
    col_index.setflags(write=False)
    return row_index, col_index


def _runs_of(board: np.ndarray, symbol, length: int) -> np.ndarray:
    rows, cols = board.shape
    row_index, col_index = line_windows(rows, cols, length)
    if row_index.size == 0:
        return np.zeros(0, dtype=bool)
    return np.all(board[row_index, col_index] == symbol, axis=1)


def count_lines(board: np.ndarray, symbol, length: int) -> int:
    """Number of (possibly overlapping) runs of ``length`` equal to ``symbol``."""
    return int(np.count_nonzero(_runs_of(board, symbol, length)))


def has_line(board: np.ndarray, symbol, length: int) -> bool:
    """True if ``symbol`` occupies some straight run of ``length`` cells."""
    return bool(np.any(_runs_of(board, symbol, length)))
