"""
Pure text rendering of board grids.

Every function here turns a grid into a string and has no other effect;
writing the string to a terminal is the UI's job.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

import numpy as np


def cell_text(value: Any, cell_strings: Optional[Mapping[Any, str]] = None) -> str:
    """Display string for one cell value."""
    if cell_strings:
        for key, text in cell_strings.items():
            if value == key:
                return text
    return str(value)


def render_grid(
    matrix,
    cell_strings: Optional[Mapping[Any, str]] = None,
    show_indices: bool = True,
) -> str:
    """
    Box-drawn grid with optional row/column indices.

    ╭───┬───╮
    │ X │   │
    ├───┼───┤
    │   │ O │
    ╰───┴───╯
    """
    grid = np.asarray(matrix, dtype=object)
    rows, cols = grid.shape
    cells = [[cell_text(grid[r, c], cell_strings) for c in range(cols)] for r in range(rows)]
    width = max([1] + [len(text) for row in cells for text in row])
    if show_indices:
        width = max(width, len(str(cols - 1)))
    margin = " " * (len(str(rows - 1)) + 1) if show_indices else ""

    def border(left: str, mid: str, right: str) -> str:
        return margin + left + mid.join("─" * (width + 2) for _ in range(cols)) + right

    lines = []
    if show_indices:
        lines.append(margin + " " + " ".join(f" {c:^{width}} " for c in range(cols)))
    lines.append(border("╭", "┬", "╮"))
    for r in range(rows):
        label = f"{r:>{len(margin) - 1}} " if show_indices else ""
        lines.append(label + "│ " + " │ ".join(f"{text:^{width}}" for text in cells[r]) + " │")
        if r < rows - 1:
            lines.append(border("├", "┼", "┤"))
    lines.append(border("╰", "┴", "╯"))
    return "\n".join(lines)


def render_blocks(
    matrix,
    block: int,
    cell_strings: Optional[Mapping[Any, str]] = None,
) -> str:
    """
    Plain grid split into ``block`` x ``block`` sub-grids (nested boards).

        0 1 2   3 4 5
      0 X . . | . . .
        ------+------
    """
    grid = np.asarray(matrix, dtype=object)
    rows, cols = grid.shape
    label_width = len(str(rows - 1))

    header = " " * (label_width + 1)
    for c in range(cols):
        if c and c % block == 0:
            header += "| "
        header += f"{c} "
    lines = [header.rstrip()]

    separator = " " * (label_width + 1) + "+-".join("-" * (2 * block) for _ in range(cols // block))
    for r in range(rows):
        if r and r % block == 0:
            lines.append(separator)
        row = f"{r:>{label_width}} "
        for c in range(cols):
            if c and c % block == 0:
                row += "| "
            row += cell_text(grid[r, c], cell_strings) + " "
        lines.append(row.rstrip())
    return "\n".join(lines)
