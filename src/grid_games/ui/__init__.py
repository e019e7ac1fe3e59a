"""
UI module - console input/output and grid rendering.
"""

from grid_games.ui.rendering import cell_text, render_grid, render_blocks
from grid_games.ui.ui_base import UIBase, PlayerSpec, KIND_LABELS

__all__ = [
    "UIBase",
    "PlayerSpec",
    "KIND_LABELS",
    "cell_text",
    "render_grid",
    "render_blocks",
]
