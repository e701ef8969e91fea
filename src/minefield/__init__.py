"""
Minefield package.

Provides the Minesweeper rules engine (cells, views and the field) and a
small terminal shell that plays on it.
"""
from .cell import (
    Cell,
    CellState,
    CellView,
    CellViewType,
    HIDDEN_VIEW,
    FLAGGED_VIEW,
    MINED_VIEW,
    EMPTY_VIEW,
)
from .field import FieldConfig, MineField
from .shell import Color, FieldShell, color_for_view, glyph_for_view

__all__ = [
    "Cell",
    "CellState",
    "CellView",
    "CellViewType",
    "HIDDEN_VIEW",
    "FLAGGED_VIEW",
    "MINED_VIEW",
    "EMPTY_VIEW",
    "FieldConfig",
    "MineField",
    "Color",
    "FieldShell",
    "color_for_view",
    "glyph_for_view",
]
