"""
Terminal shell for the minefield.

Maps pointer positions to cells, forwards clicks to the field and turns
cell views into colors and glyphs. Holds no game rules of its own.
"""
from typing import NamedTuple, Optional, Tuple

from .cell import CellView, CellViewType, MAX_NEIGHBOUR_MINES
from .field import MineField


# ============================================================================
# Colors and Glyphs
# ============================================================================

class Color(NamedTuple):
    """RGB color with 0-255 channels."""

    r: int
    g: int
    b: int


HIDDEN_COLOR = Color(200, 200, 200)
FLAGGED_COLOR = Color(255, 255, 0)
MINED_COLOR = Color(255, 0, 0)


def color_for_view(view: CellView) -> Color:
    """
    Pick the fill color of a cell.

    Revealed cells are white and get bluer as the neighbour count grows.
    """
    if view.type == CellViewType.HIDDEN:
        return HIDDEN_COLOR
    if view.type == CellViewType.FLAGGED:
        return FLAGGED_COLOR
    if view.type == CellViewType.MINED:
        return MINED_COLOR
    coeff = 1.0 - (view.neighbour_mines or 0) / MAX_NEIGHBOUR_MINES
    return Color(int(255 * coeff), int(255 * coeff), 255)


def glyph_for_view(view: CellView) -> str:
    """Pick the character used to draw a cell in a terminal."""
    if view.type == CellViewType.HIDDEN:
        return "."
    if view.type == CellViewType.FLAGGED:
        return "F"
    if view.type == CellViewType.MINED:
        return "*"
    if view.has_count:
        return str(view.neighbour_mines)
    return " "


# ============================================================================
# Field Shell
# ============================================================================

class FieldShell:
    """
    Input and drawing front end around a :class:`MineField`.

    Pointer positions are in pixels; each cell is a ``cell_size`` square,
    rows running down the y axis and columns along the x axis.
    """

    def __init__(self, minefield: MineField, cell_size: int = 15) -> None:
        """
        Initialize the shell.

        Args:
            minefield: Field to play on.
            cell_size: Side of a cell in pixels.
        """
        if cell_size < 1:
            raise ValueError("Cell size must be positive")
        self.minefield = minefield
        self.cell_size = cell_size

    @classmethod
    def for_window(
        cls,
        width: int,
        height: int,
        cell_size: int = 15,
        num_mines: Optional[int] = None,
        seed: Optional[int] = None,
    ) -> "FieldShell":
        """
        Build a shell whose field fills a window.

        Args:
            width: Window width in pixels.
            height: Window height in pixels.
            cell_size: Side of a cell in pixels.
            num_mines: Mines to place (default: 3 per row).
            seed: Seed for mine placement.
        """
        rows = height // cell_size
        cols = width // cell_size
        if num_mines is None:
            num_mines = 3 * rows
        minefield = MineField.create(rows, cols, num_mines, seed=seed)
        return cls(minefield, cell_size)

    def pixel_to_cell(self, x: int, y: int) -> Optional[Tuple[int, int]]:
        """Map a pointer position to (row, col), or None off the field."""
        if x < 0 or y < 0:
            return None
        rows, cols = self.minefield.get_field_size()
        row = y // self.cell_size
        col = x // self.cell_size
        if row >= rows or col >= cols:
            return None
        return row, col

    def handle_left_click(self, x: int, y: int) -> bool:
        """
        Reveal the cell under the pointer.

        Returns:
            True if the click landed on the field while playing.
        """
        position = self._playable_position(x, y)
        if position is None:
            return False
        self.minefield.reveal(*position)
        return True

    def handle_right_click(self, x: int, y: int) -> bool:
        """
        Toggle the flag under the pointer.

        Returns:
            True if the click landed on the field while playing.
        """
        position = self._playable_position(x, y)
        if position is None:
            return False
        self.minefield.toggle_flag(*position)
        return True

    def _playable_position(self, x: int, y: int) -> Optional[Tuple[int, int]]:
        if self.minefield.is_game_over:
            return None
        return self.pixel_to_cell(x, y)

    def render(self) -> str:
        """Render the field as text, one line per row."""
        lines = []
        for views in self.minefield.get_field_view():
            lines.append(" ".join(glyph_for_view(view) for view in views))
        return "\n".join(lines)
