"""
Cell module for the minefield.

Represents individual cells of the grid with their state
(hidden/flagged/revealed) and content (mine/neighbour count), and the
mine-hiding view that is exposed to front ends.
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


# ============================================================================
# Constants
# ============================================================================

MAX_NEIGHBOUR_MINES = 8


class CellState(Enum):
    """Possible player-facing states of a cell."""

    HIDDEN = auto()
    FLAGGED = auto()
    REVEALED = auto()


class CellViewType(Enum):
    """Kinds of cell views exposed outside the field."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()
    MINED = auto()


# ============================================================================
# Cell View
# ============================================================================

@dataclass(frozen=True)
class CellView:
    """
    Read-only projection of a cell.

    Only a ``REVEALED`` view carries a neighbour count, and only when that
    count is non-zero. An unrevealed cell never tells whether it is mined.

    Attributes:
        type: Kind of view.
        neighbour_mines: Adjacent mine count (1-8) for numbered cells.
    """

    type: CellViewType = CellViewType.HIDDEN
    neighbour_mines: Optional[int] = None

    def __post_init__(self) -> None:
        """Reject counts on views that cannot carry one."""
        if self.neighbour_mines is None:
            return
        if self.type != CellViewType.REVEALED:
            raise ValueError(
                f"{self.type.name} view cannot carry a neighbour count"
            )
        if not 1 <= self.neighbour_mines <= MAX_NEIGHBOUR_MINES:
            raise ValueError(
                f"Neighbour count must be between 1 and {MAX_NEIGHBOUR_MINES}"
            )

    @classmethod
    def revealed(cls, neighbour_mines: int) -> "CellView":
        """Build the view of a revealed safe cell."""
        if neighbour_mines == 0:
            return EMPTY_VIEW
        return cls(CellViewType.REVEALED, neighbour_mines)

    @property
    def has_count(self) -> bool:
        """Check if this is a numbered revealed cell."""
        return self.neighbour_mines is not None

    def to_observation(self) -> int:
        """
        Encode the view as a small integer.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with its neighbour mine count
            9: Revealed mine
        """
        if self.type == CellViewType.HIDDEN:
            return -1
        if self.type == CellViewType.FLAGGED:
            return -2
        if self.type == CellViewType.MINED:
            return 9
        return self.neighbour_mines or 0


HIDDEN_VIEW = CellView(CellViewType.HIDDEN)
FLAGGED_VIEW = CellView(CellViewType.FLAGGED)
MINED_VIEW = CellView(CellViewType.MINED)
EMPTY_VIEW = CellView(CellViewType.REVEALED)


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    A single cell of the minefield.

    Attributes:
        is_mine: Whether this cell holds a mine.
        neighbour_mines: Count of mines in the adjacent cells (0-8).
        state: Current state (hidden, flagged or revealed).
    """

    is_mine: bool = False
    neighbour_mines: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """
        Reveal this cell, dropping any flag on it.

        Returns:
            True if the cell was not revealed before.
        """
        if self.state == CellState.REVEALED:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_view(self) -> CellView:
        """Project this cell to the view shown to players."""
        if self.state == CellState.FLAGGED:
            return FLAGGED_VIEW
        if self.state == CellState.HIDDEN:
            return HIDDEN_VIEW
        if self.is_mine:
            return MINED_VIEW
        return CellView.revealed(self.neighbour_mines)
