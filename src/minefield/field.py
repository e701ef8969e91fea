"""
Minefield module.

Implements the rules engine: mine placement, neighbour counting,
flood-fill reveal, flagging and game-over tracking.
"""
import logging
import numbers
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .cell import Cell, CellView


logger = logging.getLogger(__name__)

ORTHOGONAL_OFFSETS = ((-1, 0), (0, -1), (0, 1), (1, 0))
DIAGONAL_OFFSETS = ((-1, -1), (-1, 1), (1, -1), (1, 1))


# ============================================================================
# Configuration
# ============================================================================

@dataclass
class FieldConfig:
    """
    Configuration for a randomly mined field.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Total mines to place.
    """

    rows: int = 9
    cols: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        values = (self.rows, self.cols, self.num_mines)
        if not all(
            isinstance(value, numbers.Integral) and not isinstance(value, bool)
            for value in values
        ):
            raise ValueError("Field dimensions and mine count must be integers")
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Field dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.rows * self.cols
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")


# ============================================================================
# MineField Class
# ============================================================================

@dataclass
class MineField:
    """
    Minesweeper minefield.

    Holds the grid of cells and the game-over flag. Build one with
    :meth:`create` (random mines) or :meth:`create_for_tests` (explicit
    layout); the field keeps its size for its whole life.
    """

    _grid: List[List[Cell]] = field(repr=False)
    _game_over: bool = False

    def __post_init__(self) -> None:
        """Reject grids without cells."""
        if not self._grid or any(len(cells) == 0 for cells in self._grid):
            raise ValueError("Mine layout must have at least one non-empty row")

    # ========================================================================
    # Construction
    # ========================================================================

    @classmethod
    def create(
        cls,
        rows: int,
        cols: int,
        num_mines: int,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> "MineField":
        """
        Create a field with mines at random positions.

        Args:
            rows: Number of rows.
            cols: Number of columns.
            num_mines: Number of distinct cells to mine.
            seed: Seed for a fresh generator, ignored when rng is given.
            rng: Generator to draw mine positions from.

        Returns:
            New field with all cells hidden.

        Raises:
            ValueError: If the dimensions or mine count are invalid.
        """
        config = FieldConfig(rows, cols, num_mines)
        if rng is None:
            rng = np.random.default_rng(seed)

        grid = [[Cell() for _ in range(config.cols)] for _ in range(config.rows)]
        positions = rng.choice(
            config.rows * config.cols, size=config.num_mines, replace=False
        )
        for position in positions:
            row, col = divmod(int(position), config.cols)
            grid[row][col].is_mine = True

        minefield = cls(grid)
        minefield._calculate_neighbour_mines()
        logger.debug(
            "Created %dx%d field with %d mines",
            config.rows, config.cols, config.num_mines,
        )
        return minefield

    @classmethod
    def create_for_tests(cls, layout: Sequence[Sequence[bool]]) -> "MineField":
        """
        Create a field from an explicit mine layout.

        Args:
            layout: Rows of booleans, True where a mine sits. Rows may
                differ in length.

        Returns:
            New field with all cells hidden.

        Raises:
            ValueError: If the layout has no rows or an empty row.
        """
        grid = [[Cell(is_mine=bool(mined)) for mined in row] for row in layout]
        minefield = cls(grid)
        minefield._calculate_neighbour_mines()
        return minefield

    def _calculate_neighbour_mines(self) -> None:
        """Calculate neighbour mine counts for all cells."""
        for row, cells in enumerate(self._grid):
            for col, cell in enumerate(cells):
                cell.neighbour_mines = self._count_neighbour_mines(row, col)

    def _count_neighbour_mines(self, row: int, col: int) -> int:
        """Count mines among the up to 8 cells around a position."""
        neighbours = self._get_neighbours(row, col, with_corners=True)
        return sum(
            1 for nrow, ncol in neighbours if self._grid[nrow][ncol].is_mine
        )

    # ========================================================================
    # Neighbour Utilities
    # ========================================================================

    def _get_neighbours(
        self, row: int, col: int, with_corners: bool
    ) -> List[Tuple[int, int]]:
        """
        Get in-bounds neighbour positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.
            with_corners: Include the 4 diagonal neighbours.

        Returns:
            List of (row, col) tuples for valid neighbours.
        """
        offsets = ORTHOGONAL_OFFSETS
        if with_corners:
            offsets = ORTHOGONAL_OFFSETS + DIAGONAL_OFFSETS
        return [
            (row + delta_row, col + delta_col)
            for delta_row, delta_col in offsets
            if self._is_valid_position(row + delta_row, col + delta_col)
        ]

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within the grid."""
        return 0 <= row < len(self._grid) and 0 <= col < len(self._grid[row])

    # ========================================================================
    # Game Actions
    # ========================================================================

    def reveal(self, row: int, col: int) -> int:
        """
        Reveal the cell at the given position.

        A mine ends the game. A cell with no neighbouring mines opens the
        connected zero region through its orthogonal neighbours, stopping
        at numbered cells (which are revealed) and at flagged or mined
        cells (which are not).

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            Number of cells that became revealed.
        """
        if self._game_over or not self._is_valid_position(row, col):
            return 0

        cell = self._grid[row][col]
        revealed = int(cell.reveal())

        if cell.is_mine:
            return revealed + self._game_over_transition()
        if cell.neighbour_mines > 0:
            return revealed
        return revealed + self._flood_reveal(row, col)

    def _flood_reveal(self, row: int, col: int) -> int:
        """Open the zero region around a revealed empty cell."""
        revealed = 0
        stack = self._unrevealed_orthogonal_neighbours(row, col)
        while stack:
            row, col = stack.pop()
            cell = self._grid[row][col]
            if cell.is_revealed or cell.is_mine or cell.is_flagged:
                continue
            cell.reveal()
            revealed += 1
            if cell.neighbour_mines == 0:
                stack.extend(self._unrevealed_orthogonal_neighbours(row, col))
        return revealed

    def _unrevealed_orthogonal_neighbours(
        self, row: int, col: int
    ) -> List[Tuple[int, int]]:
        """Get orthogonal neighbours that are not revealed yet."""
        return [
            (nrow, ncol)
            for nrow, ncol in self._get_neighbours(row, col, with_corners=False)
            if not self._grid[nrow][ncol].is_revealed
        ]

    def _game_over_transition(self) -> int:
        """End the game and show every mine."""
        self._game_over = True
        revealed = 0
        for cells in self._grid:
            for cell in cells:
                if cell.is_mine and cell.reveal():
                    revealed += 1
        logger.debug("Game over, %d more mines shown", revealed)
        return revealed

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if flag was toggled, False otherwise.
        """
        if self._game_over or not self._is_valid_position(row, col):
            return False
        return self._grid[row][col].toggle_flag()

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def is_game_over(self) -> bool:
        """Check if a mine has been revealed."""
        return self._game_over

    @property
    def num_mines(self) -> int:
        """Total mines in the field."""
        return sum(cell.is_mine for cells in self._grid for cell in cells)

    def get_field_size(self) -> Tuple[int, int]:
        """Get (rows, cols) of the field."""
        return len(self._grid), len(self._grid[0])

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self._is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def get_field_view(self) -> List[List[CellView]]:
        """Get the view of every cell, row by row."""
        return [[cell.to_view() for cell in cells] for cells in self._grid]

    def get_observation(self) -> np.ndarray:
        """
        Get the field view as a numpy array.

        Returns:
            2D int8 array of ``CellView.to_observation`` values. Cells
            missing from short rows are left at -1.
        """
        rows = len(self._grid)
        cols = max(len(cells) for cells in self._grid)
        obs = np.full((rows, cols), -1, dtype=np.int8)
        for row, cells in enumerate(self._grid):
            for col, cell in enumerate(cells):
                obs[row, col] = cell.to_view().to_observation()
        return obs
