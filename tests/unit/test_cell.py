"""
Unit tests for Cell and CellView.

Tests cell state management, reveal/flag behavior and view projection.
"""
import pytest
from minefield import (
    Cell,
    CellState,
    CellView,
    CellViewType,
    EMPTY_VIEW,
    FLAGGED_VIEW,
    HIDDEN_VIEW,
    MINED_VIEW,
)


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self) -> None:
        """New cell should not be a mine by default."""
        cell = Cell()
        assert cell.is_mine is False

    def test_default_cell_is_hidden(self) -> None:
        """New cell should be hidden by default."""
        cell = Cell()
        assert cell.state == CellState.HIDDEN
        assert cell.is_hidden is True

    def test_default_cell_has_zero_neighbour_mines(self) -> None:
        """New cell should have 0 neighbour mines by default."""
        cell = Cell()
        assert cell.neighbour_mines == 0


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_hidden_cell_returns_true(self, hidden_cell: Cell) -> None:
        """Revealing a hidden cell should succeed."""
        assert hidden_cell.reveal() is True
        assert hidden_cell.is_revealed is True

    def test_reveal_already_revealed_returns_false(
        self, hidden_cell: Cell
    ) -> None:
        """Revealing an already revealed cell should report no change."""
        hidden_cell.reveal()
        assert hidden_cell.reveal() is False

    def test_reveal_flagged_cell_drops_flag(self, hidden_cell: Cell) -> None:
        """A revealed cell is never flagged."""
        hidden_cell.toggle_flag()
        assert hidden_cell.reveal() is True
        assert hidden_cell.is_revealed is True
        assert hidden_cell.is_flagged is False


# ============================================================================
# Cell Flag Tests
# ============================================================================

class TestCellFlag:
    """Test cell flagging behavior."""

    def test_flag_hidden_cell_returns_true(self, hidden_cell: Cell) -> None:
        """Flagging a hidden cell should succeed."""
        assert hidden_cell.toggle_flag() is True
        assert hidden_cell.state == CellState.FLAGGED

    def test_unflag_returns_to_hidden(self, hidden_cell: Cell) -> None:
        """Unflagging a cell should return it to hidden."""
        hidden_cell.toggle_flag()
        hidden_cell.toggle_flag()
        assert hidden_cell.is_hidden is True

    def test_flag_revealed_cell_returns_false(self, hidden_cell: Cell) -> None:
        """Cannot flag a revealed cell."""
        hidden_cell.reveal()
        assert hidden_cell.toggle_flag() is False
        assert hidden_cell.is_revealed is True


# ============================================================================
# Cell View Tests
# ============================================================================

class TestCellToView:
    """Test projection of cells to views."""

    def test_hidden_mine_looks_hidden(self, mine_cell: Cell) -> None:
        """An unrevealed mine must not give itself away."""
        assert mine_cell.to_view() == HIDDEN_VIEW

    def test_flagged_cell_view(self, mine_cell: Cell) -> None:
        """Flagged cell shows as flagged."""
        mine_cell.toggle_flag()
        assert mine_cell.to_view() == FLAGGED_VIEW

    def test_revealed_mine_view(self, mine_cell: Cell) -> None:
        """Revealed mine shows as mined."""
        mine_cell.reveal()
        assert mine_cell.to_view() == MINED_VIEW

    def test_revealed_empty_cell_has_no_count(self, hidden_cell: Cell) -> None:
        """Revealed cell with no neighbour mines carries no count."""
        hidden_cell.reveal()
        view = hidden_cell.to_view()
        assert view == EMPTY_VIEW
        assert view.type == CellViewType.REVEALED
        assert view.neighbour_mines is None
        assert view.has_count is False

    @pytest.mark.parametrize("count", range(1, 9))
    def test_revealed_cell_view_carries_count(self, count: int) -> None:
        """Revealed numbered cell carries its neighbour count."""
        cell = Cell(neighbour_mines=count)
        cell.reveal()
        assert cell.to_view() == CellView(CellViewType.REVEALED, count)


class TestCellView:
    """Test view construction and encoding."""

    def test_revealed_factory_with_zero_is_empty(self) -> None:
        """Zero count maps to the plain revealed view."""
        assert CellView.revealed(0) is EMPTY_VIEW

    @pytest.mark.parametrize(
        "view_type",
        [CellViewType.HIDDEN, CellViewType.FLAGGED, CellViewType.MINED],
    )
    def test_count_on_non_revealed_view_raises_error(
        self, view_type: CellViewType
    ) -> None:
        """Only revealed views may carry a count."""
        with pytest.raises(ValueError, match="cannot carry"):
            CellView(view_type, 2)

    @pytest.mark.parametrize("count", [0, 9, -1])
    def test_out_of_range_count_raises_error(self, count: int) -> None:
        """Counts must lie between 1 and 8."""
        with pytest.raises(ValueError, match="between 1 and 8"):
            CellView(CellViewType.REVEALED, count)

    @pytest.mark.parametrize(
        "view, expected",
        [
            (HIDDEN_VIEW, -1),
            (FLAGGED_VIEW, -2),
            (MINED_VIEW, 9),
            (EMPTY_VIEW, 0),
            (CellView.revealed(5), 5),
        ],
    )
    def test_to_observation(self, view: CellView, expected: int) -> None:
        """Views encode to the documented integers."""
        assert view.to_observation() == expected

    def test_views_are_immutable(self) -> None:
        """Views cannot be changed after construction."""
        with pytest.raises(AttributeError):
            HIDDEN_VIEW.type = CellViewType.MINED
