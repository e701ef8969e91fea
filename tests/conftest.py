"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Cell, FieldShell, MineField


# ============================================================================
# Field Fixtures
# ============================================================================

@pytest.fixture
def corner_field() -> MineField:
    """4x4 field with mines at (0,1), (1,0) and (1,1)."""
    return MineField.create_for_tests([
        [False, True, False, False],
        [True, True, False, False],
        [False, False, False, False],
        [False, False, False, False],
    ])


@pytest.fixture
def column_field() -> MineField:
    """4x4 field with a column of mines on the right edge."""
    return MineField.create_for_tests([
        [False, False, False, True],
        [False, True, False, True],
        [False, False, True, True],
        [False, False, False, True],
    ])


@pytest.fixture
def single_mine_field() -> MineField:
    """5x5 field with one mine in the bottom-right corner."""
    layout = [[False] * 5 for _ in range(5)]
    layout[4][4] = True
    return MineField.create_for_tests(layout)


@pytest.fixture
def empty_field() -> MineField:
    """Random 6x6 field with no mines for flood testing."""
    return MineField.create(6, 6, 0, seed=0)


@pytest.fixture
def random_field() -> MineField:
    """Seeded 9x9 field with 10 mines."""
    return MineField.create(9, 9, 10, seed=42)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Shell Fixtures
# ============================================================================

@pytest.fixture
def corner_shell(corner_field: MineField) -> FieldShell:
    """Shell with 10 pixel cells over the corner field."""
    return FieldShell(corner_field, cell_size=10)
