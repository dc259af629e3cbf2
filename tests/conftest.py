"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell, Game


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Deterministic random source."""
    return random.Random(1234)


@pytest.fixture
def corner_mine_board() -> Board:
    """3x3 board with its only mine at (2, 2)."""
    return Board.from_mines(BoardConfig(3, 3, 1), [(2, 2)])


@pytest.fixture
def corner_mine_game(corner_mine_board: Board) -> Game:
    """Game on the 3x3 board with its only mine at (2, 2)."""
    return Game(board=corner_mine_board)


@pytest.fixture
def chord_game() -> Game:
    """
    5x3 board for chord testing.

    Mines at (0, 0) and (2, 0), so (1, 1) reads 2 and its covered
    neighbors include a safe (1, 0).

        * 2 * 1 0
        1 2 1 1 0
        0 0 0 0 0
    """
    config = BoardConfig(rows=3, columns=5, mine_count=2)
    return Game(board=Board.from_mines(config, [(0, 0), (2, 0)]))


@pytest.fixture
def empty_game() -> Game:
    """5x5 game with no mines for cascade testing."""
    return Game(BoardConfig(5, 5, 0))


@pytest.fixture
def beginner_game(rng: random.Random) -> Game:
    """Seeded 9x9 game with 10 mines."""
    return Game(BoardConfig(9, 9, 10), rng=rng)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def covered_cell() -> Cell:
    """Create a covered cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)
