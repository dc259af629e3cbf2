"""
Board module for the Minesweeper rules engine.

Holds the board configuration, the owned grid of cells, and the board
generator that places mines and computes adjacency numbers.
"""
import logging
import random
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple

from .cell import Cell, CellStatus

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows (height).
        columns: Number of columns (width).
        mine_count: Total mines to place.
    """

    rows: int = 16
    columns: int = 30
    mine_count: int = 99

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.columns < 1:
            raise ValueError("Board dimensions must be positive")
        if self.mine_count < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.rows * self.columns - 1
        if self.mine_count > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.rows * self.columns

    @property
    def safe_cells(self) -> int:
        """Number of non-mined cells, i.e. the reveals needed to win."""
        return self.total_cells - self.mine_count


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(16, 30, 99)

PRESETS = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Owned grid of cells.

    Cells live in one flat list indexed by ``y * columns + x``. All
    coordinate access goes through ``cell`` or ``neighbors``, which are
    the only places bounds are checked.
    """

    config: BoardConfig = field(default_factory=lambda: EXPERT)
    _cells: List[Cell] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        if not self._cells:
            self._init_grid()

    @classmethod
    def from_mines(
        cls, config: BoardConfig, mines: Iterable[Position]
    ) -> "Board":
        """
        Build a board with a fixed mine layout.

        Args:
            config: Board configuration; ``mine_count`` must match.
            mines: (x, y) positions of the mines.

        Returns:
            Fully numbered board with every cell covered.
        """
        positions = list(mines)
        if len(set(positions)) != len(positions):
            raise ValueError("Duplicate mine positions")
        if len(positions) != config.mine_count:
            raise ValueError(
                f"Expected {config.mine_count} mines, got {len(positions)}"
            )
        board = cls(config)
        for x, y in positions:
            if not board.in_bounds(x, y):
                raise ValueError(f"Mine position ({x}, {y}) is off the board")
            board._cells[board._index(x, y)].is_mine = True
        board._calculate_adjacent_mines()
        return board

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create a grid of covered Number(0) cells."""
        self._cells = [Cell() for _ in range(self.config.total_cells)]

    def _place_mines(self, rng: random.Random) -> None:
        """Shuffle every position and mine the first ``mine_count``."""
        positions = [
            (x, y)
            for y in range(self.config.rows)
            for x in range(self.config.columns)
        ]
        rng.shuffle(positions)
        for x, y in positions[:self.config.mine_count]:
            self._cells[self._index(x, y)].is_mine = True

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all non-mined cells."""
        for y in range(self.config.rows):
            for x in range(self.config.columns):
                cell = self._cells[self._index(x, y)]
                if not cell.is_mine:
                    cell.adjacent_mines = self._count_adjacent_mines(x, y)

    def _count_adjacent_mines(self, x: int, y: int) -> int:
        """Count mines adjacent to a specific cell."""
        return sum(
            1 for nx, ny in self.neighbors(x, y)
            if self._cells[self._index(nx, ny)].is_mine
        )

    # ========================================================================
    # Coordinate Utilities (Low-level)
    # ========================================================================

    def _index(self, x: int, y: int) -> int:
        return y * self.config.columns + x

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.config.columns and 0 <= y < self.config.rows

    def check_bounds(self, x: int, y: int) -> None:
        """Raise IndexError if (x, y) is outside the grid."""
        if not self.in_bounds(x, y):
            raise IndexError(
                f"Cell ({x}, {y}) outside {self.config.columns}x"
                f"{self.config.rows} board"
            )

    def neighbors(self, x: int, y: int) -> Iterator[Position]:
        """
        Yield in-bounds neighboring positions.

        Args:
            x: Column of center cell.
            y: Row of center cell.

        Yields:
            (x, y) tuples for up to 8 neighbors; edges never wrap.
        """
        for ny in range(max(0, y - 1), min(self.config.rows, y + 2)):
            for nx in range(max(0, x - 1), min(self.config.columns, x + 2)):
                if nx == x and ny == y:
                    continue
                yield nx, ny

    # ========================================================================
    # Accessors
    # ========================================================================

    def cell(self, x: int, y: int) -> Cell:
        """Get cell at position, raising IndexError if invalid."""
        self.check_bounds(x, y)
        return self._cells[self._index(x, y)]

    def __iter__(self) -> Iterator[Tuple[Position, Cell]]:
        """Iterate ((x, y), cell) in row-major order."""
        for y in range(self.config.rows):
            for x in range(self.config.columns):
                yield (x, y), self._cells[self._index(x, y)]

    def mine_positions(self) -> List[Position]:
        return [pos for pos, cell in self if cell.is_mine]

    def count_status(self, status: CellStatus) -> int:
        return sum(1 for cell in self._cells if cell.status == status)


# ============================================================================
# Generator
# ============================================================================

def generate(
    config: BoardConfig, rng: Optional[random.Random] = None
) -> Board:
    """
    Generate a fresh board ready for play.

    Args:
        config: Validated board configuration.
        rng: Random source for mine placement (fresh one if omitted).

    Returns:
        Board with mines placed uniformly at random and every non-mined
        cell numbered; all cells covered.
    """
    board = Board(config)
    board._place_mines(rng or random.Random())
    board._calculate_adjacent_mines()
    logger.debug(
        "Generated %dx%d board with %d mines",
        config.columns, config.rows, config.mine_count,
    )
    return board
