"""
Cell module for the Minesweeper rules engine.

A cell pairs a value fixed at generation time (a mine, or the number of
mined neighbors) with a play status that changes as the game goes on.
The cell also owns its outward encodings: the integer observation code
used by agents and the one-character symbol used by the text render.
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


# ============================================================================
# Constants
# ============================================================================

class CellStatus(Enum):
    """Possible play states of a cell."""

    COVERED = auto()
    FLAGGED = auto()
    REVEALED = auto()


# Observation codes; revealed numbers encode as themselves (0-8)
OBS_COVERED = -1
OBS_FLAGGED = -2
OBS_MINE = 9

SYMBOL_COVERED = "."
SYMBOL_FLAGGED = "F"
SYMBOL_MINE = "*"
SYMBOL_EMPTY = " "


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell holds a mine.
        adjacent_mines: Mined neighbors (0-8); meaningless for a mine.
        status: Current play status.
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    status: CellStatus = CellStatus.COVERED

    @property
    def value(self) -> Optional[int]:
        """Adjacency number, or None for a mined cell."""
        if self.is_mine:
            return None
        return self.adjacent_mines

    @property
    def is_covered(self) -> bool:
        return self.status == CellStatus.COVERED

    @property
    def is_revealed(self) -> bool:
        return self.status == CellStatus.REVEALED

    @property
    def is_flagged(self) -> bool:
        return self.status == CellStatus.FLAGGED

    # ========================================================================
    # Status Transitions
    # ========================================================================

    def reveal(self) -> bool:
        """Open a covered cell; flagged and revealed cells stay as they are."""
        if not self.is_covered:
            return False
        self.status = CellStatus.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """Swap COVERED and FLAGGED; False for a revealed cell."""
        if self.is_revealed:
            return False
        self.status = (
            CellStatus.COVERED if self.is_flagged else CellStatus.FLAGGED
        )
        return True

    # ========================================================================
    # Encodings
    # ========================================================================

    def to_observation(self) -> int:
        """
        Integer code of what a player can see of this cell.

        Returns:
            -1 covered, -2 flagged, 0-8 revealed number, 9 revealed mine.
        """
        if self.is_flagged:
            return OBS_FLAGGED
        if not self.is_revealed:
            return OBS_COVERED
        return OBS_MINE if self.is_mine else self.adjacent_mines

    def to_symbol(self, expose_mine: bool = False) -> str:
        """
        One-character text symbol for this cell.

        Args:
            expose_mine: Show a covered mine, as after a lost game.
        """
        if self.is_flagged:
            return SYMBOL_FLAGGED
        if self.is_revealed or (expose_mine and self.is_mine):
            if self.is_mine:
                return SYMBOL_MINE
            if self.adjacent_mines == 0:
                return SYMBOL_EMPTY
            return str(self.adjacent_mines)
        return SYMBOL_COVERED
