"""
Game engine module for Minesweeper.

Owns the live board, the game status state machine, and the revealed and
flag counters. The engine is a synchronous state container: the
presentation layer calls into it and reads back a ``Snapshot``.
"""
import logging
import random
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import List, Optional, Tuple

import numpy as np

from .board import Board, BoardConfig, EXPERT, Position, generate
from .cell import CellStatus

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    PRESSING = auto()
    LOST = auto()
    WON = auto()

    @property
    def is_active(self) -> bool:
        """PLAYING and PRESSING accept moves; LOST and WON are terminal."""
        return self in (GameStatus.PLAYING, GameStatus.PRESSING)


# ============================================================================
# Snapshot
# ============================================================================

@dataclass(frozen=True)
class CellView:
    """
    What the presentation layer may see of a cell.

    ``value`` and ``is_mine`` are only filled in for revealed cells;
    ``observation`` and ``symbol`` are the cell's own encodings.
    """

    status: CellStatus
    observation: int
    symbol: str
    value: Optional[int] = None
    is_mine: bool = False


@dataclass(frozen=True)
class Snapshot:
    """
    Renderable, read-only view of the game after an operation.

    Attributes:
        rows: Board height.
        columns: Board width.
        status: Current game status.
        cells: Row-major cell views, ``cells[y][x]``.
        revealed_count: Number of revealed safe cells.
        flag_count: Number of flagged cells.
        mine_count: Configured number of mines.
        safe_cells: Reveals needed to win.
        exposed_mines: Every mine position once the game is lost, else empty.
    """

    rows: int
    columns: int
    status: GameStatus
    cells: Tuple[Tuple[CellView, ...], ...]
    revealed_count: int
    flag_count: int
    mine_count: int
    safe_cells: int
    exposed_mines: Tuple[Position, ...] = ()

    def cell(self, x: int, y: int) -> CellView:
        return self.cells[y][x]

    @property
    def mines_remaining(self) -> int:
        """Counter shown to the player: mines minus flags placed."""
        return self.mine_count - self.flag_count

    @property
    def progress(self) -> float:
        """Fraction of safe cells revealed."""
        return self.revealed_count / self.safe_cells

    def to_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array of shape (rows, columns) where:
                -1 = covered
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        return np.array(
            [[view.observation for view in row] for row in self.cells],
            dtype=np.int8,
        )

    def render_text(self) -> str:
        """Render board as plain text, one line per row."""
        return "\n".join(
            " ".join(view.symbol for view in row) for row in self.cells
        )


# ============================================================================
# Game Class
# ============================================================================

class Game:
    """
    Minesweeper rules engine.

    Exposes ``reveal``, ``chord_reveal``, ``toggle_flag`` and ``reset``.
    Mutating operations return True when they changed state and False
    for benign no-ops; out-of-bounds coordinates raise IndexError.
    """

    def __init__(
        self,
        config: BoardConfig = EXPERT,
        rng: Optional[random.Random] = None,
        board: Optional[Board] = None,
    ) -> None:
        """
        Initialize the game.

        Args:
            config: Board configuration (default: 16x30 with 99 mines).
            rng: Random source used for every generated board.
            board: Pre-built board to start from instead of generating one.
        """
        self.config = board.config if board is not None else config
        self._rng = rng or random.Random()
        if board is None:
            self.reset()
        else:
            self._start(board)

    def _start(self, board: Board) -> None:
        self.board = board
        self.status = GameStatus.PLAYING
        self.revealed_count = 0
        self.flag_count = 0

    def reset(self, rng: Optional[random.Random] = None) -> "Game":
        """
        Discard the current board and start over with a fresh one.

        Args:
            rng: Replacement random source for this and later boards.
        """
        if rng is not None:
            self._rng = rng
        self._start(generate(self.config, self._rng))
        logger.debug("New game started")
        return self

    # ========================================================================
    # Press State
    # ========================================================================

    def press(self) -> bool:
        """Enter the transient PRESSING state while a button is held."""
        if self.status != GameStatus.PLAYING:
            return False
        self.status = GameStatus.PRESSING
        return True

    def release(self) -> bool:
        """Return from PRESSING to PLAYING."""
        if self.status != GameStatus.PRESSING:
            return False
        self.status = GameStatus.PLAYING
        return True

    # ========================================================================
    # Game Actions
    # ========================================================================

    def reveal(self, x: int, y: int) -> bool:
        """
        Reveal a covered cell.

        Revealing a mine loses the game. Revealing a zero cell flood-fills
        its connected zero region plus the bordering numbered cells;
        flagged cells are never crossed.

        Args:
            x: Column to reveal.
            y: Row to reveal.

        Returns:
            True if any cell was revealed, False otherwise.
        """
        if not self.can_reveal(x, y):
            return False

        cell = self.board.cell(x, y)
        if cell.is_mine:
            cell.reveal()
            self._finish(GameStatus.LOST)
            return True

        before = self.revealed_count
        self._flood_reveal(x, y)
        logger.debug(
            "Revealed %d cell(s) from (%d, %d)",
            self.revealed_count - before, x, y,
        )
        return True

    def _flood_reveal(self, x: int, y: int) -> None:
        """Reveal from (x, y) using an explicit work-list."""
        pending: List[Position] = [(x, y)]
        while pending:
            cx, cy = pending.pop()
            cell = self.board.cell(cx, cy)
            if not cell.reveal():
                continue

            self.revealed_count += 1
            if self.revealed_count >= self.config.safe_cells:
                self._finish(GameStatus.WON)
                return

            if cell.adjacent_mines == 0:
                pending.extend(
                    (nx, ny) for nx, ny in self.board.neighbors(cx, cy)
                    if not self.board.cell(nx, ny).is_revealed
                )

    def chord_reveal(self, x: int, y: int) -> bool:
        """
        Reveal every covered neighbor of a revealed number.

        Only acts when the number of flagged neighbors equals the cell's
        number. Each neighbor goes through ``reveal``, so a wrongly placed
        flag can still lose the game.

        Args:
            x: Column of a revealed numbered cell.
            y: Row of a revealed numbered cell.

        Returns:
            True if any neighbor was revealed, False otherwise.
        """
        if not self.can_chord(x, y):
            return False

        revealed_any = False
        for nx, ny in list(self.board.neighbors(x, y)):
            if not self.status.is_active:
                break
            if self.board.cell(nx, ny).is_covered:
                revealed_any = self.reveal(nx, ny) or revealed_any
        return revealed_any

    def toggle_flag(self, x: int, y: int) -> bool:
        """
        Toggle a flag on a covered or flagged cell.

        New flags are refused once ``flag_count`` reaches the mine count.

        Args:
            x: Column.
            y: Row.

        Returns:
            True if flag was toggled, False otherwise.
        """
        if not self.can_flag(x, y):
            return False

        cell = self.board.cell(x, y)
        cell.toggle_flag()
        if cell.is_flagged:
            self.flag_count += 1
        else:
            self.flag_count -= 1
        logger.debug("Flag at (%d, %d) -> %s", x, y, cell.status.name)
        return True

    def _finish(self, status: GameStatus) -> None:
        self.status = status
        logger.info(
            "Game %s with %d/%d safe cells revealed",
            status.name.lower(), self.revealed_count, self.config.safe_cells,
        )

    # ========================================================================
    # Legality Queries
    # ========================================================================

    def can_reveal(self, x: int, y: int) -> bool:
        """Check if ``reveal`` would act on (x, y)."""
        cell = self.board.cell(x, y)
        return self.status.is_active and cell.is_covered

    def can_flag(self, x: int, y: int) -> bool:
        """Check if ``toggle_flag`` would act on (x, y)."""
        cell = self.board.cell(x, y)
        if not self.status.is_active or cell.is_revealed:
            return False
        if cell.is_covered:
            return self.flag_count < self.config.mine_count
        return True

    def can_chord(self, x: int, y: int) -> bool:
        """Check if ``chord_reveal`` would act on (x, y)."""
        cell = self.board.cell(x, y)
        if not self.status.is_active or not cell.is_revealed or cell.is_mine:
            return False
        neighbors = [
            self.board.cell(nx, ny) for nx, ny in self.board.neighbors(x, y)
        ]
        flags = sum(1 for neighbor in neighbors if neighbor.is_flagged)
        if flags != cell.adjacent_mines:
            return False
        return any(neighbor.is_covered for neighbor in neighbors)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def is_active(self) -> bool:
        return self.status.is_active

    @property
    def is_won(self) -> bool:
        return self.status == GameStatus.WON

    @property
    def is_lost(self) -> bool:
        return self.status == GameStatus.LOST

    @property
    def mines_remaining(self) -> int:
        return self.config.mine_count - self.flag_count

    def snapshot(self) -> Snapshot:
        """Build a read-only view of the current game."""
        lost = self.status == GameStatus.LOST
        rows = []
        for y in range(self.config.rows):
            row = []
            for x in range(self.config.columns):
                cell = self.board.cell(x, y)
                view = CellView(
                    status=cell.status,
                    observation=cell.to_observation(),
                    symbol=cell.to_symbol(expose_mine=lost),
                )
                if cell.is_revealed:
                    view = replace(view, value=cell.value, is_mine=cell.is_mine)
                row.append(view)
            rows.append(tuple(row))

        exposed: Tuple[Position, ...] = ()
        if lost:
            exposed = tuple(self.board.mine_positions())

        return Snapshot(
            rows=self.config.rows,
            columns=self.config.columns,
            status=self.status,
            cells=tuple(rows),
            revealed_count=self.revealed_count,
            flag_count=self.flag_count,
            mine_count=self.config.mine_count,
            safe_cells=self.config.safe_cells,
            exposed_mines=exposed,
        )
