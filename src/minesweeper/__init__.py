"""
Minesweeper rules engine.

Provides board generation, the game engine with reveal/flag/chord
operations, pointer input mapping, and a Gymnasium environment.
"""
from .cell import Cell, CellStatus
from .board import (
    Board,
    BoardConfig,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    PRESETS,
    generate,
)
from .engine import CellView, Game, GameStatus, Snapshot
from .controls import Action, MouseButton, PointerTracker, apply_action
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellStatus",
    "Board",
    "BoardConfig",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "PRESETS",
    "generate",
    "CellView",
    "Game",
    "GameStatus",
    "Snapshot",
    "Action",
    "MouseButton",
    "PointerTracker",
    "apply_action",
    "MinesweeperEnv",
]
