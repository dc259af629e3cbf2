"""
Input controls for Minesweeper.

Translates pointer presses and releases into engine calls. Pressing
either button enters the PRESSING state; releasing resolves the click:
left alone reveals, right alone flags, and both together (or the middle
button) chord-reveal.
"""
from enum import Enum, auto
from typing import Optional, Set

from .engine import Game


# ============================================================================
# Constants
# ============================================================================

class MouseButton(Enum):
    """Physical pointer buttons."""

    LEFT = auto()
    RIGHT = auto()
    MIDDLE = auto()


class Action(Enum):
    """Engine call a resolved input maps to."""

    REVEAL = auto()
    FLAG = auto()
    CHORD = auto()
    NEW_GAME = auto()


def apply_action(
    game: Game,
    action: Action,
    x: Optional[int] = None,
    y: Optional[int] = None,
) -> bool:
    """
    Perform the engine call for an action.

    Args:
        game: Game to act on.
        action: Action to perform.
        x: Column, required for cell actions.
        y: Row, required for cell actions.

    Returns:
        True if the game state changed.
    """
    if action == Action.NEW_GAME:
        game.reset()
        return True
    if x is None or y is None:
        raise ValueError(f"{action.name} needs cell coordinates")
    if action == Action.REVEAL:
        return game.reveal(x, y)
    if action == Action.FLAG:
        return game.toggle_flag(x, y)
    return game.chord_reveal(x, y)


# ============================================================================
# Pointer Tracker
# ============================================================================

class PointerTracker:
    """
    Tracks held buttons between press and release.

    Releasing either button after both were held counts as a chord, so
    the second release after a chord resolves to nothing.
    """

    def __init__(self, game: Game) -> None:
        self.game = game
        self._pressed: Set[MouseButton] = set()

    @property
    def pressed(self) -> Set[MouseButton]:
        return set(self._pressed)

    def press(self, button: MouseButton) -> None:
        """Record a button press over the grid."""
        if button == MouseButton.MIDDLE:
            self._pressed.update((MouseButton.LEFT, MouseButton.RIGHT))
        else:
            self._pressed.add(button)
        self.game.press()

    def resolve(self) -> Optional[Action]:
        """Action the currently held buttons would trigger on release."""
        left = MouseButton.LEFT in self._pressed
        right = MouseButton.RIGHT in self._pressed
        if left and right:
            return Action.CHORD
        if left:
            return Action.REVEAL
        if right:
            return Action.FLAG
        return None

    def release(
        self, x: Optional[int] = None, y: Optional[int] = None
    ) -> Optional[Action]:
        """
        Release all held buttons and act on the cell under the pointer.

        Args:
            x: Column under the pointer, or None if outside the grid.
            y: Row under the pointer, or None if outside the grid.

        Returns:
            The action performed, or None if nothing was applied.
        """
        action = self.resolve()
        self._pressed.clear()
        self.game.release()
        if action is None or x is None or y is None:
            return None
        apply_action(self.game, action, x, y)
        return action
