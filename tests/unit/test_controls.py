"""
Unit tests for pointer input mapping.
"""
import pytest
from minesweeper import (
    Action,
    Game,
    GameStatus,
    MouseButton,
    PointerTracker,
    apply_action,
)


@pytest.fixture
def tracker(chord_game: Game) -> PointerTracker:
    """Pointer tracker bound to the chord test game."""
    return PointerTracker(chord_game)


# ============================================================================
# Pointer Tracker Tests
# ============================================================================

class TestPointerTracker:
    """Test press/release resolution."""

    def test_press_enters_pressing(self, tracker: PointerTracker) -> None:
        """Pressing a button shows the PRESSING state."""
        tracker.press(MouseButton.LEFT)
        assert tracker.game.status == GameStatus.PRESSING

    def test_left_release_reveals(self, tracker: PointerTracker) -> None:
        """Left click reveals the cell under the pointer."""
        tracker.press(MouseButton.LEFT)
        assert tracker.release(3, 0) == Action.REVEAL
        assert tracker.game.board.cell(3, 0).is_revealed is True
        assert tracker.game.status == GameStatus.PLAYING

    def test_right_release_flags(self, tracker: PointerTracker) -> None:
        """Right click toggles a flag."""
        tracker.press(MouseButton.RIGHT)
        assert tracker.release(0, 0) == Action.FLAG
        assert tracker.game.flag_count == 1

    def test_both_buttons_chord(self, tracker: PointerTracker) -> None:
        """Left and right together chord-reveal."""
        game = tracker.game
        game.reveal(3, 0)
        game.toggle_flag(2, 0)

        tracker.press(MouseButton.LEFT)
        tracker.press(MouseButton.RIGHT)
        assert tracker.release(3, 0) == Action.CHORD
        assert game.revealed_count == 12

    def test_second_release_after_chord_does_nothing(
        self, tracker: PointerTracker
    ) -> None:
        """Only the first release of a chord acts."""
        tracker.press(MouseButton.LEFT)
        tracker.press(MouseButton.RIGHT)
        tracker.release(4, 2)
        assert tracker.release(4, 2) is None
        assert tracker.pressed == set()

    def test_middle_button_chords(self, tracker: PointerTracker) -> None:
        """Middle button counts as both buttons."""
        tracker.press(MouseButton.MIDDLE)
        assert tracker.resolve() == Action.CHORD

    def test_release_outside_grid(self, tracker: PointerTracker) -> None:
        """Releasing off the grid clears state without acting."""
        tracker.press(MouseButton.LEFT)
        assert tracker.release() is None
        assert tracker.game.revealed_count == 0
        assert tracker.game.status == GameStatus.PLAYING

    def test_release_after_loss_keeps_lost(
        self, tracker: PointerTracker
    ) -> None:
        """Pressing a lost game neither acts nor changes status."""
        tracker.press(MouseButton.LEFT)
        tracker.release(0, 0)
        tracker.press(MouseButton.LEFT)
        tracker.release(4, 2)
        assert tracker.game.status == GameStatus.LOST
        assert tracker.game.revealed_count == 0


# ============================================================================
# Apply Action Tests
# ============================================================================

class TestApplyAction:
    """Test the action dispatcher."""

    def test_new_game_resets(self, corner_mine_game: Game) -> None:
        """NEW_GAME resets the game."""
        corner_mine_game.reveal(2, 2)
        assert apply_action(corner_mine_game, Action.NEW_GAME) is True
        assert corner_mine_game.status == GameStatus.PLAYING

    def test_cell_action_needs_coordinates(
        self, corner_mine_game: Game
    ) -> None:
        """Cell actions without coordinates are rejected."""
        with pytest.raises(ValueError, match="needs cell coordinates"):
            apply_action(corner_mine_game, Action.REVEAL)

    @pytest.mark.parametrize(
        "action, expected",
        [(Action.REVEAL, True), (Action.FLAG, True), (Action.CHORD, False)],
    )
    def test_dispatch(
        self, corner_mine_game: Game, action: Action, expected: bool
    ) -> None:
        """Each action maps to its engine call."""
        assert apply_action(corner_mine_game, action, 1, 1) is expected
