"""
Unit tests for the command-line driver.

Tests how preset and override arguments become a board configuration.
"""
import argparse
import sys
from pathlib import Path
from typing import Optional

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from main import build_config


def make_args(
    preset: str = "beginner",
    rows: Optional[int] = None,
    columns: Optional[int] = None,
    mines: Optional[int] = None,
) -> argparse.Namespace:
    return argparse.Namespace(
        preset=preset, rows=rows, columns=columns, mines=mines
    )


# ============================================================================
# Configuration Tests
# ============================================================================

class TestBuildConfig:
    """Test preset and override handling."""

    def test_preset_only(self) -> None:
        """No overrides gives the preset itself."""
        config = build_config(make_args("intermediate"))
        assert (config.rows, config.columns, config.mine_count) == (16, 16, 40)

    def test_overrides_replace_preset(self) -> None:
        """Explicit values win over the preset."""
        config = build_config(make_args(rows=5, columns=7, mines=3))
        assert (config.rows, config.columns, config.mine_count) == (5, 7, 3)

    def test_zero_mines_override(self) -> None:
        """Zero mines is a real override, not a missing one."""
        assert build_config(make_args(mines=0)).mine_count == 0

    @pytest.mark.parametrize("rows, columns", [(0, None), (None, 0)])
    def test_zero_dimension_raises(
        self, rows: Optional[int], columns: Optional[int]
    ) -> None:
        """Zero rows or columns is rejected, not replaced by the preset."""
        with pytest.raises(ValueError, match="dimensions must be positive"):
            build_config(make_args(rows=rows, columns=columns))
