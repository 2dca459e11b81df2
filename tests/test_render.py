"""Tests for text rendering."""

import pytest

from gridpath.core.grid import Grid
from gridpath.render import ANSI_COLORS, RESET, colorize, render_grid


class TestRender:
    """Test grid rendering."""

    @pytest.fixture
    def grid(self):
        return Grid.from_text("S.#\n..E")

    def test_plain(self, grid):
        """Test rendering without highlights."""
        assert render_grid(grid) == "S.#\n..E"

    def test_marker(self, grid):
        """Test highlighted cells replaced by a marker when color is off."""
        rendered = render_grid(grid, [(0, 0), (0, 1), (1, 1)], use_color=False, marker='*')
        assert rendered == "**#\n.*E"

    def test_color(self, grid):
        """Test highlighted cells wrapped in ANSI codes."""
        rendered = render_grid(grid, [(1, 2)], color='green')

        assert rendered.splitlines()[0] == "S.#"
        assert rendered.splitlines()[1] == f"..{ANSI_COLORS['green']}E{RESET}"

    def test_overrides(self, grid):
        """Test per-cell replacement text."""
        assert render_grid(grid, overrides={(0, 1): '>'}) == "S>#\n..E"

    def test_colorize(self):
        assert colorize("x", "background-cyan") == "\x1b[46mx\x1b[0m"

    def test_unknown_color(self, grid):
        """Test unknown color names are rejected."""
        with pytest.raises(ValueError):
            colorize("x", "ultraviolet")
        with pytest.raises(ValueError):
            render_grid(grid, [(0, 0)], color='ultraviolet')
