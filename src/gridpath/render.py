"""ANSI text rendering of grids with highlighted cells.

Rendering is a display concern only; the search engine never calls it.
"""

from typing import Dict, Iterable, Optional, Tuple

from gridpath.core.grid import Grid

RESET = "\x1b[0m"

ANSI_COLORS: Dict[str, str] = {
    # Foreground colors
    'red': "\x1b[31m",
    'green': "\x1b[32m",
    'yellow': "\x1b[33m",
    'blue': "\x1b[34m",
    'magenta': "\x1b[35m",
    'cyan': "\x1b[36m",
    'white': "\x1b[37m",
    'gray': "\x1b[90m",
    # Background colors
    'background-red': "\x1b[41m",
    'background-green': "\x1b[42m",
    'background-yellow': "\x1b[43m",
    'background-blue': "\x1b[44m",
    'background-magenta': "\x1b[45m",
    'background-cyan': "\x1b[46m",
    'background-white': "\x1b[47m",
    'background-gray': "\x1b[100m",
}


def colorize(text: str, color: str) -> str:
    """Wrap ``text`` in the ANSI code for ``color``.

    Raises:
        ValueError: If the color name is unknown
    """
    if color not in ANSI_COLORS:
        raise ValueError(f"Unknown color '{color}'")
    return f"{ANSI_COLORS[color]}{text}{RESET}"


def render_grid(grid: Grid,
                highlighted: Iterable[Tuple[int, int]] = (),
                color: str = 'background-cyan',
                use_color: bool = True,
                marker: str = 'O',
                overrides: Optional[Dict[Tuple[int, int], str]] = None) -> str:
    """Render a grid as text, one row per line.

    Args:
        grid: Grid to render
        highlighted: Positions to highlight
        color: ANSI color name used for highlighted cells
        use_color: If False, highlighted cells are replaced by ``marker``
        marker: Replacement character when color is disabled
        overrides: Per-position replacement text (drawn before highlighting)

    Returns:
        Rendered grid without a trailing newline
    """
    if use_color and color not in ANSI_COLORS:
        raise ValueError(f"Unknown color '{color}'")

    marked = {tuple(pos) for pos in highlighted}
    overrides = overrides or {}
    lines = []
    for row in range(grid.rows):
        cells = []
        for col in range(grid.cols):
            text = overrides.get((row, col), str(grid.at((row, col))))
            if (row, col) in marked:
                text = colorize(text, color) if use_color else marker
            cells.append(text)
        lines.append(''.join(cells))
    return '\n'.join(lines)
