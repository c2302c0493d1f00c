"""
Text rendering for terminal front-ends.

Maps cell views to characters and, optionally, ANSI colours. The
engine itself never deals with glyphs or colours.
"""
from typing import Dict, Tuple

from .cell import CellState, CellView


# ============================================================================
# Constants
# ============================================================================

# Classic digit colours, RGB
NUMBER_COLORS: Dict[int, Tuple[int, int, int]] = {
    1: (0, 0, 255),
    2: (0, 128, 0),
    3: (255, 0, 0),
    4: (0, 0, 128),
    5: (128, 0, 0),
    6: (64, 224, 208),
    7: (0, 0, 0),
    8: (128, 128, 128),
}

COVERED_CHAR = "."
FLAG_CHAR = "F"
MINE_CHAR = "*"
DETONATED_CHAR = "X"
EMPTY_CHAR = " "

_RESET = "\033[0m"


# ============================================================================
# Rendering
# ============================================================================

def cell_char(view: CellView) -> str:
    """Single character for a cell view."""
    if view.state == CellState.FLAGGED:
        return FLAG_CHAR
    if view.state == CellState.COVERED:
        return COVERED_CHAR
    if view.detonated:
        return DETONATED_CHAR
    if view.is_mine:
        return MINE_CHAR
    if not view.adjacent_mines:
        return EMPTY_CHAR
    return str(view.adjacent_mines)


def colorize(char: str, view: CellView) -> str:
    """Wrap a digit in a 24-bit ANSI colour escape."""
    if view.adjacent_mines not in NUMBER_COLORS:
        return char
    red, green, blue = NUMBER_COLORS[view.adjacent_mines]
    return f"\033[38;2;{red};{green};{blue}m{char}{_RESET}"


def render_text(snapshot, color: bool = False, headers: bool = False) -> str:
    """
    Render a session snapshot as text.

    Args:
        snapshot: Grid of CellView, as returned by GameSession.snapshot().
        color: Emit ANSI colours for digits.
        headers: Prefix rows and columns with their indices.

    Returns:
        Multi-line string, one line per board row.
    """
    lines = []
    if headers and snapshot:
        width = len(str(len(snapshot) - 1))
        cols = len(snapshot[0])
        lines.append(
            " " * (width + 1) + " ".join(str(col % 10) for col in range(cols))
        )

    for row_index, row in enumerate(snapshot):
        chars = []
        for view in row:
            char = cell_char(view)
            chars.append(colorize(char, view) if color else char)
        line = " ".join(chars)
        if headers:
            line = f"{row_index:>{width}} {line}"
        lines.append(line)

    return "\n".join(lines)
