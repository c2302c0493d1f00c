"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their position,
state (covered/flagged/revealed) and content (mine/number).
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    COVERED = auto()
    FLAGGED = auto()
    REVEALED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        row: Row index, fixed at creation.
        col: Column index, fixed at creation.
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8). Only
            meaningful once a safe cell is revealed.
        state: Current visual state (covered, flagged, or revealed).
    """

    row: int
    col: int
    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.COVERED

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was successfully revealed, False if already
            revealed or flagged.
        """
        if self.state != CellState.COVERED:
            return False
        self.state = CellState.REVEALED
        return True

    def expose(self) -> bool:
        """
        Reveal this cell even if it carries a flag.

        Used to show mines once the game is over.

        Returns:
            True if the state changed.
        """
        if self.state == CellState.REVEALED:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.COVERED:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.COVERED
        return True

    @property
    def position(self) -> tuple:
        """(row, col) of this cell."""
        return self.row, self.col

    @property
    def is_covered(self) -> bool:
        """Check if cell is covered."""
        return self.state == CellState.COVERED

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Convert cell to a numeric observation value.

        Returns:
            -1: Covered cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.state == CellState.COVERED:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.adjacent_mines

    def view(self, game_over: bool, detonated: bool = False) -> "CellView":
        """
        Build an immutable snapshot of this cell for a front-end.

        Args:
            game_over: Whether mine positions may be disclosed.
            detonated: Whether this is the mine that lost the game.
        """
        adjacent = None
        if self.is_revealed and not self.is_mine:
            adjacent = self.adjacent_mines
        return CellView(
            row=self.row,
            col=self.col,
            state=self.state,
            adjacent_mines=adjacent,
            is_mine=self.is_mine if game_over else None,
            detonated=detonated,
        )


@dataclass(frozen=True)
class CellView:
    """
    Read-only view of a cell handed to front-ends.

    Attributes:
        row: Row index.
        col: Column index.
        state: Visual state.
        adjacent_mines: Mine count for revealed safe cells, else None.
        is_mine: None while the game is running, True/False afterwards.
        detonated: True only for the mine whose reveal lost the game.
    """

    row: int
    col: int
    state: CellState
    adjacent_mines: Optional[int] = None
    is_mine: Optional[bool] = None
    detonated: bool = False
