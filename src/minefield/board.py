"""
Board module for Minesweeper game.

Implements the grid of cells, neighbour enumeration and bounds checking.
Game rules live in the reveal engine and the session.
"""
from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, List, Tuple

import numpy as np

from .cell import Cell
from .errors import InvalidConfiguration, OutOfBounds
from .mine_placer import validate_layout


# ============================================================================
# Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Total mines to place.
    """

    rows: int = 9
    cols: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        validate_layout(self.rows, self.cols, self.num_mines)

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.rows * self.cols

    @property
    def safe_cells(self) -> int:
        """Number of cells without a mine."""
        return self.total_cells - self.num_mines


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the rows x cols grid of cells and answers positional questions
    about it.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        self._init_grid()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell(row, col) for col in range(self.config.cols)]
            for row in range(self.config.rows)
        ]

    def place_mines(self, positions: Iterable[Tuple[int, int]]) -> None:
        """
        Mark the given positions as mines.

        Nothing is marked unless every position is on the board and
        there are exactly config.num_mines distinct positions.

        Args:
            positions: (row, col) tuples, all within bounds.

        Raises:
            OutOfBounds: If a position is off the board.
            InvalidConfiguration: If the number of positions is wrong.
        """
        cells = {self.cell(row, col).position: self.cell(row, col)
                 for row, col in positions}
        if len(cells) != self.config.num_mines:
            raise InvalidConfiguration(
                f"Expected {self.config.num_mines} distinct mine positions, "
                f"got {len(cells)}"
            )
        for cell in cells.values():
            cell.is_mine = True

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbours(self, row: int, col: int) -> Iterator[Tuple[int, int]]:
        """
        Yield valid neighbouring positions in row-major order.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            Iterator over (row, col) tuples for up to eight neighbours.

        Raises:
            OutOfBounds: Immediately, if (row, col) is off the board.
        """
        self._check_bounds(row, col)
        return self._iter_neighbours(row, col)

    def _iter_neighbours(self, row: int, col: int) -> Iterator[Tuple[int, int]]:
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.contains(new_row, new_col):
                    yield new_row, new_col

    def count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self.neighbours(row, col):
            if self._grid[neighbor_row][neighbor_col].is_mine:
                count += 1
        return count

    def contains(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.rows and 0 <= col < self.config.cols

    def _check_bounds(self, row: int, col: int) -> None:
        if not self.contains(row, col):
            raise OutOfBounds(row, col, self.config.rows, self.config.cols)

    # ========================================================================
    # Accessors (High-level)
    # ========================================================================

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def cols(self) -> int:
        return self.config.cols

    @property
    def mine_count(self) -> int:
        """Number of cells currently holding a mine."""
        return sum(1 for cell in self if cell.is_mine)

    def cell(self, row: int, col: int) -> Cell:
        """
        Get cell at position.

        Raises:
            OutOfBounds: If (row, col) is not on the board.
        """
        self._check_bounds(row, col)
        return self._grid[row][col]

    def __iter__(self) -> Iterator[Cell]:
        """Iterate over all cells in row-major order."""
        for row in self._grid:
            yield from row

    def for_each(self, visitor: Callable[[Cell], None]) -> None:
        """Call `visitor` on every cell in row-major order."""
        for cell in self:
            visitor(cell)

    def positions(self) -> List[Tuple[int, int]]:
        """All (row, col) positions in row-major order."""
        return [cell.position for cell in self]

    def mine_positions(self) -> List[Tuple[int, int]]:
        """Positions of all mines in row-major order."""
        return [cell.position for cell in self if cell.is_mine]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D numpy array where:
                -1 = covered
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.config.rows, self.config.cols), dtype=np.int8)
        for cell in self:
            obs[cell.row, cell.col] = cell.to_observation()
        return obs

    def get_covered_positions(self) -> List[Tuple[int, int]]:
        """
        Get list of cells that can still be revealed.

        Returns:
            List of (row, col) positions that are covered and unflagged.
        """
        return [cell.position for cell in self if cell.is_covered]
