"""
Random mine placement.

Draws distinct board positions from a numpy random Generator so that
sessions seeded identically produce identical layouts.
"""
from typing import Set, Tuple

import numpy as np

from .errors import InvalidConfiguration


Position = Tuple[int, int]


def validate_layout(rows: int, cols: int, num_mines: int) -> None:
    """
    Reject board shapes the engine cannot play.

    Raises:
        InvalidConfiguration: If a dimension is not positive, or the mine
            count is not in 1 .. rows * cols - 1.
    """
    if rows <= 0 or cols <= 0:
        raise InvalidConfiguration("Board dimensions must be positive")
    if num_mines <= 0:
        raise InvalidConfiguration("Board needs at least one mine")
    max_mines = rows * cols - 1
    if num_mines > max_mines:
        raise InvalidConfiguration(f"Too many mines (max {max_mines})")


def place_mines(
    rows: int,
    cols: int,
    num_mines: int,
    rng: np.random.Generator,
) -> Set[Position]:
    """
    Choose `num_mines` distinct positions on a rows x cols board.

    Sparse boards draw uniformly and retry on collision. Once half the
    board or more is mined, positions are sampled without replacement
    instead so the expected work stays bounded.

    Args:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: How many positions to pick.
        rng: Source of randomness.

    Returns:
        Set of (row, col) tuples.
    """
    validate_layout(rows, cols, num_mines)

    total_cells = rows * cols
    if 2 * num_mines >= total_cells:
        return _sample_without_replacement(cols, total_cells, num_mines, rng)
    return _rejection_sample(rows, cols, num_mines, rng)


def _rejection_sample(
    rows: int, cols: int, num_mines: int, rng: np.random.Generator
) -> Set[Position]:
    positions: Set[Position] = set()
    while len(positions) < num_mines:
        row = int(rng.integers(rows))
        col = int(rng.integers(cols))
        positions.add((row, col))
    return positions


def _sample_without_replacement(
    cols: int, total_cells: int, num_mines: int, rng: np.random.Generator
) -> Set[Position]:
    indices = rng.choice(total_cells, size=num_mines, replace=False)
    return {divmod(int(index), cols) for index in indices}
