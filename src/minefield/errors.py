"""
Exceptions raised by the Minesweeper engine.

Each error also derives from the closest builtin so callers can keep
catching ValueError / IndexError / KeyError.
"""


class MinesweeperError(Exception):
    """Base class for all engine errors."""


class OutOfBounds(MinesweeperError, IndexError):
    """Coordinate lies outside the board."""

    def __init__(self, row: int, col: int, rows: int, cols: int) -> None:
        self.row = row
        self.col = col
        super().__init__(
            f"Position ({row}, {col}) is outside a {rows}x{cols} board"
        )


class InvalidConfiguration(MinesweeperError, ValueError):
    """Board dimensions or mine count make no sense."""


class UnknownDifficulty(MinesweeperError, KeyError):
    """Difficulty name is not in the catalogue."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown difficulty: {self.name!r}"
