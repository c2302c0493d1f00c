"""
Player commands accepted by GameSession.execute().
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class NewGame:
    """Start over with the current board size."""


@dataclass(frozen=True)
class ApplyDifficulty:
    """Switch to a preset board and start a new game."""

    name: str


@dataclass(frozen=True)
class Reveal:
    """Uncover the cell at (row, col)."""

    row: int
    col: int


@dataclass(frozen=True)
class ToggleFlag:
    """Place or remove a flag at (row, col)."""

    row: int
    col: int


def parse_command(text: str):
    """
    Parse a line typed at the terminal into a command.

    Accepted forms (case-insensitive):
        r ROW COL / reveal ROW COL
        f ROW COL / flag ROW COL
        n / new
        d NAME / difficulty NAME

    Returns:
        The command, or None for a blank line.

    Raises:
        ValueError: If the line cannot be parsed.
    """
    parts = text.split()
    if not parts:
        return None

    verb = parts[0].lower()
    args = parts[1:]

    if verb in ("n", "new"):
        if args:
            raise ValueError(f"'{verb}' takes no arguments")
        return NewGame()
    if verb in ("d", "difficulty"):
        if len(args) != 1:
            raise ValueError(f"'{verb}' needs exactly one difficulty name")
        return ApplyDifficulty(args[0])
    if verb in ("r", "reveal", "f", "flag"):
        if len(args) != 2:
            raise ValueError(f"'{verb}' needs a row and a column")
        try:
            row, col = int(args[0]), int(args[1])
        except ValueError:
            raise ValueError(f"Row and column must be integers: {args}") from None
        if verb in ("r", "reveal"):
            return Reveal(row, col)
        return ToggleFlag(row, col)

    raise ValueError(f"Unknown command: {verb!r}")
