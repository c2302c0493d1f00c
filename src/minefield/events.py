"""
Notifications delivered to session listeners.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import FrozenSet, Tuple


class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass(frozen=True)
class StateChanged:
    """
    Sent after every accepted command.

    Attributes:
        status: Game state after the command.
        flag_budget: Mines minus flags placed.
        changed: Positions whose cell state changed.
    """

    status: GameState
    flag_budget: int
    changed: FrozenSet[Tuple[int, int]]


@dataclass(frozen=True)
class GameWon:
    """Sent when the last safe cell is revealed."""

    revealed_count: int


@dataclass(frozen=True)
class GameLost:
    """Sent when a mine is revealed."""

    row: int
    col: int
