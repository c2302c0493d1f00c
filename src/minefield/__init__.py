"""
Minesweeper board engine.

Provides board management, mine placement, the cascading reveal and the
game session that front-ends drive with commands.
"""
from .cell import Cell, CellState, CellView
from .board import Board, BoardConfig
from .commands import (
    ApplyDifficulty,
    NewGame,
    Reveal,
    ToggleFlag,
    parse_command,
)
from .difficulty import (
    DIFFICULTIES,
    EASY,
    HARD,
    MEDIUM,
    Difficulty,
    difficulty_names,
    get_difficulty,
)
from .errors import (
    InvalidConfiguration,
    MinesweeperError,
    OutOfBounds,
    UnknownDifficulty,
)
from .events import GameLost, GameState, GameWon, StateChanged
from .mine_placer import place_mines
from .reveal import RevealEngine, RevealResult
from .session import GameSession
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "CellView",
    "Board",
    "BoardConfig",
    "NewGame",
    "ApplyDifficulty",
    "Reveal",
    "ToggleFlag",
    "parse_command",
    "Difficulty",
    "DIFFICULTIES",
    "EASY",
    "MEDIUM",
    "HARD",
    "difficulty_names",
    "get_difficulty",
    "MinesweeperError",
    "OutOfBounds",
    "InvalidConfiguration",
    "UnknownDifficulty",
    "GameState",
    "StateChanged",
    "GameWon",
    "GameLost",
    "place_mines",
    "RevealEngine",
    "RevealResult",
    "GameSession",
    "MinesweeperEnv",
]
