"""
Game session for Minesweeper.

Composes the board, mine placement and reveal engine, tracks the game
lifecycle and notifies front-ends of every accepted command.
"""
import logging
from typing import Callable, List, Optional, Set, Tuple, Union

import numpy as np

from .board import Board, BoardConfig
from .cell import CellView
from .commands import ApplyDifficulty, NewGame, Reveal, ToggleFlag
from .difficulty import EASY, Difficulty, get_difficulty
from .events import GameLost, GameState, GameWon, StateChanged
from .mine_placer import place_mines
from .reveal import RevealEngine

logger = logging.getLogger(__name__)


Position = Tuple[int, int]
Placer = Callable[[int, int, int, np.random.Generator], Set[Position]]
Listener = Callable[[object], None]
Command = Union[NewGame, ApplyDifficulty, Reveal, ToggleFlag]


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    A running game of Minesweeper.

    Commands return True when accepted and False when they had no
    effect (revealing a revealed cell, anything after the game ended).
    Coordinates outside the board raise OutOfBounds.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Union[None, int, np.random.Generator] = None,
        placer: Placer = place_mines,
    ) -> None:
        """
        Create a session and deal the first game.

        Args:
            config: Board configuration (default: Easy preset).
            rng: Seed or Generator used for mine placement.
            placer: Callable choosing mine positions.
        """
        self.rng = np.random.default_rng(rng)
        self._placer = placer
        self._listeners: List[Listener] = []
        self._deal(config or EASY.config)

    # ========================================================================
    # Setup (Low-level)
    # ========================================================================

    def _deal(self, config: BoardConfig) -> None:
        """
        Replace the board with a freshly mined one.

        The new board is filled before anything is swapped in, so a
        failing placer leaves the current game untouched.
        """
        board = Board(config)
        board.place_mines(
            self._placer(config.rows, config.cols, config.num_mines, self.rng)
        )

        self.board = board
        self._engine = RevealEngine(board)
        self._status = GameState.PLAYING
        self._flag_budget = config.num_mines
        self._detonated: Optional[Position] = None
        logger.debug(
            "New %dx%d game with %d mines",
            config.rows, config.cols, config.num_mines,
        )

    # ========================================================================
    # Notifications
    # ========================================================================

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a callable receiving events after each command.

        Returns:
            A callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, event: object) -> None:
        for listener in list(self._listeners):
            listener(event)

    def _state_changed(self, changed) -> None:
        self._emit(
            StateChanged(self._status, self._flag_budget, frozenset(changed))
        )

    # ========================================================================
    # Commands
    # ========================================================================

    def execute(self, command: Command) -> bool:
        """
        Dispatch a command object.

        Raises:
            TypeError: If the command type is not recognised.
        """
        if isinstance(command, Reveal):
            return self.reveal(command.row, command.col)
        if isinstance(command, ToggleFlag):
            return self.toggle_flag(command.row, command.col)
        if isinstance(command, NewGame):
            return self.new_game()
        if isinstance(command, ApplyDifficulty):
            return self.apply_difficulty(command.name)
        raise TypeError(f"Unsupported command: {command!r}")

    def reveal(self, row: int, col: int) -> bool:
        """
        Reveal a cell, cascading over zero-count regions.

        Flagged cells are protected and must be unflagged first.

        Returns:
            True if any cell was revealed.
        """
        cell = self.board.cell(row, col)
        if self._status != GameState.PLAYING or not cell.is_covered:
            return False

        result = self._engine.reveal(row, col)
        changed = list(result.changed)

        if result.hit_mine:
            self._status = GameState.LOST
            self._detonated = (row, col)
            changed.extend(self._engine.expose_mines())
            logger.debug("Game lost at (%d, %d)", row, col)
            self._emit(GameLost(row, col))
        elif self._engine.is_cleared:
            self._status = GameState.WON
            changed.extend(self._engine.expose_mines())
            logger.debug("Game won after %d reveals", self.revealed_count)
            self._emit(GameWon(self.revealed_count))

        self._state_changed(changed)
        return True

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Flag or unflag a covered cell.

        The flag budget is allowed to go negative.

        Returns:
            True if the flag was toggled.
        """
        cell = self.board.cell(row, col)
        if self._status != GameState.PLAYING:
            return False
        if not cell.toggle_flag():
            return False

        self._flag_budget += -1 if cell.is_flagged else 1
        self._state_changed([cell.position])
        return True

    def new_game(self) -> bool:
        """Start a new game with the current board size."""
        return self._start(self.board.config)

    def apply_difficulty(self, name: Union[str, Difficulty]) -> bool:
        """
        Switch to a preset board and start a new game.

        Raises:
            UnknownDifficulty: If the preset does not exist.
        """
        difficulty = get_difficulty(name)
        logger.debug("Switching to %s", difficulty.label)
        return self._start(difficulty.config)

    def _start(self, config: BoardConfig) -> bool:
        self._deal(config)
        self._state_changed(self.board.positions())
        return True

    # ========================================================================
    # Queries
    # ========================================================================

    @property
    def config(self) -> BoardConfig:
        return self.board.config

    @property
    def dimensions(self) -> Tuple[int, int]:
        """(rows, cols) of the current board."""
        return self.board.rows, self.board.cols

    @property
    def status(self) -> GameState:
        """Get current game state."""
        return self._status

    @property
    def flag_budget(self) -> int:
        """Mines minus flags currently placed."""
        return self._flag_budget

    @property
    def revealed_count(self) -> int:
        """Cells uncovered by reveals in this game."""
        return self._engine.revealed_count

    @property
    def detonated(self) -> Optional[Position]:
        """Position of the mine that lost the game, if any."""
        return self._detonated

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._status == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._status == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._status == GameState.LOST

    def cell_view(self, row: int, col: int) -> CellView:
        """
        Read-only view of a cell.

        Mine positions stay hidden (is_mine is None) while playing.
        """
        cell = self.board.cell(row, col)
        return cell.view(
            game_over=not self.is_playing,
            detonated=cell.position == self._detonated,
        )

    def snapshot(self) -> List[List[CellView]]:
        """Views of every cell, one list per row."""
        rows, cols = self.dimensions
        return [
            [self.cell_view(row, col) for col in range(cols)]
            for row in range(rows)
        ]
