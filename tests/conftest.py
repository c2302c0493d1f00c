"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Board, BoardConfig, Cell, GameSession


def fixed_placer(*positions):
    """Build a placer that always returns the given mine positions."""
    def placer(rows, cols, num_mines, rng):
        assert len(positions) == num_mines
        return set(positions)
    return placer


def make_session(rows, cols, *mines, rng=None) -> GameSession:
    """Session on a rows x cols board with mines at fixed positions."""
    return GameSession(
        BoardConfig(rows, cols, len(mines)),
        rng=rng,
        placer=fixed_placer(*mines),
    )


class EventRecorder:
    """Listener collecting every event a session emits."""

    def __init__(self) -> None:
        self.events = []

    def __call__(self, event) -> None:
        self.events.append(event)

    def of_type(self, event_type):
        return [event for event in self.events if isinstance(event, event_type)]


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 mines, none placed yet."""
    return Board()


@pytest.fixture
def small_board() -> Board:
    """Create a 3x3 board with a mine in the top-left corner."""
    board = Board(BoardConfig(3, 3, 1))
    board.place_mines([(0, 0)])
    return board


@pytest.fixture
def wide_board() -> Board:
    """Create a 4x6 board with mines along one column."""
    board = Board(BoardConfig(4, 6, 4))
    board.place_mines([(0, 3), (1, 3), (2, 3), (3, 3)])
    return board


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def corner_session() -> GameSession:
    """2x2 session with a single mine at (0, 0)."""
    return make_session(2, 2, (0, 0))


@pytest.fixture
def center_session() -> GameSession:
    """3x3 session with a single mine in the centre."""
    return make_session(3, 3, (1, 1))


@pytest.fixture
def seeded_session() -> GameSession:
    """Easy-sized session with a fixed seed."""
    return GameSession(BoardConfig(9, 9, 10), rng=1234)


@pytest.fixture
def recorder() -> EventRecorder:
    """Fresh event recorder."""
    return EventRecorder()


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def covered_cell() -> Cell:
    """Create a covered cell."""
    return Cell(0, 0)


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(1, 1, is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
