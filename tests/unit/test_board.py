"""
Unit tests for Board class.

Tests board configuration, neighbour enumeration, bounds checking
and observation generation.
"""
import pytest
import numpy as np
from minefield import Board, BoardConfig, InvalidConfiguration, OutOfBounds


# ============================================================================
# Board Configuration Tests
# ============================================================================

class TestBoardConfig:
    """Test board configuration validation."""

    def test_valid_config_creation(self, valid_config: BoardConfig) -> None:
        """Valid configuration should be created successfully."""
        assert valid_config.rows == 9
        assert valid_config.cols == 9
        assert valid_config.num_mines == 10
        assert valid_config.total_cells == 81
        assert valid_config.safe_cells == 71

    @pytest.mark.parametrize("rows,cols", [(0, 9), (9, 0), (-1, 3)])
    def test_non_positive_dimensions_raise_error(
        self, rows: int, cols: int
    ) -> None:
        with pytest.raises(InvalidConfiguration, match="dimensions must be positive"):
            BoardConfig(rows, cols, 1)

    @pytest.mark.parametrize("mines", [0, -1])
    def test_non_positive_mines_raise_error(self, mines: int) -> None:
        with pytest.raises(InvalidConfiguration, match="at least one mine"):
            BoardConfig(9, 9, mines)

    def test_too_many_mines_raises_error(self) -> None:
        with pytest.raises(InvalidConfiguration, match="Too many mines"):
            BoardConfig(3, 3, 9)  # Max is 8 (9 cells - 1)

    def test_max_mines_is_valid(self) -> None:
        config = BoardConfig(3, 3, 8)
        assert config.num_mines == 8

    def test_invalid_configuration_is_value_error(self) -> None:
        """Callers catching ValueError keep working."""
        with pytest.raises(ValueError):
            BoardConfig(1, 1, 1)


# ============================================================================
# Board Initialization Tests
# ============================================================================

class TestBoardInitialization:
    """Test board creation and initial state."""

    def test_new_board_all_cells_covered(self, default_board: Board) -> None:
        assert all(cell.is_covered for cell in default_board)

    def test_new_board_has_no_mines(self, default_board: Board) -> None:
        """Mines are placed by the session, not the board."""
        assert default_board.mine_count == 0

    def test_cells_know_their_position(self, default_board: Board) -> None:
        for row in range(9):
            for col in range(9):
                assert default_board.cell(row, col).position == (row, col)

    def test_iteration_is_row_major(self) -> None:
        board = Board(BoardConfig(2, 3, 1))
        assert [cell.position for cell in board] == [
            (0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2),
        ]

    def test_for_each_visits_every_cell(self, default_board: Board) -> None:
        seen = []
        default_board.for_each(lambda cell: seen.append(cell.position))
        assert seen == default_board.positions()
        assert len(seen) == 81


# ============================================================================
# Bounds Tests
# ============================================================================

class TestBounds:
    """Test coordinate validation."""

    @pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (9, 0), (0, 9)])
    def test_cell_out_of_bounds_raises(
        self, default_board: Board, row: int, col: int
    ) -> None:
        with pytest.raises(OutOfBounds):
            default_board.cell(row, col)

    def test_out_of_bounds_is_index_error(self, default_board: Board) -> None:
        with pytest.raises(IndexError, match=r"\(9, 9\)"):
            default_board.cell(9, 9)

    def test_neighbours_of_out_of_bounds_raises(
        self, default_board: Board
    ) -> None:
        with pytest.raises(OutOfBounds):
            list(default_board.neighbours(-1, -1))

    def test_neighbours_raises_before_iteration(
        self, default_board: Board
    ) -> None:
        """The bounds check happens on the call, not on the first next()."""
        with pytest.raises(OutOfBounds):
            default_board.neighbours(-1, 0)
        with pytest.raises(OutOfBounds):
            default_board.neighbours(0, 9)

    def test_contains(self, default_board: Board) -> None:
        assert default_board.contains(8, 8) is True
        assert default_board.contains(9, 8) is False


# ============================================================================
# Neighbour Tests
# ============================================================================

class TestNeighbours:
    """Test neighbour enumeration."""

    def test_corner_has_three_neighbours(self, default_board: Board) -> None:
        assert list(default_board.neighbours(0, 0)) == [(0, 1), (1, 0), (1, 1)]

    def test_edge_has_five_neighbours(self, default_board: Board) -> None:
        assert len(list(default_board.neighbours(0, 4))) == 5

    def test_interior_has_eight_neighbours_in_order(
        self, default_board: Board
    ) -> None:
        assert list(default_board.neighbours(4, 4)) == [
            (3, 3), (3, 4), (3, 5),
            (4, 3), (4, 5),
            (5, 3), (5, 4), (5, 5),
        ]

    def test_single_cell_row_board(self) -> None:
        board = Board(BoardConfig(1, 3, 1))
        assert list(board.neighbours(0, 1)) == [(0, 0), (0, 2)]


# ============================================================================
# Mine Tests
# ============================================================================

class TestMines:
    """Test mine placement and adjacency counting."""

    def test_place_mines_sets_flags(self, small_board: Board) -> None:
        assert small_board.mine_count == 1
        assert small_board.mine_positions() == [(0, 0)]

    def test_adjacent_counts(self, small_board: Board) -> None:
        assert small_board.count_adjacent_mines(0, 1) == 1
        assert small_board.count_adjacent_mines(1, 1) == 1
        assert small_board.count_adjacent_mines(2, 2) == 0

    def test_adjacent_counts_along_column(self, wide_board: Board) -> None:
        assert wide_board.count_adjacent_mines(1, 2) == 3
        assert wide_board.count_adjacent_mines(0, 4) == 2
        assert wide_board.count_adjacent_mines(2, 0) == 0

    def test_place_mines_out_of_bounds_raises(self, default_board: Board) -> None:
        with pytest.raises(OutOfBounds):
            default_board.place_mines([(9, 9)])

    @pytest.mark.parametrize("positions", [
        [(0, 0)],
        [(0, 0), (0, 1), (0, 2)],
        [(0, 0), (0, 0)],
    ])
    def test_place_mines_wrong_count_raises(self, positions) -> None:
        """Placing anything but exactly num_mines distinct mines is rejected."""
        board = Board(BoardConfig(3, 3, 2))
        with pytest.raises(InvalidConfiguration):
            board.place_mines(positions)
        assert board.mine_count == 0

    def test_place_mines_partial_out_of_bounds_marks_nothing(self) -> None:
        board = Board(BoardConfig(3, 3, 2))
        with pytest.raises(OutOfBounds):
            board.place_mines([(0, 0), (3, 0)])
        assert board.mine_count == 0


# ============================================================================
# Observation Tests
# ============================================================================

class TestObservation:
    """Test observation array."""

    def test_observation_shape_matches_board(self) -> None:
        board = Board(BoardConfig(4, 7, 3))
        assert board.get_observation().shape == (4, 7)

    def test_new_board_observation_all_covered(
        self, default_board: Board
    ) -> None:
        assert np.all(default_board.get_observation() == -1)

    def test_observation_dtype_is_int8(self, default_board: Board) -> None:
        assert default_board.get_observation().dtype == np.int8

    def test_flagged_cell_in_observation(self, default_board: Board) -> None:
        default_board.cell(0, 0).toggle_flag()
        assert default_board.get_observation()[0, 0] == -2

    def test_covered_positions_skip_flags_and_reveals(
        self, small_board: Board
    ) -> None:
        small_board.cell(0, 0).toggle_flag()
        small_board.cell(2, 2).reveal()
        positions = small_board.get_covered_positions()
        assert (0, 0) not in positions
        assert (2, 2) not in positions
        assert len(positions) == 7
