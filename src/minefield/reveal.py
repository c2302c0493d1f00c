"""
Cascading reveal.

Uncovers cells, computes adjacency counts on the way, and flood-fills
across zero-count regions using an explicit stack so large boards never
hit the interpreter's recursion limit.
"""
from dataclasses import dataclass, field
from typing import List, Tuple

from .board import Board


Position = Tuple[int, int]


@dataclass
class RevealResult:
    """
    Outcome of a single reveal.

    Attributes:
        changed: Positions that became revealed, in reveal order.
        hit_mine: Whether the revealed cell was a mine.
    """

    changed: List[Position] = field(default_factory=list)
    hit_mine: bool = False

    def __bool__(self) -> bool:
        return bool(self.changed)


class RevealEngine:
    """
    Executes reveals against a board and counts revealed cells.

    The engine knows nothing about game status; the session decides
    whether a reveal is allowed and what a mine hit means.
    """

    def __init__(self, board: Board) -> None:
        self.board = board
        self.revealed_count = 0

    @property
    def is_cleared(self) -> bool:
        """True once every safe cell has been revealed."""
        return self.revealed_count == self.board.config.safe_cells

    def reveal(self, row: int, col: int) -> RevealResult:
        """
        Reveal a cell and cascade through zero-count neighbours.

        Flagged and already revealed cells are left alone.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            RevealResult listing every cell uncovered.
        """
        start = self.board.cell(row, col)
        result = RevealResult()
        if not start.is_covered:
            return result

        if start.is_mine:
            start.reveal()
            self.revealed_count += 1
            result.changed.append(start.position)
            result.hit_mine = True
            return result

        stack = [start.position]
        while stack:
            current_row, current_col = stack.pop()
            cell = self.board.cell(current_row, current_col)
            # a cell can be pushed twice before it is popped
            if not cell.is_covered:
                continue

            cell.adjacent_mines = self.board.count_adjacent_mines(
                current_row, current_col
            )
            cell.reveal()
            self.revealed_count += 1
            result.changed.append(cell.position)

            if cell.adjacent_mines == 0:
                for neighbour in self.board.neighbours(current_row, current_col):
                    if self.board.cell(*neighbour).is_covered:
                        stack.append(neighbour)

        return result

    def expose_mines(self) -> List[Position]:
        """
        Reveal every mine for display at the end of a game.

        Exposed mines do not count towards revealed_count.

        Returns:
            Positions whose state changed.
        """
        exposed = []
        for cell in self.board:
            if cell.is_mine and cell.expose():
                exposed.append(cell.position)
        return exposed
