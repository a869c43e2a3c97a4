"""
Suggests a move for the player who has been thinking for a while.

This is a greedy, fixed-priority heuristic (no game tree), so it can be beaten.
"""

from dataclasses import dataclass
from typing import Optional

from src.core.shared_types import Cell, Marker
from src.tictactoe.board import BOARD_SIZE, CELL_COUNT, Board
from src.tictactoe.lines import WINNING_LINES

CENTER = 4
CORNERS = (0, 2, 6, 8)


@dataclass(frozen=True)
class Hint:
    index: int
    row: int
    col: int

    @property
    def message(self) -> str:
        return f"Hint: Try placing your marker at row {self.row}, column {self.col}"


def recommend(board: Board, player: Marker) -> Optional[int]:
    """
    Recommend a cell for `player`, trying in order:

    1. complete one of your own lines (win now)
    2. complete one of the opponent's lines before they do (block)
    3. take the center
    4. take a corner (0, 2, 6, 8)
    5. take any empty cell

    Returns None on a full board.
    """
    winning_cell = _completing_cell(board, player)
    if winning_cell is not None:
        return winning_cell

    blocking_cell = _completing_cell(board, player.opponent())
    if blocking_cell is not None:
        return blocking_cell

    if board.cell_at(CENTER) == Cell.EMPTY:
        return CENTER

    for corner in CORNERS:
        if board.cell_at(corner) == Cell.EMPTY:
            return corner

    for index in range(CELL_COUNT):
        if board.cell_at(index) == Cell.EMPTY:
            return index

    return None


def hint_for(board: Board, player: Marker) -> Optional[Hint]:
    index = recommend(board, player)
    if index is None:
        return None
    row, col = to_row_col(index)
    return Hint(index, row, col)


def to_row_col(index: int) -> tuple[int, int]:
    """1-based (row, column), the way people talk about the board."""
    return index // BOARD_SIZE + 1, index % BOARD_SIZE + 1


def _completing_cell(board: Board, marker: Marker) -> Optional[int]:
    """
    First empty cell that would give `marker` three in a row.

    NOTE Lines are scanned in the order of WINNING_LINES, and within a line (a, b, c) the
    empty cell is looked for at c, then b, then a. The first hit wins, not necessarily the "best" one.
    """
    for a, b, c in WINNING_LINES:
        for empty, first, second in ((c, a, b), (b, a, c), (a, b, c)):
            if (
                board.cell_at(first) == marker
                and board.cell_at(second) == marker
                and board.cell_at(empty) == Cell.EMPTY
            ):
                return empty
    return None
