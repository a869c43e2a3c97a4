"""Unit tests for /src/tictactoe/advisor.py"""

import pytest

from src.core.shared_types import Cell
from src.tictactoe.advisor import Hint, hint_for, recommend, to_row_col
from src.tictactoe.board import Board


# -- PRIORITIES --
def test_win_before_block() -> None:
    board = Board.from_string("XX_/OO_/___")
    assert recommend(board, Cell.X) == 2


def test_block_when_no_win() -> None:
    board = Board.from_string("X__/OO_/___")
    assert recommend(board, Cell.X) == 5


def test_same_board_other_player() -> None:
    """O has the win on the middle row, which beats blocking X on the top row"""
    board = Board.from_string("XX_/OO_/___")
    assert recommend(board, Cell.O) == 5


@pytest.mark.parametrize("player", [Cell.X, Cell.O])
def test_center_on_empty_board(player: Cell) -> None:
    assert recommend(Board(), player) == 4


def test_corner_when_center_taken() -> None:
    assert recommend(Board.from_string("____X____"), Cell.O) == 0


def test_first_free_corner() -> None:
    assert recommend(Board.from_string("X__/_O_/___"), Cell.X) == 2


def test_corners_in_order() -> None:
    """Center and corners 0 and 2 are taken, nobody can complete a line: next corner is 6"""
    board = Board.from_string("O_X/XOO/__X")
    assert recommend(board, Cell.X) == 6
    assert recommend(board, Cell.O) == 6


def test_late_game_win_and_block() -> None:
    board = Board.from_string("XOX/_O_/OXX")
    # X completes 2-5-8
    assert recommend(board, Cell.X) == 5
    # ... which O has to block
    assert recommend(board, Cell.O) == 5

    board = Board.from_string("XOX/OXO/O_O")
    # X can't complete anything, O threatens 6-7-8
    assert recommend(board, Cell.X) == 7


def test_first_empty_cell_fallback() -> None:
    board = Board.from_string("XOX/_O_/OXO")
    # No line can be completed by either player, center and corners are taken.
    assert recommend(board, Cell.X) == 3


def test_full_board() -> None:
    assert recommend(Board.from_string("XOX/XOO/OXX"), Cell.X) is None
    assert hint_for(Board.from_string("XOX/XOO/OXX"), Cell.O) is None


# -- TIE BREAKS --
@pytest.mark.parametrize(
    "layout, expected",
    [
        ("XX_/___/___", 2),  # c empty
        ("X_X/___/___", 1),  # b empty
        ("_XX/___/___", 0),  # a empty
        ("___/___/X_X", 7),
        ("X__/___/X__", 3),  # column
        ("__X/_X_/___", 6),  # anti-diagonal
    ],
)
def test_empty_cell_in_line(layout: str, expected: int) -> None:
    assert recommend(Board.from_string(layout), Cell.X) == expected


def test_first_line_in_document_order_wins() -> None:
    """Two different cells complete a line: the one on the earlier line is chosen"""
    # top row at 2, left column at 3. Rows come first.
    assert recommend(Board.from_string("XX_/___/X__"), Cell.X) == 2
    # left column at 6, diagonal at 4. Columns come first.
    assert recommend(Board.from_string("X__/X__/__X"), Cell.X) == 6


def test_block_uses_first_threat() -> None:
    """Two threats from O: the one on the earlier line gets blocked"""
    board = Board.from_string("X__/OO_/O_X")
    # O threatens 3-4-5 at 5, and 2-4-6 at 2. Row 3-4-5 comes first.
    assert recommend(board, Cell.X) == 5


# -- HINTS --
@pytest.mark.parametrize(
    "index, row_col",
    [(0, (1, 1)), (2, (1, 3)), (4, (2, 2)), (5, (2, 3)), (6, (3, 1)), (8, (3, 3))],
)
def test_to_row_col(index: int, row_col: tuple[int, int]) -> None:
    assert to_row_col(index) == row_col


def test_hint_message() -> None:
    hint = hint_for(Board.from_string("X__/OO_/___"), Cell.X)
    assert hint == Hint(index=5, row=2, col=3)
    assert hint.message == "Hint: Try placing your marker at row 2, column 3"
