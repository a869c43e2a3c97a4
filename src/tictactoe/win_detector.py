"""Checks the board for three markers in a row."""

from typing import Optional

from src.core.shared_types import Cell, Marker
from src.tictactoe.board import Board
from src.tictactoe.lines import WINNING_LINES, WinningLine


def evaluate(board: Board) -> Optional[tuple[Marker, WinningLine]]:
    """
    Return the marker that completed a line, together with that line (so the UI can highlight it).
    ----

    All lines get scanned, and the first completed one (in the fixed order of WINNING_LINES) is returned.
    One move can complete two lines at once (e.g. a corner shared by a row and a column); the earlier line in that order is the one returned.
    """
    for line in WINNING_LINES:
        marker = _line_owner(board, line)
        if marker is not None:
            return marker, line
    return None


def completed_lines(board: Board) -> list[tuple[Marker, WinningLine]]:
    """Every completed line on the board, in the same order as evaluate() scans them."""
    results: list[tuple[Marker, WinningLine]] = []
    for line in WINNING_LINES:
        marker = _line_owner(board, line)
        if marker is not None:
            results.append((marker, line))
    return results


def _line_owner(board: Board, line: WinningLine) -> Optional[Marker]:
    a, b, c = (board.cell_at(index) for index in line)
    if a != Cell.EMPTY and a == b == c:
        return a
    return None
