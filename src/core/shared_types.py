"""
Type definitions used across layers
"""

from enum import Enum, StrEnum
from typing import Literal


class Cell(Enum):
    """State of a single square. Values are the symbols shown to the players."""

    EMPTY = "_"
    X = "X"
    O = "O"  # noqa: E741

    def opponent(self) -> "Cell":
        if self == Cell.EMPTY:
            raise ValueError("An empty cell has no opponent.")
        return Cell.O if self == Cell.X else Cell.X


# Only X and O can be placed (and be "to move")
Marker = Literal[Cell.X, Cell.O]


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    WON = "won"
    DRAW = "draw"
