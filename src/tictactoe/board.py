"""The Board holds the nine cells and implements the only rule that concerns a single cell: you can't place on top of another marker."""

from dataclasses import dataclass, field
from typing import Iterable, Self

from src.core.exceptions import CellOccupiedError, IndexOutOfRangeError
from src.core.shared_types import Cell, Marker

BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE


def _empty_cells() -> list[Cell]:
    return [Cell.EMPTY] * CELL_COUNT


@dataclass
class Board:
    _cells: list[Cell] = field(default_factory=_empty_cells)

    @classmethod
    def from_cells(cls, cells: Iterable[Cell]) -> Self:
        cells = list(cells)
        if len(cells) != CELL_COUNT:
            raise IndexOutOfRangeError(
                f"A board has exactly {CELL_COUNT} cells, got {len(cells)}."
            )
        return cls(cells)

    @classmethod
    def from_string(cls, layout: str) -> Self:
        """Construct a board from a compact notation, read row by row.

        ex. "XX_OO____" means:
        * X on cells 0 and 1
        * O on cells 3 and 4
        * all other cells empty
        Spaces and slashes may be used to separate rows ("XX_/OO_/___").
        """
        symbols = [char for char in layout if char not in " /"]
        return cls.from_cells(Cell(symbol) for symbol in symbols)

    def to_string(self) -> str:
        return "".join(cell.value for cell in self._cells)

    @property
    def cells(self) -> tuple[Cell, ...]:
        """Read-only snapshot, so callers can't bypass place()"""
        return tuple(self._cells)

    def cell_at(self, index: int) -> Cell:
        self._assert_in_range(index)
        return self._cells[index]

    def place(self, index: int, marker: Marker) -> None:
        """Put a marker on an empty cell. Checks happen before anything is changed."""
        if marker == Cell.EMPTY:
            raise ValueError("Can only place X or O on the board.")
        if self.cell_at(index) != Cell.EMPTY:
            raise CellOccupiedError(
                f"Cell {index} is already taken by {self._cells[index].value}."
            )
        self._cells[index] = marker

    def is_full(self) -> bool:
        return Cell.EMPTY not in self._cells

    def empty_cells(self) -> list[int]:
        return [index for index, cell in enumerate(self._cells) if cell == Cell.EMPTY]

    def count(self, cell: Cell) -> int:
        return self._cells.count(cell)

    def clear(self) -> None:
        self._cells = _empty_cells()

    @staticmethod
    def _assert_in_range(index: int) -> None:
        # bool is an int subclass, but True/False are never meant as a cell index
        if isinstance(index, bool) or not 0 <= index < CELL_COUNT:
            raise IndexOutOfRangeError(
                f"Cell index must be within 0-{CELL_COUNT - 1}, got {index!r}."
            )
