"""
The Game class is the entrypoint into the domain layer for the service layer.
It owns the board and the turn, accepts moves one at a time and decides when the game is over.
The result of every move is handed back to the caller (and to an optional listener for terminal results, e.g. score keeping).
"""

from dataclasses import dataclass, field
from typing import Callable, Optional

from src.core.exceptions import (
    CellOccupiedError,
    GameNotActiveError,
    InvalidRequestError,
)
from src.core.shared_types import Cell, Marker, Status
from src.tictactoe import win_detector
from src.tictactoe.board import Board
from src.tictactoe.lines import WinningLine


@dataclass(frozen=True)
class MoveResult:
    """Everything the UI needs to render after a move."""

    index: int
    marker: Marker
    status: Status
    turn: Optional[Marker]  # None once the game is over
    winner: Optional[Marker] = None
    winning_line: Optional[WinningLine] = None

    @property
    def is_terminal(self) -> bool:
        return self.status != Status.IN_PROGRESS


ResultListener = Callable[[MoveResult], None]


@dataclass
class Game:
    board: Board = field(default_factory=Board)
    on_result: Optional[ResultListener] = None

    def __post_init__(self) -> None:
        self._start()
        # a board handed in with markers on it: X moves whenever both have placed equally many
        lead = self.board.count(Cell.X) - self.board.count(Cell.O)
        if lead not in (0, 1):
            raise InvalidRequestError(
                f"X must have placed as many markers as O, or one more. Got {self.board.to_string()!r}."
            )
        if lead == 1:
            self._turn = Cell.O
        # a board that is already won or full starts out finished
        win = win_detector.evaluate(self.board)
        if win is not None:
            self._winner, self._winning_line = win
            self._change_status(Status.WON)
        elif self.board.is_full():
            self._change_status(Status.DRAW)

    # --- DOMAIN LAYER API CALLED BY SERVICE ---
    @property
    def turn(self) -> Optional[Marker]:
        """Marker to move next. None when the game has ended."""
        return self._turn if self.status == Status.IN_PROGRESS else None

    @property
    def status(self) -> Status:
        return self._status

    @property
    def winner(self) -> Optional[Marker]:
        return self._winner

    @property
    def winning_line(self) -> Optional[WinningLine]:
        return self._winning_line

    @property
    def is_active(self) -> bool:
        return self._status == Status.IN_PROGRESS

    @property
    def move_history(self) -> list[int]:
        return list(self._history)

    def apply_move(self, index: int) -> MoveResult:
        """
        Place the marker of the player whose turn it is.
        -----

        1. make sure the game is (still) in progress
        2. make sure the cell exists and is empty
        3. update the board
        4. check for a win, then for a draw; otherwise pass the turn
        5. report terminal results to the listener

        All checks happen before the board is touched, so a refused move leaves the game as it was.
        """
        if not self.is_active:
            raise GameNotActiveError(f"Game is not in progress. status: {self.status}")

        # cell_at() takes care of out-of-range indices
        if self.board.cell_at(index) != Cell.EMPTY:
            raise CellOccupiedError(f"Cell {index} is already taken.")

        marker = self._turn
        self.board.place(index, marker)
        self._history.append(index)

        result = self._update_game_status(index, marker)
        if result.is_terminal and self.on_result is not None:
            self.on_result(result)
        return result

    def reset(self) -> None:
        """Start over with an empty board. Scores live elsewhere and are not touched."""
        self.board.clear()
        self._start()

    # -- PRIVATE HELPERS ---
    def _start(self) -> None:
        self._turn: Marker = Cell.X
        self._status = Status.IN_PROGRESS
        self._winner: Optional[Marker] = None
        self._winning_line: Optional[WinningLine] = None
        self._history: list[int] = []

    def _update_game_status(self, index: int, marker: Marker) -> MoveResult:
        """Performs checks to see if the game has ended and changes status accordingly."""
        win = win_detector.evaluate(self.board)
        if win is not None:
            self._winner, self._winning_line = win
            self._change_status(Status.WON)
        elif self.board.is_full():
            self._change_status(Status.DRAW)
        else:
            self._turn = marker.opponent()

        return MoveResult(
            index=index,
            marker=marker,
            status=self.status,
            turn=self.turn,
            winner=self.winner,
            winning_line=self.winning_line,
        )

    def _change_status(self, new_status: Status) -> None:
        self._status = new_status
