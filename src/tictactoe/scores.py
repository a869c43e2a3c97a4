"""Score keeping across games. Knows nothing about a single game's lifecycle, only about its results."""

import logging
from typing import Literal, Self

from src.core.exceptions import InvalidRecordError, InvalidRequestError
from src.core.models import (
    DEFAULT_PLAYER1_NAME,
    DEFAULT_PLAYER2_NAME,
    MAX_NAME_LENGTH,
    ScoreRecord,
)
from src.core.shared_types import Cell, Marker

PlayerSlot = Literal[1, 2]


class ScoreTracker:
    """Tallies of wins and draws, plus the names the players go by. Player 1 plays X."""

    def __init__(self) -> None:
        self._record = ScoreRecord()

    @classmethod
    def from_record(cls, record: ScoreRecord) -> Self:
        """Restore a tracker from a persisted record. Refuses anything that breaks the constraints."""
        for tally_name in ("player1_wins", "player2_wins", "draws"):
            tally = getattr(record, tally_name)
            if isinstance(tally, bool) or not isinstance(tally, int) or tally < 0:
                raise InvalidRecordError(
                    f"{tally_name} must be a non-negative integer, got {tally!r}."
                )
        for name in (record.player1_name, record.player2_name):
            if not isinstance(name, str) or name != _normalize_name(name) or not name:
                raise InvalidRecordError(
                    f"Player names must be 1-{MAX_NAME_LENGTH} characters without surrounding whitespace, got {name!r}."
                )

        tracker = cls()
        tracker._record = ScoreRecord(
            player1_wins=record.player1_wins,
            player2_wins=record.player2_wins,
            draws=record.draws,
            player1_name=record.player1_name,
            player2_name=record.player2_name,
        )
        return tracker

    def to_record(self) -> ScoreRecord:
        """Copy, so the caller can't change the tallies behind our back."""
        return ScoreRecord(**vars(self._record))

    @property
    def player1_name(self) -> str:
        return self._record.player1_name

    @property
    def player2_name(self) -> str:
        return self._record.player2_name

    def name_of(self, marker: Marker) -> str:
        return self.player1_name if marker == Cell.X else self.player2_name

    def record_win(self, marker: Marker) -> None:
        if marker == Cell.X:
            self._record.player1_wins += 1
        elif marker == Cell.O:
            self._record.player2_wins += 1
        else:
            raise ValueError(f"Only X or O can win, got {marker!r}.")

    def record_draw(self) -> None:
        self._record.draws += 1

    def rename(self, slot: PlayerSlot, new_name: str) -> str:
        """
        Change a player's name and return the name that is in effect afterwards.

        Whitespace is trimmed and names are cut off at MAX_NAME_LENGTH.
        An empty name (after trimming) is not accepted: the previous name stays.
        """
        if slot not in (1, 2):
            raise InvalidRequestError(f"Player slot must be 1 or 2, got {slot!r}.")

        current = self.player1_name if slot == 1 else self.player2_name
        name = _normalize_name(new_name)
        if not name:
            logging.info(f"Ignoring empty name for player {slot}, keeping {current!r}")
            return current

        if slot == 1:
            self._record.player1_name = name
        else:
            self._record.player2_name = name
        return name

    def reset(self) -> None:
        """Zero all tallies and go back to the default names."""
        self._record = ScoreRecord(
            player1_name=DEFAULT_PLAYER1_NAME, player2_name=DEFAULT_PLAYER2_NAME
        )


def _normalize_name(name: str) -> str:
    return name.strip()[:MAX_NAME_LENGTH].strip()
