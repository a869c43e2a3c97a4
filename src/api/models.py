"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Status

PlayerName = str
Symbol = str


# --- REQUEST MODELS ---
class MoveRequest(BaseModel):
    # Range is checked by the Board, so a bad index surfaces as IndexOutOfRangeError
    index: int


class RenameRequest(BaseModel):
    slot: int
    name: str

    @field_validator("slot")
    @classmethod
    def validate_slot(cls, value: int) -> int:
        if value not in (1, 2):
            raise InvalidRequestError(f"Player slot must be 1 or 2, got {value!r}.")
        return value


# --- RESPONSE MODELS ---
class ScoreResponse(BaseModel):
    player1_name: PlayerName
    player2_name: PlayerName
    player1_wins: int
    player2_wins: int
    draws: int


class GameResponse(BaseModel):
    board: list[Symbol]
    status: Status
    turn: Optional[Symbol]
    turn_player: Optional[PlayerName]
    winner: Optional[Symbol]
    winner_name: Optional[PlayerName]
    winning_line: Optional[list[int]]
    message: str
    scores: ScoreResponse


class HintResponse(BaseModel):
    index: int
    row: int
    col: int
    message: str
