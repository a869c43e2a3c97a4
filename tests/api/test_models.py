"""Unit tests for src/api/models.py"""

import pytest
from pydantic import ValidationError

from src.api.models import GameResponse, MoveRequest, RenameRequest, ScoreResponse
from src.core.shared_types import Status


# -- Validation - RenameRequest --
@pytest.mark.parametrize("slot", [1, 2])
def test_valid_slot(slot: int) -> None:
    request = RenameRequest(slot=slot, name="Olga")
    assert request.slot == slot
    assert request.name == "Olga"


@pytest.mark.parametrize("slot", [0, 3, -2])
def test_invalid_slot(slot: int) -> None:
    """InvalidRequestError is a ValueError, which pydantic reports as a validation error"""
    with pytest.raises(ValidationError, match="Player slot must be 1 or 2"):
        _ = RenameRequest(slot=slot, name="Olga")


# -- Validation - MoveRequest --
def test_move_request_index() -> None:
    assert MoveRequest(index=8).index == 8
    # range is checked by the game, not here
    assert MoveRequest(index=9).index == 9


def test_move_request_not_a_number() -> None:
    with pytest.raises(ValidationError):
        _ = MoveRequest(index="center")


# -- Responses --
def test_game_response_serializes_status() -> None:
    response = GameResponse(
        board=["X", "_", "_", "_", "_", "_", "_", "_", "_"],
        status=Status.IN_PROGRESS,
        turn="O",
        turn_player="Player 2",
        winner=None,
        winner_name=None,
        winning_line=None,
        message="Player 2's turn",
        scores=ScoreResponse(
            player1_name="Player 1",
            player2_name="Player 2",
            player1_wins=0,
            player2_wins=0,
            draws=0,
        ),
    )
    dumped = response.model_dump(mode="json")
    assert dumped["status"] == "in progress"
    assert dumped["scores"]["draws"] == 0
