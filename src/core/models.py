"""
Boundary layer data model(s).

The ScoreRecord is what gets persisted and restored as a whole.
Both the service layer (higher) and the db layer (lower) use it, so neither needs to know about the other's internal representation.
"""

from dataclasses import dataclass

DEFAULT_PLAYER1_NAME = "Player 1"
DEFAULT_PLAYER2_NAME = "Player 2"
MAX_NAME_LENGTH = 20


@dataclass
class ScoreRecord:
    """Transport-safe snapshot of the score board. Player 1 always plays X."""

    player1_wins: int = 0
    player2_wins: int = 0
    draws: int = 0
    player1_name: str = DEFAULT_PLAYER1_NAME
    player2_name: str = DEFAULT_PLAYER2_NAME
