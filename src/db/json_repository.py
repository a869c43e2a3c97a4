"""
Implementation of (Score)Repository as a single JSON document on disk.

The document has the same shape the browser version kept in local storage:
{"player1Name": ..., "player2Name": ..., "scores": {"player1": ..., "player2": ..., "draws": ...}}
"""

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from src.core.exceptions import RepositoryError
from src.core.models import DEFAULT_PLAYER1_NAME, DEFAULT_PLAYER2_NAME, ScoreRecord


class StoredScores(BaseModel):
    player1: int = Field(default=0, ge=0)
    player2: int = Field(default=0, ge=0)
    draws: int = Field(default=0, ge=0)


class StoredScoreDocument(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    player1_name: str = Field(default=DEFAULT_PLAYER1_NAME, alias="player1Name")
    player2_name: str = Field(default=DEFAULT_PLAYER2_NAME, alias="player2Name")
    scores: StoredScores = Field(default_factory=StoredScores)

    @classmethod
    def from_record(cls, record: ScoreRecord) -> "StoredScoreDocument":
        return cls(
            player1_name=record.player1_name,
            player2_name=record.player2_name,
            scores=StoredScores(
                player1=record.player1_wins,
                player2=record.player2_wins,
                draws=record.draws,
            ),
        )

    def to_record(self) -> ScoreRecord:
        return ScoreRecord(
            player1_wins=self.scores.player1,
            player2_wins=self.scores.player2,
            draws=self.scores.draws,
            # an empty name falls back to the default, like a missing one
            player1_name=self.player1_name or DEFAULT_PLAYER1_NAME,
            player2_name=self.player2_name or DEFAULT_PLAYER2_NAME,
        )


class JSONScoreRepository:
    """Data stored as a JSON file"""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> ScoreRecord | None:
        """Absent, unreadable or malformed files all mean: nothing stored."""
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            logging.error(f"Failed to read score file {self.path}: {e}")
            return None

        # invalid UTF-8 is reported by pydantic as a ValidationError too
        try:
            document = StoredScoreDocument.model_validate_json(raw)
        except ValidationError as e:
            logging.warning(f"Ignoring malformed score file {self.path}: {e}")
            return None
        return document.to_record()

    def save(self, record: ScoreRecord) -> None:
        document = StoredScoreDocument.from_record(record)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                document.model_dump_json(by_alias=True), encoding="utf-8"
            )
        except OSError as e:
            raise RepositoryError(f"Failed to write score file {self.path}: {e}") from e

    def delete(self) -> None:
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            raise RepositoryError(f"Failed to remove score file {self.path}: {e}") from e
