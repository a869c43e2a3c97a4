"""Implementation of (Score)Repository using SQLAlchemy"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.core.config import Config
from src.core.exceptions import RepositoryError
from src.core.models import ScoreRecord
from src.db.schema import DBScoreRecord


class SQLScoreRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session, key: str = Config.STORAGE_KEY) -> None:
        self.db = db_session
        self.key = key

    def load(self) -> ScoreRecord | None:
        """Get the stored record, if it exists. Storage errors count as 'nothing stored'."""
        try:
            record_db = self._fetch_record()
        except SQLAlchemyError as e:
            logging.error(f"Failed to read score record {self.key!r}: {e}")
            self.db.rollback()
            return None
        if record_db:
            return self._to_model(record_db)
        return None

    def save(self, record: ScoreRecord) -> None:
        """Insert or overwrite the record stored under this repository's key."""
        try:
            record_db = self._fetch_record()
            if record_db is None:
                record_db = DBScoreRecord(key=self.key)
                self.db.add(record_db)
            record_db.player1_name = record.player1_name
            record_db.player2_name = record.player2_name
            record_db.player1_wins = record.player1_wins
            record_db.player2_wins = record.player2_wins
            record_db.draws = record.draws
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise RepositoryError(f"Failed to save score record {self.key!r}: {e}") from e

    def delete(self) -> None:
        try:
            record_db = self._fetch_record()
            if record_db is None:
                return
            self.db.delete(record_db)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise RepositoryError(
                f"Failed to delete score record {self.key!r}: {e}"
            ) from e

    def _fetch_record(self) -> DBScoreRecord | None:
        query = select(DBScoreRecord).where(DBScoreRecord.key == self.key)
        return self.db.scalar(query)

    def _to_model(self, record_db: DBScoreRecord) -> ScoreRecord:
        """Convert SQLAlchemy model to data transfer model."""
        return ScoreRecord(
            player1_wins=record_db.player1_wins,
            player2_wins=record_db.player2_wins,
            draws=record_db.draws,
            player1_name=record_db.player1_name,
            player2_name=record_db.player2_name,
        )
