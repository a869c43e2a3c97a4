"""Protocol repository (implemented for SQL Alchemy and a plain JSON file)"""

from typing import Protocol

from src.core.models import ScoreRecord


class ScoreRepository(Protocol):
    """Persistence of the one score record (names + tallies)"""

    def load(self) -> ScoreRecord | None:
        """Get the stored record. None if there is none, or it can't be read."""
        ...

    def save(self, record: ScoreRecord) -> None:
        """Store the record, replacing whatever was there."""
        ...

    def delete(self) -> None:
        """Forget the stored record."""
        ...
