"""Database tables / schema"""

from datetime import datetime, timezone

from sqlalchemy import String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from src.core.models import MAX_NAME_LENGTH


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBScoreRecord(Base):
    __tablename__ = "score_records"
    # storage key, so several score boards could share one database
    key: Mapped[str] = mapped_column(String(64), primary_key=True)
    player1_name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH))
    player2_name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH))
    player1_wins: Mapped[int] = mapped_column(default=0)
    player2_wins: Mapped[int] = mapped_column(default=0)
    draws: Mapped[int] = mapped_column(default=0)
    updated_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)
