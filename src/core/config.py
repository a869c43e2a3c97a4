"""Settings, read from the environment (or a .env file) with sensible defaults."""

import logging
import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    DATABASE_URL = os.environ.get("DATABASE_URL") or "sqlite:///tictactoe.sqlite3"
    # key under which the score record is stored (same key the browser version used)
    STORAGE_KEY = os.environ.get("STORAGE_KEY") or "noughtsAndCrossesData"
    # Seconds of inactivity before a hint is offered
    HINT_DELAY_SEC = float(os.environ.get("HINT_DELAY_SEC", "10"))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(level=level or Config.LOG_LEVEL)
