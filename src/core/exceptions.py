"""Custom exceptions. Everything the domain raises derives from GameError, so callers can catch a single type."""


class GameError(Exception):
    """Top-level exception for anything that goes wrong while playing."""


class IndexOutOfRangeError(GameError, IndexError):
    """A cell index outside of 0-8 was requested."""


class CellOccupiedError(GameError):
    """Attempt to place a marker on a cell that already holds one."""


class GameNotActiveError(GameError):
    """A move was attempted after the game was won or drawn."""


class InvalidRecordError(GameError):
    """A score record does not satisfy the constraints on tallies and names."""


class InvalidRequestError(GameError, ValueError):
    """Request from the outside world could not be interpreted.

    NOTE also a ValueError, so pydantic validators turn it into a ValidationError.
    """


class RepositoryError(Exception):
    """The persistence layer could not complete an operation."""
