"""
The eight lines that win the game.

(placed in its own module as both the win detector and the advisor need them)
"""

WinningLine = tuple[int, int, int]

# Document order: rows top to bottom, columns left to right, then both diagonals.
# Detector and advisor both rely on this order to break ties.
WINNING_LINES: tuple[WinningLine, ...] = (
    # rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # diagonals
    (0, 4, 8),
    (2, 4, 6),
)
