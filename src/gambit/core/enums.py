"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color. White is the first player, black the second."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Row delta of a pawn step (white climbs toward row 0)."""
        return -1 if self == Color.WHITE else 1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class GameEndReason(IntEnum):
    """Why a game reached its terminal state."""

    KING_CAPTURED = 1
    CHECKMATE = 2
    STALEMATE = 3


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3
