"""Piece: fixed identity plus a mutable board position."""

from __future__ import annotations

from gambit.core.enums import Color, PieceType
from gambit.core.types import Square

# FEN character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


class Piece:
    """A chess piece living on a :class:`~gambit.core.board.Board`.

    ``color`` and ``piece_type`` never change.  ``row``/``col`` mirror the
    board cell holding the piece and are only written by the board itself.
    Pieces compare by identity: two white pawns are different pieces.
    """

    __slots__ = ("_color", "_piece_type", "row", "col", "has_moved")

    def __init__(
        self,
        color: Color,
        piece_type: PieceType,
        row: int = -1,
        col: int = -1,
        has_moved: bool = False,
    ) -> None:
        self._color = color
        self._piece_type = piece_type
        self.row = row
        self.col = col
        self.has_moved = has_moved

    @property
    def color(self) -> Color:
        return self._color

    @property
    def piece_type(self) -> PieceType:
        return self._piece_type

    @property
    def square(self) -> Square:
        return (self.row, self.col)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self._color, self._piece_type)]

    def __repr__(self) -> str:
        return f"Piece({self._color}, {self._piece_type.name.lower()}, {self.square})"

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self._color, self._piece_type)]
