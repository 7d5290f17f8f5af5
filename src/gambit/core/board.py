"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from gambit.core.enums import Color, PieceType
from gambit.core.piece import Piece
from gambit.core.types import Square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid; the single source of truth for occupancy.

    All writes go through :meth:`place` and :meth:`remove`, which keep each
    piece's ``row``/``col`` equal to the cell that references it.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        row, col = sq
        return self._grid[row][col]

    def is_empty(self, sq: Square) -> bool:
        row, col = sq
        return self._grid[row][col] is None

    def place(self, piece: Piece, sq: Square) -> None:
        """Put *piece* on the empty square *sq*."""
        row, col = sq
        if self._grid[row][col] is not None:
            raise ValueError(f"Square {sq} is already occupied")
        self._grid[row][col] = piece
        piece.row = row
        piece.col = col

    def remove(self, sq: Square) -> Piece | None:
        """Empty *sq* and return whatever stood there.

        The removed piece keeps its last coordinates so it can be put back.
        """
        row, col = sq
        piece = self._grid[row][col]
        self._grid[row][col] = None
        return piece

    # -- Query helpers ------------------------------------------------------

    def __iter__(self) -> Iterator[Piece]:
        """All pieces in row-major order."""
        for row in self._grid:
            for piece in row:
                if piece is not None:
                    yield piece

    def pieces(self, color: Color) -> list[Piece]:
        """All pieces of *color*, row-major."""
        return [p for p in self if p.color == color]

    def find_king(self, color: Color) -> Piece | None:
        for piece in self:
            if piece.piece_type == PieceType.KING and piece.color == color:
                return piece
        return None

    def king_square(self, color: Color) -> Square:
        """Return the king square for *color*."""
        king = self.find_king(color)
        if king is None:
            raise ValueError(f"No {color.name} king on board")
        return king.square

    def snapshot(self) -> tuple[tuple[str | None, ...], ...]:
        """Read-only view: FEN characters (or None) per cell."""
        return tuple(
            tuple(str(p) if p is not None else None for p in row) for row in self._grid
        )

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col in range(8):
            b.place(Piece(Color.BLACK, PieceType.PAWN), (1, col))
            b.place(Piece(Color.WHITE, PieceType.PAWN), (6, col))

        for col, pt in enumerate(_BACK_RANK):
            b.place(Piece(Color.BLACK, pt), (0, col))
            b.place(Piece(Color.WHITE, pt), (7, col))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __repr__(self) -> str:
        rows: list[str] = []
        for row_idx, row in enumerate(self._grid):
            cells = [str(p) if p else "." for p in row]
            rows.append(f"{8 - row_idx} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
