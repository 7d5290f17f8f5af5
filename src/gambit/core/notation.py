"""Board placement strings (the first field of FEN)."""

from __future__ import annotations

from gambit.core.board import Board
from gambit.core.enums import Color, PieceType
from gambit.core.piece import Piece

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

# Pawns standing here have not moved yet.
_PAWN_HOME_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


def board_from_placement(placement: str) -> Board:
    """Parse a FEN piece-placement field into a :class:`Board`.

    A pawn counts as unmoved only on its home row; every other piece starts
    with ``has_moved = False``.
    """
    rows = placement.strip().split("/")
    if len(rows) != 8:
        raise ValueError(f"Invalid placement (must contain 8 ranks): {placement!r}")
    board = Board()
    for row, row_text in enumerate(rows):
        col = 0
        for ch in row_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid placement digit {ch!r}: {placement!r}")
                col += step
            else:
                if col >= 8:
                    raise ValueError(f"Invalid placement rank width: {placement!r}")
                piece = Piece.from_char(ch)
                if piece.piece_type == PieceType.PAWN:
                    piece.has_moved = row != _PAWN_HOME_ROW[piece.color]
                board.place(piece, (row, col))
                col += 1
            if col > 8:
                raise ValueError(f"Invalid placement rank width: {placement!r}")
        if col != 8:
            raise ValueError(f"Invalid placement rank width: {placement!r}")
    return board


def board_to_placement(board: Board) -> str:
    """Serialise *board* to a FEN piece-placement field."""
    rows: list[str] = []
    for cells in board.snapshot():
        empty = 0
        text = ""
        for cell in cells:
            if cell is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += cell
        if empty:
            text += str(empty)
        rows.append(text)
    return "/".join(rows)
