"""Applying and reversing single moves on a :class:`Board`."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from gambit.core.board import Board
from gambit.core.piece import Piece
from gambit.core.types import Square


def execute(board: Board, piece: Piece, to_sq: Square) -> Piece | None:
    """Move *piece* to *to_sq*; return the captured piece, if any."""
    board.remove(piece.square)
    captured = board.remove(to_sq)
    board.place(piece, to_sq)
    piece.has_moved = True
    return captured


def reverse(
    board: Board,
    piece: Piece,
    from_sq: Square,
    captured: Piece | None,
    had_moved: bool = True,
) -> None:
    """Undo an :func:`execute` of *piece* that started on *from_sq*.

    ``has_moved`` is left set unless the caller passes the value it had
    before the move.
    """
    to_sq = piece.square
    board.remove(to_sq)
    if captured is not None:
        board.place(captured, to_sq)
    board.place(piece, from_sq)
    piece.has_moved = had_moved


@contextmanager
def speculate(board: Board, piece: Piece, to_sq: Square) -> Iterator[Piece | None]:
    """Play *piece* to *to_sq* for the duration of the ``with`` block.

    The board, including ``has_moved``, is restored on every exit path.
    """
    from_sq = piece.square
    had_moved = piece.has_moved
    captured = execute(board, piece, to_sq)
    try:
        yield captured
    finally:
        reverse(board, piece, from_sq, captured, had_moved)
