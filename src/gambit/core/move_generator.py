"""Pseudo-legal and legal move generation."""

from __future__ import annotations

from gambit.core.attacks import (
    BISHOP_RAYS,
    KING_TARGETS,
    KNIGHT_TARGETS,
    QUEEN_RAYS,
    ROOK_RAYS,
    is_king_in_check,
    is_square_attacked,
)
from gambit.core.board import Board
from gambit.core.enums import Color, PieceType
from gambit.core.executor import speculate
from gambit.core.move import Move
from gambit.core.piece import Piece
from gambit.core.types import Square, in_bounds


# -- Piece-specific generators (private) -----------------------------------


def _gen_pawn(piece: Piece, board: Board) -> list[Square]:
    moves: list[Square] = []
    step = piece.color.forward
    row, col = piece.square

    one_row = row + step
    if not in_bounds(one_row, col):
        return moves

    if board.is_empty((one_row, col)):
        moves.append((one_row, col))
        two_row = one_row + step
        if (
            not piece.has_moved
            and in_bounds(two_row, col)
            and board.is_empty((two_row, col))
        ):
            moves.append((two_row, col))

    for cap_col in (col - 1, col + 1):
        if not in_bounds(one_row, cap_col):
            continue
        target = board[(one_row, cap_col)]
        if target is not None and target.color != piece.color:
            moves.append((one_row, cap_col))
    return moves


def _gen_step(piece: Piece, board: Board, targets: tuple[Square, ...]) -> list[Square]:
    moves: list[Square] = []
    for to_sq in targets:
        target = board[to_sq]
        if target is None or target.color != piece.color:
            moves.append(to_sq)
    return moves


def _gen_sliding(
    piece: Piece,
    board: Board,
    rays: tuple[tuple[Square, ...], ...],
) -> list[Square]:
    moves: list[Square] = []
    for ray in rays:
        for to_sq in ray:
            target = board[to_sq]
            if target is None:
                moves.append(to_sq)
                continue
            if target.color != piece.color:
                moves.append(to_sq)
            break
    return moves


# -- Public API -----------------------------------------------------------


def pseudo_legal_moves(piece: Piece, board: Board) -> list[Square]:
    """Destinations for *piece* ignoring whether its own king ends in check."""
    sq = piece.square
    match piece.piece_type:
        case PieceType.PAWN:
            return _gen_pawn(piece, board)
        case PieceType.KNIGHT:
            return _gen_step(piece, board, KNIGHT_TARGETS[sq])
        case PieceType.KING:
            return _gen_step(piece, board, KING_TARGETS[sq])
        case PieceType.BISHOP:
            return _gen_sliding(piece, board, BISHOP_RAYS[sq])
        case PieceType.ROOK:
            return _gen_sliding(piece, board, ROOK_RAYS[sq])
        case PieceType.QUEEN:
            return _gen_sliding(piece, board, QUEEN_RAYS[sq])
    return []


def legal_moves(piece: Piece, board: Board) -> list[Square]:
    """Pseudo-legal destinations that do not leave *piece*'s king in check."""
    legal: list[Square] = []
    for to_sq in pseudo_legal_moves(piece, board):
        with speculate(board, piece, to_sq):
            if not is_king_in_check(board, piece.color):
                legal.append(to_sq)
    return legal


def all_legal_moves(board: Board, color: Color) -> list[Move]:
    """Every legal move for *color* across all of its pieces."""
    moves: list[Move] = []
    for piece in board.pieces(color):
        from_sq = piece.square
        moves.extend(Move(from_sq, to_sq) for to_sq in legal_moves(piece, board))
    return moves


class MoveGenerator:
    """Generates moves and answers attack queries for a :class:`Board`.

    Legality filtering mutates the board through :func:`speculate` but
    always restores it before returning.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    def generate_legal_moves(self, color: Color) -> list[Move]:
        """All strictly legal moves for *color*."""
        return all_legal_moves(self._board, color)

    def generate_pseudo_legal_moves(self, color: Color) -> list[Move]:
        """All pseudo-legal moves for *color* (may leave own king in check)."""
        moves: list[Move] = []
        for piece in self._board.pieces(color):
            from_sq = piece.square
            moves.extend(
                Move(from_sq, to_sq) for to_sq in pseudo_legal_moves(piece, self._board)
            )
        return moves

    def legal_destinations(self, sq: Square) -> list[Square]:
        """Legal destinations for the piece on *sq* (empty square → [])."""
        piece = self._board[sq]
        if piece is None:
            return []
        return legal_moves(piece, self._board)

    # -- Attack detection -------------------------------------------------

    def is_in_check(self, color: Color) -> bool:
        return is_king_in_check(self._board, color)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        return is_square_attacked(self._board, sq, by_color)
