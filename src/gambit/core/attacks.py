"""Geometry tables and the attack oracle.

``is_square_attacked`` answers a purely geometric question: could a piece of
the given color move onto the square, ignoring whether doing so would expose
its own king.  It does not care whose turn it is.
"""

from __future__ import annotations

from gambit.core.board import Board
from gambit.core.enums import Color, PieceType
from gambit.core.types import Square, in_bounds

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

_ALL_SQUARES: tuple[Square, ...] = tuple((r, c) for r in range(8) for c in range(8))


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[Square, ...]]:
    targets: dict[Square, tuple[Square, ...]] = {}
    for row, col in _ALL_SQUARES:
        targets[(row, col)] = tuple(
            (row + dr, col + dc) for dr, dc in offsets if in_bounds(row + dr, col + dc)
        )
    return targets


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[tuple[Square, ...], ...]]:
    rays_per_square: dict[Square, tuple[tuple[Square, ...], ...]] = {}
    for row, col in _ALL_SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for dr, dc in directions:
            r, c = row + dr, col + dc
            ray: list[Square] = []
            while in_bounds(r, c):
                ray.append((r, c))
                r += dr
                c += dc
            square_rays.append(tuple(ray))
        rays_per_square[(row, col)] = tuple(square_rays)
    return rays_per_square


KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
KING_TARGETS = _build_targets(KING_OFFSETS)

BISHOP_RAYS = _build_rays(BISHOP_DIRS)
ROOK_RAYS = _build_rays(ROOK_DIRS)
QUEEN_RAYS = _build_rays(QUEEN_DIRS)

_DIAGONAL_ATTACKERS = (PieceType.BISHOP, PieceType.QUEEN)
_STRAIGHT_ATTACKERS = (PieceType.ROOK, PieceType.QUEEN)


# -- Oracle -------------------------------------------------------------------


def _attacked_along(
    board: Board,
    rays: tuple[tuple[Square, ...], ...],
    by_color: Color,
    kinds: tuple[PieceType, ...],
) -> bool:
    for ray in rays:
        for sq in ray:
            piece = board[sq]
            if piece is None:
                continue
            if piece.color == by_color and piece.piece_type in kinds:
                return True
            break
    return False


def _attacked_from(
    board: Board,
    squares: tuple[Square, ...],
    by_color: Color,
    kind: PieceType,
) -> bool:
    for sq in squares:
        piece = board[sq]
        if piece is not None and piece.color == by_color and piece.piece_type == kind:
            return True
    return False


def is_square_attacked(board: Board, sq: Square, by_color: Color) -> bool:
    """Is *sq* attacked by any piece of *by_color*?"""
    row, col = sq

    # A pawn strikes one step along its own forward direction, so the
    # attacker sits one row *behind* the target from its point of view.
    pawn_row = row - by_color.forward
    pawn_squares = tuple(
        (pawn_row, c) for c in (col - 1, col + 1) if in_bounds(pawn_row, c)
    )
    if _attacked_from(board, pawn_squares, by_color, PieceType.PAWN):
        return True

    if _attacked_from(board, KNIGHT_TARGETS[sq], by_color, PieceType.KNIGHT):
        return True

    if _attacked_from(board, KING_TARGETS[sq], by_color, PieceType.KING):
        return True

    if _attacked_along(board, BISHOP_RAYS[sq], by_color, _DIAGONAL_ATTACKERS):
        return True

    return _attacked_along(board, ROOK_RAYS[sq], by_color, _STRAIGHT_ATTACKERS)


def is_king_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked by the opponent?

    A board without that king is simply not in check.
    """
    king = board.find_king(color)
    if king is None:
        return False
    return is_square_attacked(board, king.square, color.opposite)
