"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from gambit.core import Board, Color, MoveGenerator

    board = Board.initial()
    gen = MoveGenerator(board)
    for move in gen.generate_legal_moves(Color.WHITE):
        print(move)
"""

from gambit.core.attacks import is_king_in_check, is_square_attacked
from gambit.core.board import Board
from gambit.core.enums import Color, GameEndReason, GameResult, PieceType
from gambit.core.executor import execute, reverse, speculate
from gambit.core.move import Move
from gambit.core.move_generator import (
    MoveGenerator,
    all_legal_moves,
    legal_moves,
    pseudo_legal_moves,
)
from gambit.core.notation import (
    STARTING_PLACEMENT,
    board_from_placement,
    board_to_placement,
)
from gambit.core.piece import Piece
from gambit.core.rules import GameOutcome, Rules
from gambit.core.types import Square, in_bounds, make_square, parse_square, square_name

__all__ = [
    # Enums
    "Color",
    "GameEndReason",
    "GameResult",
    "PieceType",
    # Types / helpers
    "Square",
    "in_bounds",
    "make_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "GameOutcome",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Operations
    "all_legal_moves",
    "execute",
    "is_king_in_check",
    "is_square_attacked",
    "legal_moves",
    "pseudo_legal_moves",
    "reverse",
    "speculate",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_placement",
    "board_to_placement",
]
