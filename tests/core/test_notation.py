"""Tests for square helpers and placement strings."""

import pytest

from gambit.core.board import Board
from gambit.core.enums import Color, PieceType
from gambit.core.notation import (
    STARTING_PLACEMENT,
    board_from_placement,
    board_to_placement,
)
from gambit.core.types import E2, E4, H8, parse_square, square_name


class TestSquareNames:
    def test_square_name(self) -> None:
        assert square_name((6, 4)) == "e2"
        assert square_name((0, 0)) == "a8"
        assert square_name((7, 7)) == "h1"

    def test_parse_square(self) -> None:
        assert parse_square("e4") == (4, 4)
        assert parse_square("h8") == H8

    @pytest.mark.parametrize("name", ["", "e", "i1", "a9", "e22"])
    def test_parse_square_invalid(self, name: str) -> None:
        with pytest.raises(ValueError):
            parse_square(name)


class TestPlacement:
    def test_starting_placement_matches_initial_board(self) -> None:
        assert board_to_placement(Board.initial()) == STARTING_PLACEMENT

    def test_parse_starting_placement(self) -> None:
        board = board_from_placement(STARTING_PLACEMENT)
        assert board.snapshot() == Board.initial().snapshot()

    def test_parse_sparse(self) -> None:
        board = board_from_placement("4k3/8/8/8/4P3/8/8/4K3")
        pawn = board[E4]
        assert pawn is not None
        assert pawn.color == Color.WHITE and pawn.piece_type == PieceType.PAWN
        assert pawn.square == E4
        assert board_to_placement(board) == "4k3/8/8/8/4P3/8/8/4K3"

    def test_pawn_off_home_row_has_moved(self) -> None:
        board = board_from_placement("4k3/8/8/8/4P3/8/8/4K3")
        pawn = board[E4]
        assert pawn is not None and pawn.has_moved

    def test_pawn_on_home_row_has_not_moved(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/8/4P3/4K3")
        pawn = board[E2]
        assert pawn is not None and not pawn.has_moved

    @pytest.mark.parametrize(
        "placement",
        [
            "8/8/8/8/8/8/8",
            "9/8/8/8/8/8/8/8",
            "ppppppppp/8/8/8/8/8/8/8",
            "7/8/8/8/8/8/8/8",
            "x7/8/8/8/8/8/8/8",
        ],
    )
    def test_invalid_placement(self, placement: str) -> None:
        with pytest.raises(ValueError):
            board_from_placement(placement)
