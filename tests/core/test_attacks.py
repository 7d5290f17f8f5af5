"""Tests for the attack oracle."""

import pytest

from gambit.core.attacks import is_king_in_check, is_square_attacked
from gambit.core.board import Board
from gambit.core.enums import Color
from gambit.core.notation import board_from_placement


class TestPawnAttacks:
    def test_white_pawn_attacks_forward_diagonals(self) -> None:
        board = board_from_placement("8/8/8/8/4P3/8/8/8")  # white pawn e4
        assert is_square_attacked(board, (3, 3), Color.WHITE)  # d5
        assert is_square_attacked(board, (3, 5), Color.WHITE)  # f5
        assert not is_square_attacked(board, (5, 3), Color.WHITE)  # d3
        assert not is_square_attacked(board, (3, 4), Color.WHITE)  # e5

    def test_black_pawn_attacks_forward_diagonals(self) -> None:
        board = board_from_placement("8/8/8/4p3/8/8/8/8")  # black pawn e5
        assert is_square_attacked(board, (4, 3), Color.BLACK)  # d4
        assert is_square_attacked(board, (4, 5), Color.BLACK)  # f4
        assert not is_square_attacked(board, (2, 3), Color.BLACK)  # d6

    def test_pawn_color_must_match(self) -> None:
        board = board_from_placement("8/8/8/8/4P3/8/8/8")
        assert not is_square_attacked(board, (3, 3), Color.BLACK)

    def test_edge_pawn(self) -> None:
        board = board_from_placement("8/8/8/8/P7/8/8/8")  # white pawn a4
        assert is_square_attacked(board, (3, 1), Color.WHITE)


class TestLeaperAttacks:
    def test_knight(self) -> None:
        board = board_from_placement("8/8/8/8/8/8/8/6N1")  # knight g1
        assert is_square_attacked(board, (5, 5), Color.WHITE)  # f3
        assert is_square_attacked(board, (6, 4), Color.WHITE)  # e2
        assert not is_square_attacked(board, (6, 6), Color.WHITE)  # g2

    @pytest.mark.parametrize(
        "sq", [(3, 3), (3, 4), (3, 5), (4, 3), (4, 5), (5, 3), (5, 4), (5, 5)]
    )
    def test_king_covers_all_neighbours(self, sq) -> None:
        board = board_from_placement("8/8/8/8/4k3/8/8/8")  # black king e4
        assert is_square_attacked(board, sq, Color.BLACK)

    def test_king_does_not_reach_two_squares(self) -> None:
        board = board_from_placement("8/8/8/8/4k3/8/8/8")
        assert not is_square_attacked(board, (2, 4), Color.BLACK)
        assert not is_square_attacked(board, (4, 4), Color.BLACK)


class TestSlidingAttacks:
    def test_rook_along_file(self) -> None:
        board = board_from_placement("8/8/8/8/8/8/8/R7")
        assert is_square_attacked(board, (0, 0), Color.WHITE)
        assert is_square_attacked(board, (7, 7), Color.WHITE)
        assert not is_square_attacked(board, (6, 1), Color.WHITE)

    def test_blocked_ray(self) -> None:
        board = board_from_placement("8/8/8/8/P7/8/8/R7")  # rook a1, pawn a4
        assert is_square_attacked(board, (5, 0), Color.WHITE)  # a3
        assert not is_square_attacked(board, (3, 0), Color.WHITE)  # a5

    def test_enemy_blocker_also_blocks(self) -> None:
        board = board_from_placement("8/8/8/8/p7/8/8/R7")
        assert is_square_attacked(board, (4, 0), Color.WHITE)  # the blocker itself
        assert not is_square_attacked(board, (3, 0), Color.WHITE)

    def test_bishop_diagonal_only(self) -> None:
        board = board_from_placement("8/8/8/8/8/8/8/2b5")  # black bishop c1
        assert is_square_attacked(board, (2, 7), Color.BLACK)  # h6
        assert not is_square_attacked(board, (5, 2), Color.BLACK)  # c3

    def test_queen_both_ways(self) -> None:
        board = board_from_placement("8/8/8/8/3q4/8/8/8")
        assert is_square_attacked(board, (0, 3), Color.BLACK)
        assert is_square_attacked(board, (0, 7), Color.BLACK)
        assert not is_square_attacked(board, (2, 4), Color.BLACK)

    def test_rook_does_not_attack_diagonally(self) -> None:
        board = board_from_placement("8/8/8/8/3r4/8/8/8")
        assert not is_square_attacked(board, (3, 4), Color.BLACK)


class TestKingInCheck:
    def test_start_not_in_check(self) -> None:
        board = Board.initial()
        assert not is_king_in_check(board, Color.WHITE)
        assert not is_king_in_check(board, Color.BLACK)

    def test_rook_check(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/8/8/K3R3")
        assert is_king_in_check(board, Color.BLACK)

    def test_missing_king_is_not_in_check(self) -> None:
        board = board_from_placement("8/8/8/8/8/8/8/R7")
        assert not is_king_in_check(board, Color.BLACK)
