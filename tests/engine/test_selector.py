"""Tests for the capture-first move selector."""

import random

import pytest

from gambit.core.board import Board
from gambit.core.enums import Color
from gambit.core.move import Move
from gambit.core.move_generator import all_legal_moves
from gambit.core.notation import board_from_placement
from gambit.core.types import D5, E4
from gambit.engine import DefaultSelector
from gambit.engine.search import SelectorSettings
from gambit.engine.selector import CaptureFirstSelector


class _FirstChoice(random.Random):
    """RNG stub that always picks the first candidate."""

    def choice(self, seq):
        return seq[0]


class TestCaptureFirstSelector:
    def test_default_selector(self) -> None:
        assert DefaultSelector is CaptureFirstSelector

    @pytest.mark.parametrize("seed", range(10))
    def test_always_picks_the_only_capture(self, seed: int) -> None:
        board = board_from_placement("4k3/8/8/3p4/4P3/8/8/4K3")
        selector = CaptureFirstSelector(rng=random.Random(seed))
        assert selector.select_move(board, Color.WHITE) == Move(E4, D5)

    @pytest.mark.parametrize("seed", range(10))
    def test_choice_is_a_capture_when_several_exist(self, seed: int) -> None:
        # White queen d4 can take on d7, a7 or g7.
        board = board_from_placement("4k3/p2p2p1/8/8/3Q4/8/8/4K3")
        selector = CaptureFirstSelector(rng=random.Random(seed))
        move = selector.select_move(board, Color.WHITE)
        assert move is not None
        target = board[move.to_sq]
        assert target is not None and target.color == Color.BLACK

    def test_quiet_move_when_no_capture(self) -> None:
        board = Board.initial()
        selector = CaptureFirstSelector(SelectorSettings(seed=42))
        move = selector.select_move(board, Color.BLACK)
        assert move in all_legal_moves(board, Color.BLACK)

    def test_none_without_legal_moves(self) -> None:
        board = board_from_placement("k7/2Q5/1K6/8/8/8/8/8")
        assert CaptureFirstSelector().select_move(board, Color.BLACK) is None

    def test_injected_rng_is_used(self) -> None:
        board = Board.initial()
        selector = CaptureFirstSelector(rng=_FirstChoice())
        assert selector.select_move(board, Color.WHITE) == all_legal_moves(
            board, Color.WHITE
        )[0]

    def test_same_seed_same_choice(self) -> None:
        board = Board.initial()
        a = CaptureFirstSelector(SelectorSettings(seed=5))
        b = CaptureFirstSelector(SelectorSettings(seed=5))
        assert [a.select_move(board, Color.WHITE) for _ in range(5)] == [
            b.select_move(board, Color.WHITE) for _ in range(5)
        ]

    def test_selection_leaves_board_untouched(self) -> None:
        board = board_from_placement("4k3/p2p2p1/8/8/3Q4/8/8/4K3")
        before = board.snapshot()
        CaptureFirstSelector().select_move(board, Color.WHITE)
        assert board.snapshot() == before

    def test_only_legal_captures_count(self) -> None:
        # The e-pawn capture would expose the white king to the rook on e8.
        board = board_from_placement("4r1k1/8/8/3p4/4P3/8/8/4K3")
        selector = CaptureFirstSelector(rng=random.Random(0))
        for _ in range(10):
            move = selector.select_move(board, Color.WHITE)
            assert move is not None
            assert move != Move(E4, D5)

    def test_settings_defaults(self) -> None:
        settings = CaptureFirstSelector().settings
        assert settings.seed is None
        assert settings.think_delay_ms == 500
