"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator

import pytest

from gambit.core.board import Board

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for Qt bridge tests."""
    qt_core = pytest.importorskip("PyQt6.QtCore")

    app = qt_core.QCoreApplication.instance()
    if app is None:
        app = qt_core.QCoreApplication([])
    yield app


def _assert_positions_consistent(board: Board) -> None:
    for row in range(8):
        for col in range(8):
            piece = board[(row, col)]
            if piece is not None:
                assert piece.square == (row, col), f"{piece!r} stored at {(row, col)}"


@pytest.fixture
def assert_consistent() -> Callable[[Board], None]:
    """Check that every occupied cell holds a piece that knows it is there."""
    return _assert_positions_consistent
