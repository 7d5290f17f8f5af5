"""Greedy one-ply opponent: take something if you can, else move anything."""

from __future__ import annotations

import logging
import random

from gambit.core.board import Board
from gambit.core.enums import Color
from gambit.core.move import Move
from gambit.core.move_generator import all_legal_moves
from gambit.engine.search import IMoveSelector, SelectorSettings

_LOGGER = logging.getLogger(__name__)


class CaptureFirstSelector(IMoveSelector):
    """Picks uniformly among legal captures, falling back to any legal move.

    There is no lookahead and no positional evaluation.  Pass *rng* (or a
    seeded :class:`SelectorSettings`) to make choices reproducible.
    """

    __slots__ = ("_settings", "_rng")

    def __init__(
        self,
        settings: SelectorSettings | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._settings = settings or SelectorSettings()
        self._rng = rng if rng is not None else random.Random(self._settings.seed)

    @property
    def settings(self) -> SelectorSettings:
        return self._settings

    def select_move(self, board: Board, color: Color) -> Move | None:
        """Choose a move for *color*, or None if it has no legal move."""
        legal = all_legal_moves(board, color)
        if not legal:
            _LOGGER.debug("No legal moves for %s", color)
            return None

        captures = [m for m in legal if _is_capture(board, m, color)]
        pool = captures or legal
        move = self._rng.choice(pool)
        _LOGGER.debug(
            "%s selects %s (%d captures, %d legal)",
            color,
            move,
            len(captures),
            len(legal),
        )
        return move


def _is_capture(board: Board, move: Move, color: Color) -> bool:
    target = board[move.to_sq]
    return target is not None and target.color != color
