"""Shared move-selector settings and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from gambit.core.board import Board
    from gambit.core.enums import Color
    from gambit.core.move import Move


@dataclass(slots=True, frozen=True)
class SelectorSettings:
    """Tunables for the automated opponent.

    Attributes:
        seed: Seed for the selector's private RNG (None = nondeterministic).
        think_delay_ms: Pause the Qt bridge inserts before answering.
    """

    seed: int | None = None
    think_delay_ms: int = 500


class IMoveSelector(Protocol):
    """Protocol for move selectors used by the game layer."""

    def select_move(self, board: Board, color: Color) -> Move | None: ...
