"""Phase states and the participant protocol for the game layer."""

from __future__ import annotations

from enum import IntEnum, auto
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from gambit.core.enums import Color
    from gambit.core.move import Move
    from gambit.game.state import GameState


class GamePhase(IntEnum):
    """Where the game stands between two moves."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()  # a human side must submit a move
    THINKING = auto()  # an automated side is due to move
    GAME_OVER = auto()


class Participant(Protocol):
    """One side of the board.

    An automated participant answers :meth:`choose_move` with the move it
    wants played; the controller submits it.  A human participant returns
    None and its moves arrive through ``GameController.submit_move``.
    """

    @property
    def color(self) -> Color: ...

    @property
    def name(self) -> str: ...

    @property
    def is_automated(self) -> bool: ...

    def choose_move(self, state: GameState) -> Move | None: ...
