"""The two kinds of participant: a human side and a selector-driven side."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from gambit.core.enums import Color
from gambit.engine.selector import CaptureFirstSelector

if TYPE_CHECKING:
    from gambit.core.move import Move
    from gambit.engine.search import IMoveSelector
    from gambit.game.state import GameState


@dataclass(frozen=True, slots=True)
class HumanPlayer:
    """A side whose moves come from the presentation layer."""

    color: Color
    name: str = "Human"

    is_automated: ClassVar[bool] = False

    def choose_move(self, state: GameState) -> Move | None:
        return None


@dataclass(frozen=True, slots=True)
class AIPlayer:
    """A side that plays whatever its selector picks.

    The player holds no game state of its own.  It only answers when it is
    asked on its own turn of a running game; otherwise it returns None.
    """

    color: Color
    selector: IMoveSelector = field(default_factory=CaptureFirstSelector)
    name: str = "Engine"

    is_automated: ClassVar[bool] = True

    def choose_move(self, state: GameState) -> Move | None:
        if state.is_game_over or state.side_to_move != self.color:
            return None
        return self.selector.select_move(state.board, self.color)
