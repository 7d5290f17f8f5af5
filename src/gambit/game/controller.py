"""GameController — the central orchestrator of a chess game.

Coordinates: Players, GameState, move selectors.
Emits events via simple callbacks so the presentation layer / tests can
subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from gambit.core.enums import Color
from gambit.core.move import Move
from gambit.core.rules import GameOutcome
from gambit.game.interfaces import GamePhase, Participant
from gambit.game.state import GameState, MoveRecord

if TYPE_CHECKING:
    from gambit.engine.search import IMoveSelector

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, MoveRecord, "GameState"], None]
GameOverCallback = Callable[[GameOutcome], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Validates submitted moves, switches turns and notifies listeners.

    The controller never plays an automated side on its own.  After a move
    it only marks the phase ``THINKING`` when the next side is automated;
    the caller then drives that side with :meth:`play_automated_turn` or
    :meth:`run_automated_turns`, directly or from a ``SelectorWorker``.

    All methods must be called from a single thread.
    """

    __slots__ = ("_state", "_players", "_placement", "_start_side", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self._players: dict[Color, Participant] = {}
        self._placement: str | None = None
        self._start_side = Color.WHITE
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def current_player(self) -> Participant | None:
        return self._players.get(self._state.side_to_move)

    def player(self, color: Color) -> Participant | None:
        return self._players.get(color)

    @property
    def awaiting_automated_move(self) -> bool:
        cp = self.current_player
        return not self._state.is_game_over and cp is not None and cp.is_automated

    # ── Game lifecycle ───────────────────────────────────────────────────

    def new_game(
        self,
        white: Participant,
        black: Participant,
        placement: str | None = None,
        side_to_move: Color = Color.WHITE,
    ) -> None:
        """Seat *white* and *black* and start from *placement*."""
        self._players = {Color.WHITE: white, Color.BLACK: black}
        self._placement = placement
        self._start_side = side_to_move
        self._start()

    def reset(self) -> None:
        """Restart from the standard layout with the same players."""
        if not self._players:
            return
        self._placement = None
        self._start_side = Color.WHITE
        self._start()

    def submit_move(self, move: Move) -> bool:
        """Play *move* for the side to move. Returns False if it was refused."""
        if self._state.is_game_over:
            return False
        if self._state.phase not in (GamePhase.AWAITING_MOVE, GamePhase.THINKING):
            return False
        if move not in self._state.legal_moves():
            _LOGGER.debug("Rejected move %s", move)
            return False

        record = self._state.apply_move(move)
        self._emit_move(move, record)

        if self._state.is_game_over:
            self._emit_game_over()
            return True

        self._update_phase()
        return True

    # ── Automated play ───────────────────────────────────────────────────

    def play_automated_turn(
        self, selector: IMoveSelector | None = None
    ) -> Move | None:
        """Play one move for the side to move.

        The move comes from *selector* when given, otherwise from the
        current player if it is automated.  Returns the move played, or
        None when nothing was played.
        """
        if self._state.is_game_over:
            return None
        if selector is not None:
            move = selector.select_move(self._state.board, self._state.side_to_move)
        elif self.awaiting_automated_move:
            cp = self.current_player
            assert cp is not None
            move = cp.choose_move(self._state)
        else:
            return None

        if move is None:
            if self._state.evaluate_terminal_state() is not None:
                self._emit_game_over()
            return None
        if not self.submit_move(move):
            _LOGGER.warning("Selector proposed an illegal move: %s", move)
            return None
        return move

    def run_automated_turns(self, max_plies: int | None = None) -> list[Move]:
        """Play automated sides until a human is due or the game ends.

        *max_plies* caps the number of moves played; a game between two
        automated players has no other bound.
        """
        played: list[Move] = []
        while self.awaiting_automated_move:
            if max_plies is not None and len(played) >= max_plies:
                break
            move = self.play_automated_turn()
            if move is None:
                break
            played.append(move)
        return played

    # ── Internal helpers ─────────────────────────────────────────────────

    def _start(self) -> None:
        self._state = GameState()
        self._state.setup(self._placement, self._start_side)
        _LOGGER.info("New game, %s to move", self._start_side)

        if self._state.is_game_over:
            self._emit_game_over()
            return
        self._update_phase()

    def _update_phase(self) -> None:
        """Mark whether the side to move is a human or an automated player."""
        if self.awaiting_automated_move:
            self._state.phase = GamePhase.THINKING
        else:
            self._state.phase = GamePhase.AWAITING_MOVE
        self._emit_phase(self._state.phase)

    def _emit_move(self, move: Move, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(move, record, self._state)

    def _emit_game_over(self) -> None:
        outcome = self._state.outcome
        if outcome is None:
            return
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(outcome)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
