"""Game state machine — turn order, terminal detection and move history."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from gambit.core.board import Board
from gambit.core.enums import Color, GameEndReason, GameResult, PieceType
from gambit.core.executor import execute
from gambit.core.move import Move
from gambit.core.move_generator import all_legal_moves, legal_moves
from gambit.core.notation import board_from_placement
from gambit.core.rules import GameOutcome, Rules
from gambit.core.types import Square
from gambit.game.interfaces import GamePhase

_LOGGER = logging.getLogger(__name__)


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    piece: str
    captured: str | None = None
    was_check: bool = False

    @property
    def was_capture(self) -> bool:
        return self.captured is not None


@dataclass
class GameState:
    """Owns the board, the side to move and the game outcome.

    This is a pure data/logic class — no threading, no UI.  Once the phase
    reaches ``GAME_OVER`` only :meth:`setup` leaves it.
    """

    board: Board = field(default_factory=Board.initial, init=False)
    side_to_move: Color = field(default=Color.WHITE, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    outcome: GameOutcome | None = field(default=None, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(
        self,
        placement: str | None = None,
        side_to_move: Color = Color.WHITE,
    ) -> None:
        """Initialise (or reset) the game.

        Without *placement* the standard starting layout is used.
        """
        if placement is None:
            self.board = Board.initial()
        else:
            self.board = board_from_placement(placement)
        self.side_to_move = side_to_move
        self.phase = GamePhase.AWAITING_MOVE
        self.outcome = None
        self.move_history.clear()
        self.evaluate_terminal_state()

    # ── Move application ─────────────────────────────────────────────────

    def select(self, sq: Square) -> list[Square]:
        """Legal destinations for the side to move's piece on *sq*.

        Empty squares, enemy pieces and finished games give no moves.
        """
        if self.is_game_over:
            return []
        piece = self.board[sq]
        if piece is None or piece.color != self.side_to_move:
            return []
        return legal_moves(piece, self.board)

    def apply_move(self, move: Move) -> MoveRecord:
        """Apply *move* for the side to move and return the history record.

        Raises ``ValueError`` if *move* is not in the legal set.
        """
        if self.is_game_over or move not in self.legal_moves():
            raise ValueError(f"Illegal move: {move}")

        mover = self.side_to_move
        piece = self.board[move.from_sq]
        assert piece is not None
        captured = execute(self.board, piece, move.to_sq)
        record = MoveRecord(
            move=move,
            piece=str(piece),
            captured=str(captured) if captured is not None else None,
        )
        self.move_history.append(record)
        _LOGGER.debug("%s plays %s", mover, move)

        if captured is not None and captured.piece_type == PieceType.KING:
            self._finish(GameOutcome(GameEndReason.KING_CAPTURED, mover))
            return record

        self.side_to_move = mover.opposite
        record.was_check = Rules.is_in_check(self.board, self.side_to_move)
        self.evaluate_terminal_state()
        return record

    def evaluate_terminal_state(self) -> GameOutcome | None:
        """Classify the position for the side to move.

        Ends the game on checkmate or stalemate and returns the outcome.
        """
        if self.is_game_over:
            return self.outcome
        outcome = Rules.evaluate_terminal_state(self.board, self.side_to_move)
        if outcome is not None:
            self._finish(outcome)
        return outcome

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def is_in_check(self) -> bool:
        return Rules.is_in_check(self.board, self.side_to_move)

    @property
    def result(self) -> GameResult:
        if self.outcome is None:
            return GameResult.IN_PROGRESS
        return self.outcome.result

    @property
    def last_move(self) -> Move | None:
        if not self.move_history:
            return None
        return self.move_history[-1].move

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    @property
    def fullmove_display(self) -> int:
        """Current full-move number for display."""
        return (self.ply_count // 2) + 1

    def legal_moves(self) -> list[Move]:
        """Legal moves for the side to move."""
        return all_legal_moves(self.board, self.side_to_move)

    # ── Internal ─────────────────────────────────────────────────────────

    def _finish(self, outcome: GameOutcome) -> None:
        self.outcome = outcome
        self.phase = GamePhase.GAME_OVER
        _LOGGER.info("Game over: %s", outcome)
