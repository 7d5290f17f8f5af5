"""High-level chess rules: check, checkmate, stalemate."""

from __future__ import annotations

from dataclasses import dataclass

from gambit.core.attacks import is_king_in_check
from gambit.core.board import Board
from gambit.core.enums import Color, GameEndReason, GameResult
from gambit.core.move_generator import all_legal_moves


@dataclass(frozen=True, slots=True)
class GameOutcome:
    """How a finished game ended. ``winner`` is None for a stalemate."""

    reason: GameEndReason
    winner: Color | None = None

    @property
    def result(self) -> GameResult:
        if self.winner is None:
            return GameResult.DRAW
        if self.winner == Color.WHITE:
            return GameResult.WHITE_WINS
        return GameResult.BLACK_WINS

    def __str__(self) -> str:
        if self.reason == GameEndReason.STALEMATE:
            return "Stalemate! It's a draw."
        if self.reason == GameEndReason.CHECKMATE:
            return f"Checkmate! {str(self.winner).capitalize()} wins!"
        return f"Game over! {str(self.winner).capitalize()} wins!"


class Rules:
    """Static rule-checker for the side *color* on a :class:`Board`."""

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return is_king_in_check(board, color)

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        if not Rules.is_in_check(board, color):
            return False
        return len(all_legal_moves(board, color)) == 0

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        if Rules.is_in_check(board, color):
            return False
        return len(all_legal_moves(board, color)) == 0

    @staticmethod
    def evaluate_terminal_state(board: Board, color: Color) -> GameOutcome | None:
        """Outcome if *color*, to move, has no legal moves; otherwise None."""
        if all_legal_moves(board, color):
            return None
        if Rules.is_in_check(board, color):
            return GameOutcome(GameEndReason.CHECKMATE, color.opposite)
        return GameOutcome(GameEndReason.STALEMATE)

    @staticmethod
    def game_result(board: Board, color: Color) -> GameResult:
        """Determine the current game result with *color* to move."""
        outcome = Rules.evaluate_terminal_state(board, color)
        if outcome is None:
            return GameResult.IN_PROGRESS
        return outcome.result
