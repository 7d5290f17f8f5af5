"""Qt bridge that runs the move selector on behalf of the UI."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QTimer, pyqtSignal, pyqtSlot

from gambit.core.board import Board
from gambit.core.enums import Color
from gambit.engine.search import IMoveSelector, SelectorSettings
from gambit.engine.selector import CaptureFirstSelector


class SelectorWorker(QObject):
    """Computes automated moves on demand and reports them as signals.

    Selection itself is synchronous; ``schedule_move`` only defers the start
    so the UI can show the human's move before the reply appears.
    """

    move_ready = pyqtSignal(int, object)
    no_move = pyqtSignal(int)
    selection_error = pyqtSignal(int, str)

    __slots__ = ("_selector", "_settings")

    def __init__(
        self,
        settings: SelectorSettings | None = None,
        selector: IMoveSelector | None = None,
    ) -> None:
        super().__init__()
        self._settings = settings or SelectorSettings()
        self._selector = selector or CaptureFirstSelector(self._settings)

    @property
    def settings(self) -> SelectorSettings:
        return self._settings

    @pyqtSlot(object, int, int)
    def request_move(self, board_obj: object, color: int, request_id: int) -> None:
        """Select a move for *color* on *board_obj* and emit the result."""
        if not isinstance(board_obj, Board):
            self.selection_error.emit(request_id, "Selector received invalid board")
            return

        try:
            move = self._selector.select_move(board_obj, Color(color))
        except Exception as exc:
            self.selection_error.emit(request_id, str(exc))
            return

        if move is None:
            self.no_move.emit(request_id)
            return
        self.move_ready.emit(request_id, move)

    def schedule_move(self, board: Board, color: Color, request_id: int) -> None:
        """Run :meth:`request_move` after the configured think delay."""
        QTimer.singleShot(
            self._settings.think_delay_ms,
            lambda: self.request_move(board, int(color), request_id),
        )
