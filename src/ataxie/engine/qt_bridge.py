"""Qt bridge to run engine search in a worker thread."""

from __future__ import annotations

import logging
import threading

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from ataxie.core.move_generator import MoveGenerator
from ataxie.core.position import Position
from ataxie.engine.minimax import MinimaxEngine
from ataxie.engine.search import DEFAULT_MAX_DEPTH, ColorSense, IEngine, SearchLimits

_LOGGER = logging.getLogger(__name__)


class EngineWorker(QObject):
    """Thread-affine worker that computes engine moves on demand.

    The search itself cannot be interrupted; :meth:`cancel` only makes the
    worker drop the result of the search in flight.
    """

    best_move_ready = pyqtSignal(int, object, int, int, int)
    search_cancelled = pyqtSignal(int)
    search_no_move = pyqtSignal(int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_cancel_event", "_engine", "_limits")

    def __init__(
        self,
        *,
        max_depth: int = DEFAULT_MAX_DEPTH,
        fold_forced_pass: bool = False,
        senses: ColorSense | None = None,
    ) -> None:
        super().__init__()
        self._engine: IEngine = (
            MinimaxEngine(senses) if senses is not None else MinimaxEngine()
        )
        self._limits = SearchLimits(
            max_depth=max_depth, fold_forced_pass=fold_forced_pass
        )
        self._cancel_event = threading.Event()

    @property
    def limits(self) -> SearchLimits:
        return self._limits

    @pyqtSlot(object, int)
    def request_move(self, position_obj: object, request_id: int) -> None:
        """Search for the best move in *position_obj* and emit result."""
        if not isinstance(position_obj, Position):
            self.search_error.emit(request_id, "Engine received invalid position")
            return

        self._cancel_event.clear()
        if position_obj.winner is not None or not MoveGenerator(position_obj).has_moves():
            self.search_no_move.emit(request_id)
            return

        try:
            result = self._engine.search(position_obj, self._limits)
        except Exception as exc:
            _LOGGER.exception("Engine search failed for request %d", request_id)
            self.search_error.emit(request_id, str(exc))
            return

        if self._cancel_event.is_set():
            self.search_cancelled.emit(request_id)
            return

        if result.best_move is None:
            self.search_no_move.emit(request_id)
            return

        self.best_move_ready.emit(
            request_id,
            result.best_move,
            result.score,
            result.depth,
            result.nodes,
        )

    @pyqtSlot()
    def cancel(self) -> None:
        """Drop the result of the current search."""
        self._cancel_event.set()

    @pyqtSlot(int)
    def set_limits(self, max_depth: int) -> None:
        """Update the search depth (takes effect on the next search)."""
        self._limits = SearchLimits(
            max_depth=max_depth,
            fold_forced_pass=self._limits.fold_forced_pass,
        )
