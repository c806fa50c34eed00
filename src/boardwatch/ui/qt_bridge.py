"""Qt bridge exposing a BoardSession through signals and slots."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from boardwatch.core.errors import ParseError
from boardwatch.core.placement import PiecesPlacement
from boardwatch.game.session import BoardSession, InProgress, SessionState
from boardwatch.game.status import Moved


class SessionBridge(QObject):
    """Forwards board readings to a session and re-emits its state changes.

    Must live in the thread that feeds it; signals are emitted synchronously
    from within the slots.
    """

    state_changed = pyqtSignal(object)
    status_changed = pyqtSignal(object)
    game_ended = pyqtSignal(object)
    placement_rejected = pyqtSignal(str)

    __slots__ = ("_session", "_unsubscribe")

    def __init__(self, session: BoardSession | None = None) -> None:
        super().__init__()
        self._session = session if session is not None else BoardSession()
        self._unsubscribe = self._session.on_state_change(self._on_state)

    @property
    def session(self) -> BoardSession:
        return self._session

    @pyqtSlot(object)
    def observe(self, placement_obj: object) -> None:
        """Feed a :class:`PiecesPlacement` or a FEN placement string."""
        if isinstance(placement_obj, str):
            try:
                placement_obj = PiecesPlacement.from_fen(placement_obj)
            except ParseError as exc:
                self.placement_rejected.emit(str(exc))
                return
        if not isinstance(placement_obj, PiecesPlacement):
            self.placement_rejected.emit(
                f"Expected a placement, got {type(placement_obj).__name__}"
            )
            return
        self._session.observe(placement_obj)

    @pyqtSlot()
    def reset(self) -> None:
        self._session.reset()

    def detach(self) -> None:
        """Stop listening to the session."""
        self._unsubscribe()

    def _on_state(self, state: SessionState) -> None:
        self.state_changed.emit(state)
        if not isinstance(state, InProgress):
            return
        position = state.position
        self.status_changed.emit(position.status)
        if isinstance(position.status, Moved):
            ending = position.game_ending()
            if ending is not None:
                self.game_ended.emit(ending)
