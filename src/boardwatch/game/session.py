"""BoardSession — set-up phase followed by a reconciled game in progress.

Listeners subscribed with :meth:`BoardSession.on_state_change` are called
synchronously, in subscription order, after every state change.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeAlias

from boardwatch.core.placement import PiecesPlacement
from boardwatch.game.position import Position
from boardwatch.game.settings import SessionSettings

_LOGGER = logging.getLogger(__name__)


# ── Session states ───────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class SettingUp:
    """Pieces are being arranged; the placement can be edited freely."""

    placement: PiecesPlacement


@dataclass(frozen=True, slots=True)
class InProgress:
    """A game is being played and every observation is reconciled."""

    position: Position


SessionState: TypeAlias = SettingUp | InProgress

StateCallback = Callable[[SessionState], None]


# ── Session ──────────────────────────────────────────────────────────────────


class BoardSession:
    """Owns the current session state and notifies listeners of changes.

    Thread-safety: none. All calls must come from one thread, and listeners
    must not call back into the session while being notified.
    """

    __slots__ = ("_settings", "_state", "_listeners", "_notifying")

    def __init__(self, settings: SessionSettings | None = None) -> None:
        self._settings = settings if settings is not None else SessionSettings()
        self._state: SessionState = SettingUp(self._settings.setup_placement)
        self._listeners: list[StateCallback] = []
        self._notifying = False

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def settings(self) -> SessionSettings:
        return self._settings

    @property
    def position(self) -> Position | None:
        """Live position of the game in progress, ``None`` while setting up."""
        if isinstance(self._state, InProgress):
            return self._state.position
        return None

    # ── Subscription ─────────────────────────────────────────────────────

    def on_state_change(self, callback: StateCallback) -> Callable[[], None]:
        """Subscribe *callback*; returns a function that unsubscribes it.

        Every listener sees every state change. If a listener raises, the
        remaining listeners are still called and the first error is re-raised
        afterwards; the new state stays committed.
        """
        self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    # ── Commands ─────────────────────────────────────────────────────────

    def update_placement(self, placement: PiecesPlacement) -> None:
        """Replace the set-up placement. Ignored once the game is in progress."""
        self._ensure_not_notifying()
        if not isinstance(self._state, SettingUp):
            _LOGGER.debug("Ignoring placement edit while a game is in progress")
            return

        self._set_state(SettingUp(placement))
        if self._settings.auto_start and placement.is_starting():
            self.start()

    def start(self) -> bool:
        """Commit the set-up placement and begin the game.

        Returns False if a game is already in progress, or if the set-up is
        not a legal chess position (the session then stays in set-up).
        """
        self._ensure_not_notifying()
        state = self._state
        if not isinstance(state, SettingUp):
            return False

        if state.placement.is_starting():
            position = Position.initial()
        else:
            try:
                position = Position.from_placement(state.placement)
            except ValueError as exc:
                _LOGGER.warning("Cannot start game: %s", exc)
                return False
        _LOGGER.info("Game started from %s", state.placement.to_fen())
        self._set_state(InProgress(position))
        return True

    def observe(self, placement: PiecesPlacement) -> None:
        """Feed a board reading: edits the set-up, or advances the game."""
        self._ensure_not_notifying()
        state = self._state
        if isinstance(state, SettingUp):
            self.update_placement(placement)
            return

        position = state.position.next(placement)
        if position is state.position:
            return
        self._set_state(InProgress(position))

    def reset(self) -> None:
        """Abandon the current game and return to setting up."""
        self._ensure_not_notifying()
        _LOGGER.info("Session reset")
        self._set_state(SettingUp(self._settings.setup_placement))

    # ── Internal helpers ─────────────────────────────────────────────────

    def _ensure_not_notifying(self) -> None:
        if self._notifying:
            raise RuntimeError("BoardSession cannot be changed from a state listener")

    def _set_state(self, state: SessionState) -> None:
        self._state = state
        first_error: Exception | None = None
        self._notifying = True
        try:
            for callback in list(self._listeners):
                try:
                    callback(state)
                except Exception as exc:
                    _LOGGER.exception("State listener %r failed", callback)
                    if first_error is None:
                        first_error = exc
        finally:
            self._notifying = False
        if first_error is not None:
            raise first_error
