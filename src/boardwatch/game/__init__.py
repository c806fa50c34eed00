"""Game layer — reconciliation state machine, rules adapter, session.

Quick start::

    from boardwatch.core import PiecesPlacement
    from boardwatch.game import BoardSession, InProgress

    session = BoardSession()
    session.on_state_change(lambda state: print(state))
    session.observe(PiecesPlacement.starting())  # auto-starts the game
    assert isinstance(session.state, InProgress)
"""

from boardwatch.game.position import Position, SupersededPositionError
from boardwatch.game.rules import ChessRulesEngine, LegalMove, RulesEngine
from boardwatch.game.session import (
    BoardSession,
    InProgress,
    SessionState,
    SettingUp,
    StateCallback,
)
from boardwatch.game.settings import SessionSettings
from boardwatch.game.status import (
    Errors,
    FullMove,
    GameEnding,
    Lifted,
    Moved,
    PendingSide,
    PositionStatus,
    Ready,
    TurnSide,
)

__all__ = [
    # Rules engine
    "ChessRulesEngine",
    "LegalMove",
    "RulesEngine",
    # Status
    "Errors",
    "Lifted",
    "Moved",
    "PositionStatus",
    "Ready",
    # Sides / summary
    "FullMove",
    "GameEnding",
    "PendingSide",
    "TurnSide",
    # Position
    "Position",
    "SupersededPositionError",
    # Session
    "BoardSession",
    "InProgress",
    "SessionSettings",
    "SessionState",
    "SettingUp",
    "StateCallback",
]
