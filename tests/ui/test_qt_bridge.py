"""Tests for the Qt session bridge."""

from __future__ import annotations

from PyQt6.QtTest import QSignalSpy

from boardwatch.core.placement import STARTING_PLACEMENT_FEN, PiecesPlacement
from boardwatch.core.types import E2
from boardwatch.game.session import InProgress, SettingUp
from boardwatch.game.status import GameEnding, Lifted, Ready
from boardwatch.ui.qt_bridge import SessionBridge

_FOOLS_MATE = [
    "rnbqkbnr/pppppppp/8/8/8/5P2/PPPPP1PP/RNBQKBNR",
    "rnbqkbnr/pppp1ppp/8/4p3/8/5P2/PPPPP1PP/RNBQKBNR",
    "rnbqkbnr/pppp1ppp/8/4p3/6P1/5P2/PPPPP2P/RNBQKBNR",
    "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR",
]


class TestSessionBridge:
    def test_auto_start_emits_both_states(self) -> None:
        bridge = SessionBridge()
        states = QSignalSpy(bridge.state_changed)
        statuses = QSignalSpy(bridge.status_changed)

        bridge.observe(PiecesPlacement.starting())

        assert len(states) == 2
        assert isinstance(states[0][0], SettingUp)
        assert isinstance(states[1][0], InProgress)
        assert len(statuses) == 1
        assert isinstance(statuses[0][0], Ready)

    def test_accepts_fen_string(self) -> None:
        bridge = SessionBridge()
        bridge.observe(STARTING_PLACEMENT_FEN)
        statuses = QSignalSpy(bridge.status_changed)

        bridge.observe(PiecesPlacement.starting().with_piece_at(E2, None).to_fen())

        assert len(statuses) == 1
        assert isinstance(statuses[0][0], Lifted)

    def test_rejects_bad_fen(self) -> None:
        bridge = SessionBridge()
        rejected = QSignalSpy(bridge.placement_rejected)
        states = QSignalSpy(bridge.state_changed)

        bridge.observe("not a board")

        assert len(rejected) == 1
        assert "Invalid FEN" in rejected[0][0]
        assert len(states) == 0

    def test_rejects_other_objects(self) -> None:
        bridge = SessionBridge()
        rejected = QSignalSpy(bridge.placement_rejected)

        bridge.observe(42)

        assert len(rejected) == 1
        assert rejected[0][0] == "Expected a placement, got int"

    def test_game_ended_on_checkmate(self) -> None:
        bridge = SessionBridge()
        bridge.observe(STARTING_PLACEMENT_FEN)
        ended = QSignalSpy(bridge.game_ended)

        for fen in _FOOLS_MATE:
            bridge.observe(fen)

        assert len(ended) == 1
        assert ended[0][0] == GameEnding.CHECKMATE

    def test_reset_and_detach(self) -> None:
        bridge = SessionBridge()
        bridge.observe(STARTING_PLACEMENT_FEN)
        states = QSignalSpy(bridge.state_changed)

        bridge.reset()
        assert len(states) == 1
        assert isinstance(states[0][0], SettingUp)

        bridge.detach()
        bridge.observe(STARTING_PLACEMENT_FEN)
        assert len(states) == 1
        assert isinstance(bridge.session.state, InProgress)
