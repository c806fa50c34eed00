"""Position — reconciles observed board placements with the game in progress.

Each observed placement is compared with the last accepted one and
classified as nothing, a lifted piece, a completed move, or an error.
Completed moves (and their cancellation) are pushed into the rules engine
that the position owns.

Ownership of the engine moves forward with every transition: once
:meth:`Position.next` returns a different object, the old one can no longer
reach the engine and raises :class:`SupersededPositionError` if asked to.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from boardwatch.core.placement import PiecesPlacement, Target, TargetChange
from boardwatch.game.rules import ChessRulesEngine, LegalMove, RulesEngine
from boardwatch.game.status import (
    MOVED,
    READY,
    Errors,
    FullMove,
    GameEnding,
    Lifted,
    PendingSide,
    PositionStatus,
    TurnSide,
)

_LOGGER = logging.getLogger(__name__)


class SupersededPositionError(RuntimeError):
    """The position was replaced by :meth:`Position.next` and lost its engine."""


class Position:
    """Accepted board state plus the status of the latest observation.

    Attributes are read-only; transitions return new instances.
    """

    __slots__ = ("_placement", "_status", "_turn_side", "_pending_side", "_engine")

    def __init__(
        self,
        engine: RulesEngine,
        status: PositionStatus,
        turn_side: TurnSide,
        pending_side: PendingSide | None = None,
    ) -> None:
        self._engine: RulesEngine | None = engine
        self._placement = PiecesPlacement.from_fen(engine.current_fen())
        self._status = status
        self._turn_side = turn_side
        self._pending_side = pending_side

    # ── Factories ────────────────────────────────────────────────────────

    @classmethod
    def initial(cls, engine: RulesEngine | None = None) -> Position:
        """Game at the standard starting position (or wherever *engine* stands)."""
        if engine is None:
            engine = ChessRulesEngine()
        return cls(engine, READY, _turn_side(engine))

    @classmethod
    def from_placement(cls, placement: PiecesPlacement) -> Position:
        """Game starting from a freely set-up placement, white to move.

        Raises:
            ValueError: the placement is not a legal chess position.
        """
        return cls.initial(ChessRulesEngine.from_placement(placement))

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def placement(self) -> PiecesPlacement:
        return self._placement

    @property
    def status(self) -> PositionStatus:
        return self._status

    @property
    def turn_side(self) -> TurnSide:
        return self._turn_side

    @property
    def pending_side(self) -> PendingSide | None:
        return self._pending_side

    @property
    def legal_moves(self) -> tuple[LegalMove, ...]:
        return self._turn_side.legal_moves

    @property
    def is_superseded(self) -> bool:
        return self._engine is None

    # ── Transition ───────────────────────────────────────────────────────

    def next(self, observed: PiecesPlacement) -> Position:
        """Reconcile *observed* with the accepted placement.

        Returns ``self`` when nothing changed, otherwise a new position that
        takes over the rules engine.
        """
        engine = self._owned_engine()
        changes = self._placement.diff(observed, 2)

        if not changes:
            if isinstance(self._status, (Lifted, Errors)):
                _LOGGER.debug(
                    "Board restored, clearing %s", type(self._status).__name__
                )
                return self._with_status(READY)
            _LOGGER.debug("No changes detected")
            return self

        if len(changes) == 1:
            return self._with_status(self._classify_single(changes[0]))

        observed_fen = observed.to_fen()
        pending = self._pending_side
        if pending is not None:
            if observed.equals(pending.return_placement):
                _LOGGER.debug(
                    "Pending move taken back, restoring %s to move", pending.color
                )
                engine.undo_last_move()
                restored = TurnSide(pending.color, _legal(engine))
                return self._hand_over(READY, restored, None)

            alternative = _find_move(pending.legal_moves, observed_fen)
            if alternative is not None:
                _LOGGER.debug("Pending move replaced by %s", alternative.san)
                engine.undo_last_move()
                engine.apply_move(alternative)
                return self._hand_over(MOVED, _turn_side(engine), pending)

        move = _find_move(self._turn_side.legal_moves, observed_fen)
        if move is not None:
            _LOGGER.debug("Legal move detected: %s", move.san)
            engine.apply_move(move)
            moved = PendingSide(
                self._turn_side.color, self._placement, self._turn_side.legal_moves
            )
            return self._hand_over(MOVED, _turn_side(engine), moved)

        targets = _targets(self._placement.diff(observed))
        _LOGGER.debug("Unexplained change on %d squares", len(targets))
        return self._with_status(Errors(targets))

    def _classify_single(self, change: TargetChange) -> PositionStatus:
        piece = change.before
        mover = self._turn_side.color
        if change.is_lift and piece is not None and piece.color == mover:
            _LOGGER.debug("Lifted %s from %s", piece, change.square)
            return Lifted(piece, change.square)
        _LOGGER.debug("Single unexplained change on %s", change.square)
        return Errors((Target(change.before, change.square),))

    # ── Engine pass-through ──────────────────────────────────────────────

    def to_fen(self) -> str:
        return self._owned_engine().current_fen()

    def to_pgn(self) -> str:
        return self._owned_engine().to_pgn()

    def game_ending(self) -> GameEnding | None:
        """First applicable reason the game is over, or ``None``."""
        engine = self._owned_engine()
        if engine.is_checkmate():
            return GameEnding.CHECKMATE
        if engine.is_stalemate():
            return GameEnding.STALEMATE
        if engine.is_insufficient_material():
            return GameEnding.INSUFFICIENT_MATERIAL
        if engine.is_threefold_repetition():
            return GameEnding.THREEFOLD_REPETITION
        if engine.is_fifty_move_draw():
            return GameEnding.FIFTY_MOVES
        return None

    def moves_history(self) -> list[FullMove]:
        """Played moves paired into numbered white/black lines.

        Numbering continues from the starting position, and a game that
        starts with black to move opens with a line whose white move is
        ``None``.
        """
        engine = self._owned_engine()
        sans: list[str | None] = [move.san for move in engine.move_history()]
        fields = engine.starting_fen().split()
        if sans and fields[1] == "b":
            sans.insert(0, None)
        first = int(fields[5])
        lines: list[FullMove] = []
        for i in range(0, len(sans), 2):
            black = sans[i + 1] if i + 1 < len(sans) else None
            lines.append(FullMove(first + i // 2, sans[i], black))
        return lines

    # ── Internal helpers ─────────────────────────────────────────────────

    def _owned_engine(self) -> RulesEngine:
        if self._engine is None:
            raise SupersededPositionError(
                "Position was superseded; use the value returned by next()"
            )
        return self._engine

    def _take_engine(self) -> RulesEngine:
        engine = self._owned_engine()
        self._engine = None
        return engine

    def _with_status(self, status: PositionStatus) -> Position:
        return self._hand_over(status, self._turn_side, self._pending_side)

    def _hand_over(
        self,
        status: PositionStatus,
        turn_side: TurnSide,
        pending_side: PendingSide | None,
    ) -> Position:
        return Position(self._take_engine(), status, turn_side, pending_side)

    def __repr__(self) -> str:
        return (
            f"Position({self._placement.to_fen()!r}, status={self._status!r}, "
            f"turn={self._turn_side.color})"
        )


def _legal(engine: RulesEngine) -> tuple[LegalMove, ...]:
    return tuple(engine.legal_moves())


def _turn_side(engine: RulesEngine) -> TurnSide:
    return TurnSide(engine.turn_to_move(), _legal(engine))


def _find_move(moves: Iterable[LegalMove], placement_fen: str) -> LegalMove | None:
    """First move, in engine order, leading to *placement_fen*."""
    for move in moves:
        if move.placement_fen == placement_fen:
            return move
    return None


def _targets(changes: Iterable[TargetChange]) -> tuple[Target, ...]:
    return tuple(Target(change.before, change.square) for change in changes)
