"""Position status variants and the side bookkeeping of a reconciled game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TypeAlias

from boardwatch.core.enums import Color
from boardwatch.core.piece import Piece
from boardwatch.core.placement import PiecesPlacement, Target
from boardwatch.core.types import Square
from boardwatch.game.rules import LegalMove

# ── Status variants ──────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Ready:
    """The board matches the accepted position."""


@dataclass(frozen=True, slots=True)
class Lifted:
    """A piece of the side to move has been picked up."""

    piece: Piece
    square: Square


@dataclass(frozen=True, slots=True)
class Errors:
    """The board cannot be explained; *targets* show what each square should hold."""

    targets: tuple[Target, ...]


@dataclass(frozen=True, slots=True)
class Moved:
    """A move was recognised and applied to the rules engine."""


PositionStatus: TypeAlias = Ready | Lifted | Errors | Moved

READY = Ready()
MOVED = Moved()


# ── Sides ────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class TurnSide:
    """Side to move and every legal move available to it."""

    color: Color
    legal_moves: tuple[LegalMove, ...]


@dataclass(frozen=True, slots=True)
class PendingSide:
    """The side that just moved, kept so the move can be taken back or swapped.

    *return_placement* is the placement before the move; *legal_moves* is the
    list the move was found in.
    """

    color: Color
    return_placement: PiecesPlacement
    legal_moves: tuple[LegalMove, ...]


# ── Game summary ─────────────────────────────────────────────────────────────


class GameEnding(IntEnum):
    """Why a game is over, in the order the checks are made."""

    CHECKMATE = auto()
    STALEMATE = auto()
    INSUFFICIENT_MATERIAL = auto()
    THREEFOLD_REPETITION = auto()
    FIFTY_MOVES = auto()


@dataclass(frozen=True, slots=True)
class FullMove:
    """One numbered line of the score sheet.

    *white* is ``None`` only on the first line of a game that started with
    black to move.
    """

    number: int
    white: str | None
    black: str | None = None
