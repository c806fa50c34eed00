"""Plain-text board diagram with accent marks for reconciliation feedback.

A lifted piece is shown with a combining circumflex (``P̂``); every square
named by an ``Errors`` status is shown with a combining diaeresis below,
either on the piece that belongs there (``Q̤``) or on a blank when the
square should be empty.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, assert_never

from boardwatch.game.status import Errors, Lifted, Moved, Ready

if TYPE_CHECKING:
    from boardwatch.core.piece import Piece
    from boardwatch.core.placement import PiecesPlacement
    from boardwatch.core.types import Square
    from boardwatch.game.position import Position

EMPTY = "."
_CIRCUMFLEX = "\u0302"
_DIAERESIS_BELOW = "\u0324"


class Accent(Enum):
    NONE = ""
    CIRCUMFLEX = _CIRCUMFLEX
    DIAERESIS = _DIAERESIS_BELOW


class AsciiBoard:
    """Mutable 64-cell text board, rank 8 at the top."""

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[str] = [EMPTY] * 64

    # ── Factories ────────────────────────────────────────────────────────

    @classmethod
    def from_placement(cls, placement: PiecesPlacement) -> AsciiBoard:
        board = cls()
        for index, piece in enumerate(placement.pieces):
            if piece is not None:
                board._cells[index] = str(piece)
        return board

    @classmethod
    def from_position(cls, position: Position) -> AsciiBoard:
        """Accepted placement of *position* with its status marked on it."""
        board = cls.from_placement(position.placement)
        status = position.status
        if isinstance(status, Lifted):
            board.set_piece(status.square, status.piece, Accent.CIRCUMFLEX)
        elif isinstance(status, Errors):
            for target in status.targets:
                if target.piece is None:
                    board.clear_square(target.square, Accent.DIAERESIS)
                else:
                    board.set_piece(target.square, target.piece, Accent.DIAERESIS)
        elif isinstance(status, (Ready, Moved)):
            pass
        else:
            assert_never(status)
        return board

    # ── Cells ────────────────────────────────────────────────────────────

    def cell(self, square: Square) -> str:
        return self._cells[square.index]

    def set_piece(
        self, square: Square, piece: Piece, accent: Accent = Accent.NONE
    ) -> None:
        self._cells[square.index] = str(piece) + accent.value

    def clear_square(self, square: Square, accent: Accent = Accent.NONE) -> None:
        if accent is Accent.NONE:
            self._cells[square.index] = EMPTY
        else:
            self._cells[square.index] = " " + accent.value

    # ── Output ───────────────────────────────────────────────────────────

    def render(self) -> str:
        rows: list[str] = []
        for row in range(8):
            cells = self._cells[row * 8 : row * 8 + 8]
            rows.append(f"{8 - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)

    def __str__(self) -> str:
        return self.render()
