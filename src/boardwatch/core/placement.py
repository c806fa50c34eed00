"""PiecesPlacement — immutable 64-square snapshot of which piece stands where."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from boardwatch.core.errors import ParseError
from boardwatch.core.piece import Piece
from boardwatch.core.types import SQUARES, Square

STARTING_PLACEMENT_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
EMPTY_PLACEMENT_FEN = "8/8/8/8/8/8/8/8"


@dataclass(frozen=True, slots=True)
class TargetChange:
    """One square whose occupant differs between two placements."""

    square: Square
    before: Piece | None
    after: Piece | None

    @property
    def is_lift(self) -> bool:
        """A piece left the square and nothing took its place."""
        return self.before is not None and self.after is None


@dataclass(frozen=True, slots=True)
class Target:
    """A square together with the piece expected on it (``None`` = empty)."""

    piece: Piece | None
    square: Square


class PiecesPlacement:
    """Immutable 64-slot board indexed by :attr:`Square.index`.

    Every mutator returns a new instance; equality and :meth:`diff` compare
    the 64 slots structurally.
    """

    __slots__ = ("_pieces",)

    def __init__(self, pieces: Sequence[Piece | None]) -> None:
        if len(pieces) != 64:
            raise ValueError(f"A placement needs exactly 64 squares, got {len(pieces)}")
        self._pieces: tuple[Piece | None, ...] = tuple(pieces)

    # ── Factories ────────────────────────────────────────────────────────

    @classmethod
    def empty(cls) -> PiecesPlacement:
        return cls((None,) * 64)

    @classmethod
    def starting(cls) -> PiecesPlacement:
        """Standard starting placement."""
        return _STARTING

    @classmethod
    def from_fen(cls, text: str) -> PiecesPlacement:
        """Parse the piece-placement field of a FEN record.

        Any fields after the first (side to move, castling, ...) are ignored.

        Raises:
            ParseError: wrong rank count, unknown character, or a board that
                does not describe exactly 64 squares.
        """
        parts = text.split()
        field = parts[0] if parts else ""
        ranks = field.split("/")
        if len(ranks) != 8:
            raise ParseError(f"Invalid FEN: must have 8 ranks: {text!r}")

        pieces: list[Piece | None] = []
        for rank_text in ranks:
            width = 0
            for ch in rank_text:
                if ch in "12345678":
                    step = int(ch)
                    pieces.extend([None] * step)
                    width += step
                    continue
                piece = Piece.try_from_char(ch)
                if piece is None:
                    raise ParseError(f"Invalid FEN: invalid piece symbol {ch!r}")
                pieces.append(piece)
                width += 1
            if width != 8:
                raise ParseError(
                    f"Invalid FEN: board must have exactly 64 squares "
                    f"(rank {rank_text!r} covers {width})"
                )

        return cls(pieces)

    # ── Element access ───────────────────────────────────────────────────

    @property
    def pieces(self) -> tuple[Piece | None, ...]:
        return self._pieces

    def piece_at(self, square: Square) -> Piece | None:
        return self._pieces[square.index]

    def piece_at_index(self, index: int) -> Piece | None:
        return self._pieces[index]

    def ranks(self) -> list[list[Piece | None]]:
        """Rows of the board, rank 8 first, each from the a-file to the h-file."""
        return [list(self._pieces[row * 8 : row * 8 + 8]) for row in range(8)]

    def is_starting(self) -> bool:
        return self.equals(_STARTING)

    # ── Copy-on-write updates ────────────────────────────────────────────

    def with_piece_at(self, square: Square, piece: Piece | None) -> PiecesPlacement:
        return self.with_piece_at_index(square.index, piece)

    def with_piece_at_index(self, index: int, piece: Piece | None) -> PiecesPlacement:
        if not 0 <= index < 64:
            raise ValueError(f"Invalid square index: {index}")
        pieces = list(self._pieces)
        pieces[index] = piece
        return PiecesPlacement(pieces)

    def with_rank(self, rank: int, pieces: Sequence[Piece | None]) -> PiecesPlacement:
        """Replace a whole rank (0 = first rank), files a to h."""
        if len(pieces) != 8:
            raise ValueError("Must provide exactly 8 pieces for the rank")
        if not 0 <= rank <= 7:
            raise ValueError(f"Invalid rank: {rank}")
        start = (7 - rank) * 8
        new_pieces = list(self._pieces)
        new_pieces[start : start + 8] = pieces
        return PiecesPlacement(new_pieces)

    # ── Serialisation ────────────────────────────────────────────────────

    def to_fen(self) -> str:
        """Piece-placement field of FEN, e.g. ``rnbqkbnr/pppppppp/8/...``."""
        rows: list[str] = []
        for row in range(8):
            empty = 0
            text = ""
            for piece in self._pieces[row * 8 : row * 8 + 8]:
                if piece is None:
                    empty += 1
                    continue
                if empty:
                    text += str(empty)
                    empty = 0
                text += str(piece)
            if empty:
                text += str(empty)
            rows.append(text)
        return "/".join(rows)

    # ── Comparison ───────────────────────────────────────────────────────

    def diff(self, other: PiecesPlacement, limit: int = 64) -> list[TargetChange]:
        """Squares whose occupant differs, in index order.

        Scanning stops as soon as *limit* changes have been collected, so
        ``diff(other, 2)`` is a cheap way to tell "one change" from "more".
        """
        changes: list[TargetChange] = []
        if limit <= 0:
            return changes
        for index, (before, after) in enumerate(zip(self._pieces, other._pieces)):
            if before != after:
                changes.append(TargetChange(SQUARES[index], before, after))
                if len(changes) >= limit:
                    break
        return changes

    def equals(self, other: PiecesPlacement) -> bool:
        return not self.diff(other, 1)

    # ── Dunder helpers ───────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PiecesPlacement):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self._pieces)

    def __repr__(self) -> str:
        rows: list[str] = []
        for row, pieces in enumerate(self.ranks()):
            cells = [str(p) if p else "." for p in pieces]
            rows.append(f"{8 - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)


_STARTING = PiecesPlacement.from_fen(STARTING_PLACEMENT_FEN)
