"""Square value type and named square constants.

Board layout (FEN order, rank 8 first):
    a8=0, b8=1, ..., h8=7
    a7=8, b7=9, ..., h7=15
    ...
    a1=56, b1=57, ..., h1=63

``rank`` and ``file`` are zero-based from white's side: ``rank`` 0 is the
first rank, ``file`` 0 is the a-file.
"""

from __future__ import annotations

from dataclasses import dataclass

from boardwatch.core.errors import ParseError

_FILES = "abcdefgh"
_RANKS = "12345678"


@dataclass(frozen=True, slots=True)
class Square:
    """Immutable board coordinate."""

    rank: int
    file: int

    def __post_init__(self) -> None:
        if not (0 <= self.rank <= 7 and 0 <= self.file <= 7):
            raise ValueError(
                f"Invalid square coordinates: rank={self.rank}, file={self.file}"
            )

    @property
    def index(self) -> int:
        """Linear index 0–63 (a8=0, h1=63)."""
        return (7 - self.rank) * 8 + self.file

    def algebraic(self) -> str:
        """Human-readable name, e.g. ``e4``."""
        return _FILES[self.file] + _RANKS[self.rank]

    def __str__(self) -> str:
        return self.algebraic()

    # ── Constructors ─────────────────────────────────────────────────────

    @classmethod
    def from_index(cls, index: int) -> Square:
        if not 0 <= index < 64:
            raise ValueError(f"Invalid square index: {index}")
        return SQUARES[index]

    @classmethod
    def try_from_index(cls, index: int) -> Square | None:
        if not 0 <= index < 64:
            return None
        return SQUARES[index]

    @classmethod
    def from_coords(cls, rank: int, file: int) -> Square:
        if not (0 <= rank <= 7 and 0 <= file <= 7):
            raise ValueError(f"Invalid square coordinates: rank={rank}, file={file}")
        return SQUARES[(7 - rank) * 8 + file]

    @classmethod
    def try_from_coords(cls, rank: int, file: int) -> Square | None:
        if not (0 <= rank <= 7 and 0 <= file <= 7):
            return None
        return SQUARES[(7 - rank) * 8 + file]

    @classmethod
    def from_algebraic(cls, name: str) -> Square:
        """Parse a square name, e.g. ``"e4"``."""
        square = cls.try_from_algebraic(name)
        if square is None:
            raise ParseError(f"Invalid square algebraic notation: {name!r}")
        return square

    @classmethod
    def try_from_algebraic(cls, name: str) -> Square | None:
        if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
            return None
        return cls.from_coords(_RANKS.index(name[1]), _FILES.index(name[0]))


SQUARES: tuple[Square, ...] = tuple(
    Square(7 - index // 8, index % 8) for index in range(64)
)


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = SQUARES[0:8]
A7, B7, C7, D7, E7, F7, G7, H7 = SQUARES[8:16]
A6, B6, C6, D6, E6, F6, G6, H6 = SQUARES[16:24]
A5, B5, C5, D5, E5, F5, G5, H5 = SQUARES[24:32]
A4, B4, C4, D4, E4, F4, G4, H4 = SQUARES[32:40]
A3, B3, C3, D3, E3, F3, G3, H3 = SQUARES[40:48]
A2, B2, C2, D2, E2, F2, G2, H2 = SQUARES[48:56]
A1, B1, C1, D1, E1, F1, G1, H1 = SQUARES[56:64]
