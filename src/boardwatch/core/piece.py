"""Piece value object and the twelve canonical pieces."""

from __future__ import annotations

from dataclasses import dataclass

from boardwatch.core.enums import Color, PieceType
from boardwatch.core.errors import ParseError

# FEN character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    color: Color
    piece_type: PieceType

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Canonical piece for a FEN character, e.g. 'N' → white knight."""
        piece = cls.try_from_char(char)
        if piece is None:
            raise ParseError(f"Invalid piece character: {char!r}")
        return piece

    @classmethod
    def try_from_char(cls, char: str) -> Piece | None:
        return _CANONICAL.get(char)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def is_white(self) -> bool:
        return self.color == Color.WHITE

    def with_color(self, color: Color) -> Piece:
        """Same kind of piece for *color*."""
        if color == self.color:
            return self
        return _CANONICAL[_FEN_CHARS[(color, self.piece_type)]]


_CANONICAL: dict[str, Piece] = {
    char: Piece(color, ptype) for char, (color, ptype) in _CHAR_MAP.items()
}

WHITE_PAWN = _CANONICAL["P"]
WHITE_KNIGHT = _CANONICAL["N"]
WHITE_BISHOP = _CANONICAL["B"]
WHITE_ROOK = _CANONICAL["R"]
WHITE_QUEEN = _CANONICAL["Q"]
WHITE_KING = _CANONICAL["K"]
BLACK_PAWN = _CANONICAL["p"]
BLACK_KNIGHT = _CANONICAL["n"]
BLACK_BISHOP = _CANONICAL["b"]
BLACK_ROOK = _CANONICAL["r"]
BLACK_QUEEN = _CANONICAL["q"]
BLACK_KING = _CANONICAL["k"]
