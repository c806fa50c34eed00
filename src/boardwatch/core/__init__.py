"""Core domain layer — board value types with zero external dependencies.

Quick start::

    from boardwatch.core import PiecesPlacement, Square

    before = PiecesPlacement.starting()
    after = before.with_piece_at(Square.from_algebraic("e2"), None)
    for change in before.diff(after):
        print(change.square, change.before, change.after)
"""

from boardwatch.core.enums import Color, PieceType
from boardwatch.core.errors import ParseError
from boardwatch.core.piece import Piece
from boardwatch.core.placement import (
    EMPTY_PLACEMENT_FEN,
    STARTING_PLACEMENT_FEN,
    PiecesPlacement,
    Target,
    TargetChange,
)
from boardwatch.core.types import SQUARES, Square

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Errors
    "ParseError",
    # Value objects
    "Piece",
    "PiecesPlacement",
    "SQUARES",
    "Square",
    "Target",
    "TargetChange",
    # Constants
    "EMPTY_PLACEMENT_FEN",
    "STARTING_PLACEMENT_FEN",
]
