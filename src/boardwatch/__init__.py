"""Chess game tracking from full-board placement readings."""

from boardwatch.core import Color, ParseError, Piece, PiecesPlacement, Square
from boardwatch.game import BoardSession, Position, SessionSettings

__version__ = "0.1.0"

__all__ = [
    "BoardSession",
    "Color",
    "ParseError",
    "Piece",
    "PiecesPlacement",
    "Position",
    "SessionSettings",
    "Square",
    "__version__",
]
