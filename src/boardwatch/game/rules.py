"""Rules-engine contract and its python-chess implementation.

The reconciliation layer never decides chess legality itself. It asks a
:class:`RulesEngine` for the legal moves from the live position (each with
the placement it leads to) and tells it to apply or undo moves.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

import chess
import chess.pgn

from boardwatch.core.enums import Color
from boardwatch.core.piece import BLACK_KING, BLACK_ROOK, WHITE_KING, WHITE_ROOK
from boardwatch.core.types import A1, A8, E1, E8, H1, H8

if TYPE_CHECKING:
    from boardwatch.core.placement import PiecesPlacement


@dataclass(frozen=True, slots=True)
class LegalMove:
    """A move as reported by the rules engine, with the position it leads to."""

    move: chess.Move
    san: str
    resulting_fen: str

    @property
    def uci(self) -> str:
        return self.move.uci()

    @property
    def placement_fen(self) -> str:
        """Piece-placement field of :attr:`resulting_fen`."""
        return self.resulting_fen.split(" ", 1)[0]

    def __str__(self) -> str:
        return self.san


class RulesEngine(Protocol):
    """Protocol for the chess-rules collaborator driven by a Position."""

    def current_fen(self) -> str: ...

    def starting_fen(self) -> str: ...

    def legal_moves(self) -> list[LegalMove]: ...

    def apply_move(self, move: LegalMove) -> None: ...

    def undo_last_move(self) -> None: ...

    def turn_to_move(self) -> Color: ...

    def is_checkmate(self) -> bool: ...

    def is_stalemate(self) -> bool: ...

    def is_insufficient_material(self) -> bool: ...

    def is_threefold_repetition(self) -> bool: ...

    def is_fifty_move_draw(self) -> bool: ...

    def move_history(self) -> list[LegalMove]: ...

    def to_pgn(self) -> str: ...


class ChessRulesEngine:
    """:class:`RulesEngine` backed by a mutable :class:`chess.Board`."""

    __slots__ = ("_board",)

    def __init__(self, fen: str = chess.STARTING_FEN) -> None:
        self._board = chess.Board(fen)

    @classmethod
    def from_placement(
        cls, placement: PiecesPlacement, turn: Color = Color.WHITE
    ) -> ChessRulesEngine:
        """Engine for a freely set-up placement.

        Castling is allowed for every king and rook still on their home
        squares; there is no en-passant square and both clocks start fresh.

        Raises:
            ValueError: the set-up is not a legal chess position (missing
                kings, pawns on a back rank, side not to move in check, ...).
        """
        castling = _castling_fen(placement)
        engine = cls(f"{placement.to_fen()} {turn.fen_char} {castling} - 0 1")
        status = engine._board.status()
        if status != chess.STATUS_VALID:
            raise ValueError(
                f"Set-up is not a legal position ({status!r}): {placement.to_fen()}"
            )
        return engine

    # ── Position ─────────────────────────────────────────────────────────

    def current_fen(self) -> str:
        return self._board.fen()

    def starting_fen(self) -> str:
        """FEN of the position the game started from."""
        return self._board.root().fen()

    def turn_to_move(self) -> Color:
        return Color.WHITE if self._board.turn == chess.WHITE else Color.BLACK

    def legal_moves(self) -> list[LegalMove]:
        """Legal moves in python-chess generation order."""
        board = self._board
        moves: list[LegalMove] = []
        for move in board.legal_moves:
            san = board.san(move)
            board.push(move)
            try:
                moves.append(LegalMove(move, san, board.fen()))
            finally:
                board.pop()
        return moves

    # ── Mutation ─────────────────────────────────────────────────────────

    def apply_move(self, move: LegalMove) -> None:
        if not self._board.is_legal(move.move):
            raise ValueError(f"Illegal move {move.uci} in {self._board.fen()}")
        self._board.push(move.move)

    def undo_last_move(self) -> None:
        """Take back the last move.

        Raises:
            IndexError: no move has been played.
        """
        self._board.pop()

    # ── Game-ending checks ───────────────────────────────────────────────

    def is_checkmate(self) -> bool:
        return self._board.is_checkmate()

    def is_stalemate(self) -> bool:
        return self._board.is_stalemate()

    def is_insufficient_material(self) -> bool:
        return self._board.is_insufficient_material()

    def is_threefold_repetition(self) -> bool:
        return self._board.is_repetition(3)

    def is_fifty_move_draw(self) -> bool:
        return self._board.is_fifty_moves()

    # ── History ──────────────────────────────────────────────────────────

    def move_history(self) -> list[LegalMove]:
        """Applied moves, oldest first."""
        replay = self._board.root()
        history: list[LegalMove] = []
        for move in self._board.move_stack:
            san = replay.san(move)
            replay.push(move)
            history.append(LegalMove(move, san, replay.fen()))
        return history

    def to_pgn(self) -> str:
        game = chess.pgn.Game.from_board(self._board)
        return str(game)


def _castling_fen(placement: PiecesPlacement) -> str:
    rights = ""
    if placement.piece_at(E1) == WHITE_KING:
        if placement.piece_at(H1) == WHITE_ROOK:
            rights += "K"
        if placement.piece_at(A1) == WHITE_ROOK:
            rights += "Q"
    if placement.piece_at(E8) == BLACK_KING:
        if placement.piece_at(H8) == BLACK_ROOK:
            rights += "k"
        if placement.piece_at(A8) == BLACK_ROOK:
            rights += "q"
    return rights or "-"
