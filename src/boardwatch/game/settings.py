"""Session configuration."""

from __future__ import annotations

from dataclasses import dataclass

from boardwatch.core.placement import EMPTY_PLACEMENT_FEN, PiecesPlacement


@dataclass
class SessionSettings:
    """All user-configurable session settings."""

    # Start the game as soon as the board shows the standard starting placement
    auto_start: bool = True

    # Placement a new or reset session is set up from
    setup_fen: str = EMPTY_PLACEMENT_FEN

    @property
    def setup_placement(self) -> PiecesPlacement:
        return PiecesPlacement.from_fen(self.setup_fen)
