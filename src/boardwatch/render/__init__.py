"""Text rendering of reconciled positions."""

from boardwatch.render.ascii_board import Accent, AsciiBoard

__all__ = ["Accent", "AsciiBoard"]
