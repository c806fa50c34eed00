"""Exceptions raised for malformed board input."""

from __future__ import annotations


class ParseError(ValueError):
    """Placement text, piece letter or square name could not be parsed."""
