from __future__ import annotations


class InvalidHandError(ValueError):
    """Raised when a caller hands the engine something that is not a legal hand."""


class InvalidTileError(InvalidHandError):
    """Raised for a single malformed tile (unknown code or rank out of range)."""
