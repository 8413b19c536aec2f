"""
Custom exceptions.

Rejected moves are NOT exceptions: the rules engine returns a MoveRejection for those.
What lives here are the conditions that mean either the caller sent garbage, or the engine itself is broken.
"""


class GameError(Exception):
    """Base class for everything raised by this package."""


class MissingKingError(GameError):
    """A king is missing from the board. Should never happen during normal play (invariant violation)."""


class InvalidRequestError(GameError):
    """Request data at the boundary cannot be interpreted."""
