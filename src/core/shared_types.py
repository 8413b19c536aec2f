"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    ACTIVE = "active"
    CHECK = "check"
    CHECKMATE = "checkmate"


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"

    @property
    def opponent(self) -> "Color":
        return Color.BLACK if self == Color.WHITE else Color.WHITE


class PieceType(StrEnum):
    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"


class RejectionReason(StrEnum):
    """Closed set of reasons a move can be turned down. None of them are fatal."""

    OUT_OF_BOUNDS = "out of bounds"
    OWN_PIECE_CAPTURE = "own piece capture"
    WRONG_TURN = "wrong turn"
    PIECE_RULE_VIOLATION = "piece rule violation"
    LEAVES_KING_IN_CHECK = "leaves king in check"
