"""Defines the chess pieces"""

from dataclasses import dataclass
from typing import Self

from src.core.shared_types import Color, PieceType

FEN_TO_PIECE: dict[str, PieceType] = {
    "p": PieceType.PAWN,
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "q": PieceType.QUEEN,
    "k": PieceType.KING,
}

PIECE_TO_FEN: dict[PieceType, str] = {value: key for key, value in FEN_TO_PIECE.items()}


@dataclass(frozen=True)
class Piece:
    """
    A piece standing on a square. An empty square is simply `None` (see Board).
    Frozen, so pieces can be shared between board snapshots safely.
    """

    type: PieceType
    color: Color

    @classmethod
    def from_fen(cls, character: str) -> Self:
        # lower case: Black pieces, upper case: White pieces
        color = Color.WHITE if character.isupper() else Color.BLACK
        piece_type = FEN_TO_PIECE[character.lower()]
        return cls(piece_type, color)

    def to_fen(self) -> str:
        return (
            PIECE_TO_FEN[self.type].upper()
            if self.color == Color.WHITE
            else PIECE_TO_FEN[self.type].lower()
        )
