"""Short move notation for the move history: <piece letter><x if capture><destination>, e.g. 'Nxf7' or 'e4'."""

from src.chess.pieces import PIECE_TO_FEN
from src.chess.position import Position
from src.core.shared_types import PieceType


def record(piece_type: PieceType, was_capture: bool, destination: Position) -> str:
    letter = "" if piece_type == PieceType.PAWN else PIECE_TO_FEN[piece_type].upper()
    capture = "x" if was_capture else ""
    return f"{letter}{capture}{destination.to_algebraic()}"


def numbered_history(tokens: list[str]) -> list[str]:
    """Every move gets its own number, as shown in the move list."""
    return [f"{index}. {token}" for index, token in enumerate(tokens, start=1)]
