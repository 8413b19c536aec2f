"""Unit tests for /src/chess/notation.py"""

import pytest

from src.chess.notation import numbered_history, record
from src.core.shared_types import PieceType
from tests.helpers import sq


@pytest.mark.parametrize(
    "piece_type, was_capture, destination, expected",
    [
        (PieceType.PAWN, False, "e4", "e4"),
        (PieceType.PAWN, True, "d5", "xd5"),
        (PieceType.KNIGHT, False, "f3", "Nf3"),
        (PieceType.BISHOP, True, "f7", "Bxf7"),
        (PieceType.ROOK, False, "a8", "Ra8"),
        (PieceType.QUEEN, True, "f7", "Qxf7"),
        (PieceType.KING, False, "h1", "Kh1"),
    ],
)
def test_record(
    piece_type: PieceType, was_capture: bool, destination: str, expected: str
) -> None:
    assert record(piece_type, was_capture, sq(destination)) == expected


def test_numbered_history() -> None:
    assert numbered_history(["e4", "e5", "Nf3"]) == ["1. e4", "2. e5", "3. Nf3"]
    assert numbered_history([]) == []
