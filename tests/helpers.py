"""Small helpers shared by the test modules (building positions from algebraic square names)."""

from typing import Callable

from src.chess.board import Board
from src.chess.game import GameState
from src.chess.pieces import Piece
from src.chess.position import Position

MakeState = Callable[..., GameState]


def place(pieces: dict[str, str]) -> Board:
    """Empty board with the requested pieces on it. ex. {"e1": "K", "e8": "k"} (FEN letters: capitals are White)"""
    board = Board.empty()
    for square_name, fen_char in pieces.items():
        board = board.set(Position.from_algebraic(square_name), Piece.from_fen(fen_char))
    return board


def sq(name: str) -> Position:
    """Shorthand: algebraic square name to Position"""
    return Position.from_algebraic(name)
