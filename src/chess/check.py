"""
Is a king under attack?

Brute force on purpose: ask every opposing piece whether it could legally (geometrically) move onto the square.
That is O(64 x validation) per query, fine for an 8x8 board.
"""

from src.chess.board import Board
from src.chess.moves import geometric_rejection
from src.chess.position import Position, all_positions
from src.core.exceptions import MissingKingError
from src.core.shared_types import Color, PieceType


def find_king(board: Board, color: Color) -> Position:
    kings = board.locate_pieces(PieceType.KING, color)
    if len(kings) != 1:
        raise MissingKingError(
            f"Expected exactly one {color} king on the board, found {len(kings)}: {board.to_fen()}"
        )
    return kings[0]


def is_attacked(board: Board, target: Position, defender_color: Color) -> bool:
    """
    TRUE if any of the attacker's pieces could move onto target.

    NOTE: uses the geometry rules only (ignoring checks). A piece pinned to its own king still gives check.
    This is also what keeps this function from recursing into itself via the check-escape rule.
    """
    attacker_color = defender_color.opponent
    return any(
        geometric_rejection(board, square, target) is None
        for square in board.locate_color(attacker_color)
    )


def is_in_check(board: Board, color: Color) -> bool:
    return is_attacked(board, find_king(board, color), color)


def leaves_king_safe(
    board: Board, origin: Position, destination: Position, color: Color
) -> bool:
    """Play the move on a copy of the board, and see whether the mover's king survives it."""
    simulated = board.move_piece(origin, destination)
    return not is_in_check(simulated, color)


def has_legal_move(board: Board, color: Color) -> bool:
    """
    Exhaustive search for an escape
    ---

    For every piece of `color`, try every square on the board:
    is there any geometrically legal move after which the king is no longer attacked?
    """
    for origin in board.locate_color(color):
        for destination in all_positions():
            if geometric_rejection(board, origin, destination) is not None:
                continue
            if leaves_king_safe(board, origin, destination, color):
                return True
    return False
