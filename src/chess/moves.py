"""
Geometry/Base movement rules

Key idea: Use strategy pattern to define the movement pattern of each piece type.
Each rule answers "may the piece on `origin` travel to `destination` on this board?",
ignoring whether doing so leaves your own king in check.

Check-related legality is layered on top in validator.py
"""

from dataclasses import dataclass
from typing import Callable, Optional

from src.chess.board import Board
from src.chess.pieces import Piece
from src.chess.position import Position
from src.core.shared_types import Color, PieceType, RejectionReason

Vector = tuple[int, int]

# Starting rows of the pawns, and the direction they walk in. White moves UP the board (towards row 0)
PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}

KNIGHT_DELTAS: set[Vector] = {(1, 2), (2, 1)}


@dataclass(frozen=True)
class Move:
    """A move that has been accepted and applied. Stored in the game history."""

    origin: Position
    destination: Position
    piece: Piece
    captured: Optional[Piece]
    notation: str

    @property
    def is_capture(self) -> bool:
        return self.captured is not None


@dataclass(frozen=True)
class MoveRejection:
    """Why a move was turned down. Handed back to the caller instead of raising."""

    reason: RejectionReason
    message: str
    piece_type: Optional[PieceType] = None


def out_of_bounds() -> MoveRejection:
    return MoveRejection(
        RejectionReason.OUT_OF_BOUNDS, "Invalid move: Outside the board"
    )


def own_piece_capture() -> MoveRejection:
    return MoveRejection(
        RejectionReason.OWN_PIECE_CAPTURE,
        "Invalid move: Cannot capture your own piece",
    )


def piece_rule_violation(piece_type: PieceType) -> MoveRejection:
    return MoveRejection(
        RejectionReason.PIECE_RULE_VIOLATION,
        f"Invalid {piece_type} move",
        piece_type=piece_type,
    )


def leaves_king_in_check() -> MoveRejection:
    return MoveRejection(
        RejectionReason.LEAVES_KING_IN_CHECK, "Must move to get out of check!"
    )


def wrong_turn(color_to_move: Color) -> MoveRejection:
    return MoveRejection(
        RejectionReason.WRONG_TURN, f"It's {color_to_move.capitalize()}'s turn"
    )


def game_over() -> MoveRejection:
    """Terminal rejection: nobody is to move anymore."""
    return MoveRejection(RejectionReason.WRONG_TURN, "The game is over")


# --- PATH HELPERS ---
def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def squares_between(origin: Position, destination: Position) -> list[Position]:
    """
    Squares strictly in between two squares on the same rank, file or diagonal.

    NOTE: walk one step at the time along the unit vector pointing from origin to destination.
    """
    d_row = destination.row - origin.row
    d_col = destination.col - origin.col
    if not (d_row == 0 or d_col == 0 or abs(d_row) == abs(d_col)):
        raise ValueError(
            f"squares_between requires both squares to share a line.\n from: {origin}\n to: {destination}"
        )

    step: Vector = (_sign(d_row), _sign(d_col))
    squares_found: list[Position] = []
    square = origin.offset(*step)
    while square != destination:
        squares_found.append(square)
        square = square.offset(*step)
    return squares_found


def is_path_clear(board: Board, origin: Position, destination: Position) -> bool:
    return all(board.is_empty(square) for square in squares_between(origin, destination))


# --- MOVEMENT RULES ---
def is_valid_pawn_move(board: Board, origin: Position, destination: Position) -> bool:
    """
    A pawn:
    - moves by a single square forward onto an empty square.
    - can move by two in their first move (so when on their starting rank), if both squares are empty
    - takes diagonally (one square forward), and ONLY takes that way
    """
    pawn = board.get(origin)
    assert pawn is not None
    direction = PAWN_DIRECTION[pawn.color]
    d_row = destination.row - origin.row
    d_col = destination.col - origin.col
    target = board.get(destination)

    single_push = d_row == direction and d_col == 0 and target is None
    double_push = (
        origin.row == PAWN_START_ROW[pawn.color]
        and d_row == 2 * direction
        and d_col == 0
        and target is None
        and board.is_empty(origin.offset(direction, 0))
    )
    capture = (
        d_row == direction
        and abs(d_col) == 1
        and target is not None
        and target.color != pawn.color
    )
    return single_push or double_push or capture


def is_valid_rook_move(board: Board, origin: Position, destination: Position) -> bool:
    """Rooks move either horizontally or vertically, and cannot jump over pieces"""
    same_row = origin.row == destination.row
    same_col = origin.col == destination.col
    if same_row == same_col:
        # either not on a line at all, or not moving
        return False
    return is_path_clear(board, origin, destination)


def is_valid_knight_move(
    board: Board, origin: Position, destination: Position
) -> bool:
    """Knights jump: |delta_row| + |delta_col| = 3, with both deltas non-zero"""
    deltas = (
        abs(destination.row - origin.row),
        abs(destination.col - origin.col),
    )
    return deltas in KNIGHT_DELTAS


def is_valid_bishop_move(
    board: Board, origin: Position, destination: Position
) -> bool:
    """Bishops move diagonally: |delta_row| = |delta_col|"""
    d_row = abs(destination.row - origin.row)
    d_col = abs(destination.col - origin.col)
    if d_row != d_col or d_row == 0:
        return False
    return is_path_clear(board, origin, destination)


def is_valid_queen_move(
    board: Board, origin: Position, destination: Position
) -> bool:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return is_valid_rook_move(board, origin, destination) or is_valid_bishop_move(
        board, origin, destination
    )


def is_valid_king_move(board: Board, origin: Position, destination: Position) -> bool:
    """The king can move by a single square at the time. No castling."""
    d_row = abs(destination.row - origin.row)
    d_col = abs(destination.col - origin.col)
    return d_row <= 1 and d_col <= 1 and (d_row, d_col) != (0, 0)


# -- STRATEGY PATTERN: MOVEMENT RULES ---
MovementRuleFn = Callable[[Board, Position, Position], bool]
MOVEMENT_RULES: dict[PieceType, MovementRuleFn] = {
    PieceType.PAWN: is_valid_pawn_move,
    PieceType.KNIGHT: is_valid_knight_move,
    PieceType.BISHOP: is_valid_bishop_move,
    PieceType.ROOK: is_valid_rook_move,
    PieceType.QUEEN: is_valid_queen_move,
    PieceType.KING: is_valid_king_move,
}


def geometric_rejection(
    board: Board, origin: Position, destination: Position
) -> Optional[MoveRejection]:
    """
    Geometric legality of a move
    ----

    1. origin and destination must be on the board
    2. destination must not hold one of your own pieces
    3. the movement pattern (and path) of the piece must allow it

    Returns None when the move passes, otherwise the reason it failed.
    Origin is expected to hold a piece (the caller takes care of empty squares / turn order).
    """
    if not origin.is_within_bounds() or not destination.is_within_bounds():
        return out_of_bounds()

    piece = board.get(origin)
    assert piece is not None, f"No piece to move on {origin.to_algebraic()}"

    target = board.get(destination)
    if target is not None and target.color == piece.color:
        return own_piece_capture()

    movement_rule = MOVEMENT_RULES[piece.type]
    if not movement_rule(board, origin, destination):
        return piece_rule_violation(piece.type)
    return None
