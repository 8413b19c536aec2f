"""
Full legality of a single move: the geometry rules (moves.py) plus the rule that you may never end your move with your own king attacked.
"""

import logging
from typing import Optional

from src.chess.board import Board
from src.chess.check import leaves_king_safe
from src.chess.moves import MoveRejection, geometric_rejection, leaves_king_in_check
from src.chess.position import Position

_LOGGER = logging.getLogger(__name__)


def validate_move(
    board: Board,
    origin: Position,
    destination: Position,
    ignore_check: bool = False,
) -> Optional[MoveRejection]:
    """
    Returns None for a legal move, otherwise the reason for rejecting it.

    With `ignore_check` the king safety test is skipped (that is how check detection itself asks the question).
    """
    rejection = geometric_rejection(board, origin, destination)
    if rejection is not None:
        return rejection

    if ignore_check:
        return None

    mover = board.get(origin)
    assert mover is not None
    if not leaves_king_safe(board, origin, destination, mover.color):
        _LOGGER.debug(
            "%s%s would leave the %s king attacked",
            origin.to_algebraic(),
            destination.to_algebraic(),
            mover.color,
        )
        return leaves_king_in_check()
    return None


def is_legal(
    board: Board,
    origin: Position,
    destination: Position,
    ignore_check: bool = False,
) -> bool:
    return validate_move(board, origin, destination, ignore_check) is None
