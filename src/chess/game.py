"""
The game state machine is the entrypoint into the domain layer for the service layer.

GameState is a single immutable value. The only ways to get a new one are the transitions below:
* new_game()       : fresh game in the standard starting position
* submit_move()    : a player attempts a move
* tick()           : one second passes on the clock of the side to move
* select_square()  : click-style input (select a piece, then its destination)

A rejected move hands back the very same state, plus the reason for the rejection.
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional, Self

from src.chess.board import Board
from src.chess.check import has_legal_move, is_in_check
from src.chess.clock import Clocks
from src.chess.moves import (
    Move,
    MoveRejection,
    game_over,
    out_of_bounds,
    wrong_turn,
)
from src.chess.notation import record
from src.chess.position import Position
from src.chess.validator import validate_move
from src.core.config import CLOCK_SECONDS
from src.core.shared_types import Color, Status

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveOutcome:
    """What happened when a move got accepted."""

    move: Move
    status: Status


MoveResult = MoveOutcome | MoveRejection


@dataclass(frozen=True)
class GameState:
    board: Board
    turn: Color
    status: Status
    clocks: Clocks
    history: tuple[Move, ...] = ()
    pending_selection: Optional[Position] = None

    @classmethod
    def initial(cls, clock_seconds: int = CLOCK_SECONDS) -> Self:
        return cls(
            board=Board.starting_position(),
            turn=Color.WHITE,
            status=Status.ACTIVE,
            clocks=Clocks.start(clock_seconds),
        )

    # --- READ ACCESSORS ---
    @property
    def is_over(self) -> bool:
        return self.status == Status.CHECKMATE

    @property
    def winner(self) -> Optional[Color]:
        """
        Only defined once the game is over.
        Whether mated or flagged, the losing side is always the side to move, so the opponent must be the winner.
        """
        if not self.is_over:
            return None
        return self.turn.opponent

    @property
    def notation_history(self) -> list[str]:
        return [move.notation for move in self.history]

    def remaining(self, color: Color) -> int:
        return self.clocks.remaining(color)


def new_game(clock_seconds: int = CLOCK_SECONDS) -> GameState:
    if clock_seconds <= 0:
        raise ValueError(f"Clocks need a positive amount of seconds, got {clock_seconds}")
    _LOGGER.info("New game, %s seconds per side", clock_seconds)
    return GameState.initial(clock_seconds)


def submit_move(
    state: GameState, origin: Position, destination: Position
) -> tuple[GameState, MoveResult]:
    """
    Attempt to make a move
    -----

    1. refuse if the game is over, or the piece on origin is not yours to move
    2. validate the move (geometry + your king may not be left attacked)
    3. update the board (capture happens by overwriting the destination)
    4. update game status, looking at the opponent's king
    5. hand the turn over and record the move
    """
    rejection = _turn_rejection(state, origin)
    if rejection is None:
        rejection = validate_move(state.board, origin, destination)
    if rejection is not None:
        _LOGGER.debug(
            "Rejected %s -> %s for %s: %s",
            origin,
            destination,
            state.turn,
            rejection.reason,
        )
        return state, rejection

    moving_piece = state.board.get(origin)
    assert moving_piece is not None
    captured = state.board.get(destination)
    board = state.board.move_piece(origin, destination)

    opponent = state.turn.opponent
    status = _status_after_move(board, opponent)

    move = Move(
        origin=origin,
        destination=destination,
        piece=moving_piece,
        captured=captured,
        notation=record(moving_piece.type, captured is not None, destination),
    )
    _LOGGER.info("%s plays %s (%s)", state.turn, move.notation, status)

    new_state = replace(
        state,
        board=board,
        turn=opponent,
        status=status,
        history=state.history + (move,),
        pending_selection=None,
    )
    return new_state, MoveOutcome(move, status)


def tick(state: GameState) -> GameState:
    """
    One second passes for the side to move.
    Running out of time ends the game on the spot, whatever the position on the board.
    The flag falls on the tick that brings the clock to 0, not on a later tick at 0.
    """
    if state.is_over:
        return state

    remaining = state.clocks.remaining(state.turn) - 1
    if remaining > 0:
        return replace(state, clocks=state.clocks.with_remaining(state.turn, remaining))

    _LOGGER.info("Flag fall: %s ran out of time", state.turn)
    return replace(
        state,
        clocks=state.clocks.with_remaining(state.turn, 0),
        status=Status.CHECKMATE,
    )


def select_square(
    state: GameState, position: Position
) -> tuple[GameState, Optional[MoveResult]]:
    """
    Two-step input: first pick one of your pieces, then the square it should go to.

    * no piece picked yet: select your own piece; an opponent's piece is refused; an empty square does nothing
    * piece picked: submit the move. Selection is cleared, accepted or not.
    """
    if state.is_over:
        return state, None

    if state.pending_selection is not None:
        origin = state.pending_selection
        cleared = replace(state, pending_selection=None)
        return submit_move(cleared, origin, position)

    if not position.is_within_bounds():
        return state, out_of_bounds()

    piece = state.board.get(position)
    if piece is None:
        return state, None
    if piece.color != state.turn:
        return state, wrong_turn(state.turn)
    return replace(state, pending_selection=position), None


# -- PRIVATE HELPERS ---
def _turn_rejection(state: GameState, origin: Position) -> Optional[MoveRejection]:
    if state.is_over:
        return game_over()
    if not origin.is_within_bounds():
        return out_of_bounds()
    piece = state.board.get(origin)
    if piece is None or piece.color != state.turn:
        return wrong_turn(state.turn)
    return None


def _status_after_move(board: Board, opponent: Color) -> Status:
    """Performs checks to see if the opponent is in check, and whether they can get out of it."""
    if not is_in_check(board, opponent):
        return Status.ACTIVE
    if has_legal_move(board, opponent):
        return Status.CHECK
    return Status.CHECKMATE
