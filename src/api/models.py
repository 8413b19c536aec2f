"""Requests and Response models"""

from typing import Optional, Self

from pydantic import BaseModel, field_validator

from src.chess.clock import format_clock
from src.chess.game import GameState
from src.chess.moves import MoveRejection
from src.chess.notation import numbered_history
from src.chess.position import BOARD_DIMENSIONS, FILES
from src.core.config import CLOCK_SECONDS
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, PieceType, RejectionReason, Status


def _is_algebraic_notation(value: str) -> bool:
    if len(value) != 2:
        return False

    file_character = value[0]
    rank_character = value[1]
    if not (file_character in FILES and rank_character.isdigit()):
        return False
    return 1 <= int(rank_character) <= BOARD_DIMENSIONS[0]


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    clock_seconds: int = CLOCK_SECONDS

    @field_validator("clock_seconds")
    @classmethod
    def validate_clock_seconds(cls, value: int) -> int:
        if value <= 0:
            raise InvalidRequestError(
                f"Clock must start with a positive number of seconds, got {value}."
            )
        return value


class MoveRequest(BaseModel):
    from_square: str
    to_square: str

    @field_validator(*["from_square", "to_square"])
    @classmethod
    def validate_square(cls, value: str) -> str:
        if not _is_algebraic_notation(value):
            raise InvalidRequestError(
                f"Cannot interpret {value!r} as a valid square name."
            )
        return value


class SelectSquareRequest(BaseModel):
    square: str

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        if not _is_algebraic_notation(value):
            raise InvalidRequestError(
                f"Cannot interpret {value!r} as a valid square name."
            )
        return value


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    board: list[list[Optional[str]]]
    fen_position: str
    turn: Color
    status: Status
    clocks: dict[Color, int]
    clock_display: dict[Color, str]
    move_history: list[str]
    numbered_moves: list[str]
    selected_square: Optional[str]
    winner: Optional[Color]

    @classmethod
    def from_state(cls, state: GameState) -> Self:
        clocks = state.clocks.as_dict()
        return cls(
            board=state.board.rows(),
            fen_position=state.board.to_fen(),
            turn=state.turn,
            status=state.status,
            clocks=clocks,
            clock_display={color: format_clock(secs) for color, secs in clocks.items()},
            move_history=state.notation_history,
            numbered_moves=numbered_history(state.notation_history),
            selected_square=(
                state.pending_selection.to_algebraic()
                if state.pending_selection
                else None
            ),
            winner=state.winner,
        )


class RejectionResponse(BaseModel):
    reason: RejectionReason
    message: str
    piece_type: Optional[PieceType] = None

    @classmethod
    def from_rejection(cls, rejection: MoveRejection) -> Self:
        return cls(
            reason=rejection.reason,
            message=rejection.message,
            piece_type=rejection.piece_type,
        )


class MoveResponse(BaseModel):
    accepted: bool
    notation: Optional[str] = None
    rejection: Optional[RejectionResponse] = None
    game: GameResponse
