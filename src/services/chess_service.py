"""
Orchestration of communication from the (excluded) UI layer to the rules engine, and back.

The service is the single writer of the live GameState. Moves, selections and clock ticks come in from
different sources (user clicks, a timer), so every event is applied under one lock: no event ever sees
a half-applied predecessor. A tick that makes a flag fall is therefore always seen by the next move.
"""

import asyncio
import logging
import threading

from src.api.models import (
    CreateGameRequest,
    GameResponse,
    MoveRequest,
    MoveResponse,
    RejectionResponse,
    SelectSquareRequest,
)
from src.chess.game import (
    GameState,
    MoveOutcome,
    MoveResult,
    new_game,
    select_square,
    submit_move,
    tick,
)
from src.chess.position import Position
from src.core.config import CLOCK_SECONDS, TICK_SECONDS

_LOGGER = logging.getLogger(__name__)


class ChessService:
    """Orchestration of layers for a single chess game."""

    def __init__(self, clock_seconds: int = CLOCK_SECONDS) -> None:
        self._lock = threading.Lock()
        self._state = new_game(clock_seconds)

    @property
    def state(self) -> GameState:
        with self._lock:
            return self._state

    # -- UI facing logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Throw away the current game, start a fresh one."""
        with self._lock:
            self._state = new_game(request.clock_seconds)
            return GameResponse.from_state(self._state)

    def get_game_state(self) -> GameResponse:
        """Retrieve current game state (for rendering)."""
        with self._lock:
            return GameResponse.from_state(self._state)

    def make_move(self, request: MoveRequest) -> MoveResponse:
        """Make a move attempt."""
        origin = Position.from_algebraic(request.from_square)
        destination = Position.from_algebraic(request.to_square)
        with self._lock:
            self._state, result = submit_move(self._state, origin, destination)
            return self._create_move_response(result)

    def select_square(self, request: SelectSquareRequest) -> MoveResponse:
        """Click on a square: either picks a piece, or completes a move with the piece picked before."""
        position = Position.from_algebraic(request.square)
        with self._lock:
            self._state, result = select_square(self._state, position)
            return self._create_move_response(result)

    def tick(self) -> GameResponse:
        """One clock period passed."""
        with self._lock:
            self._state = tick(self._state)
            return GameResponse.from_state(self._state)

    # -- Internal helpers --
    def _create_move_response(self, result: MoveResult | None) -> MoveResponse:
        """NOTE: called while holding the lock."""
        game = GameResponse.from_state(self._state)
        if result is None:
            return MoveResponse(accepted=False, game=game)
        if isinstance(result, MoveOutcome):
            return MoveResponse(
                accepted=True, notation=result.move.notation, game=game
            )
        return MoveResponse(
            accepted=False,
            rejection=RejectionResponse.from_rejection(result),
            game=game,
        )


async def run_clock(service: ChessService, period: float = TICK_SECONDS) -> GameResponse:
    """
    The wall-clock event source: tick once per period until the game has ended.
    Returns the final game state. Cancel the task to stop it early (e.g. when starting a new game).
    """
    while True:
        await asyncio.sleep(period)
        response = service.tick()
        if response.winner is not None:
            _LOGGER.info("Clock stopped, %s wins", response.winner)
            return response
