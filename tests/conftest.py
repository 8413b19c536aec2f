"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures required for testing multiple layers.
"""

import pytest

from src.chess.clock import Clocks
from src.chess.game import GameState
from src.core.shared_types import Color, Status
from tests.helpers import MakeState, place


@pytest.fixture
def make_state() -> MakeState:
    """Build a game state in an arbitrary position (the clocks default to plenty of time)."""

    def _make_state(
        pieces: dict[str, str],
        turn: Color = Color.WHITE,
        status: Status = Status.ACTIVE,
        white_seconds: int = 600,
        black_seconds: int = 600,
    ) -> GameState:
        return GameState(
            board=place(pieces),
            turn=turn,
            status=status,
            clocks=Clocks(white=white_seconds, black=black_seconds),
        )

    return _make_state
