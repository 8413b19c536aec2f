"""Unit tests for /src/chess/clock.py"""

import pytest

from src.chess.clock import Clocks, format_clock
from src.core.shared_types import Color


def test_start() -> None:
    clocks = Clocks.start(300)
    assert clocks.remaining(Color.WHITE) == 300
    assert clocks.remaining(Color.BLACK) == 300


def test_with_remaining_leaves_other_clock_alone() -> None:
    clocks = Clocks.start(300)
    updated = clocks.with_remaining(Color.BLACK, 12)
    assert updated.remaining(Color.BLACK) == 12
    assert updated.remaining(Color.WHITE) == 300
    assert clocks.remaining(Color.BLACK) == 300


def test_as_dict() -> None:
    assert Clocks(white=1, black=2).as_dict() == {Color.WHITE: 1, Color.BLACK: 2}


@pytest.mark.parametrize(
    "seconds, expected",
    [(600, "10:00"), (65, "1:05"), (9, "0:09"), (0, "0:00"), (-3, "0:00")],
)
def test_format_clock(seconds: int, expected: str) -> None:
    assert format_clock(seconds) == expected
