"""Per-player countdown clocks (whole seconds)."""

from dataclasses import dataclass, replace
from typing import Self

from src.core.shared_types import Color


@dataclass(frozen=True)
class Clocks:
    white: int
    black: int

    @classmethod
    def start(cls, seconds: int) -> Self:
        return cls(white=seconds, black=seconds)

    def remaining(self, color: Color) -> int:
        return self.white if color == Color.WHITE else self.black

    def with_remaining(self, color: Color, seconds: int) -> Self:
        if color == Color.WHITE:
            return replace(self, white=seconds)
        return replace(self, black=seconds)

    def as_dict(self) -> dict[Color, int]:
        return {Color.WHITE: self.white, Color.BLACK: self.black}


def format_clock(seconds: int) -> str:
    """600 -> '10:00'"""
    minutes, secs = divmod(max(seconds, 0), 60)
    return f"{minutes}:{secs:02d}"
