"""
A position (coordinates of a square) on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Chess board is always 8x8. (rows, cols)
BOARD_DIMENSIONS = (8, 8)

FILES = "abcdefgh"


@dataclass(frozen=True)
class Position:
    """
    Board coordinates as (row, col).

    NOTE: row 0 is the 8th rank (Black's back rank), row 7 is the 1st rank (White's back rank). col 0 is the a-file.
    """

    row: int
    col: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Position:
        """Algebraic notation: 'a8' gets converted to (0, 0), 'h1' to (7, 7)"""
        col = ord(sq[0]) - ord("a")
        row = BOARD_DIMENSIONS[0] - int(sq[1])
        return cls(row, col)

    def to_algebraic(self) -> str:
        return f"{FILES[self.col]}{BOARD_DIMENSIONS[0] - self.row}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_DIMENSIONS[0]) and (
            0 <= self.col < BOARD_DIMENSIONS[1]
        )

    def offset(self, d_row: int, d_col: int) -> Position:
        return Position(self.row + d_row, self.col + d_col)


def all_positions() -> list[Position]:
    """Every square on the board, row by row starting at a8."""
    return [
        Position(row, col)
        for row in range(BOARD_DIMENSIONS[0])
        for col in range(BOARD_DIMENSIONS[1])
    ]
