"""
The Game board: pure data container for the configuration of pieces on the board.

No rules knowledge lives here. Every "change" returns a new Board, so speculative
"what if" checks (see check.py) can never corrupt the live position.
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Self

from src.chess.pieces import Piece
from src.chess.position import BOARD_DIMENSIONS, Position, all_positions
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, PieceType

# Contents of a single square: None when empty
Square = Optional[Piece]
Grid = tuple[tuple[Square, ...], ...]

STARTING_POSITION_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


@dataclass(frozen=True)
class Board:
    squares: Grid

    @classmethod
    def empty(cls) -> Self:
        row = (None,) * BOARD_DIMENSIONS[1]
        return cls((row,) * BOARD_DIMENSIONS[0])

    @classmethod
    def starting_position(cls) -> Self:
        """White back rank on row 7, Black back rank on row 0, pawns on rows 6/1."""
        return cls.from_fen(STARTING_POSITION_FEN)

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a board using the piece placement part of a FEN string.

        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * black pieces are on the 8th rank (row 0), starting with a rook on a8
        * ranks 6 through 3 have 8 consecutive empty squares
        * 1st rank (row 7) holds the white pieces (capital letters)

        FEN is read from the top rank down, which is exactly the row order of the grid.
        """
        fen_by_ranks = fen_str.split("/")
        if len(fen_by_ranks) != BOARD_DIMENSIONS[0]:
            raise InvalidRequestError(
                f"Expected {BOARD_DIMENSIONS[0]} ranks in board FEN, got {len(fen_by_ranks)}: {fen_str!r}"
            )

        rows: list[tuple[Square, ...]] = []
        for fen_one_rank in fen_by_ranks:
            row: list[Square] = []
            for character in fen_one_rank:
                if character.isdigit():
                    # A number denotes the amount of empty squares after each other
                    row.extend([None] * int(character))
                else:
                    try:
                        row.append(Piece.from_fen(character))
                    except KeyError:
                        raise InvalidRequestError(
                            f"Unknown piece letter {character!r} in board FEN: {fen_str!r}"
                        ) from None
            if len(row) != BOARD_DIMENSIONS[1]:
                raise InvalidRequestError(
                    f"Rank {fen_one_rank!r} does not describe {BOARD_DIMENSIONS[1]} squares."
                )
            rows.append(tuple(row))
        return cls(tuple(rows))

    def to_fen(self) -> str:
        """Ranks are separated by slashes in FEN string."""
        return "/".join(self._rank_to_fen(row) for row in self.squares)

    def _rank_to_fen(self, row: tuple[Square, ...]) -> str:
        """FEN string of a single rank"""
        fen_characters: list[str] = []
        empty_count = 0
        for piece in row:
            if piece is None:
                empty_count += 1
                continue
            if empty_count > 0:
                fen_characters.append(str(empty_count))
                empty_count = 0
            fen_characters.append(piece.to_fen())

        # if the entire rank is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    def get(self, position: Position) -> Square:
        _check_on_board(position)
        return self.squares[position.row][position.col]

    def set(self, position: Position, square: Square) -> Self:
        """Return a new board with a single square replaced. The original is left alone."""
        _check_on_board(position)
        rows = list(self.squares)
        row = list(rows[position.row])
        row[position.col] = square
        rows[position.row] = tuple(row)
        return type(self)(tuple(rows))

    def clone(self) -> Self:
        return type(self)(tuple(tuple(row) for row in self.squares))

    def move_piece(self, origin: Position, destination: Position) -> Self:
        """Move whatever stands on origin to destination. Anything on destination gets overwritten (= captured)."""
        piece_that_moved = self.get(origin)
        return self.set(origin, None).set(destination, piece_that_moved)

    def is_empty(self, position: Position) -> bool:
        return self.get(position) is None

    def pieces(self) -> Iterator[tuple[Position, Piece]]:
        for position in all_positions():
            piece = self.get(position)
            if piece is not None:
                yield position, piece

    def locate_color(self, color: Color) -> list[Position]:
        return [position for position, piece in self.pieces() if piece.color == color]

    def locate_pieces(self, piece_type: PieceType, color: Color) -> list[Position]:
        return [
            position
            for position, piece in self.pieces()
            if piece == Piece(piece_type, color)
        ]

    def rows(self) -> list[list[Optional[str]]]:
        """Grid of FEN characters (None for empty squares). Convenient for anything that draws the board."""
        return [
            [piece.to_fen() if piece else None for piece in row] for row in self.squares
        ]


def _check_on_board(position: Position) -> None:
    # Negative indexes must never wrap around to the far edge
    if not position.is_within_bounds():
        raise IndexError(f"{position} is not on the board")
