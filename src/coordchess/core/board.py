"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from coordchess.core.enums import Color, PieceType
from coordchess.core.errors import OutOfBoundsError
from coordchess.core.piece import Piece
from coordchess.core.types import BOARD_SIZE, FILE_NAMES, Coordinate

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def _checked(coord: tuple[int, int]) -> Coordinate:
    coord = Coordinate(*coord)
    if not coord.is_on_board():
        raise OutOfBoundsError(coord)
    return coord


class Board:
    """Mutable 64-square grid, addressed by :class:`Coordinate`.

    The board holds piece placement only: no side to move, no history.
    Rows are stored by rank index, so ``_grid[0]`` is the eighth rank.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, coord: tuple[int, int]) -> Piece | None:
        file, rank = _checked(coord)
        return self._grid[rank][file]

    def __setitem__(self, coord: tuple[int, int], piece: Piece | None) -> None:
        file, rank = _checked(coord)
        self._grid[rank][file] = piece

    def occupant(self, coord: tuple[int, int]) -> Piece | None:
        """Piece on *coord*, or ``None`` for an empty square."""
        return self[coord]

    def is_empty(self, coord: tuple[int, int]) -> bool:
        return self[coord] is None

    def take(self, coord: tuple[int, int]) -> Piece | None:
        """Remove and return the piece on *coord*."""
        file, rank = _checked(coord)
        piece = self._grid[rank][file]
        self._grid[rank][file] = None
        return piece

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color | None = None) -> list[Coordinate]:
        """Occupied squares in display order, optionally only *color*'s."""
        return [
            Coordinate(file, rank)
            for rank, row in enumerate(self._grid)
            for file, piece in enumerate(row)
            if piece is not None and (color is None or piece.color == color)
        ]

    def rows(self) -> Iterator[tuple[Piece | None, ...]]:
        """Rows from rank index 0 (the eighth rank) down to rank index 7."""
        for row in self._grid:
            yield tuple(row)

    def symbol_at(self, coord: tuple[int, int]) -> str | None:
        """Display symbol of the piece on *coord*, ``None`` if empty."""
        piece = self[coord]
        return piece.symbol if piece is not None else None

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        return b

    def clear(self) -> None:
        self._grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f, pt in enumerate(_BACK_RANK):
            b[f, 0] = Piece(Color.BLACK, pt)
            b[f, 1] = Piece(Color.BLACK, PieceType.PAWN)
            b[f, 6] = Piece(Color.WHITE, PieceType.PAWN)
            b[f, 7] = Piece(Color.WHITE, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank, row in enumerate(self._grid):
            cells = [(p.symbol if p else ".").ljust(2) for p in row]
            rows.append(f"{BOARD_SIZE - rank} {' '.join(cells).rstrip()}")
        rows.append("  " + " ".join(f.ljust(2) for f in FILE_NAMES).rstrip())
        return "\n".join(rows)
