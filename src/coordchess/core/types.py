"""Coordinate type and named square constants.

Board layout (rank index 0 is the eighth rank)::

    a8=(0, 0), b8=(1, 0), ..., h8=(7, 0)
    a7=(0, 1), ...
    ...
    a1=(0, 7), b1=(1, 7), ..., h1=(7, 7)

Parsing and rendering both rely on this inversion.
"""

from __future__ import annotations

from typing import NamedTuple

from coordchess.core.errors import OutOfBoundsError

BOARD_SIZE = 8
FILE_NAMES = "abcdefgh"


class Coordinate(NamedTuple):
    """A (file, rank-index) pair identifying one square."""

    file: int
    rank: int

    def is_on_board(self) -> bool:
        return 0 <= self.file < BOARD_SIZE and 0 <= self.rank < BOARD_SIZE

    def offset(self, dfile: int, drank: int) -> Coordinate:
        return Coordinate(self.file + dfile, self.rank + drank)

    @property
    def name(self) -> str:
        """Algebraic name, e.g. (4, 6) -> 'e2'; off-board squares raise."""
        if not self.is_on_board():
            raise OutOfBoundsError(self)
        return FILE_NAMES[self.file] + str(BOARD_SIZE - self.rank)

    def __str__(self) -> str:
        return self.name


def all_coordinates() -> list[Coordinate]:
    """Every square in display order: a8..h8, a7..h7, ..., a1..h1."""
    return [Coordinate(f, r) for r in range(BOARD_SIZE) for f in range(BOARD_SIZE)]


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = (Coordinate(f, 0) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Coordinate(f, 1) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Coordinate(f, 2) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Coordinate(f, 3) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Coordinate(f, 4) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Coordinate(f, 5) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Coordinate(f, 6) for f in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = (Coordinate(f, 7) for f in range(8))
