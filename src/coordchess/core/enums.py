"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class MoveErrorKind(IntEnum):
    """Every way a notation string or a requested move can be rejected."""

    INVALID_FORMAT = auto()
    OUT_OF_BOUNDS = auto()
    EMPTY_SOURCE = auto()
    INVALID_PAWN_MOVE = auto()
    INVALID_ROOK_MOVE = auto()
    INVALID_KNIGHT_MOVE = auto()
    INVALID_BISHOP_MOVE = auto()
    DESTINATION_OCCUPIED = auto()
    CANNOT_CAPTURE_OWN_PIECE = auto()
    PATH_BLOCKED = auto()
    UNSUPPORTED_PIECE_KIND = auto()

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS: dict[MoveErrorKind, str] = {
    MoveErrorKind.INVALID_FORMAT: "move must look like 'e2e4'",
    MoveErrorKind.OUT_OF_BOUNDS: "square is off the board",
    MoveErrorKind.EMPTY_SOURCE: "no piece at the source square",
    MoveErrorKind.INVALID_PAWN_MOVE: "pawns cannot move that way",
    MoveErrorKind.INVALID_ROOK_MOVE: "rooks move along a rank or a file",
    MoveErrorKind.INVALID_KNIGHT_MOVE: "knights move in an L-shape",
    MoveErrorKind.INVALID_BISHOP_MOVE: "bishops move along a diagonal",
    MoveErrorKind.DESTINATION_OCCUPIED: "destination square is occupied",
    MoveErrorKind.CANNOT_CAPTURE_OWN_PIECE: "cannot capture your own piece",
    MoveErrorKind.PATH_BLOCKED: "path is blocked",
    MoveErrorKind.UNSUPPORTED_PIECE_KIND: "moves for this piece are not supported",
}
