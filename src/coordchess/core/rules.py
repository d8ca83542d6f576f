"""Move legality: per-piece geometry, path obstruction and capture rules.

The validator looks at piece placement only. It does not know whose turn
it is, and it never asks whether a king would be left in check.
"""

from __future__ import annotations

from dataclasses import dataclass

from coordchess.core.board import Board
from coordchess.core.enums import Color, MoveErrorKind, PieceType
from coordchess.core.errors import IllegalMoveError, OutOfBoundsError
from coordchess.core.move import Move
from coordchess.core.piece import Piece
from coordchess.core.types import Coordinate

# Rank-index step of a forward pawn move; rank index 0 is the eighth rank.
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
PAWN_START_RANK: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}

KNIGHT_DELTAS: frozenset[tuple[int, int]] = frozenset({(1, 2), (2, 1)})


@dataclass(frozen=True, slots=True)
class RulesPolicy:
    """Options for the validator.

    Args:
        rook_captures_own: Rooks skip the destination color check, so a
            rook may land on a piece of its own color. Set to ``False`` to
            reject that with ``CANNOT_CAPTURE_OWN_PIECE``.
    """

    rook_captures_own: bool = True


DEFAULT_POLICY = RulesPolicy()


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _between(from_sq: Coordinate, to_sq: Coordinate) -> list[Coordinate]:
    """Squares strictly between two squares on a shared line or diagonal."""
    step_file = _sign(to_sq.file - from_sq.file)
    step_rank = _sign(to_sq.rank - from_sq.rank)
    squares: list[Coordinate] = []
    sq = from_sq.offset(step_file, step_rank)
    while sq != to_sq:
        squares.append(sq)
        sq = sq.offset(step_file, step_rank)
    return squares


def _check_path(board: Board, move: Move) -> None:
    for sq in _between(move.from_sq, move.to_sq):
        if not board.is_empty(sq):
            raise IllegalMoveError(
                MoveErrorKind.PATH_BLOCKED, f"Path blocked at {sq.name}"
            )


def _check_not_own(board: Board, piece: Piece, to_sq: Coordinate) -> None:
    target = board[to_sq]
    if target is not None and target.color == piece.color:
        raise IllegalMoveError(MoveErrorKind.CANNOT_CAPTURE_OWN_PIECE)


class MoveRules:
    """Rule checker for single moves on a :class:`Board`."""

    __slots__ = ("_policy",)

    def __init__(self, policy: RulesPolicy | None = None) -> None:
        self._policy = policy or DEFAULT_POLICY

    @property
    def policy(self) -> RulesPolicy:
        return self._policy

    def validate(self, board: Board, move: Move) -> None:
        """Raise :class:`IllegalMoveError` unless *move* is legal on *board*."""
        for sq in move:
            if not sq.is_on_board():
                raise OutOfBoundsError(sq)

        piece = board[move.from_sq]
        if piece is None:
            raise IllegalMoveError(
                MoveErrorKind.EMPTY_SOURCE, f"No piece at {move.from_sq.name}"
            )

        match piece.piece_type:
            case PieceType.PAWN:
                self._validate_pawn(board, piece, move)
            case PieceType.KNIGHT:
                self._validate_knight(board, piece, move)
            case PieceType.BISHOP:
                self._validate_bishop(board, piece, move)
            case PieceType.ROOK:
                self._validate_rook(board, piece, move)
            case PieceType.QUEEN | PieceType.KING:
                raise IllegalMoveError(
                    MoveErrorKind.UNSUPPORTED_PIECE_KIND,
                    f"No movement rule for {piece.piece_type.name.lower()}",
                )

    def is_legal(self, board: Board, move: Move) -> bool:
        try:
            self.validate(board, move)
        except IllegalMoveError:
            return False
        return True

    # ── Per-kind rules ───────────────────────────────────────────────────

    @staticmethod
    def _validate_pawn(board: Board, piece: Piece, move: Move) -> None:
        dx, dy = move.delta
        forward = dy * PAWN_DIRECTION[piece.color]
        sideways = abs(dx)

        if forward == 1 and sideways == 0:
            if not board.is_empty(move.to_sq):
                raise IllegalMoveError(MoveErrorKind.DESTINATION_OCCUPIED)
        elif forward == 2 and sideways == 0:
            if move.from_sq.rank != PAWN_START_RANK[piece.color]:
                raise IllegalMoveError(
                    MoveErrorKind.INVALID_PAWN_MOVE,
                    "Pawns advance two squares only from their starting rank",
                )
            _check_path(board, move)
            if not board.is_empty(move.to_sq):
                raise IllegalMoveError(MoveErrorKind.DESTINATION_OCCUPIED)
        elif forward == 1 and sideways == 1:
            target = board[move.to_sq]
            if target is None:
                raise IllegalMoveError(
                    MoveErrorKind.INVALID_PAWN_MOVE,
                    "Pawns move diagonally only to capture",
                )
            if target.color == piece.color:
                raise IllegalMoveError(MoveErrorKind.CANNOT_CAPTURE_OWN_PIECE)
        else:
            raise IllegalMoveError(MoveErrorKind.INVALID_PAWN_MOVE)

    def _validate_rook(self, board: Board, piece: Piece, move: Move) -> None:
        dx, dy = move.delta
        if (dx == 0) == (dy == 0):
            raise IllegalMoveError(MoveErrorKind.INVALID_ROOK_MOVE)
        _check_path(board, move)
        if not self._policy.rook_captures_own:
            _check_not_own(board, piece, move.to_sq)

    @staticmethod
    def _validate_knight(board: Board, piece: Piece, move: Move) -> None:
        dx, dy = move.delta
        if (abs(dx), abs(dy)) not in KNIGHT_DELTAS:
            raise IllegalMoveError(MoveErrorKind.INVALID_KNIGHT_MOVE)
        _check_not_own(board, piece, move.to_sq)

    @staticmethod
    def _validate_bishop(board: Board, piece: Piece, move: Move) -> None:
        dx, dy = move.delta
        if dx == 0 or abs(dx) != abs(dy):
            raise IllegalMoveError(MoveErrorKind.INVALID_BISHOP_MOVE)
        _check_not_own(board, piece, move.to_sq)
        _check_path(board, move)


def validate_move(board: Board, move: Move, policy: RulesPolicy | None = None) -> None:
    """Raise :class:`IllegalMoveError` unless *move* is legal on *board*."""
    MoveRules(policy).validate(board, move)


def is_legal_move(board: Board, move: Move, policy: RulesPolicy | None = None) -> bool:
    """Whether *move* is legal on *board*; out-of-range squares still raise."""
    return MoveRules(policy).is_legal(board, move)
