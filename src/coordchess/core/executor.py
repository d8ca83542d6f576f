"""Move execution: relocates a piece without any legality check."""

from __future__ import annotations

from coordchess.core.board import Board
from coordchess.core.enums import MoveErrorKind
from coordchess.core.errors import IllegalMoveError
from coordchess.core.move import Move
from coordchess.core.piece import Piece


def execute_move(board: Board, move: Move) -> Piece | None:
    """Move the piece on ``move.from_sq`` to ``move.to_sq``.

    Whatever stood on the destination is overwritten and returned. The move
    is applied as given, legal or not; callers validate first with
    :func:`coordchess.core.rules.validate_move`. An empty source square
    raises :class:`IllegalMoveError` (``EMPTY_SOURCE``) so that ``None``
    always means a quiet move. A null move leaves the board unchanged and
    returns ``None``.
    """
    # Both lookups bounds-check before anything is mutated.
    target = board.occupant(move.to_sq)
    if board.is_empty(move.from_sq):
        raise IllegalMoveError(
            MoveErrorKind.EMPTY_SOURCE, "No piece at the source position"
        )
    if move.is_null:
        return None
    board[move.to_sq] = board.take(move.from_sq)
    return target
