"""Exception hierarchy for notation, board access and move legality.

Every error carries the :class:`MoveErrorKind` that classifies it, so
callers can branch on ``exc.kind`` instead of on exception types or text.
"""

from __future__ import annotations

from coordchess.core.enums import MoveErrorKind


class ChessError(Exception):
    """Base class for all recoverable chess errors."""

    def __init__(self, kind: MoveErrorKind, message: str | None = None) -> None:
        self.kind = kind
        super().__init__(message or kind.description)


class NotationError(ChessError, ValueError):
    """Move text is not four well-formed characters."""

    def __init__(self, text: str, message: str | None = None) -> None:
        self.text = text
        super().__init__(
            MoveErrorKind.INVALID_FORMAT,
            message or f"Invalid move notation: {text!r}",
        )


class OutOfBoundsError(ChessError, IndexError):
    """A coordinate lies outside the 8x8 board."""

    def __init__(self, coord: tuple[int, int]) -> None:
        self.coord = coord
        super().__init__(
            MoveErrorKind.OUT_OF_BOUNDS, f"Coordinate out of bounds: {tuple(coord)}"
        )


class IllegalMoveError(ChessError):
    """A requested move breaks the moving piece's rule."""
