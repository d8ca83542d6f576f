"""Coordinate notation: 'e2e4' ↔ :class:`Move`."""

from __future__ import annotations

from coordchess.core.errors import NotationError
from coordchess.core.move import Move
from coordchess.core.types import BOARD_SIZE, FILE_NAMES, Coordinate

_RANK_DIGITS = "12345678"


def parse_coordinate(text: str) -> Coordinate:
    """Parse a square name, e.g. 'e2' → Coordinate(4, 6)."""
    if len(text) != 2 or text[0] not in FILE_NAMES or text[1] not in _RANK_DIGITS:
        raise NotationError(text, f"Invalid square name: {text!r}")
    return Coordinate(FILE_NAMES.index(text[0]), BOARD_SIZE - int(text[1]))


def parse_move(text: str) -> Move:
    """Parse four-character coordinate notation, e.g. 'e2e4'.

    File letters must be lowercase ``a``–``h`` and digits ``1``–``8``;
    anything else raises :class:`NotationError`. Whitespace is not stripped.
    """
    if len(text) != 4:
        raise NotationError(
            text, f"Invalid move format (expected e.g. 'e2e4'): {text!r}"
        )
    try:
        return Move(parse_coordinate(text[:2]), parse_coordinate(text[2:]))
    except NotationError:
        raise NotationError(text) from None


def coordinate_name(coord: Coordinate) -> str:
    """Square name, e.g. Coordinate(0, 0) → 'a8'."""
    return Coordinate(*coord).name


def move_to_text(move: Move) -> str:
    """Four-character notation for *move*."""
    return coordinate_name(move.from_sq) + coordinate_name(move.to_sq)
