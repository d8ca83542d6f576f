"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from coordchess.core.enums import Color, PieceType

# Kind letters as drawn on the board grid; the knight takes two characters.
_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "Kn",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

# symbol ↔ (Color, PieceType); white keeps the letter, black lower-cases it
_SYMBOL_MAP: dict[str, tuple[Color, PieceType]] = {}
for _ptype, _letter in _LETTERS.items():
    _SYMBOL_MAP[_letter] = (Color.WHITE, _ptype)
    _SYMBOL_MAP[_letter.lower()] = (Color.BLACK, _ptype)


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    color: Color
    piece_type: PieceType

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return self.symbol

    @property
    def letter(self) -> str:
        """Kind letter without color, e.g. 'Kn'."""
        return _LETTERS[self.piece_type]

    @property
    def symbol(self) -> str:
        """1–2 character symbol, e.g. 'Kn' for a white knight, 'kn' for black."""
        if self.color == Color.WHITE:
            return self.letter
        return self.letter.lower()

    @property
    def unicode(self) -> str:
        """Unicode chess glyph, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]

    @classmethod
    def from_symbol(cls, symbol: str) -> Piece:
        """Create piece from its symbol, e.g. 'kn' → black knight."""
        try:
            color, ptype = _SYMBOL_MAP[symbol]
        except KeyError:
            raise ValueError(f"Invalid piece symbol: {symbol!r}") from None
        return cls(color, ptype)
