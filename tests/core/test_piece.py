"""Tests for Piece and Coordinate value objects."""

import pytest

from coordchess.core.enums import Color, PieceType
from coordchess.core.errors import OutOfBoundsError
from coordchess.core.piece import Piece
from coordchess.core.types import E2, H1, Coordinate, all_coordinates


class TestPiece:
    def test_equal_by_value(self) -> None:
        assert Piece(Color.WHITE, PieceType.ROOK) == Piece(Color.WHITE, PieceType.ROOK)
        assert Piece(Color.WHITE, PieceType.ROOK) != Piece(Color.BLACK, PieceType.ROOK)

    def test_symbols(self) -> None:
        assert Piece(Color.WHITE, PieceType.KNIGHT).symbol == "Kn"
        assert Piece(Color.BLACK, PieceType.KNIGHT).symbol == "kn"
        assert Piece(Color.WHITE, PieceType.KING).symbol == "K"
        assert Piece(Color.BLACK, PieceType.PAWN).symbol == "p"

    def test_symbol_is_short(self) -> None:
        for color in Color:
            for ptype in PieceType:
                assert 1 <= len(Piece(color, ptype).symbol) <= 2

    def test_from_symbol_inverts_symbol(self) -> None:
        for color in Color:
            for ptype in PieceType:
                piece = Piece(color, ptype)
                assert Piece.from_symbol(piece.symbol) == piece

    def test_from_symbol_rejects_unknown(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece symbol"):
            Piece.from_symbol("N")

    def test_unicode(self) -> None:
        assert Piece(Color.BLACK, PieceType.KNIGHT).unicode == "♞"

    def test_immutable(self) -> None:
        piece = Piece(Color.WHITE, PieceType.PAWN)
        with pytest.raises(AttributeError):
            piece.color = Color.BLACK  # type: ignore[misc]

    def test_color_opposite(self) -> None:
        assert Color.WHITE.opposite == Color.BLACK
        assert str(Color.BLACK) == "black"


class TestCoordinate:
    def test_names(self) -> None:
        assert E2 == Coordinate(4, 6)
        assert E2.name == "e2"
        assert H1.name == "h1"
        assert Coordinate(0, 0).name == "a8"

    def test_on_board(self) -> None:
        assert Coordinate(7, 7).is_on_board()
        assert not Coordinate(8, 0).is_on_board()
        assert not Coordinate(0, -1).is_on_board()

    def test_offset(self) -> None:
        assert E2.offset(0, -2) == Coordinate(4, 4)

    @pytest.mark.parametrize("coord", [(-1, 0), (0, -1), (8, 3), (2, 8)])
    def test_off_board_name_raises(self, coord: tuple[int, int]) -> None:
        with pytest.raises(OutOfBoundsError):
            Coordinate(*coord).name
        with pytest.raises(OutOfBoundsError):
            str(Coordinate(*coord))

    def test_all_coordinates(self) -> None:
        squares = all_coordinates()
        assert len(squares) == 64
        assert len(set(squares)) == 64
        assert squares[0] == (0, 0)
        assert squares[-1] == (7, 7)
