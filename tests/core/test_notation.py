"""Tests for coordinate notation parsing and formatting."""

import pytest

from coordchess.core.enums import MoveErrorKind
from coordchess.core.errors import NotationError, OutOfBoundsError
from coordchess.core.move import Move
from coordchess.core.notation import (
    coordinate_name,
    move_to_text,
    parse_coordinate,
    parse_move,
)
from coordchess.core.types import A8, E2, E4, H1, Coordinate


class TestParseMove:
    def test_e2e4(self) -> None:
        move = parse_move("e2e4")
        assert move == Move(E2, E4)
        assert tuple(move) == ((4, 6), (4, 4))

    def test_corner_to_corner(self) -> None:
        from_sq, to_sq = parse_move("a8h1")
        assert from_sq == (0, 0)
        assert to_sq == (7, 7)

    def test_rank_inversion(self) -> None:
        assert parse_coordinate("a1") == Coordinate(0, 7)
        assert parse_coordinate("h8") == Coordinate(7, 0)

    @pytest.mark.parametrize("text", ["", "e2", "e2e", "e2e45", " e2e4", "e2-e4"])
    def test_wrong_length_raises(self, text: str) -> None:
        with pytest.raises(NotationError) as excinfo:
            parse_move(text)
        assert excinfo.value.kind == MoveErrorKind.INVALID_FORMAT

    @pytest.mark.parametrize("text", ["i2e4", "e9e4", "e0e4", "E2E4", "e2`4", "2e4e"])
    def test_malformed_characters_raise(self, text: str) -> None:
        with pytest.raises(NotationError, match="Invalid move notation"):
            parse_move(text)

    def test_notation_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_move("zz99")

    def test_error_keeps_text(self) -> None:
        with pytest.raises(NotationError) as excinfo:
            parse_move("e2e9")
        assert excinfo.value.text == "e2e9"


class TestParseCoordinate:
    @pytest.mark.parametrize("text", ["e", "e22", "j1", "a0"])
    def test_invalid_square_raises(self, text: str) -> None:
        with pytest.raises(NotationError, match="Invalid square name"):
            parse_coordinate(text)


class TestFormatting:
    def test_move_from_plain_tuples(self) -> None:
        move = Move((4, 6), (4, 4))
        assert move == Move(E2, E4)
        assert move.from_sq.name == "e2"
        assert move.delta == (0, -2)
        assert str(move) == "e2e4"

    def test_coordinate_name(self) -> None:
        assert coordinate_name(A8) == "a8"
        assert coordinate_name(H1) == "h1"

    def test_coordinate_name_off_board_raises(self) -> None:
        with pytest.raises(OutOfBoundsError):
            coordinate_name(Coordinate(8, 0))

    @pytest.mark.parametrize("text", ["e2e4", "a8h1", "g1f3", "b7b5"])
    def test_move_to_text_inverts_parse(self, text: str) -> None:
        assert move_to_text(parse_move(text)) == text
        assert str(parse_move(text)) == text
