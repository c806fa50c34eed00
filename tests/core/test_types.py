"""Tests for Square and Piece value types."""

import pytest

from boardwatch.core.enums import Color, PieceType
from boardwatch.core.errors import ParseError
from boardwatch.core.piece import BLACK_KNIGHT, WHITE_KNIGHT, WHITE_QUEEN, Piece
from boardwatch.core.types import A1, A8, E4, H1, H8, SQUARES, Square


class TestSquareIndex:
    def test_corners(self) -> None:
        assert A8.index == 0
        assert H8.index == 7
        assert A1.index == 56
        assert H1.index == 63

    def test_index_formula(self) -> None:
        for rank in range(8):
            for file in range(8):
                sq = Square(rank, file)
                assert sq.index == (7 - rank) * 8 + file

    def test_from_index_round_trip(self) -> None:
        for index in range(64):
            assert Square.from_index(index).index == index

    def test_squares_in_index_order(self) -> None:
        assert [sq.index for sq in SQUARES] == list(range(64))

    def test_equality_by_coordinates(self) -> None:
        assert Square(3, 4) == E4
        assert Square.from_coords(3, 4) is E4

    def test_out_of_range_raises(self) -> None:
        with pytest.raises(ValueError, match="Invalid square coordinates"):
            Square(8, 0)
        with pytest.raises(ValueError, match="Invalid square index"):
            Square.from_index(64)

    def test_try_constructors_return_none(self) -> None:
        assert Square.try_from_index(-1) is None
        assert Square.try_from_coords(0, 8) is None
        assert Square.try_from_index(63) == H1


class TestSquareAlgebraic:
    def test_names(self) -> None:
        assert A1.algebraic() == "a1"
        assert str(E4) == "e4"
        assert H8.algebraic() == "h8"

    def test_parse(self) -> None:
        assert Square.from_algebraic("e4") == E4
        assert Square.from_algebraic("a8").index == 0

    @pytest.mark.parametrize("name", ["", "e", "e44", "i1", "a0", "a9", "E4"])
    def test_invalid_names(self, name: str) -> None:
        assert Square.try_from_algebraic(name) is None
        with pytest.raises(ParseError):
            Square.from_algebraic(name)


class TestPiece:
    def test_from_char(self) -> None:
        assert Piece.from_char("N") == Piece(Color.WHITE, PieceType.KNIGHT)
        assert Piece.from_char("q") == Piece(Color.BLACK, PieceType.QUEEN)

    def test_canonical_instances(self) -> None:
        assert Piece.from_char("N") is WHITE_KNIGHT
        assert Piece.from_char("Q") is WHITE_QUEEN

    def test_str_is_fen_char(self) -> None:
        for char in "PNBRQKpnbrqk":
            assert str(Piece.from_char(char)) == char

    def test_invalid_char(self) -> None:
        assert Piece.try_from_char("x") is None
        with pytest.raises(ParseError, match="Invalid piece character"):
            Piece.from_char("x")

    def test_with_color(self) -> None:
        assert WHITE_KNIGHT.with_color(Color.BLACK) is BLACK_KNIGHT
        assert WHITE_KNIGHT.with_color(Color.WHITE) is WHITE_KNIGHT

    def test_is_white(self) -> None:
        assert WHITE_KNIGHT.is_white
        assert not BLACK_KNIGHT.is_white

    def test_symbol(self) -> None:
        assert BLACK_KNIGHT.symbol == "♞"


class TestColor:
    def test_opposite(self) -> None:
        assert Color.WHITE.opposite == Color.BLACK
        assert Color.BLACK.opposite == Color.WHITE

    def test_str(self) -> None:
        assert str(Color.WHITE) == "white"
        assert Color.BLACK.fen_char == "b"
