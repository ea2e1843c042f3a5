"""Tests for square coordinates and their text form."""

import pytest

from chessterm.core.errors import FormatError
from chessterm.core.move import Move
from chessterm.core.types import A1, A8, E2, E4, H1, H8, parse_square, square_name


class TestParseSquare:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("a8", (0, 0)),
            ("h8", (0, 7)),
            ("a1", (7, 0)),
            ("h1", (7, 7)),
            ("e2", (6, 4)),
        ],
    )
    def test_corners_and_e2(self, text: str, expected: tuple[int, int]) -> None:
        assert parse_square(text) == expected

    def test_row_is_eight_minus_rank(self) -> None:
        for rank in range(1, 9):
            assert parse_square(f"c{rank}") == (8 - rank, 2)

    @pytest.mark.parametrize(
        "text", ["", "e", "e22", "i1", "a0", "a9", "E2", "2e", " e2"]
    )
    def test_malformed_raises_format_error(self, text: str) -> None:
        with pytest.raises(FormatError, match="Invalid square name"):
            parse_square(text)

    def test_format_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_square("z9")


class TestSquareName:
    def test_named_constants(self) -> None:
        assert square_name(A1) == "a1"
        assert square_name(H1) == "h1"
        assert square_name(A8) == "a8"
        assert square_name(H8) == "h8"

    def test_inverse_of_parse(self) -> None:
        for name in ("a1", "d4", "e5", "h8", "b7"):
            assert square_name(parse_square(name)) == name


class TestMove:
    def test_parse(self) -> None:
        assert Move.parse("e2", "e4") == Move(E2, E4)

    def test_str(self) -> None:
        assert str(Move(E2, E4)) == "e2e4"

    def test_parse_rejects_bad_text(self) -> None:
        with pytest.raises(FormatError):
            Move.parse("e2", "e9")
