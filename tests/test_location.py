"""Tests for LineSpan."""

from marklet.location import LineSpan


class TestLineSpan:
    def test_single_line(self) -> None:
        span = LineSpan(2, 2)
        assert str(span) == "2"
        assert len(span) == 1

    def test_range(self) -> None:
        span = LineSpan(3, 5)
        assert str(span) == "3-5"
        assert len(span) == 3

    def test_from_indices(self) -> None:
        assert LineSpan.from_indices(0, 1) == LineSpan(1, 1)
        assert LineSpan.from_indices(4, 7) == LineSpan(5, 7)
