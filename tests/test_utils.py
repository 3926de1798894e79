"""Tests for marklet.utils (escaping, slugs, logger naming)."""

from __future__ import annotations

import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from marklet.utils import escape_html, get_logger, slugify


class TestEscapeHtml:
    """escape_html converts the five sensitive characters in one pass."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("&", "&amp;"),
            ("<", "&lt;"),
            (">", "&gt;"),
            ('"', "&quot;"),
            ("'", "&#x27;"),
            ("plain", "plain"),
            ("", ""),
        ],
    )
    def test_each_character(self, text: str, expected: str) -> None:
        assert escape_html(text) == expected

    def test_not_idempotent(self) -> None:
        """Escaping already-escaped text escapes the ampersand again."""
        assert escape_html("&amp;") == "&amp;amp;"

    @given(st.text())
    def test_output_has_no_raw_brackets_or_quotes(self, text: str) -> None:
        escaped = escape_html(text)
        for char in "<>\"'":
            assert char not in escaped


class TestSlugify:
    """slugify builds heading anchors."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Hello World!", "hello-world"),
            ("Getting Started", "getting-started"),
            ("  --a--  ", "a"),
            ("Café & Crème", "café-crème"),
            ("A &amp; B", "a-b"),
            ("!!!", ""),
            ("", ""),
        ],
    )
    def test_slugs(self, text: str, expected: str) -> None:
        assert slugify(text) == expected

    def test_custom_separator(self) -> None:
        assert slugify("one two", separator="_") == "one_two"


class TestGetLogger:
    """Loggers live under the marklet namespace."""

    def test_prefix_added(self) -> None:
        assert get_logger("mymodule").name == "marklet.mymodule"

    def test_package_names_unchanged(self) -> None:
        assert get_logger("marklet.lexer.core").name == "marklet.lexer.core"
        assert get_logger("marklet").name == "marklet"

    def test_returns_stdlib_logger(self) -> None:
        assert isinstance(get_logger("x"), logging.Logger)

    def test_degradations_logged_under_package(self, caplog: pytest.LogCaptureFixture) -> None:
        from marklet import render

        with caplog.at_level(logging.DEBUG, logger="marklet"):
            render("| header only |")
        assert any(r.name == "marklet.lexer.detectors.table" for r in caplog.records)

    def test_library_installs_no_handlers(self) -> None:
        import marklet  # noqa: F401

        assert logging.getLogger("marklet").handlers == []
