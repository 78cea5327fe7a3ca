"""
Unit Tests for the Error Hierarchy
==================================

Covers message formatting (location prefix, source context, caret and
hint) and the exception class relationships.
"""

import pytest
from monkeylang.errors import (
    ConfigurationError,
    IntegerOverflowError,
    LexerError,
    MonkeyError,
    SourceLocation,
)
from monkeylang.lexer import tokenize


class TestSourceLocation:
    """Tests for SourceLocation."""

    def test_str(self):
        assert str(SourceLocation("prog.mk", 3, 7)) == "prog.mk:3:7"

    def test_frozen(self):
        location = SourceLocation("<input>", 1, 1)
        with pytest.raises(AttributeError):
            location.line = 2

    def test_equality(self):
        assert SourceLocation("a", 1, 2) == SourceLocation("a", 1, 2)


class TestLexerErrorFormatting:
    """Tests for LexerError message layout."""

    def test_message_only(self):
        assert str(LexerError("bad input")) == "error: bad input"

    def test_with_location(self):
        error = LexerError("bad input", SourceLocation("<input>", 2, 5))
        assert str(error) == "<input>:2:5: error: bad input"

    def test_with_source_line_and_caret(self):
        error = LexerError(
            "bad input",
            SourceLocation("<input>", 1, 3),
            source_line="abcdef",
        )
        lines = str(error).splitlines()
        assert lines[1] == "    abcdef"
        assert lines[2] == "      ^"

    def test_underline_spans_offending_text(self):
        error = LexerError(
            "bad input",
            SourceLocation("<input>", 1, 2),
            source_line="abcdef",
            span=3,
        )
        assert str(error).splitlines()[2] == "     ^^^"
        assert error.span == 3

    def test_span_at_least_one(self):
        error = LexerError("bad input", SourceLocation("<input>", 1, 1), source_line="a", span=0)
        assert str(error).splitlines()[2] == "    ^"

    def test_with_hint(self):
        error = LexerError("bad input", hint="try again")
        assert str(error).splitlines()[-1] == "hint: try again"

    def test_attributes_kept(self):
        location = SourceLocation("<input>", 1, 1)
        error = LexerError("bad input", location, hint="h", source_line="x")
        assert error.message == "bad input"
        assert error.location == location
        assert error.hint == "h"
        assert error.source_line == "x"


class TestIntegerOverflowError:
    """Tests for IntegerOverflowError."""

    def test_attributes(self):
        error = IntegerOverflowError("300", 8)
        assert error.literal == "300"
        assert error.bits == 8
        assert error.max_value == 127
        assert error.span == 3

    def test_message(self):
        error = IntegerOverflowError("300", 8)
        assert "integer literal '300' does not fit in a 8-bit signed integer" in str(error)
        assert "hint: the largest allowed value is 127" in str(error)

    def test_raised_by_lexer_with_context(self):
        with pytest.raises(IntegerOverflowError) as exc_info:
            tokenize("let x = 99999999999;")
        assert str(exc_info.value).splitlines() == [
            "<input>:1:9: error: integer literal '99999999999' does not fit "
            "in a 32-bit signed integer",
            "    let x = 99999999999;",
            "            ^^^^^^^^^^^",
            "hint: the largest allowed value is 2147483647",
        ]


class TestHierarchy:
    """All toolchain errors share a base class."""

    @pytest.mark.parametrize("error", [
        LexerError("x"),
        IntegerOverflowError("9", 2),
        ConfigurationError("int_bits", 0, "must be at least 2"),
    ])
    def test_is_monkey_error(self, error):
        assert isinstance(error, MonkeyError)

    def test_overflow_is_lexer_error(self):
        assert issubclass(IntegerOverflowError, LexerError)

    def test_configuration_error_is_not_lexer_error(self):
        assert not issubclass(ConfigurationError, LexerError)

    def test_configuration_error_message(self):
        error = ConfigurationError("int_bits", 0, "must be at least 2")
        assert str(error) == "invalid value 0 for 'int_bits': must be at least 2"
        assert error.option == "int_bits"
        assert error.value == 0
