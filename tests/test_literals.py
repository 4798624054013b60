"""Test integer and string literal lexing."""

import pytest

from monkeylex.errors import LexError, LexErrorKind
from monkeylex.lexer import MAX_INTEGER, tokenize_all
from monkeylex.tokens import Token, TokenType

from .conftest import assert_types, assert_values


class TestIntegers:
    @pytest.mark.parametrize(("source", "value"), [("0", 0), ("5", 5), ("10", 10), ("1234567", 1234567)])
    def test_value(self, lex, source, value):
        tokens = lex(source)
        assert tokens == [Token(TokenType.INTEGER, value)]

    def test_leading_zeros(self, lex):
        assert_values(lex("007"), [7])

    def test_negative_is_minus_then_integer(self, lex):
        tokens = lex("-5")
        assert_types(tokens, [TokenType.MINUS, TokenType.INTEGER])
        assert tokens[1].value == 5

    def test_integer_then_identifier(self, lex):
        tokens = lex("5x")
        assert_types(tokens, [TokenType.INTEGER, TokenType.IDENTIFIER])

    def test_max_value(self, lex):
        assert_values(lex(str(MAX_INTEGER)), [MAX_INTEGER])

    def test_overflow_raises(self, lex):
        with pytest.raises(LexError) as exc_info:
            lex(str(MAX_INTEGER + 1))
        err = exc_info.value
        assert err.kind is LexErrorKind.MALFORMED_INTEGER
        assert err.text == "2147483648"

    def test_very_long_digit_run_raises_lex_error(self, lex):
        digits = "1" * 5000
        with pytest.raises(LexError) as exc_info:
            lex(digits)
        err = exc_info.value
        assert err.kind is LexErrorKind.MALFORMED_INTEGER
        assert err.text == digits

    def test_very_long_digit_run_collected(self):
        tokens, errors = tokenize_all("let x = " + "9" * 5000 + ";")
        assert [e.kind for e in errors] == [LexErrorKind.MALFORMED_INTEGER]
        assert_types(
            tokens,
            [
                TokenType.LET,
                TokenType.IDENTIFIER,
                TokenType.ASSIGN,
                TokenType.SEMICOLON,
                TokenType.EOF,
            ],
        )

    def test_long_run_of_leading_zeros(self, lex):
        assert_values(lex("0" * 5000 + "42"), [42])

    def test_leading_zeros_then_overflow(self, lex):
        with pytest.raises(LexError):
            lex("0" * 5000 + "2147483648")

    def test_overflow_message_names_literal(self, lex):
        with pytest.raises(LexError, match="99999999999"):
            lex("let x = 99999999999;")


class TestStrings:
    def test_simple(self, lex):
        tokens = lex('"hello world"')
        assert tokens == [Token(TokenType.STRING, "hello world")]

    def test_empty(self, lex):
        assert_values(lex('""'), [""])

    def test_two_strings(self, lex):
        tokens = lex('"foo" "bar"')
        assert_types(tokens, [TokenType.STRING, TokenType.STRING])
        assert_values(tokens, ["foo", "bar"])

    def test_no_escape_processing(self, lex):
        assert_values(lex(r'"a\nb"'), ["a\\nb"])

    def test_newline_kept(self, lex):
        assert_values(lex('"line1\nline2"'), ["line1\nline2"])

    def test_whitespace_kept(self, lex):
        assert_values(lex('"  padded  "'), ["  padded  "])

    def test_token_after_string(self, lex):
        tokens = lex('"a";')
        assert_types(tokens, [TokenType.STRING, TokenType.SEMICOLON])

    def test_unterminated(self, lex):
        with pytest.raises(LexError) as exc_info:
            lex('"abc')
        err = exc_info.value
        assert err.kind is LexErrorKind.UNTERMINATED_STRING
        assert err.text == '"abc'

    def test_lone_quote_unterminated(self, lex):
        with pytest.raises(LexError) as exc_info:
            lex('"')
        assert exc_info.value.kind is LexErrorKind.UNTERMINATED_STRING
