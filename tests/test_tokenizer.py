"""
Tests for the character-level tokenizer.
"""

import pytest

from core import (
    tokenize, Token, TokenType, LEFT_PAREN, RIGHT_PAREN,
    InvalidCharacterError, InvalidNumberError, ParseError
)


def test_simple_expression():
    assert tokenize("12+(3)") == [
        Token.number(12), Token.operator('+'), LEFT_PAREN, Token.number(3), RIGHT_PAREN
    ]


def test_all_operators():
    tokens = tokenize("1+2-3*4/5^6")
    symbols = [t.symbol for t in tokens if t.type == TokenType.OPERATOR]
    assert symbols == ['+', '-', '*', '/', '^']


def test_decimal_numbers():
    assert tokenize("3.14") == [Token.number(3.14)]
    assert tokenize(".5") == [Token.number(0.5)]
    assert tokenize("5.") == [Token.number(5.0)]


def test_whitespace_is_discarded_and_splits_numbers():
    assert tokenize(" \t3 \n+  4 ") == [Token.number(3), Token.operator('+'), Token.number(4)]
    # 语法检查不在这里做
    assert tokenize("3 4") == [Token.number(3), Token.number(4)]


def test_number_flushed_before_right_paren():
    assert tokenize("(42)") == [LEFT_PAREN, Token.number(42), RIGHT_PAREN]


def test_empty_input():
    assert tokenize("") == []


@pytest.mark.parametrize("text, char, position", [
    ("3 $ 4", '$', 2),
    ("x", 'x', 0),
    ("1 + 2,5", ',', 5),
    ("2²", '²', 1),
])
def test_invalid_character(text, char, position):
    with pytest.raises(InvalidCharacterError) as exc_info:
        tokenize(text)
    assert exc_info.value.char == char
    assert exc_info.value.position == position


@pytest.mark.parametrize("text, lexeme", [
    ("1.2.3 + 4", "1.2.3"),
    ("3 + .", "."),
    ("2..", "2.."),
])
def test_invalid_number(text, lexeme):
    with pytest.raises(InvalidNumberError) as exc_info:
        tokenize(text)
    assert exc_info.value.lexeme == lexeme
    assert isinstance(exc_info.value, ParseError)


def test_token_str():
    assert str(Token.number(3)) == "3"
    assert str(Token.number(2.5)) == "2.5"
    assert str(Token.operator('^')) == "^"
    assert str(LEFT_PAREN) == "("
    assert str(RIGHT_PAREN) == ")"


def test_tokens_are_immutable_values():
    token = Token.number(1)
    assert token == Token.number(1.0)
    assert hash(token) == hash(Token.number(1.0))
    with pytest.raises(AttributeError):
        token.value = 2.0


def test_unknown_operator_symbol_rejected():
    with pytest.raises(ValueError):
        Token.operator('%')


def test_literal_beyond_float_range():
    lexeme = "9" * 400
    with pytest.raises(InvalidNumberError) as exc_info:
        tokenize(f"{lexeme} + 1")
    assert exc_info.value.lexeme == lexeme
