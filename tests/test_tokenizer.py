import math

import pytest

from core import Tokenizer, TOKEN_DEFINITIONS, TokenType


def texts(expression):
    return [t.text for t in Tokenizer.tokenize(expression)]


def types(expression):
    return [t.type for t in Tokenizer.tokenize(expression)]


def test_spaces_are_discarded():
    assert texts("2 + 3 * 4") == ["2", "+", "3", "*", "4"]
    assert texts("2+3*4") == ["2", "+", "3", "*", "4"]
    assert texts("   ") == []
    assert texts("") == []


def test_parentheses_are_their_own_tokens():
    assert texts("(2+3)*4") == ["(", "2", "+", "3", ")", "*", "4"]
    assert types("(1)") == [TokenType.LEFT_PAREN, TokenType.NUMBER, TokenType.RIGHT_PAREN]


def test_multi_character_terms():
    tokens = Tokenizer.tokenize("12.5 POWER 2 SQRT 144")
    assert [t.text for t in tokens] == ["12.5", "POWER", "2", "SQRT", "144"]
    assert [t.type for t in tokens] == [
        TokenType.NUMBER, TokenType.OPERATOR, TokenType.NUMBER, TokenType.OPERATOR, TokenType.NUMBER
    ]
    assert tokens[0].value == 12.5


def test_keywords_need_a_boundary():
    # letters never close a term, so "2POWER3" stays one opaque token
    tokens = Tokenizer.tokenize("2POWER3")
    assert [t.text for t in tokens] == ["2POWER3"]
    assert tokens[0].type == TokenType.TERM


def test_constants_are_case_insensitive():
    for name in ("pi", "Pi", "PI", "pI"):
        (token,) = Tokenizer.tokenize(name)
        assert token.type == TokenType.CONSTANT
        assert token.value == math.pi


def test_number_literals():
    for text, value in [("7", 7.0), (".5", 0.5), ("3.", 3.0), ("2e3", 2000.0), ("0.25", 0.25)]:
        (token,) = Tokenizer.tokenize(text)
        assert token.type == TokenType.NUMBER
        assert token.value == value


def test_malformed_terms_are_deferred():
    for text in (".", "1.2.3", "x", "NaN", "inf", "1_000"):
        (token,) = Tokenizer.tokenize(text)
        assert token.type == TokenType.TERM
        assert token.value is None


def test_signed_exponent_splits_on_operator():
    assert texts("1e-5") == ["1e", "-", "5"]


def test_positions():
    tokens = Tokenizer.tokenize("12 + (345)")
    assert [t.position for t in tokens] == [0, 3, 5, 6, 9]


def test_tokens_are_immutable():
    (token,) = Tokenizer.tokenize("1")
    with pytest.raises(AttributeError):
        token.text = "2"


def test_whitespace_around_numbers():
    # only spaces separate terms, so tabs and newlines stay in the token text
    tokens = Tokenizer.tokenize("2 + 3\n")
    assert [t.text for t in tokens] == ["2", "+", "3\n"]
    assert tokens[-1].type == TokenType.NUMBER
    assert tokens[-1].value == 3.0

    tokens = Tokenizer.tokenize("2\t+ 3")
    assert [t.text for t in tokens] == ["2\t", "+", "3"]
    assert tokens[0].type == TokenType.NUMBER
    assert tokens[0].value == 2.0


def test_whitespace_only_term_is_unparseable():
    (token,) = Tokenizer.tokenize("\t")
    assert token.type == TokenType.TERM


def test_operator_tokens_come_from_definitions():
    tokens = Tokenizer.tokenize("1 POWER 2 * 3")
    assert tokens[1] == TOKEN_DEFINITIONS["POWER"]._replace(position=2)
    assert tokens[3] == TOKEN_DEFINITIONS["*"]._replace(position=10)
