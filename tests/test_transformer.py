"""Tests for reprjson.core.transformer."""

from __future__ import annotations

from reprjson.core.tokenizer import tokenize
from reprjson.core.tokens import Token, TokenKind
from reprjson.core.transformer import drop_trailing_commas, quote_identifiers, transform


def text_of(tokens: list[Token]) -> str:
    return "".join(t.value for t in tokens)


class TestQuoteIdentifiers:
    def test_identifier_becomes_string(self):
        tokens = [Token(TokenKind.IDENTIFIER, "Bob", "Bob")]
        assert quote_identifiers(tokens) == [Token(TokenKind.STRING, "Bob", "Bob")]

    def test_other_kinds_untouched(self):
        tokens = tokenize("{'a': True, 'b': 1}")
        assert quote_identifiers(tokens) == tokens

    def test_input_list_not_modified(self):
        tokens = [Token(TokenKind.IDENTIFIER, "x", "x")]
        quote_identifiers(tokens)
        assert tokens[0].kind is TokenKind.IDENTIFIER


class TestDropTrailingCommas:
    def test_before_brace(self):
        assert text_of(drop_trailing_commas(tokenize("{a: 1,}"))) == "{a: 1}"

    def test_before_bracket_with_whitespace(self):
        assert text_of(drop_trailing_commas(tokenize("[1, 2, \n ]"))) == "[1, 2 \n ]"

    def test_inner_commas_kept(self):
        assert text_of(drop_trailing_commas(tokenize("[1, 2]"))) == "[1, 2]"

    def test_comma_at_end_of_input_kept(self):
        assert text_of(drop_trailing_commas(tokenize("1,"))) == "1,"

    def test_nested_trailing_commas(self):
        assert text_of(drop_trailing_commas(tokenize("{a: [1,],}"))) == "{a: [1]}"


class TestTransform:
    def test_combined(self):
        result = transform(tokenize("{name: Bob,}"))
        assert [t.kind for t in result] == [
            TokenKind.STRUCTURAL,
            TokenKind.STRING,
            TokenKind.COLON,
            TokenKind.WHITESPACE,
            TokenKind.STRING,
            TokenKind.STRUCTURAL,
        ]
        assert not any(t.kind is TokenKind.IDENTIFIER for t in result)
