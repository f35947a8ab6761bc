"""Token-list rewrites applied between lexing and serialization."""

from __future__ import annotations

from reprjson.core.tokens import Token, TokenKind


def quote_identifiers(tokens: list[Token]) -> list[Token]:
    """Turn every bare identifier (including captured tag paths and dates) into a string."""
    return [
        Token(TokenKind.STRING, tok.value, tok.raw) if tok.kind is TokenKind.IDENTIFIER else tok
        for tok in tokens
    ]


def drop_trailing_commas(tokens: list[Token]) -> list[Token]:
    """Remove commas whose next non-whitespace token is ``}`` or ``]``.

    Whitespace around a dropped comma is kept.
    """
    result: list[Token] = []
    for i, tok in enumerate(tokens):
        if tok.kind is TokenKind.COMMA:
            j = i + 1
            while j < len(tokens) and tokens[j].kind is TokenKind.WHITESPACE:
                j += 1
            if j < len(tokens) and tokens[j].is_closer():
                continue
        result.append(tok)
    return result


def transform(tokens: list[Token]) -> list[Token]:
    return drop_trailing_commas(quote_identifiers(tokens))
