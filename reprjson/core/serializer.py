"""Reassemble transformed tokens into JSON text.

The output is not pretty-printed; the converter formats it after
validation.
"""

from __future__ import annotations

from reprjson.core.tokens import Token, TokenKind

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def quote_string(value: str) -> str:
    """Return *value* as a double-quoted JSON string literal.

    Control characters below U+0020 without a short escape become
    ``\\u00xx``; all other characters are written as-is.
    """
    parts = ['"']
    for ch in value:
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif ord(ch) < 0x20:
            parts.append(f"\\u{ord(ch):04x}")
        else:
            parts.append(ch)
    parts.append('"')
    return "".join(parts)


def serialize(tokens: list[Token]) -> str:
    return "".join(
        quote_string(tok.value) if tok.kind in (TokenKind.STRING, TokenKind.IDENTIFIER) else tok.value
        for tok in tokens
    )
