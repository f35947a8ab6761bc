"""Context-aware lexer for repr-style debug output.

Every recognizer takes the full text and a start position and returns
``(token, next_position)``, so each one can be exercised on its own.
:func:`tokenize` drives them left to right, tracking a single piece of
context: whether the scan is in *value position* (start of input, or right
after ``:``, ``,`` or an opening ``[``).  Value position decides whether

* a ``[`` opens an array or starts a tag path like ``[default]Folder/Tag``,
* a day/month abbreviation starts an unquoted date such as
  ``Mon Jan 05 09:33:15 MST 2026``.

The lexer never raises on malformed input.  Unterminated strings end at
the end of the text, unknown characters are skipped, and validity is
judged later by re-parsing the assembled JSON.
"""

from __future__ import annotations

import re
import string

from reprjson.core.tokens import Token, TokenKind

KEYWORDS: dict[str, str] = {"True": "true", "False": "false", "None": "null"}
JSON_KEYWORDS = frozenset({"true", "false", "null"})

DAY_NAMES = frozenset({"Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"})
MONTH_NAMES = frozenset(
    {"Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"}
)

STRUCTURAL_CHARS = frozenset("{}[]")
QUOTES = ("'", '"')

_SIMPLE_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "b": "\b",
    "f": "\f",
    "0": "\0",
    "\\": "\\",
    "'": "'",
    '"': '"',
}

_NUMBER_RE = re.compile(r"-?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?", re.ASCII)


# ── Character classes ───────────────────────────────────────────────────


def is_identifier_start(ch: str) -> bool:
    return ch.isalpha() or ch == "_"


def is_identifier_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def is_path_char(ch: str) -> bool:
    """Characters that may follow ``]`` inside a tag path."""
    return ch.isalnum() or ch in "_/"


def is_number_start(text: str, pos: int) -> bool:
    ch = text[pos]
    if ch in string.digits:
        return True
    return ch == "-" and pos + 1 < len(text) and text[pos + 1] in string.digits


def is_unicode_string_start(text: str, pos: int) -> bool:
    return text[pos] == "u" and pos + 1 < len(text) and text[pos + 1] in QUOTES


# ── Predicates ──────────────────────────────────────────────────────────


def match_brackets(text: str) -> dict[int, int]:
    """Map the index of every matched ``[`` to the index of its ``]``.

    One forward pass; unmatched brackets are simply absent from the map.
    Memory is one saved index per ``[`` still open, the bounded cost of
    answering every tag-path check in constant time.  The scanners
    themselves (:func:`find_matching_bracket`, :func:`scan_opaque_value`)
    keep only integer depth counters.
    """
    partners: dict[int, int] = {}
    opens: list[int] = []
    for i, ch in enumerate(text):
        if ch == "[":
            opens.append(i)
        elif ch == "]" and opens:
            partners[opens.pop()] = i
    return partners


def find_matching_bracket(text: str, pos: int) -> int | None:
    """Return the index of the ``]`` closing the ``[`` at *pos*, or None."""
    depth = 0
    for i in range(pos, len(text)):
        ch = text[i]
        if ch == "[":
            depth += 1
        elif ch == "]":
            depth -= 1
            if depth == 0:
                return i
    return None


def looks_like_tag_path(text: str, pos: int, partners: dict[int, int] | None = None) -> bool:
    """True if the ``[`` at *pos* starts a tag path such as ``[Provider]a/b``.

    The bracket must be matched and directly followed by an alphanumeric
    character, ``_`` or ``/``.  *partners* (from :func:`match_brackets`)
    avoids rescanning when called repeatedly over the same text.
    """
    close = partners.get(pos) if partners is not None else find_matching_bracket(text, pos)
    if close is None:
        return False
    after = close + 1
    return after < len(text) and is_path_char(text[after])


def looks_like_date(text: str, pos: int) -> bool:
    """True if the word at *pos* is a day/month abbreviation followed by a space."""
    end = pos
    while end < len(text) and text[end].isalpha():
        end += 1
    word = text[pos:end]
    if word not in DAY_NAMES and word not in MONTH_NAMES:
        return False
    return text.startswith(" ", end)


# ── Recognizers ─────────────────────────────────────────────────────────


def scan_whitespace(text: str, pos: int) -> tuple[Token, int]:
    end = pos
    while end < len(text) and text[end].isspace():
        end += 1
    run = text[pos:end]
    return Token(TokenKind.WHITESPACE, run, run), end


def _read_hex(text: str, pos: int, width: int) -> int | None:
    digits = text[pos : pos + width]
    if len(digits) == width and all(c in string.hexdigits for c in digits):
        return int(digits, 16)
    return None


def _decode_escape(text: str, pos: int) -> tuple[str, int]:
    """Decode the escape whose letter sits at *pos* (just after the backslash)."""
    ch = text[pos]
    if ch in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[ch], pos + 1

    if ch == "u":
        code = _read_hex(text, pos + 1, 4)
        if code is None:
            return "\\u", pos + 1
        end = pos + 5
        # surrogate pair, e.g. \ud83d\ude00
        if 0xD800 <= code <= 0xDBFF and text.startswith("\\u", end):
            low = _read_hex(text, end + 2, 4)
            if low is not None and 0xDC00 <= low <= 0xDFFF:
                return chr(0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00)), end + 6
        return chr(code), end

    if ch == "U":
        code = _read_hex(text, pos + 1, 8)
        if code is not None and code <= 0x10FFFF:
            return chr(code), pos + 9
        return "\\U", pos + 1

    if ch == "x":
        code = _read_hex(text, pos + 1, 2)
        if code is not None:
            return chr(code), pos + 3
        return "\\x", pos + 1

    return ch, pos + 1


def scan_string(text: str, pos: int) -> tuple[Token, int]:
    """Read a single- or double-quoted string starting at *pos*.

    Escapes are decoded into ``value``.  An unterminated string runs to the
    end of the text.
    """
    quote = text[pos]
    chars: list[str] = []
    i = pos + 1
    while i < len(text):
        ch = text[i]
        if ch == quote:
            return Token(TokenKind.STRING, "".join(chars), text[pos : i + 1]), i + 1
        if ch == "\\":
            if i + 1 >= len(text):
                break
            decoded, i = _decode_escape(text, i + 1)
            chars.append(decoded)
            continue
        chars.append(ch)
        i += 1
    return Token(TokenKind.STRING, "".join(chars), text[pos:]), len(text)


def scan_unicode_string(text: str, pos: int) -> tuple[Token, int]:
    """Read ``u'...'`` / ``u"..."``; the prefix survives only in ``raw``."""
    inner, end = scan_string(text, pos + 1)
    return Token(TokenKind.STRING, inner.value, text[pos:end]), end


def scan_number(text: str, pos: int) -> tuple[Token, int] | None:
    match = _NUMBER_RE.match(text, pos)
    if match is None:
        return None
    literal = match.group(0)
    return Token(TokenKind.NUMBER, literal, literal), match.end()


def scan_identifier_or_keyword(text: str, pos: int) -> tuple[Token, int]:
    end = pos
    while end < len(text) and is_identifier_char(text[end]):
        end += 1
    word = text[pos:end]
    if word in KEYWORDS:
        return Token(TokenKind.KEYWORD, KEYWORDS[word], word), end
    if word in JSON_KEYWORDS:
        return Token(TokenKind.KEYWORD, word, word), end
    return Token(TokenKind.IDENTIFIER, word, word), end


def scan_opaque_value(text: str, pos: int) -> tuple[Token, int]:
    """Capture an unquoted composite value (tag path, date) as one identifier.

    Stops at ``,`` or ``}`` outside any brackets/parens, or at a ``]`` that
    closes an enclosing array.  An unmatched ``)`` is kept as part of the
    value.
    """
    bracket_depth = 0
    paren_depth = 0
    i = pos
    while i < len(text):
        ch = text[i]
        if ch == "[":
            bracket_depth += 1
        elif ch == "]":
            if bracket_depth == 0:
                break
            bracket_depth -= 1
        elif ch == "(":
            paren_depth += 1
        elif ch == ")":
            if paren_depth:
                paren_depth -= 1
        elif ch in ",}" and bracket_depth == 0 and paren_depth == 0:
            break
        i += 1
    raw = text[pos:i]
    return Token(TokenKind.IDENTIFIER, raw.strip(), raw), i


# ── Driver ──────────────────────────────────────────────────────────────


def opens_value_position(token: Token) -> bool:
    if token.kind in (TokenKind.COLON, TokenKind.COMMA):
        return True
    return token.kind is TokenKind.STRUCTURAL and token.value == "["


def scan_token(
    text: str,
    pos: int,
    value_position: bool,
    partners: dict[int, int] | None = None,
) -> tuple[Token | None, int]:
    """Read the token at *pos*.  Returns ``(None, pos + 1)`` for an unknown char."""
    ch = text[pos]

    if ch.isspace():
        return scan_whitespace(text, pos)

    if ch == "[" and value_position and looks_like_tag_path(text, pos, partners):
        return scan_opaque_value(text, pos)

    if ch in STRUCTURAL_CHARS:
        return Token(TokenKind.STRUCTURAL, ch, ch), pos + 1

    if ch == ":":
        return Token(TokenKind.COLON, ch, ch), pos + 1

    if ch == ",":
        return Token(TokenKind.COMMA, ch, ch), pos + 1

    if is_unicode_string_start(text, pos):
        return scan_unicode_string(text, pos)

    if ch in QUOTES:
        return scan_string(text, pos)

    if is_number_start(text, pos):
        scanned = scan_number(text, pos)
        if scanned is not None:
            return scanned

    if is_identifier_start(ch):
        if value_position and looks_like_date(text, pos):
            return scan_opaque_value(text, pos)
        return scan_identifier_or_keyword(text, pos)

    return None, pos + 1


def tokenize(text: str) -> list[Token]:
    """Split *text* into tokens whose ``raw`` slices cover it in order.

    Only characters no recognizer accepts are left out.
    """
    tokens: list[Token] = []
    partners = match_brackets(text)
    value_position = True
    pos = 0
    while pos < len(text):
        token, pos = scan_token(text, pos, value_position, partners)
        if token is None:
            continue
        tokens.append(token)
        if token.kind is not TokenKind.WHITESPACE:
            value_position = opens_value_position(token)
    return tokens
