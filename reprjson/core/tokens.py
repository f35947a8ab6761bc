"""Value types shared by the conversion pipeline.

Both types live for a single ``convert`` call and carry no identity.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class TokenKind(enum.Enum):
    STRING = "string"
    NUMBER = "number"
    KEYWORD = "keyword"
    IDENTIFIER = "identifier"
    STRUCTURAL = "structural"
    WHITESPACE = "whitespace"
    COLON = "colon"
    COMMA = "comma"


@dataclass(frozen=True, slots=True)
class Token:
    """One lexical unit.

    ``value`` is the normalized payload (decoded string contents, mapped
    keyword spelling, numeric text).  ``raw`` is the exact source slice the
    token was read from.
    """

    kind: TokenKind
    value: str
    raw: str

    def is_closer(self) -> bool:
        return self.kind is TokenKind.STRUCTURAL and self.value in ("}", "]")


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """Outcome of :func:`reprjson.core.converter.convert`.

    ``json`` is empty and ``error`` is set exactly when ``success`` is False.
    """

    success: bool
    json: str
    error: str | None = None

    @classmethod
    def ok(cls, json_text: str) -> ConversionResult:
        return cls(success=True, json=json_text)

    @classmethod
    def fail(cls, error: str) -> ConversionResult:
        return cls(success=False, json="", error=error)
