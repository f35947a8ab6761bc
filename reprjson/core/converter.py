"""Convert repr-style debug output into canonical JSON.

Strategy (ordered from cheapest to most involved):
    1. Reject empty / whitespace-only input.
    2. ``json.loads`` on the trimmed text (fast path).
    3. No ``u'`` prefix, stray single quote or ``True``/``False``/``None``
       in sight: retry the direct parse with a leading BOM or zero-width
       characters removed.
    4. Tokenize, transform, serialize.
    5. Re-parse the assembled text.  Only text that parses is returned.

Every successful result is pretty-printed the same way, so converting
the output again yields identical text.  Every failure is returned as a
:class:`ConversionResult`; nothing here raises.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from reprjson.config import get_settings
from reprjson.core.serializer import serialize
from reprjson.core.tokenizer import tokenize
from reprjson.core.tokens import ConversionResult
from reprjson.core.transformer import transform

logger = logging.getLogger(__name__)

EMPTY_INPUT_MESSAGE = "Empty input"

NOTATION_SIGNALS = (
    re.compile(r"u'"),
    re.compile(r'u"'),
    re.compile(r"(?<![\"\w])'"),
    re.compile(r"\bTrue\b"),
    re.compile(r"\bFalse\b"),
    re.compile(r"\bNone\b"),
)

# Not whitespace to str.strip(), rejected by json.loads
_INVISIBLE_PREFIX = "\ufeff\u200b\u200c\u200d\u2060"

# json.dumps(ensure_ascii=False) passes these through; they cannot be encoded as UTF-8
_LONE_SURROGATE = re.compile(r"[\ud800-\udfff]")


def has_notation_signals(text: str) -> bool:
    """True if *text* shows any mark of the repr notation this module targets."""
    return any(pattern.search(text) for pattern in NOTATION_SIGNALS)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_json(text: str) -> Any:
    """Strict ``json.loads``: ``NaN`` and ``Infinity`` are refused."""
    return json.loads(text, parse_constant=_reject_constant)


def _escape_surrogate(match: re.Match[str]) -> str:
    return f"\\u{ord(match.group()):04x}"


def canonical_json(value: Any, indent: int | None = None) -> str:
    """Pretty-print *value*; unpaired surrogates stay ``\\uXXXX`` escapes."""
    settings = get_settings()
    text = json.dumps(
        value,
        indent=settings.indent if indent is None else indent,
        ensure_ascii=settings.ensure_ascii,
        allow_nan=False,
    )
    return _LONE_SURROGATE.sub(_escape_surrogate, text)


def _try_direct(text: str, indent: int | None) -> str | None:
    try:
        return canonical_json(parse_json(text), indent)
    except (ValueError, RecursionError):
        return None


def convert(text: str, *, indent: int | None = None) -> ConversionResult:
    """Convert *text* to canonical JSON.

    Args:
        text: Raw input, e.g. ``{u'name': u'Bob', 'active': True}``.
        indent: Spaces per nesting level; defaults to the configured value.
    """
    trimmed = text.strip()
    if not trimmed:
        logger.debug("Rejected empty input", extra={"stage": "empty"})
        return ConversionResult.fail(EMPTY_INPUT_MESSAGE)

    formatted = _try_direct(trimmed, indent)
    if formatted is not None:
        logger.debug("Input is already JSON", extra={"stage": "fast_path", "input_chars": len(text)})
        return ConversionResult.ok(formatted)

    if not has_notation_signals(trimmed):
        formatted = _try_direct(trimmed.lstrip(_INVISIBLE_PREFIX), indent)
        if formatted is not None:
            logger.debug("Input is JSON after prefix cleanup", extra={"stage": "pattern_detect"})
            return ConversionResult.ok(formatted)

    try:
        assembled = serialize(transform(tokenize(trimmed)))
        formatted = canonical_json(parse_json(assembled), indent)
    except (ValueError, RecursionError) as exc:
        logger.debug(
            "Assembled text is not valid JSON",
            extra={"stage": "validate", "input_chars": len(text), "error": str(exc)},
        )
        return ConversionResult.fail(f"Conversion failed: {exc}")

    logger.debug("Converted repr notation", extra={"stage": "validate", "input_chars": len(text)})
    return ConversionResult.ok(formatted)


class PythonNotationConverter:
    """Converter object for hosts that keep one around.

    Holds nothing but the output indent; :meth:`convert` is safe to call
    from any thread.
    """

    __slots__ = ("indent",)

    def __init__(self, indent: int | None = None) -> None:
        self.indent = indent

    def convert(self, text: str) -> ConversionResult:
        return convert(text, indent=self.indent)
