"""Paste-as-JSON command.

Hosts (editor integrations, clipboard tools) hand over whatever text the
user copied and get back JSON ready to insert, or a
:class:`ConversionError` explaining why nothing should be inserted.
"""

from __future__ import annotations

import logging

from reprjson.core.converter import PythonNotationConverter
from reprjson.core.errors import CONVERSION_FAILED, EMPTY_INPUT, ConversionError
from reprjson.core.log import timed

logger = logging.getLogger(__name__)


def paste_as_json(text: str, *, converter: PythonNotationConverter | None = None) -> str:
    """Convert copied debug output to JSON text or raise :class:`ConversionError`."""
    if not text.strip():
        raise ConversionError(
            "Clipboard is empty",
            EMPTY_INPUT,
            "Copy some Python debug output to the clipboard first",
        )

    converter = converter or PythonNotationConverter()
    with timed("paste_as_json", input_chars=len(text)):
        result = converter.convert(text)

    if not result.success:
        logger.info("Paste as JSON failed", extra={"error": result.error})
        raise ConversionError(
            "Conversion failed",
            CONVERSION_FAILED,
            result.error or "Could not convert clipboard content to valid JSON",
        )
    return result.json
